"""一致性检查 - validation/consistency.py"""
import logging
import math

from core.converters import (
    infix_to_postfix, infix_to_prefix,
    postfix_to_infix, postfix_to_prefix, prefix_to_postfix
)
from core.rpn_evaluator import evaluate_postfix, evaluate_prefix
from core.token_system import tokenize, is_operand, is_digit

logger = logging.getLogger(__name__)


def check_infix_round_trip(expression):
    """
    中缀 -> 后缀 -> 中缀，结构应当不变
    重建出的中缀是全括号形式，再转一次后缀即可和第一次的后缀逐字比较

    Returns:
    - dict: postfix, infix, passed
    """
    postfix = infix_to_postfix(expression).result
    infix = postfix_to_infix(postfix).result
    passed = infix_to_postfix(infix).result == postfix
    return {'postfix': postfix, 'infix': infix, 'passed': passed}


def check_cross_conversion(postfix):
    """后缀 -> 前缀 -> 后缀 应当原样返回"""
    expected = ''.join(tokenize(postfix))
    prefix = postfix_to_prefix(postfix).result
    back = prefix_to_postfix(prefix).result
    return {'prefix': prefix, 'postfix': back, 'passed': back == expected}


def check_evaluation_agreement(expression):
    """
    同一个中缀表达式，后缀求值和前缀求值结果应一致
    只对全是单个数字操作数的表达式有意义，含字母时返回 passed=None
    """
    operands = [t for t in tokenize(expression) if is_operand(t)]
    if not all(is_digit(t) for t in operands):
        return {'postfix_value': None, 'prefix_value': None, 'passed': None}

    postfix_value = evaluate_postfix(infix_to_postfix(expression).result).result
    prefix_value = evaluate_prefix(infix_to_prefix(expression).result).result
    passed = math.isclose(postfix_value, prefix_value) or postfix_value == prefix_value
    return {'postfix_value': postfix_value, 'prefix_value': prefix_value, 'passed': passed}


def cross_check_expressions(expressions):
    """
    对多个中缀表达式做全部一致性检查

    Returns:
    - results: {expression: {'round_trip': ..., 'cross_conversion': ..., 'evaluation_agreement': ...}}
    """
    results = {}

    for expression in expressions:
        logger.info(f"Checking expression: {expression}")
        round_trip = check_infix_round_trip(expression)
        cross = check_cross_conversion(round_trip['postfix'])
        agreement = check_evaluation_agreement(expression)

        results[expression] = {
            'round_trip': round_trip['passed'],
            'cross_conversion': cross['passed'],
            'evaluation_agreement': agreement['passed'],
        }
        if not (round_trip['passed'] and cross['passed']) or agreement['passed'] is False:
            logger.warning(f"Inconsistent conversions for {expression!r}: {results[expression]}")

    return results
