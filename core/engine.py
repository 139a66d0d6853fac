"""按操作标识分发到对应算法"""
import logging

from core.converters import (
    infix_to_postfix, infix_to_prefix,
    postfix_to_infix, postfix_to_prefix,
    prefix_to_infix, prefix_to_postfix
)
from core.rpn_evaluator import evaluate_postfix, evaluate_prefix

logger = logging.getLogger(__name__)


class UnknownOperationError(ValueError):
    """操作标识不在固定集合中"""


OPERATIONS = {
    'infixToPostfix': infix_to_postfix,
    'infixToPrefix': infix_to_prefix,
    'postfixToInfix': postfix_to_infix,
    'postfixToPrefix': postfix_to_prefix,
    'prefixToInfix': prefix_to_infix,
    'prefixToPostfix': prefix_to_postfix,
    'evaluatePostfix': evaluate_postfix,
    'evaluatePrefix': evaluate_prefix,
}


def is_evaluation(operation):
    return operation.startswith('evaluate')


def run_operation(operation, expression):
    """
    Args:
        operation: 操作标识，如 'infixToPostfix'
        expression: 原始表达式字符串，空白会被忽略
    Returns:
        AlgorithmResult
    """
    algorithm = OPERATIONS.get(operation)
    if algorithm is None:
        raise UnknownOperationError(
            f"Unknown operation {operation!r}, expected one of: {', '.join(OPERATIONS)}"
        )
    logger.info(f"Running {operation} on {expression!r}")
    return algorithm(expression)
