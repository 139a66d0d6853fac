"""RPN表达式求值器 - 调用统一的Operators类"""
import logging
import math

from config.config import ENGINE_CONFIG
from core.operators import Operators, format_number
from core.stack import Stack
from core.token_system import is_digit, is_operator, tokenize, reverse_tokens
from core.trace import EvaluationStep, AlgorithmResult

logger = logging.getLogger(__name__)


class RPNEvaluator:
    """按后缀/前缀表达式求值，操作数只能是单个数字"""

    @staticmethod
    def evaluate(tokens, right_operand_first=True):
        """
        评估已排好扫描顺序的token序列
        Args:
            tokens: token列表（前缀表达式需事先反转）
            right_operand_first: 后缀为True（先弹出b再弹出a），
                                 反转后的前缀为False（先弹出a再弹出b）
        Returns:
            AlgorithmResult，result为栈顶值；栈空或栈顶为NaN时为0
        """
        steps = []
        stack = Stack()

        for token in tokens:
            action = ""
            if is_digit(token):
                stack.push(float(token))
                action = f"Push operand {token}"
            elif is_operator(token):
                first = stack.pop()
                second = stack.pop()
                if second is None:
                    logger.warning(f"Insufficient operands for '{token}'")
                if right_operand_first:
                    a, b = second, first
                else:
                    a, b = first, second
                res = Operators.apply(token, a, b)
                stack.push(res)
                action = (f"Pop {format_number(first)}, {format_number(second)}; "
                          f"Compute {format_number(a)}{token}{format_number(b)}={format_number(res)}; "
                          f"Push {format_number(res)}")

            steps.append(EvaluationStep(token, stack.snapshot(), action))

        if stack.size() > 1:
            logger.warning(f"Stack has {stack.size()} elements after evaluation, expected 1")

        top = stack.peek()
        if top is None or math.isnan(top):
            result = ENGINE_CONFIG["empty_evaluation_result"]
        else:
            result = top
        return AlgorithmResult(tuple(steps), result)


def evaluate_postfix(expression: str) -> AlgorithmResult:
    """后缀表达式求值"""
    result = RPNEvaluator.evaluate(tokenize(expression), right_operand_first=True)
    logger.debug(f"evaluatePostfix {expression!r} -> {result.result}")
    return result


def evaluate_prefix(expression: str) -> AlgorithmResult:
    """前缀表达式求值：反转后扫描"""
    result = RPNEvaluator.evaluate(reverse_tokens(expression), right_operand_first=False)
    logger.debug(f"evaluatePrefix {expression!r} -> {result.result}")
    return result
