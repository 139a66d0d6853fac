"""表达式记法转换 - 中缀/后缀/前缀之间的单遍栈扫描"""
import logging

from config.config import ENGINE_CONFIG
from core.stack import Stack
from core.token_system import (
    Associativity, PRECEDENCE, ASSOCIATIVITY,
    is_operand, is_operator, tokenize, reverse_tokens, mirror_infix
)
from core.trace import (
    Step, TraceKind, AlgorithmResult, marker_step,
    MARKER_EOF, MARKER_REVERSE, MARKER_FINAL
)

logger = logging.getLogger(__name__)

EMPTY_RESULT = ENGINE_CONFIG["empty_conversion_result"]


def _text(item):
    """空栈弹出的None按字面文本拼接"""
    return ENGINE_CONFIG["absent_text"] if item is None else item


def _should_pop(top, token):
    """栈顶优先级更高，或优先级相同且当前运算符左结合"""
    top_prec = PRECEDENCE.get(top)
    prec = PRECEDENCE[token]
    if top_prec is None:
        return False
    if top_prec > prec:
        return True
    return top_prec == prec and ASSOCIATIVITY[token] == Associativity.LEFT


def infix_to_postfix(expression: str) -> AlgorithmResult:
    """
    调度场算法：中缀转后缀
    每个token记录一步；扫描结束后栈中剩余的运算符逐个弹出，每次弹出单独记一步（EOF）
    """
    steps = []
    stack = Stack()
    output = ""

    for token in tokenize(expression):
        action = ""
        if is_operand(token):
            output += token
            action = f"Operand '{token}' added to output"
        elif token == '(':
            stack.push(token)
            action = "Left paren pushed to stack"
        elif token == ')':
            action = "Right paren: popping until '('"
            while not stack.is_empty() and stack.peek() != '(':
                output += stack.pop()
            # 没有匹配的 '(' 时弹出的是None，直接丢弃
            if stack.pop() is None:
                logger.warning(f"Unmatched ')' in infix expression: {expression!r}")
        elif is_operator(token):
            while (not stack.is_empty()
                   and stack.peek() != '('
                   and _should_pop(stack.peek(), token)):
                output += stack.pop()
            stack.push(token)
            action = f"Operator '{token}' processed (precedence check)"

        steps.append(Step(token, stack.snapshot(), output, action))

    while not stack.is_empty():
        op = stack.pop()
        output += op
        steps.append(Step(MARKER_EOF, stack.snapshot(), output,
                          f"Popping remaining '{op}'", TraceKind.MARKER))

    logger.debug(f"infixToPostfix {expression!r} -> {output!r} ({len(steps)} steps)")
    return AlgorithmResult(tuple(steps), output)


def infix_to_prefix(expression: str) -> AlgorithmResult:
    """
    中缀转前缀：反转输入并交换括号 -> 中缀转后缀 -> 反转结果
    步骤 = REVERSE + 后缀转换的全部步骤 + FINAL
    """
    if not tokenize(expression):
        return AlgorithmResult((), EMPTY_RESULT)

    mirrored = mirror_infix(expression)
    postfix = infix_to_postfix(mirrored)
    prefix = postfix.result[::-1]

    steps = (
        (marker_step(MARKER_REVERSE, mirrored, "Step 1: Reverse input and swap brackets"),)
        + postfix.steps
        + (marker_step(MARKER_FINAL, prefix, "Step 2: Reverse postfix result to get Prefix"),)
    )
    logger.debug(f"infixToPrefix {expression!r} -> {prefix!r} ({len(steps)} steps)")
    return AlgorithmResult(steps, prefix)


def _combine_scan(tokens, combine, right_operand_first):
    """
    字符串栈扫描，后缀/前缀转换共用
    Args:
        tokens: 已按扫描顺序排列的token（前缀表达式需事先反转）
        combine: (op, left, right) -> 新的子表达式
        right_operand_first: True表示第一次弹出的是右操作数（后缀扫描），
                             False表示第一次弹出的是左操作数（反转后的前缀扫描）
    """
    steps = []
    stack = Stack()

    for token in tokens:
        action = ""
        if is_operand(token):
            stack.push(token)
            action = f"Push operand '{token}'"
        elif is_operator(token):
            first = stack.pop()
            second = stack.pop()
            if second is None:
                logger.warning(f"Insufficient operands for '{token}'")
            if right_operand_first:
                left, right = second, first
            else:
                left, right = first, second
            combined = combine(token, _text(left), _text(right))
            stack.push(combined)
            action = f"Pop '{_text(first)}', '{_text(second)}'; Push '{combined}'"

        steps.append(Step(token, stack.snapshot(), stack.peek() or "", action))

    return AlgorithmResult(tuple(steps), stack.peek() or EMPTY_RESULT)


def _as_infix(op, left, right):
    return f"({left}{op}{right})"


def _as_prefix(op, left, right):
    return f"{op}{left}{right}"


def _as_postfix(op, left, right):
    return f"{left}{right}{op}"


def postfix_to_infix(expression: str) -> AlgorithmResult:
    """后缀转中缀，每个子表达式加括号"""
    return _combine_scan(tokenize(expression), _as_infix, right_operand_first=True)


def prefix_to_infix(expression: str) -> AlgorithmResult:
    """前缀转中缀：反转后扫描，先弹出的是左操作数"""
    return _combine_scan(reverse_tokens(expression), _as_infix, right_operand_first=False)


def postfix_to_prefix(expression: str) -> AlgorithmResult:
    return _combine_scan(tokenize(expression), _as_prefix, right_operand_first=True)


def prefix_to_postfix(expression: str) -> AlgorithmResult:
    return _combine_scan(reverse_tokens(expression), _as_postfix, right_operand_first=False)
