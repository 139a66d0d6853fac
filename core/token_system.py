"""core/token_system.py"""
import re
from enum import Enum


class TokenType(Enum):
    OPERAND = "operand"  # 单个字母或数字
    OPERATOR = "operator"  # + - * / ^
    LEFT_PAREN = "left_paren"
    RIGHT_PAREN = "right_paren"
    OTHER = "other"  # 无法识别，扫描时直接跳过


class Associativity(Enum):
    LEFT = "L"
    RIGHT = "R"


class Token:
    def __init__(self, token_type, symbol, precedence=None, associativity=None):
        self.type = token_type
        self.symbol = symbol
        self.precedence = precedence
        self.associativity = associativity

    def __repr__(self):
        return f"Token({self.symbol!r}, {self.type.value})"


# 运算符定义字典
OPERATORS = {
    '+': Token(TokenType.OPERATOR, '+', precedence=1, associativity=Associativity.LEFT),
    '-': Token(TokenType.OPERATOR, '-', precedence=1, associativity=Associativity.LEFT),
    '*': Token(TokenType.OPERATOR, '*', precedence=2, associativity=Associativity.LEFT),
    '/': Token(TokenType.OPERATOR, '/', precedence=2, associativity=Associativity.LEFT),
    '^': Token(TokenType.OPERATOR, '^', precedence=3, associativity=Associativity.RIGHT),
}

PRECEDENCE = {symbol: tk.precedence for symbol, tk in OPERATORS.items()}
ASSOCIATIVITY = {symbol: tk.associativity for symbol, tk in OPERATORS.items()}

_OPERATOR_RE = re.compile(r'[+\-*/^]')
_OPERAND_RE = re.compile(r'[a-zA-Z0-9]')
_DIGIT_RE = re.compile(r'[0-9]')
_WHITESPACE_RE = re.compile(r'\s+')

_MIRROR = {'(': ')', ')': '('}


def is_operator(c):
    """恰好是 + - * / ^ 之一"""
    return bool(_OPERATOR_RE.fullmatch(c))


def is_operand(c):
    """单个ASCII字母或数字"""
    return bool(_OPERAND_RE.fullmatch(c))


def is_digit(c):
    """求值时只有单个十进制数字算操作数"""
    return bool(_DIGIT_RE.fullmatch(c))


def classify(c):
    """返回字符对应的TokenType"""
    if is_operand(c):
        return TokenType.OPERAND
    if is_operator(c):
        return TokenType.OPERATOR
    if c == '(':
        return TokenType.LEFT_PAREN
    if c == ')':
        return TokenType.RIGHT_PAREN
    return TokenType.OTHER


def tokenize(expression):
    """去掉所有空白后逐字符切分，多字符数字/标识符不合并"""
    return list(_WHITESPACE_RE.sub('', expression))


def reverse_tokens(expression):
    """前缀表达式从右往左扫描用"""
    return tokenize(expression)[::-1]


def mirror_infix(expression):
    """
    反转中缀表达式并交换左右括号
    A+(B*C) -> )C*B(+A -> (C*B)+A
    """
    return ''.join(_MIRROR.get(c, c) for c in reverse_tokens(expression))
