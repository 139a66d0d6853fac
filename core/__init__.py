"""核心模块 - Token分类、栈、记法转换与求值"""
from .token_system import (
    TokenType, Token, Associativity, OPERATORS, PRECEDENCE, ASSOCIATIVITY,
    is_operator, is_operand, is_digit, classify, tokenize
)
from .stack import Stack
from .trace import TraceKind, Step, EvaluationStep, AlgorithmResult
from .operators import Operators
from .converters import (
    infix_to_postfix, infix_to_prefix,
    postfix_to_infix, postfix_to_prefix,
    prefix_to_infix, prefix_to_postfix
)
from .rpn_evaluator import RPNEvaluator, evaluate_postfix, evaluate_prefix
from .engine import OPERATIONS, UnknownOperationError, run_operation, is_evaluation

__all__ = [
    'TokenType', 'Token', 'Associativity', 'OPERATORS', 'PRECEDENCE', 'ASSOCIATIVITY',
    'is_operator', 'is_operand', 'is_digit', 'classify', 'tokenize',
    'Stack', 'TraceKind', 'Step', 'EvaluationStep', 'AlgorithmResult', 'Operators',
    'infix_to_postfix', 'infix_to_prefix', 'postfix_to_infix', 'postfix_to_prefix',
    'prefix_to_infix', 'prefix_to_postfix',
    'RPNEvaluator', 'evaluate_postfix', 'evaluate_prefix',
    'OPERATIONS', 'UnknownOperationError', 'run_operation', 'is_evaluation'
]
