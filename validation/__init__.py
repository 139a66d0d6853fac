"""验证模块"""
from .consistency import (
    check_infix_round_trip, check_cross_conversion,
    check_evaluation_agreement, cross_check_expressions
)

__all__ = [
    'check_infix_round_trip', 'check_cross_conversion',
    'check_evaluation_agreement', 'cross_check_expressions'
]
