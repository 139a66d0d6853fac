"""core/operators.py"""
import logging

import numpy as np

from config.config import ENGINE_CONFIG

logger = logging.getLogger(__name__)


def _as_float(operand):
    """空栈弹出的None按NaN参与运算"""
    if operand is None:
        return np.float64(np.nan)
    return np.float64(operand)


def format_number(value):
    """整数值不带 .0，其余按float打印"""
    if value is None:
        return ENGINE_CONFIG["absent_text"]
    value = float(value)
    if np.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


class Operators:
    """二元算术操作符的静态方法集合，运算都在float64上进行"""

    @staticmethod
    def add(operand1, operand2):
        """加法操作符"""
        with np.errstate(all='ignore'):
            return float(_as_float(operand1) + _as_float(operand2))

    @staticmethod
    def sub(operand1, operand2):
        """减法操作符"""
        with np.errstate(all='ignore'):
            return float(_as_float(operand1) - _as_float(operand2))

    @staticmethod
    def mul(operand1, operand2):
        """乘法操作符"""
        with np.errstate(all='ignore'):
            return float(_as_float(operand1) * _as_float(operand2))

    @staticmethod
    def div(operand1, operand2):
        """
        除法操作符
        除数为0时不做保护：x/0 -> ±inf，0/0 -> nan
        """
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            return float(np.divide(_as_float(operand1), _as_float(operand2)))

    @staticmethod
    def pow(operand1, operand2):
        """幂运算，溢出得到inf"""
        with np.errstate(all='ignore'):
            return float(np.power(_as_float(operand1), _as_float(operand2)))

    @staticmethod
    def apply(symbol, operand1, operand2):
        """按运算符符号分发，未知符号返回NaN"""
        op_method = _SYMBOL_TO_METHOD.get(symbol)
        if op_method is None:
            logger.error(f"Unknown binary operator: {symbol}")
            return float('nan')
        return op_method(operand1, operand2)


_SYMBOL_TO_METHOD = {
    '+': Operators.add,
    '-': Operators.sub,
    '*': Operators.mul,
    '/': Operators.div,
    '^': Operators.pow,
}
