import numpy as np

from ..registry import register
from ..values import ErrorKind, Value


def _num(x) -> Value:
    return Value.number(float(x))


# overflow gives inf and undefined results give nan, as with C doubles
@np.errstate(all="ignore")
def _ufunc(fn, x, y) -> Value:
    return _num(fn(np.float64(x), np.float64(y)))


@register("+", aliases=("add",), doc="sum of the operands")
def add(x, y):
    return _ufunc(np.add, x, y)


@register("-", aliases=("sub",), doc="left operand minus each following operand")
def sub(x, y):
    return _ufunc(np.subtract, x, y)


@register("*", aliases=("mul",), doc="product of the operands")
def mul(x, y):
    return _ufunc(np.multiply, x, y)


@register("/", aliases=("div",), doc="quotient; Division By Zero when a divisor is 0")
def div(x, y):
    if y == 0:
        return Value.error(ErrorKind.DIV_ZERO)
    return _ufunc(np.divide, x, y)


@register("%", aliases=("mod",), doc="remainder with the sign of the dividend; Division By Zero when a divisor is 0")
def mod(x, y):
    if y == 0:
        return Value.error(ErrorKind.DIV_ZERO)
    return _ufunc(np.fmod, x, y)


@register("^", doc="x raised to the power y")
def power(x, y):
    return _ufunc(np.power, x, y)
