from ..registry import register
from ..values import Value

# Reducers are not folded pairwise; the evaluator scans every operand and
# calls impl(acc, y) to pick the one to keep.


@register("min", kind="reduce", doc="smallest operand")
def min_fn(acc, y):
    return Value.number(y) if y < acc else Value.number(acc)


@register("max", kind="reduce", doc="largest operand")
def max_fn(acc, y):
    return Value.number(y) if y > acc else Value.number(acc)
