import logging
import sys
from typing import Optional

import numpy as np

from .config import get_settings
from .nodes import Node, NodeKind
from .registry import REGISTRY, get_op, is_operator
from .values import ErrorKind, Value
from . import operators  # noqa: F401

logger = logging.getLogger(__name__)


class EvaluationContext:
    def __init__(self, max_depth: Optional[int] = None):
        self.max_depth = get_settings().max_depth if max_depth is None else max_depth


def parse_number(text: str) -> Value:
    x = float(text)
    if np.isinf(x):
        return Value.error(ErrorKind.BAD_NUM)
    # a literal with nonzero digits that comes out as zero or subnormal underflowed
    if (x == 0 and text.strip("-.0")) or 0 < abs(x) < sys.float_info.min:
        return Value.error(ErrorKind.BAD_NUM)
    return Value.number(x)


def apply_op(op: str, x: Value, y: Value) -> Value:
    if x.is_error:
        return x
    if y.is_error:
        return y
    spec = REGISTRY.get(op)
    if spec is None or spec.kind != "fold":
        return Value.error(ErrorKind.BAD_OP)
    return spec.impl(x.num, y.num)


def _reduce(ctx, spec, acc: Value, rest) -> Value:
    for child in rest:
        if acc.is_error:
            break
        y = _eval(ctx, child)
        if y.is_error:
            return y
        acc = spec.impl(acc.num, y.num)
    return acc


def _fold(ctx, op, acc: Value, rest) -> Value:
    for child in rest:
        # an error on the left stops the fold before the next operand runs
        if acc.is_error:
            break
        acc = apply_op(op, acc, _eval(ctx, child))
    return acc


def _eval(ctx: EvaluationContext, node: Node) -> Value:
    if node.kind is NodeKind.NUMBER:
        return parse_number(node.contents)

    op = node.operator
    first, *rest = node.operands
    acc = _eval(ctx, first)
    if not is_operator(op):
        # apply_op reports the bad operator once a second operand is combined
        logger.debug("invalid operator %r", op)
    elif get_op(op).kind == "reduce":
        return _reduce(ctx, get_op(op), acc, rest)
    return _fold(ctx, op, acc, rest)


def eval_node(ctx: EvaluationContext, node: Node) -> Value:
    if node.depth > ctx.max_depth:
        logger.debug("tree depth %d exceeds limit %d", node.depth, ctx.max_depth)
        return Value.error(ErrorKind.DEPTH_EXCEEDED)
    out = _eval(ctx, node)
    if out.is_error:
        logger.debug("evaluation ended with %s", out.err.name)
    return out


def evaluate(node: Node, ctx: Optional[EvaluationContext] = None) -> Value:
    return eval_node(ctx or EvaluationContext(), node)
