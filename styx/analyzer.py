from dataclasses import dataclass, field
from typing import Set
from .nodes import Node, NodeKind


@dataclass
class Analysis:
    operators: Set[str] = field(default_factory=set)
    numbers: int = 0
    depth: int = 0


def analyze(node: Node) -> Analysis:
    an = Analysis(depth=node.depth)

    # explicit stack: the tree may be deeper than is safe to recurse into
    stack = [node]
    while stack:
        n = stack.pop()
        if n.kind is NodeKind.NUMBER:
            an.numbers += 1
        elif n.is_compound:
            an.operators.add(n.operator)
            stack.extend(n.operands)

    return an
