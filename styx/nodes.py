from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Tuple


class NodeKind(Enum):
    NUMBER = "number"
    OPERATOR = "operator"
    EXPR = "expr"
    PROGRAM = "program"
    DELIMITER = "char"


OPERAND_KINDS = (NodeKind.NUMBER, NodeKind.EXPR)
COMPOUND_KINDS = (NodeKind.EXPR, NodeKind.PROGRAM)

# open/close children of each compound kind; program anchors match no text
_DELIMS = {
    NodeKind.EXPR: ("(", ")"),
    NodeKind.PROGRAM: ("", ""),
}


class TreeShapeError(ValueError):
    pass


@dataclass(frozen=True)
class Node:
    kind: NodeKind
    contents: str = ""
    children: Tuple["Node", ...] = ()
    depth: int = 0

    @property
    def tag(self) -> str:
        # operands nested in a compound were matched by the expr rule too
        if self.kind is NodeKind.NUMBER:
            return "expr|number"
        return self.kind.value

    @property
    def is_operand(self) -> bool:
        return self.kind in OPERAND_KINDS

    @property
    def is_compound(self) -> bool:
        return self.kind in COMPOUND_KINDS

    @property
    def operator(self) -> str:
        return self.children[1].contents

    @property
    def operands(self) -> Tuple["Node", ...]:
        return tuple(c for c in self.children[2:] if c.is_operand)

    @classmethod
    def leaf(cls, kind: NodeKind, contents: str) -> "Node":
        if kind in COMPOUND_KINDS:
            raise TreeShapeError(f"{kind.value} node cannot be a leaf")
        return cls(kind, str(contents))

    @classmethod
    def compound(cls, kind: NodeKind, operator: "Node", operands: Iterable["Node"]) -> "Node":
        if kind not in COMPOUND_KINDS:
            raise TreeShapeError(f"{kind.value} node cannot have children")
        operands = tuple(operands)
        open_, close = _DELIMS[kind]
        children = (
            (cls(NodeKind.DELIMITER, open_), operator)
            + operands
            + (cls(NodeKind.DELIMITER, close),)
        )
        depth = 1 + max((c.depth for c in operands), default=0)
        node = cls(kind, "", children, depth)
        node.validate()
        return node

    def validate(self):
        """Check the positional layout the evaluator relies on.

        Compound children are laid out as ``(open, operator, operand..., close)``:
        index 1 is always the operator and every operand sits at index 2 or
        later, in source order.
        """
        if not self.is_compound:
            if self.children:
                raise TreeShapeError(f"{self.kind.value} leaf has children")
            return
        ch = self.children
        if len(ch) < 4:
            raise TreeShapeError(f"{self.kind.value} needs an operator and at least one operand")
        if ch[0].kind is not NodeKind.DELIMITER or ch[-1].kind is not NodeKind.DELIMITER:
            raise TreeShapeError(f"{self.kind.value} is missing its delimiters")
        if ch[1].kind is not NodeKind.OPERATOR:
            raise TreeShapeError(f"child 1 of {self.kind.value} must be an operator, got {ch[1].kind.value}")
        for i, c in enumerate(ch[2:-1], start=2):
            if not c.is_operand:
                raise TreeShapeError(f"child {i} of {self.kind.value} is not an operand ({c.kind.value})")
