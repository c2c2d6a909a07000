import logging
from typing import List

from lark import Lark, Transformer, v_args
from lark.exceptions import UnexpectedEOF, UnexpectedInput

from .nodes import Node, NodeKind

logger = logging.getLogger(__name__)

GRAMMAR = r"""
program: operator expr+
?expr: number
     | "(" operator expr+ ")" -> compound
number: NUMBER
operator: OPERATOR
OPERATOR: "+" | "-" | "*" | "/" | "%" | "^"
        | "add" | "sub" | "mul" | "div" | "mod" | "min" | "max"
NUMBER: /-?[0-9]+(\.[0-9]*)?/
%ignore /[ \t\r\n]+/
"""

# how terminal names from lark read in error messages
_FRIENDLY = {
    "LPAR": "'('",
    "RPAR": "')'",
    "NUMBER": "number",
    "OPERATOR": "operator",
    "$END": "end of input",
}


@v_args(inline=True)
class ASTBuilder(Transformer):
    def number(self, tok): return Node.leaf(NodeKind.NUMBER, str(tok))
    def operator(self, tok): return Node.leaf(NodeKind.OPERATOR, str(tok))

    def compound(self, op, *operands):
        return Node.compound(NodeKind.EXPR, op, operands)

    def program(self, op, *operands):
        return Node.compound(NodeKind.PROGRAM, op, operands)


# The builder runs inline during LALR reductions, so tree construction never
# recurses no matter how deeply the input nests.
parser = Lark(GRAMMAR, start=["program", "expr"], parser="lalr", transformer=ASTBuilder())


class ParseFailure(Exception):
    def __init__(self, text: str, position: int, found: str, expected: List[str]):
        self.text = text
        self.position = position
        self.column = position + 1
        self.found = found
        self.expected = expected
        super().__init__(str(self))

    def __str__(self):
        exp = " or ".join(self.expected) if self.expected else "nothing"
        return f"<stdin>:1:{self.column}: error: expected {exp} at {self.found}"

    @classmethod
    def from_lark(cls, e: UnexpectedInput, text: str) -> "ParseFailure":
        names = getattr(e, "expected", None) or getattr(e, "allowed", None) or ()
        expected = sorted({_FRIENDLY.get(n, n) for n in names})
        token = getattr(e, "token", None)
        pos = getattr(e, "pos_in_stream", None)
        if isinstance(e, UnexpectedEOF) or (token is not None and token.type == "$END") \
                or pos is None or pos < 0 or pos >= len(text):
            return cls(text, len(text), "end of input", expected)
        if token is not None:
            found = repr(str(token))
        else:
            found = repr(getattr(e, "char", text[pos]))
        return cls(text, pos, found, expected)


def _parse(src: str, start: str) -> Node:
    try:
        return parser.parse(src, start=start)
    except UnexpectedInput as e:
        failure = ParseFailure.from_lark(e, src)
        logger.debug("parse failed for %r: %s", src, failure)
        raise failure from e


def parse_program(src: str) -> Node:
    """Parse a full input line: an operator followed by its operands."""
    return _parse(src, "program")


def parse_expr(src: str) -> Node:
    """Parse a single expression, e.g. ``5`` or ``(+ 1 2)``."""
    return _parse(src, "expr")
