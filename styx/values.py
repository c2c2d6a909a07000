from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

N = TypeVar("N", int, float)


class ErrorKind(Enum):
    DIV_ZERO = "Division By Zero"
    BAD_OP = "Invalid Operator"
    BAD_NUM = "Invalid Number"
    DEPTH_EXCEEDED = "Maximum Depth Exceeded"


@dataclass(frozen=True)
class Value(Generic[N]):
    """Result of evaluating a tree: a number, or the error that stopped it."""
    num: Optional[N] = None
    err: Optional[ErrorKind] = None

    @classmethod
    def number(cls, x) -> "Value":
        return cls(num=x)

    @classmethod
    def error(cls, kind: ErrorKind) -> "Value":
        return cls(err=kind)

    @property
    def is_error(self) -> bool:
        return self.err is not None


def render(v: Value, float_format: str = "%f") -> str:
    if v.is_error:
        return f"Error: {v.err.value}!"
    return float_format % v.num
