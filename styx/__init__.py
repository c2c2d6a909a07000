from .parser import ParseFailure, parse_expr, parse_program
from .nodes import Node, NodeKind, TreeShapeError
from .values import ErrorKind, Value, render
from .eval import EvaluationContext, eval_node, evaluate

__version__ = "0.0.0.0.3"
