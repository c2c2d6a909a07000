# styx/ast_utils.py
from typing import Any, Dict
from .nodes import Node, NodeKind

_TYPE_NAMES = {NodeKind.EXPR: "Expr", NodeKind.PROGRAM: "Program"}


def ast_to_dict(node: Node) -> Dict[str, Any]:
    if node.kind is NodeKind.NUMBER:
        return {"type": "Number", "value": node.contents}
    if node.is_compound:
        return {
            "type": _TYPE_NAMES[node.kind],
            "op": node.operator,
            "operands": [ast_to_dict(a) for a in node.operands],
        }
    return {"type": "Unknown", "tag": node.tag, "contents": node.contents}


def ast_to_pretty(node: Node, indent: str = "  ") -> str:
    lines = []
    def rec(n, depth=0, label=None):
        pad = indent * depth
        pre = f"{label}: " if label else ""
        if n.kind is NodeKind.NUMBER:
            lines.append(f"{pad}{pre}Number({n.contents})")
        elif n.is_compound:
            lines.append(f"{pad}{pre}{_TYPE_NAMES[n.kind]}({n.operator})")
            for i, a in enumerate(n.operands):
                rec(a, depth+1, f"arg[{i}]")
        else:
            lines.append(f"{pad}{pre}{n.tag}({n.contents})")
    rec(node)
    return "\n".join(lines)
