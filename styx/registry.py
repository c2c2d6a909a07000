from typing import Callable, Dict, List, NamedTuple, Tuple

from .values import Value


class OpSpec(NamedTuple):
    name: str
    aliases: Tuple[str, ...]
    impl: Callable[[float, float], Value]
    kind: str       # "fold" | "reduce"
    doc: str

    @property
    def spellings(self) -> Tuple[str, ...]:
        return (self.name,) + self.aliases


# keyed by every spelling, so "+" and "add" share one entry
REGISTRY: Dict[str, OpSpec] = {}


def register(name, aliases=(), kind="fold", doc=""):
    def deco(fn):
        spec = OpSpec(name, tuple(aliases), fn, kind, doc)
        taken = [s for s in spec.spellings if s in REGISTRY]
        if taken:
            raise ValueError(f"Operator '{taken[0]}' registered twice")
        for s in spec.spellings:
            REGISTRY[s] = spec
        return fn
    return deco


def get_op(token: str) -> OpSpec:
    if token not in REGISTRY:
        raise KeyError(f"Unknown operator '{token}'")
    return REGISTRY[token]


def is_operator(token: str) -> bool:
    return token in REGISTRY


def list_operators() -> List[dict]:
    seen = {spec.name: spec for spec in REGISTRY.values()}
    return [
        {"name": k, "aliases": list(spec.aliases), "kind": spec.kind, "doc": spec.doc}
        for k, spec in sorted(seen.items())
    ]
