# memograph/core/operator.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Union

from .exceptions import ArityError, UnknownOperatorError


@dataclass(frozen=True)
class Operator:
    """
    A pure scalar function together with its tag and arity.

    Attributes
    ----------
    tag   : str
        Name used for lookup and in debug output (e.g., "add", "sin").
    arity : int
        1 for unary operators, 2 for binary ones.
    fn    : Callable
        Side-effect-free function of the operand values. It receives numpy
        scalars of the configured dtype and must not touch the graph.
    """
    tag: str
    arity: int
    fn: Callable

    def apply(self, *values):
        if len(values) != self.arity:
            raise ArityError(
                f"Operator {self.tag!r} takes {self.arity} operand(s), got {len(values)}"
            )
        return self.fn(*values)


# Dispatch table: tag -> Operator. Populated by memograph.ops on import.
_REGISTRY: Dict[str, Operator] = {}


def register_operator(tag: str, arity: int, fn: Callable, *, replace: bool = False) -> Operator:
    """Add an operator to the dispatch table and return it."""
    if arity not in (1, 2):
        raise ValueError(f"Operator arity must be 1 or 2, got {arity}")
    if tag in _REGISTRY and not replace:
        raise ValueError(f"Operator {tag!r} is already registered")
    op = Operator(tag=tag, arity=arity, fn=fn)
    _REGISTRY[tag] = op
    return op


def unregister_operator(tag: str) -> None:
    _REGISTRY.pop(tag, None)


def get_operator(op: Union[str, Operator]) -> Operator:
    """Resolve a tag (or pass through an Operator instance)."""
    if isinstance(op, Operator):
        return op
    try:
        return _REGISTRY[op]
    except KeyError:
        raise UnknownOperatorError(
            f"Unknown operator {op!r}; registered: {sorted(_REGISTRY)}"
        ) from None


def registered_operators() -> Dict[str, Operator]:
    return dict(_REGISTRY)
