# memograph/core/engine.py
"""
Construction, evaluation and invalidation for the expression graph.

Evaluation pulls: `compute` walks operand edges back toward the inputs and
fills each cache slot it misses. Mutation pushes: `set_value` walks dependent
edges forward from an input and empties every cache slot it reaches.

Acyclicity is the caller's precondition. The constructors only accept nodes
that already exist, so the public API cannot close a loop; editing a node's
operands after the fact is unsupported and would make `compute` recurse
without end. See `graph_utils.check_acyclic` for an explicit check.
"""
from __future__ import annotations
import logging
from typing import Optional, Union

from .config import get_config
from .exceptions import ArityError, SetValueError
from .node import BinaryNode, InputNode, Node, UnaryNode
from .operator import Operator, get_operator

logger = logging.getLogger(__name__)


def _check_operand(x, role: str) -> Node:
    if not isinstance(x, Node):
        raise TypeError(f"{role} must be a Node, but got {type(x).__name__}")
    return x


def _resolve(op: Union[str, Operator], arity: int) -> Operator:
    operator = get_operator(op)
    if operator.arity != arity:
        kind = "unary" if arity == 1 else "binary"
        raise ArityError(
            f"Operator {operator.tag!r} has arity {operator.arity}; cannot build a {kind} node"
        )
    return operator


# ----------------------------- construction ----------------------------- #
def create_input(value, *, name: Optional[str] = None) -> InputNode:
    """New leaf holding `value` (coerced to the configured dtype)."""
    return InputNode(get_config().coerce(value), name=name)


def create_unary(op: Union[str, Operator], operand: Node, *, name: Optional[str] = None) -> UnaryNode:
    """
    New node applying a one-argument operator to `operand`.
    The node is registered as a dependent of `operand` before it is returned.
    """
    operator = _resolve(op, 1)
    operand = _check_operand(operand, "operand")
    node = UnaryNode(operator, operand, name=name)
    operand._add_dependent(node)
    return node


def create_binary(op: Union[str, Operator], left: Node, right: Node, *,
                  name: Optional[str] = None) -> BinaryNode:
    """
    New node applying a two-argument operator to `left` and `right`.
    The node is registered as a dependent of both operands before it is returned
    (once only when left and right are the same node).
    """
    operator = _resolve(op, 2)
    left = _check_operand(left, "left")
    right = _check_operand(right, "right")
    node = BinaryNode(operator, left, right, name=name)
    left._add_dependent(node)
    right._add_dependent(node)
    return node


# ------------------------------ evaluation ------------------------------ #
def compute(node: Node):
    """
    Current value of `node`, recomputing only what is stale.

    Inputs return their stored value in the active dtype. A filled cache slot
    is returned as is when it holds the active dtype; a slot filled under a
    different dtype counts as a miss. On a miss every operand is computed
    (each with its own cache check), the operator is applied and the result
    is memoized.
    """
    config = get_config()
    if isinstance(node, InputNode):
        value = node._value
        return value if type(value) is config.dtype else config.coerce(value)
    cached = node._cache
    if cached is not None and type(cached) is config.dtype:
        return cached

    values = [compute(operand) for operand in node._operands]
    with config.errstate():
        result = config.coerce(node.op.apply(*values))
    node._cache = result
    logger.debug("computed %r from %s", node, values)
    return result


# ------------------------- mutation / invalidation ------------------------- #
def set_value(node: Node, value) -> None:
    """
    Store a new value into an input and invalidate everything downstream.

    Raises
    ------
    SetValueError
        If `node` is not an InputNode. Nothing is modified in that case.
    """
    if not isinstance(node, InputNode):
        raise SetValueError(f"Can only set an input node, got {node!r}")
    node._value = get_config().coerce(value)
    invalidate(node)


def invalidate(node: Node) -> int:
    """
    Empty the cache of `node` and of every node reachable through dependent
    edges. Each node is visited once, even under diamond-shaped fan-in.

    Returns
    -------
    int
        Number of cache slots that held a value before being cleared.
    """
    seen = set()
    stack = [node]
    cleared = 0
    while stack:
        current = stack.pop()
        if current in seen:
            continue
        seen.add(current)
        if current._clear_cache():
            cleared += 1
        stack.extend(current._dependents)
    logger.debug("invalidated from %r: visited=%d cleared=%d", node, len(seen), cleared)
    return cleared
