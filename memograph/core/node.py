# memograph/core/node.py
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, List, Optional, Tuple
from weakref import WeakSet  # dependents are observed, never owned

from .operator import Operator


class Node(ABC):
    """
    A vertex of the expression graph.

    Concrete nodes are `InputNode`, `UnaryNode` and `BinaryNode`. Build them
    with `create_input` / `create_unary` / `create_binary` (or the helpers in
    `memograph.ops`) so that dependent edges are wired at creation.

    Attributes
    ----------
    name : Optional[str]
        Optional debug/pretty-print name.
    _dependents : WeakSet[Node]
        Nodes that consume this one directly as an operand. Weak so that a
        consumer nobody holds anymore can be reclaimed; used only to push
        invalidation forward.
    """

    # Keep numpy scalars on the left of an operator from swallowing the node
    __array_ufunc__ = None

    def __init__(self, *, name: Optional[str] = None):
        self.name = name
        self._dependents: WeakSet = WeakSet()

    # --- structure ---------------------------------------------------------
    @property
    def operands(self) -> Tuple["Node", ...]:
        return ()

    @property
    def dependents(self) -> List["Node"]:
        return list(self._dependents)

    @property
    @abstractmethod
    def op_tag(self) -> str:
        pass

    @property
    def is_input(self) -> bool:
        return False

    def _add_dependent(self, node: "Node") -> None:
        self._dependents.add(node)

    # --- cache -------------------------------------------------------------
    @property
    @abstractmethod
    def cached_value(self) -> Optional[Any]:
        """The memoized value, or None when the slot is empty."""
        pass

    @property
    def is_cached(self) -> bool:
        return self.cached_value is not None

    @abstractmethod
    def _clear_cache(self) -> bool:
        """Empty the cache slot; return True if it held a value."""
        pass

    # --- evaluation --------------------------------------------------------
    def compute(self):
        from .engine import compute
        return compute(self)

    def set(self, value) -> None:
        from .engine import set_value
        set_value(self, value)

    def __float__(self):
        return float(self.compute())

    # Operator overloading builds new nodes; it never evaluates
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pow__(self, other):
        from ..ops.arithmetic import pow
        return pow(self, other)

    def __rpow__(self, other):
        from ..ops.arithmetic import pow
        return pow(other, self)


class InputNode(Node):
    """Leaf holding a mutable scalar. Its stored value doubles as its cache."""

    def __init__(self, value, *, name: Optional[str] = None):
        super().__init__(name=name)
        self._value = value

    @property
    def value(self):
        return self._value

    @property
    def op_tag(self) -> str:
        return "input"

    @property
    def is_input(self) -> bool:
        return True

    @property
    def cached_value(self):
        return self._value

    def _clear_cache(self) -> bool:
        return False

    def __repr__(self):
        return f"InputNode({self._value!r}, name={self.name!r})"


class OpNode(Node):
    """Common part of unary and binary nodes: operator, operands, cache slot."""

    def __init__(self, op: Operator, operands: Tuple[Node, ...], *, name: Optional[str] = None):
        super().__init__(name=name)
        self.op = op
        # Immutable after construction: no edge can be added later
        self._operands = tuple(operands)
        self._cache = None

    @property
    def operands(self) -> Tuple[Node, ...]:
        return self._operands

    @property
    def op_tag(self) -> str:
        return self.op.tag

    @property
    def cached_value(self):
        return self._cache

    def _clear_cache(self) -> bool:
        held = self._cache is not None
        self._cache = None
        return held

    def __repr__(self):
        state = "empty" if self._cache is None else repr(self._cache)
        return f"{type(self).__name__}({self.op.tag!r}, cache={state}, name={self.name!r})"


class UnaryNode(OpNode):
    def __init__(self, op: Operator, operand: Node, *, name: Optional[str] = None):
        super().__init__(op, (operand,), name=name)

    @property
    def operand(self) -> Node:
        return self._operands[0]


class BinaryNode(OpNode):
    def __init__(self, op: Operator, left: Node, right: Node, *, name: Optional[str] = None):
        super().__init__(op, (left, right), name=name)

    @property
    def left(self) -> Node:
        return self._operands[0]

    @property
    def right(self) -> Node:
        return self._operands[1]
