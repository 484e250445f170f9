# memograph/core/exceptions.py
"""Exception types raised by the expression graph."""


class GraphError(Exception):
    """Base class for all memograph errors."""


class SetValueError(GraphError, TypeError):
    """Raised when `set` is called on a node that is not an input."""


class CycleError(GraphError):
    """Raised by `check_acyclic` when an operand path loops back on itself."""


class UnknownOperatorError(GraphError, KeyError):
    """Raised when an operator tag has not been registered."""


class ArityError(GraphError, ValueError):
    """Raised when an operator is used with the wrong number of operands."""
