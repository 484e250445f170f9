# memograph/core/__init__.py

"""
Core public API for the expression graph.

Exports:
    Node, InputNode, UnaryNode, BinaryNode : graph vertices.
    create_input / create_unary / create_binary : constructors that wire
                    dependent edges at creation.
    compute       : memoized evaluation of a node.
    set_value     : change an input and invalidate everything downstream.
    invalidate    : empty the caches reachable from a node.
    Operator, register_operator, get_operator : the operator dispatch table.
    GraphConfig, use_config, get_config : numeric / logging settings.
"""

from .node import Node, InputNode, UnaryNode, BinaryNode
from .engine import create_input, create_unary, create_binary, compute, set_value, invalidate
from .operator import Operator, register_operator, unregister_operator, get_operator, registered_operators
from .config import GraphConfig, use_config, get_config
from .exceptions import GraphError, SetValueError, CycleError, UnknownOperatorError, ArityError

__all__ = [
    "Node", "InputNode", "UnaryNode", "BinaryNode",
    "create_input", "create_unary", "create_binary",
    "compute", "set_value", "invalidate",
    "Operator", "register_operator", "unregister_operator", "get_operator", "registered_operators",
    "GraphConfig", "use_config", "get_config",
    "GraphError", "SetValueError", "CycleError", "UnknownOperatorError", "ArityError",
]
