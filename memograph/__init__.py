# memograph/__init__.py
# Lazily evaluated, memoized scalar expression graph

from .core.node import Node, InputNode, UnaryNode, BinaryNode
from .core.engine import (
    create_input,
    create_unary,
    create_binary,
    compute,
    set_value,
    invalidate,
)
from .core.operator import Operator, register_operator, unregister_operator, get_operator
from .core.config import GraphConfig, use_config, get_config
from .core.exceptions import (
    GraphError,
    SetValueError,
    CycleError,
    UnknownOperatorError,
    ArityError,
)
from .log import get_logger

# Operator set (importing registers add/mul/pow/sin/...)
from . import ops
from .core import graph_utils

__all__ = [
    # Nodes
    'Node',
    'InputNode',
    'UnaryNode',
    'BinaryNode',
    # Engine
    'create_input',
    'create_unary',
    'create_binary',
    'compute',
    'set_value',
    'invalidate',
    # Operators
    'Operator',
    'register_operator',
    'unregister_operator',
    'get_operator',
    'ops',
    # Config / logging
    'GraphConfig',
    'use_config',
    'get_config',
    'get_logger',
    # Errors
    'GraphError',
    'SetValueError',
    'CycleError',
    'UnknownOperatorError',
    'ArityError',
    # Inspection
    'graph_utils',
]
