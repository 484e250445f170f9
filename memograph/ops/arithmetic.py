# memograph/ops/arithmetic.py
import numpy as np
from ..core.engine import create_binary, create_input, create_unary
from ..core.node import Node
from ..core.operator import register_operator

def _as_node(x):
    """Ensure x is a Node; otherwise wrap it as a new input."""
    return x if isinstance(x, Node) else create_input(x)

# Dispatch entries: pure functions of float32 scalars
ADD = register_operator("add", 2, lambda a, b: a + b)
SUB = register_operator("sub", 2, lambda a, b: a - b)
MUL = register_operator("mul", 2, lambda a, b: a * b)
DIV = register_operator("div", 2, lambda a, b: a / b)
# Negative base with fractional exponent gives NaN, not an error
POW = register_operator("pow", 2, np.power)
NEG = register_operator("neg", 1, np.negative)

def add(x, y): return create_binary(ADD, _as_node(x), _as_node(y))
def sub(x, y): return create_binary(SUB, _as_node(x), _as_node(y))
def mul(x, y): return create_binary(MUL, _as_node(x), _as_node(y))
def div(x, y): return create_binary(DIV, _as_node(x), _as_node(y))

def neg(x):
    return create_unary(NEG, _as_node(x))

def pow(x, y):
    """
    Power: out = x ** y, following IEEE-754 `pow`.

    x < 0 with a non-integer y, or 0 ** negative, yields NaN / inf rather
    than raising (unless the active config sets fp_errors="raise").
    """
    return create_binary(POW, _as_node(x), _as_node(y))
