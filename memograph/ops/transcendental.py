# memograph/ops/transcendental.py
import numpy as np
from scipy.special import erf as scipy_erf
from ..core.engine import create_unary
from ..core.operator import register_operator
from .arithmetic import _as_node

# Angles are in radians
SIN = register_operator("sin", 1, np.sin)
COS = register_operator("cos", 1, np.cos)
EXP = register_operator("exp", 1, np.exp)
LOG = register_operator("log", 1, np.log)
SQRT = register_operator("sqrt", 1, np.sqrt)
ERF = register_operator("erf", 1, scipy_erf)

def sin(x):
    return create_unary(SIN, _as_node(x))

def cos(x):
    return create_unary(COS, _as_node(x))

def exp(x):
    return create_unary(EXP, _as_node(x))

def log(x):
    return create_unary(LOG, _as_node(x))

def sqrt(x):
    return create_unary(SQRT, _as_node(x))

def erf(x):
    """
    Error function: erf(x) = (2/√π) ∫₀ˣ e^(-t²) dt
    """
    return create_unary(ERF, _as_node(x))
