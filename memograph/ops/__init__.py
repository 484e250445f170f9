# memograph/ops/__init__.py

# Importing the submodules fills the operator dispatch table
from . import arithmetic
from . import transcendental

# Convenience re-exports so users can do: from memograph.ops import mul, sin, ...
from .arithmetic import add, sub, mul, div, neg, pow
from .transcendental import sin, cos, exp, log, sqrt, erf

__all__ = [
    "add", "sub", "mul", "div", "neg", "pow",
    "sin", "cos", "exp", "log", "sqrt", "erf",
]
