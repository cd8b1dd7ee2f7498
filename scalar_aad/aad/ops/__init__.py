# aad/ops/__init__.py

# Graph builder: every function here allocates new nodes, none mutates one.
from .arithmetic import constant, add, sub, mul, div, neg, pow, sqrt
from .transcendental import exp, tanh, relu

__all__ = [
    "constant",
    "add", "sub", "mul", "div", "neg", "pow", "sqrt",
    "exp", "tanh", "relu",
]
