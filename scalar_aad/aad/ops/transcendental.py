# aad/ops/transcendental.py
from ..core.catalog import UnaryOp, evaluate_unary
from ..core.node import Node, Unary
from .arithmetic import _as_node


def _unary(x, op: UnaryOp, label: str) -> Node:
    x = _as_node(x)
    return Node(evaluate_unary(op, x.value), provenance=Unary(x, op), label=label)


def exp(x, *, label: str = "") -> Node:
    """e**x; overflows to +Inf for large x."""
    return _unary(x, UnaryOp.EXP, label)


def tanh(x, *, label: str = "") -> Node:
    """
    Hyperbolic tangent.

    Backward uses the node's own value: d tanh(x)/dx = 1 - tanh(x)^2
    """
    return _unary(x, UnaryOp.TANH, label)


def relu(x, *, label: str = "") -> Node:
    """max(0, x); the derivative at exactly 0 is taken as 0."""
    return _unary(x, UnaryOp.RELU, label)
