# aad/ops/arithmetic.py
from numbers import Real

from ..core.catalog import BinaryOp, evaluate_binary
from ..core.node import Binary, Node


def constant(x, label: str = "") -> Node:
    """Leaf node holding the number `x` (an input, constant or parameter)."""
    if isinstance(x, bool) or not isinstance(x, Real):
        raise TypeError(
            f"constant() only accepts real numbers, but got {type(x)}"
        )
    return Node(float(x), label=label)


def _as_node(x) -> Node:
    """Ensure x is a Node; otherwise wrap it as a constant leaf."""
    return x if isinstance(x, Node) else constant(x)


def _binary(x, y, op: BinaryOp, label: str) -> Node:
    """
    Generic binary primitive:
      - computes out.value = op(x.value, y.value) once
      - records Binary(x, y, op) as provenance
    """
    x = _as_node(x)
    y = _as_node(y)
    return Node(evaluate_binary(op, x.value, y.value),
                provenance=Binary(x, y, op), label=label)


def add(x, y, *, label: str = "") -> Node:
    return _binary(x, y, BinaryOp.ADD, label)


def mul(x, y, *, label: str = "") -> Node:
    return _binary(x, y, BinaryOp.MUL, label)


def pow(x, y, *, label: str = "") -> Node:
    """
    Power: out.value = x.value ** y.value

    Only the base is differentiated. The exponent is treated as a constant
    and receives no gradient, even when it is itself a computed node.
    A negative base with a fractional exponent gives NaN.
    """
    return _binary(x, y, BinaryOp.POW, label)


# Derived operations: compositions of the primitives, no rules of their own
def neg(x, *, label: str = "") -> Node:
    """-x, built as x * (-1)."""
    return mul(x, constant(-1.0), label=label)


def sub(x, y, *, label: str = "") -> Node:
    """x - y, built as x + (-y)."""
    return add(x, neg(y), label=label)


def div(x, y, *, label: str = "") -> Node:
    """x / y, built as x * y**(-1). Division by zero gives ±Inf or NaN."""
    return mul(x, pow(y, constant(-1.0)), label=label)


def sqrt(x, *, label: str = "") -> Node:
    """Square root, built as x ** 0.5. Negative input gives NaN."""
    return pow(x, constant(0.5), label=label)
