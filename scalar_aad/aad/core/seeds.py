# aad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph.
#-----------------------------------------------------------------------------
from __future__ import annotations
from numbers import Real
from typing import Any, Callable, Dict, Iterable, List

from .node import Node
from .engine import backward
from ..ops.arithmetic import constant


def value(x: Any) -> Any:
    """Return the numeric value of a Node; pass through plain numbers unchanged."""
    return x.value if isinstance(x, Node) else x


def _check_output(y: Any, fname: str) -> None:
    if isinstance(y, Node):
        return
    if isinstance(y, Real) and not isinstance(y, bool):
        return
    raise TypeError(f"{fname} expects f to return a Node or a number, but got {type(y)}")


def _grad_of(y, node: Node) -> float:
    # A plain-number output does not depend on any input
    if not isinstance(y, Node):
        return 0.0
    return backward(y).get(node)


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Node], Any], x0: float) -> float:
    """
    Derivative of a scalar function y=f(x) at x0 (single input).
    Builds a fresh graph and runs one reverse pass.
    """
    x = constant(x0, label="x")
    y = f(x)
    _check_output(y, "grad(f, x0)")
    return _grad_of(y, x)


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Node]], Any],
          inputs: Dict[str, float]) -> Dict[str, float]:
    """
    Gradient of a scalar function y=f(vars) w.r.t. ALL inputs (dict form).
    Performs ONE reverse pass to obtain all ∂y/∂var simultaneously.

    Parameters
    ----------
    f       : function taking a dict {name: Node} and returning a Node
    inputs  : dict {name: number}

    Returns
    -------
    dict {name: float}  # gradients in the same key order as `inputs`
    """
    leaves: Dict[str, Node] = {k: constant(v, label=k) for k, v in inputs.items()}
    y = f(leaves)
    _check_output(y, "grads(f, inputs)")
    if not isinstance(y, Node):
        return {k: 0.0 for k in inputs.keys()}
    store = backward(y)
    return {k: store.get(leaves[k]) for k in inputs.keys()}


def grads_list(f: Callable[[List[Node]], Any],
               x0_list: Iterable[float]) -> List[float]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a list
    of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    xs: List[Node] = [constant(v, label=f"x{i}") for i, v in enumerate(x0_list)]
    y = f(xs)
    _check_output(y, "grads_list(f, x0_list)")
    if not isinstance(y, Node):
        return [0.0 for _ in xs]
    store = backward(y)
    return [store.get(x) for x in xs]
