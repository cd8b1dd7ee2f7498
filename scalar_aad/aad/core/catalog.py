# aad/core/catalog.py
"""
Operator catalog: the closed set of primitive operators.

Every primitive carries two rules:
  - a value rule, evaluated once when the node is built;
  - a local-derivative rule, evaluated during the reverse sweep, returning
    ∂out/∂operand for each operand.

Subtraction, division, negation and square root are compositions of the
primitives below (see ops/arithmetic.py), so they have no rules here.

All arithmetic runs on np.float64 so that 0/0, overflow and negative bases
raised to fractional powers give NaN/Inf instead of raising.
"""
from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, Optional, Tuple

import numpy as np


class BinaryOp(Enum):
    ADD = "add"
    MUL = "mul"
    POW = "pow"


class UnaryOp(Enum):
    EXP = "exp"
    TANH = "tanh"
    RELU = "relu"


# ----------------------------- value rules ----------------------------- #
BINARY_VALUE: Dict[BinaryOp, Callable[[np.float64, np.float64], np.float64]] = {
    BinaryOp.ADD: lambda a, b: a + b,
    BinaryOp.MUL: lambda a, b: a * b,
    BinaryOp.POW: lambda a, b: np.power(a, b),
}

UNARY_VALUE: Dict[UnaryOp, Callable[[np.float64], np.float64]] = {
    UnaryOp.EXP: np.exp,
    UnaryOp.TANH: np.tanh,
    UnaryOp.RELU: lambda a: np.maximum(a, 0.0),   # NaN propagates
}


# ----------------------- local-derivative rules ------------------------ #
# Binary rules: (a, b, out) -> (∂out/∂a, ∂out/∂b). A partial of None means
# the operand receives no contribution.
def _pow_partials(a, b, out):
    # Exponent is treated as a constant: only the base is differentiated.
    return b * np.power(a, b - 1.0), None


BINARY_PARTIALS: Dict[BinaryOp, Callable[..., Tuple[Optional[np.float64], Optional[np.float64]]]] = {
    BinaryOp.ADD: lambda a, b, out: (np.float64(1.0), np.float64(1.0)),
    BinaryOp.MUL: lambda a, b, out: (b, a),
    BinaryOp.POW: _pow_partials,
}

# Unary rules: (a, out) -> ∂out/∂a
UNARY_PARTIALS: Dict[UnaryOp, Callable[[np.float64, np.float64], np.float64]] = {
    UnaryOp.EXP: lambda a, out: out,
    UnaryOp.TANH: lambda a, out: 1.0 - out * out,
    UnaryOp.RELU: lambda a, out: np.float64(1.0 if a > 0 else 0.0),
}


def _check_exhaustive():
    for kind in BinaryOp:
        if kind not in BINARY_VALUE or kind not in BINARY_PARTIALS:
            raise RuntimeError(f"operator catalog is missing rules for {kind}")
    for kind in UnaryOp:
        if kind not in UNARY_VALUE or kind not in UNARY_PARTIALS:
            raise RuntimeError(f"operator catalog is missing rules for {kind}")


_check_exhaustive()


def evaluate_binary(op: BinaryOp, a: float, b: float) -> float:
    """Forward value of a binary primitive, IEEE-754 semantics."""
    with np.errstate(all="ignore"):
        return float(BINARY_VALUE[op](np.float64(a), np.float64(b)))


def evaluate_unary(op: UnaryOp, a: float) -> float:
    """Forward value of a unary primitive, IEEE-754 semantics."""
    with np.errstate(all="ignore"):
        return float(UNARY_VALUE[op](np.float64(a)))


def binary_partials(op: BinaryOp, a: float, b: float, out: float):
    with np.errstate(all="ignore"):
        return BINARY_PARTIALS[op](np.float64(a), np.float64(b), np.float64(out))


def unary_partial(op: UnaryOp, a: float, out: float):
    with np.errstate(all="ignore"):
        return UNARY_PARTIALS[op](np.float64(a), np.float64(out))
