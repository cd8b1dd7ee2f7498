# aad/core/node.py
from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from typing import NewType, Optional, Tuple, Union

from .catalog import BinaryOp, UnaryOp

NodeId = NewType("NodeId", int)

# Process-wide identity source; ids are never reused.
_ids = itertools.count(1)


def _next_id() -> NodeId:
    return NodeId(next(_ids))


@dataclass(frozen=True)
class Binary:
    """Provenance of a node produced by a binary primitive."""
    left: "Node"
    right: "Node"
    op: BinaryOp

    @property
    def operands(self) -> Tuple["Node", "Node"]:
        return (self.left, self.right)


@dataclass(frozen=True)
class Unary:
    """Provenance of a node produced by a unary primitive."""
    operand: "Node"
    op: UnaryOp

    @property
    def operands(self) -> Tuple["Node"]:
        return (self.operand,)


Provenance = Union[Binary, Unary]


@dataclass(frozen=True, eq=False, repr=False)
class Node:
    """
    One immutable vertex of the computation graph.

    Attributes
    ----------
    value : float
        Primal value, computed once when the node is built.
    provenance : Binary | Unary | None
        Operator and operand nodes that produced this node; None for leaves
        (inputs, constants, parameters).
    label : str
        Debug name. Never used for bookkeeping.
    id : NodeId
        Process-unique identity. Equality and hashing use it alone.

    Nodes are built by the graph builder (`aad.ops`); `constant` is the
    public way to make a leaf. Calling this constructor directly is internal.
    """
    value: float
    provenance: Optional[Provenance] = None
    label: str = ""
    id: NodeId = field(default_factory=_next_id)

    @property
    def operands(self) -> Tuple["Node", ...]:
        return () if self.provenance is None else self.provenance.operands

    @property
    def is_leaf(self) -> bool:
        return self.provenance is None

    @property
    def op_tag(self) -> str:
        """Operator name ("add", "tanh", ...) or "leaf"."""
        return "leaf" if self.provenance is None else self.provenance.op.value

    def __eq__(self, other):
        if not isinstance(other, Node):
            return NotImplemented
        return self.id == other.id

    def __hash__(self):
        return hash(self.id)

    def __float__(self):
        return float(self.value)

    def __repr__(self):
        lbl = f", label={self.label!r}" if self.label else ""
        return f"Node(id={self.id}, value={self.value!r}, op={self.op_tag!r}{lbl})"

    # Operator overloading; plain numbers are wrapped as constants
    def __add__(self, other):
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pow__(self, other):
        from ..ops.arithmetic import pow
        return pow(self, other)

    def __rpow__(self, other):
        from ..ops.arithmetic import pow
        return pow(other, self)

    def exp(self):
        from ..ops.transcendental import exp
        return exp(self)

    def tanh(self):
        from ..ops.transcendental import tanh
        return tanh(self)

    def relu(self):
        from ..ops.transcendental import relu
        return relu(self)

    def sqrt(self):
        from ..ops.arithmetic import sqrt
        return sqrt(self)
