# aad/core/__init__.py

"""
Core public API for the AAD package.

Exports:
    Node              : Immutable scalar graph node (value, provenance, label, id).
    NodeId            : Process-unique node identity.
    Binary, Unary     : Provenance records of non-leaf nodes.
    BinaryOp, UnaryOp : Closed sets of primitive operators.
    GradientStore     : Read-only node id -> gradient mapping from one reverse pass.
    topological_order : Visit-once, operands-first ordering of a root's ancestors.
    backward          : Run a single reverse pass and return a GradientStore.
    grad, grads, grads_list : Convenience drivers around backward.
    value             : Extract the primal value from a Node.
"""

from .catalog import BinaryOp, UnaryOp
from .node import Node, NodeId, Binary, Unary
from .gradients import GradientStore
from .topo import topological_order
from .engine import backward
from .seeds import grad, grads, grads_list, value

__all__ = [
    "Node", "NodeId", "Binary", "Unary",
    "BinaryOp", "UnaryOp",
    "GradientStore",
    "topological_order", "backward",
    "grad", "grads", "grads_list", "value",
]
