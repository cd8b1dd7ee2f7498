# aad/core/engine.py
from __future__ import annotations

from collections import defaultdict
from typing import Dict, List, Tuple

import numpy as np

from ...logger import get_logger
from .catalog import binary_partials, unary_partial
from .gradients import GradientStore
from .node import Binary, Node, NodeId
from .topo import topological_order

logger = get_logger("scalar_aad.engine")


def local_partials(node: Node) -> List[Tuple[Node, float]]:
    """
    (operand, ∂node/∂operand) pairs for a non-leaf node, looked up in the
    operator catalog. Operands that receive no contribution (the exponent
    of `pow`) are left out.
    """
    prov = node.provenance
    if prov is None:
        return []
    if isinstance(prov, Binary):
        da, db = binary_partials(prov.op, prov.left.value, prov.right.value, node.value)
        pairs = [(prov.left, da), (prov.right, db)]
        return [(p, a) for p, a in pairs if a is not None]
    return [(prov.operand, unary_partial(prov.op, prov.operand.value, node.value))]


def backward(root: Node) -> GradientStore:
    """
    Run a single reverse pass from `root`.

    1) Topologically order every ancestor of `root`.
    2) Seed ∂root/∂root = 1.0.
    3) Walk the order in reverse; for each non-leaf node with accumulated
       gradient g, propagate: operand_grad += g * (∂node/∂operand).
       Nodes that only feed a pow exponent never get an entry and are
       skipped, so their subtree stays out of the store.
    4) Return the accumulated gradients. The graph itself is untouched.

    Reverse topological order visits every consumer before its operands, so
    a node's gradient is complete before it is propagated further.
    """
    if not isinstance(root, Node):
        raise TypeError(f"backward() expects a Node, but got {type(root)}")

    order = topological_order(root)

    # Entries appear lazily at 0.0 on first write
    grads: Dict[NodeId, float] = defaultdict(float)
    grads[root.id] = 1.0

    with np.errstate(all="ignore"):
        for node in reversed(order):
            # No entry: reachable only through a pow exponent, nothing to propagate
            if node.provenance is None or node.id not in grads:
                continue
            g = grads[node.id]
            for operand, partial in local_partials(node):
                grads[operand.id] = float(grads[operand.id] + partial * g)

    logger.debug("backward: %d nodes in order, %d gradient entries (root id=%d)",
                 len(order), len(grads), root.id)
    return GradientStore(grads)
