# aad/core/topo.py
from __future__ import annotations

from typing import List, Set

from .node import Node, NodeId


def topological_order(root: Node) -> List[Node]:
    """
    Post-order DFS from `root` over provenance edges.

    Every reachable node appears exactly once, after all of its operands.
    Left operands are visited before right ones, so the order is
    deterministic for a given graph. Uses an explicit stack, so expression
    depth is not limited by the interpreter's recursion limit.
    """
    order: List[Node] = []
    visited: Set[NodeId] = set()
    # (node, expanded): expanded entries are emitted once their operands are done
    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            order.append(node)
            continue
        if node.id in visited:
            continue
        visited.add(node.id)
        stack.append((node, True))
        for operand in reversed(node.operands):
            if operand.id not in visited:
                stack.append((operand, False))
    return order
