"""
Graph inspection helpers.

Summaries of the expression graph reachable from a root node: size, fan-in /
fan-out and operator mix. Nothing here is needed for differentiation; it is
for debugging and for sizing large expressions.
"""

import numpy as np
from typing import Dict
from collections import Counter

from .node import Node
from .topo import topological_order


def get_graph_stats(root: Node) -> Dict:
    """
    Statistics of the graph reachable from `root`.

    Returns:
        dict with nodes, leaves, edges, max/avg fan-in, max/avg fan-out and
        per-operator counts (leaves counted as "leaf")
    """
    order = topological_order(root)
    n_nodes = len(order)

    fan_ins = [len(node.operands) for node in order]
    n_edges = sum(fan_ins)

    # Fan-out counts consumers inside this graph only
    fan_outs = Counter()
    for node in order:
        for operand in node.operands:
            fan_outs[operand.id] += 1
    fan_out_list = [fan_outs[node.id] for node in order]

    op_counter = Counter(node.op_tag for node in order)

    return {
        'nodes': n_nodes,
        'leaves': op_counter.get('leaf', 0),
        'edges': n_edges,
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_out_list),
        'avg_fan_out': float(np.mean(fan_out_list)),
        'operations': dict(op_counter),
    }


def format_graph(root: Node, max_nodes: int = 20) -> str:
    """
    One line per node in topological order:

        Node   3: mul          (  -6.000000) <- [Node1, Node2]
        Node   1: leaf         (   2.000000) 'x1'
    """
    order = topological_order(root)
    lines = []
    for node in order[:max_nodes]:
        head = f"Node {node.id:4d}: {node.op_tag:12s} ({node.value:10.6f})"
        if node.operands:
            parent_info = ", ".join(f"Node{p.id}" for p in node.operands)
            head += f" <- [{parent_info}]"
        if node.label:
            head += f" {node.label!r}"
        lines.append(head)
    if len(order) > max_nodes:
        lines.append(f"... ({len(order) - max_nodes} more nodes)")
    return "\n".join(lines)


def analyze_graph_complexity(root: Node) -> str:
    """Short text report on the size and operator mix of the graph."""
    stats = get_graph_stats(root)

    report = []
    report.append("Graph Complexity Analysis:")
    report.append(f"  Total nodes: {stats['nodes']:,} ({stats['leaves']:,} leaves)")
    report.append(f"  Total connections: {stats['edges']:,}")
    report.append(f"  Average branching: {stats['avg_fan_out']:.2f}")

    if stats['nodes'] < 1000:
        complexity = "Low"
    elif stats['nodes'] < 10000:
        complexity = "Medium"
    else:
        complexity = "High"
    report.append(f"  Complexity level: {complexity}")

    top_ops = sorted(stats['operations'].items(), key=lambda x: x[1], reverse=True)[:3]
    report.append("  Top operations:")
    for op, count in top_ops:
        pct = 100.0 * count / stats['nodes']
        report.append(f"    - {op}: {pct:.1f}%")

    return "\n".join(report)
