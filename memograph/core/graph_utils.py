"""
Graph utilities.
Walk, summarize and sanity-check an expression graph from its output nodes.
"""

from collections import Counter
from typing import Dict, List

import numpy as np

from .exceptions import CycleError
from .node import Node


def walk(*outputs: Node) -> List[Node]:
    """
    Every node reachable from `outputs` through operand edges, each listed once,
    operands before the nodes that consume them.
    """
    order: List[Node] = []
    done = set()
    for root in outputs:
        if root in done:
            continue
        # Iterative post-order: a node is emitted once all its operands are
        stack = [(root, iter(root.operands))]
        pending = {root}
        while stack:
            node, it = stack[-1]
            child = next(it, None)
            if child is None:
                stack.pop()
                pending.discard(node)
                done.add(node)
                order.append(node)
                continue
            if child not in done and child not in pending:
                pending.add(child)
                stack.append((child, iter(child.operands)))
    return order


def check_acyclic(*outputs: Node) -> None:
    """
    Raise CycleError if an operand path starting at `outputs` comes back to a
    node already on that path.

    The public constructors cannot build a cycle; this is for graphs whose
    internals were edited by hand.
    """
    done = set()
    for root in outputs:
        on_path = set()
        stack = [(root, iter(root.operands))]
        on_path.add(root)
        while stack:
            node, it = stack[-1]
            child = next(it, None)
            if child is None:
                stack.pop()
                on_path.discard(node)
                done.add(node)
                continue
            if child in on_path:
                raise CycleError(f"Cycle detected through {child!r}")
            if child not in done:
                on_path.add(child)
                stack.append((child, iter(child.operands)))


def get_graph_stats(*outputs: Node) -> Dict:
    """
    Statistics for the graph below `outputs` (without printing).

    Fan-out only counts dependents that are part of the walked graph.

    Returns:
        dict with nodes, inputs, edges, max/avg fan-in, max/avg fan-out,
        cached (non-input nodes with a filled cache) and operations
    """
    nodes = walk(*outputs)
    if not nodes:
        return {
            'nodes': 0,
            'inputs': 0,
            'edges': 0,
            'max_fan_in': 0,
            'avg_fan_in': 0.0,
            'max_fan_out': 0,
            'avg_fan_out': 0.0,
            'cached': 0,
            'operations': {}
        }

    members = set(nodes)
    fan_ins = [len(node.operands) for node in nodes]
    fan_outs = [sum(1 for d in node.dependents if d in members) for node in nodes]
    op_counter = Counter(node.op_tag for node in nodes if not node.is_input)

    return {
        'nodes': len(nodes),
        'inputs': sum(1 for node in nodes if node.is_input),
        'edges': sum(fan_ins),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'cached': sum(1 for node in nodes if not node.is_input and node.is_cached),
        'operations': dict(op_counter)
    }


def print_graph_summary(*outputs: Node, detailed: bool = False) -> Dict:
    """
    Print a summary of the graph below `outputs`.

    Args:
        outputs: output node(s) of the graph
        detailed: also print one line per node (graphs of up to 100 nodes)

    Returns:
        the dictionary from get_graph_stats()
    """
    stats = get_graph_stats(*outputs)
    if stats['nodes'] == 0:
        print("Empty expression graph")
        return stats

    print("\n" + "="*70)
    print("EXPRESSION GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {stats['nodes']:,}")
    print(f"Input nodes:        {stats['inputs']:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print(f"Cached nodes:       {stats['cached']:,}")
    print()
    print("Operation breakdown:")
    for op_tag, count in Counter(stats['operations']).most_common(10):
        pct = 100.0 * count / stats['nodes']
        print(f"  {op_tag:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and stats['nodes'] <= 100:
        nodes = walk(*outputs)
        index = {node: i for i, node in enumerate(nodes)}
        print()
        print("="*70)
        print("NODE LIST")
        print("="*70)
        for i, node in enumerate(nodes):
            label = node.name or ""
            if node.is_input:
                print(f"Node {i:3d}: {'input':12s} ({float(node.value):10.6f}) {label}")
                continue
            parent_info = ", ".join(f"Node{index[p]}" for p in node.operands)
            value = "--" if not node.is_cached else f"{float(node.cached_value):.6f}"
            print(f"Node {i:3d}: {node.op_tag:12s} ({value:>10s}) <- [{parent_info}] {label}")

    print("="*70 + "\n")
    return stats
