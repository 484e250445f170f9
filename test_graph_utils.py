"""
Graph walking, statistics and acyclicity checks.
"""

import pytest

import memograph as mg
from memograph import ops
from memograph.core import graph_utils


@pytest.fixture
def diamond():
    x = mg.create_input(1.0, name="x")
    left = ops.sin(x)
    right = ops.cos(x)
    top = mg.create_binary("add", left, right, name="top")
    return x, left, right, top


def test_walk_orders_operands_first(diamond):
    x, left, right, top = diamond
    order = graph_utils.walk(top)
    assert order == [x, left, right, top]
    # Each node once, even across several outputs
    assert graph_utils.walk(top, left, x) == order


def test_graph_stats(diamond):
    x, left, right, top = diamond
    stats = graph_utils.get_graph_stats(top)
    assert stats['nodes'] == 4
    assert stats['inputs'] == 1
    assert stats['edges'] == 4
    assert stats['max_fan_in'] == 2
    assert stats['max_fan_out'] == 2
    assert stats['cached'] == 0
    assert stats['operations'] == {'sin': 1, 'cos': 1, 'add': 1}

    top.compute()
    assert graph_utils.get_graph_stats(top)['cached'] == 3


def test_stats_of_nothing():
    assert graph_utils.get_graph_stats()['nodes'] == 0


def test_print_graph_summary(diamond, capsys):
    x, left, right, top = diamond
    top.compute()
    stats = graph_utils.print_graph_summary(top, detailed=True)
    out = capsys.readouterr().out
    assert "EXPRESSION GRAPH SUMMARY" in out
    assert "Total nodes:        4" in out
    assert "<- [Node1, Node2] top" in out
    assert stats['nodes'] == 4


def test_check_acyclic_accepts_dags(diamond):
    *_, top = diamond
    graph_utils.check_acyclic(top)


def test_check_acyclic_detects_tampered_edges(diamond):
    x, left, right, top = diamond
    # Hand-editing operands is unsupported; this is what check_acyclic is for
    left._operands = (top,)
    with pytest.raises(mg.CycleError):
        graph_utils.check_acyclic(top)


def test_walk_puts_shared_operand_before_every_consumer():
    x = mg.create_input(0.5)
    s = ops.sin(x)
    top = mg.create_binary("add", s, x)
    order = graph_utils.walk(top)
    assert order == [x, s, top]
    assert order.index(x) < order.index(s) < order.index(top)
