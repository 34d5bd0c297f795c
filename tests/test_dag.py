import pytest

from pyrosim.dag import Dag


def make_dag(count):
    dag = Dag()
    ids = [dag.create_node() for _ in range(count)]
    return dag, ids


def test_create_node_returns_sequential_ids():
    dag, ids = make_dag(4)
    assert ids == list(range(4))
    assert all(dag.is_valid(i) for i in ids)
    assert not dag.is_valid(4)


def test_connection_updates_edges():
    dag, (a, b) = make_dag(2)
    assert dag.create_connection(a, b)
    assert dag.is_parent(a, b)
    assert not dag.is_parent(b, a)
    assert dag.nodes[b].incoming == 1
    assert dag.nodes[a].out_connection_count == 1


def test_rejects_invalid_self_duplicate_and_cycle():
    dag, (a, b, c) = make_dag(3)
    assert not dag.create_connection(a, 10)
    assert not dag.create_connection(a, a)
    assert dag.create_connection(a, b)
    assert not dag.create_connection(a, b)
    assert dag.create_connection(b, c)
    assert not dag.create_connection(c, a)
    assert dag.nodes[a].incoming == 0


def test_set_parent_is_reverse_connection():
    dag, (a, b) = make_dag(2)
    assert dag.set_parent(b, a)
    assert dag.is_parent(a, b)


def test_is_ancestor_is_transitive():
    dag, (a, b, c, d) = make_dag(4)
    dag.create_connection(a, b)
    dag.create_connection(b, c)
    assert dag.is_ancestor(a, c)
    assert not dag.is_ancestor(c, a)
    assert not dag.is_ancestor(a, d)


def test_chain_depths():
    dag, ids = make_dag(3)
    dag.create_connection(ids[0], ids[1])
    dag.create_connection(ids[1], ids[2])
    dag.compute_depth()
    assert [dag.nodes[i].depth for i in ids] == [0, 1, 2]


def test_depth_respects_every_edge():
    dag, ids = make_dag(6)
    edges = [(0, 1), (0, 2), (1, 3), (2, 3), (3, 4), (0, 4), (5, 2)]
    for source, target in edges:
        assert dag.create_connection(source, target)
    dag.compute_depth()
    for source, target in edges:
        assert dag.nodes[target].depth > dag.nodes[source].depth
    for i in ids:
        if dag.nodes[i].incoming == 0:
            assert dag.nodes[i].depth == 0


def test_order_is_topological():
    dag, ids = make_dag(5)
    edges = [(3, 1), (1, 0), (4, 0), (0, 2)]
    for source, target in edges:
        dag.create_connection(source, target)
    dag.compute_depth()
    order = dag.order()
    assert sorted(order) == ids
    position = {node: i for i, node in enumerate(order)}
    for source, target in edges:
        assert position[source] < position[target]


def test_remove_connection():
    dag, (a, b, c) = make_dag(3)
    dag.create_connection(a, b)
    dag.create_connection(a, c)
    dag.remove_connection(a, b)
    assert not dag.is_parent(a, b)
    assert dag.is_parent(a, c)
    assert dag.nodes[b].incoming == 0


def test_remove_missing_connection_warns():
    dag, (a, b) = make_dag(2)
    with pytest.warns(RuntimeWarning):
        dag.remove_connection(a, b)
    assert dag.nodes[b].incoming == 0


def test_unknown_node_raises():
    dag, _ = make_dag(1)
    with pytest.raises(KeyError):
        dag.is_parent(7, 0)