"""Topology generator tests: node/edge counts, invariants and clamping."""
import logging
from collections import Counter

import pytest

from topograph.config import HypercubeParams, MeshParams, RingParams, TorusParams
from topograph.topology import (
    Graph,
    create_topology,
    generate_hypercube,
    generate_mesh,
    generate_ring,
    generate_torus,
)


ALL_GRAPHS = [
    pytest.param(lambda: generate_ring(12, 1), id="ring-12-1"),
    pytest.param(lambda: generate_ring(12, 6), id="ring-12-6"),
    pytest.param(lambda: generate_ring(4, 2), id="ring-4-2"),
    pytest.param(lambda: generate_ring(2), id="ring-2"),
    pytest.param(lambda: generate_mesh(4, 5), id="mesh-4x5"),
    pytest.param(lambda: generate_mesh(1, 3), id="mesh-1x3"),
    pytest.param(lambda: generate_torus(4, 5), id="torus-4x5"),
    pytest.param(lambda: generate_torus(2, 2), id="torus-2x2"),
    pytest.param(lambda: generate_torus(1, 5), id="torus-1x5"),
    pytest.param(lambda: generate_hypercube(3), id="hypercube-3"),
    pytest.param(lambda: generate_hypercube(0), id="hypercube-0"),
]


@pytest.mark.parametrize("factory", ALL_GRAPHS)
def test_ids_dense_and_edges_clean(factory):
    graph = factory()

    assert graph.node_ids() == list(range(graph.num_nodes))
    for edge in graph.edges:
        assert edge.source != edge.target

    keys = [edge.key for edge in graph.edges]
    assert len(keys) == len(set(keys))


@pytest.mark.parametrize("factory", ALL_GRAPHS)
def test_generation_is_deterministic(factory):
    first, second = factory(), factory()
    assert first.nodes == second.nodes
    assert first.edges == second.edges


def test_ring_plain_cycle():
    graph = generate_ring(12, skip=1)
    assert graph.num_nodes == 12
    assert graph.num_edges == 12
    assert all(graph.degree(i) == 2 for i in range(12))


def test_ring_half_skip_chords_collapse():
    graph = generate_ring(12, skip=6)
    assert graph.num_edges == 18
    # Every node has exactly one opposite partner
    assert all(graph.degree(i) == 3 for i in range(12))
    assert (0, 6) in graph.edge_keys()


def test_ring_skip_clamped_with_warning(caplog):
    with caplog.at_level(logging.WARNING):
        clamped = generate_ring(12, skip=9)

    assert "adjusted to 6" in caplog.text
    assert clamped.edge_keys() == generate_ring(12, skip=6).edge_keys()


def test_ring_skip_below_one_clamped(caplog):
    with caplog.at_level(logging.WARNING):
        graph = generate_ring(8, skip=0)
    assert graph.num_edges == 8
    assert "adjusted to 1" in caplog.text


def test_ring_small_cases():
    assert generate_ring(1).num_edges == 0
    assert generate_ring(1).num_nodes == 1
    assert generate_ring(2).edge_keys() == {(0, 1)}
    # Chords of skip 2 on five nodes complete the graph
    assert generate_ring(5, skip=2).num_edges == 10
    assert generate_ring(0).num_nodes == 0


def test_mesh_counts_and_coordinates():
    graph = generate_mesh(4, 5)
    assert graph.num_nodes == 20
    assert graph.num_edges == 3 * 5 + 4 * 4

    node = graph.nodes[7]
    assert (node.row, node.col) == (1, 2)
    # Corners have degree 2, interior nodes degree 4
    assert graph.degree(0) == 2
    assert graph.degree(6) == 4


def test_mesh_has_no_wraparound():
    keys = generate_mesh(3, 3).edge_keys()
    assert (0, 2) not in keys
    assert (0, 6) not in keys


def test_mesh_empty_for_non_positive_dimensions():
    assert generate_mesh(0, 5).num_nodes == 0
    assert generate_mesh(3, -1).num_edges == 0


def test_torus_counts_and_degree():
    graph = generate_torus(4, 5)
    assert graph.num_nodes == 20
    assert graph.num_edges == 40
    assert all(graph.degree(i) == 4 for i in range(20))


def test_torus_ids_are_row_major_and_wrap():
    graph = generate_torus(4, 5)
    for node in graph.nodes:
        assert node.id == node.row * 5 + node.col

    keys = graph.edge_keys()
    assert (0, 4) in keys    # horizontal wrap on row 0
    assert (0, 15) in keys   # vertical wrap on column 0


def test_torus_degenerate_shapes():
    assert generate_torus(2, 2).num_edges == 4
    assert generate_torus(1, 5).num_edges == 5
    assert generate_torus(1, 1).num_edges == 0


def test_hypercube_structure():
    graph = generate_hypercube(3)
    assert graph.num_nodes == 8
    assert graph.num_edges == 12
    assert all(len(node.binary) == 3 for node in graph.nodes)
    assert graph.nodes[5].binary == "101"

    for edge in graph.edges:
        assert bin(edge.source ^ edge.target).count("1") == 1


def test_hypercube_zero_dimension():
    graph = generate_hypercube(0)
    assert graph.num_nodes == 1
    assert graph.num_edges == 0


def test_hypercube_dimension_clamped(caplog):
    with caplog.at_level(logging.WARNING):
        graph = generate_hypercube(11)
    assert graph.num_nodes == 1024
    assert "adjusted to 10" in caplog.text

    with caplog.at_level(logging.WARNING):
        assert generate_hypercube(-2).num_nodes == 1


def test_create_topology_dispatch():
    assert create_topology(RingParams(nodes=10, skip=2)).num_edges == 20
    assert create_topology(MeshParams(rows=4, cols=5)).num_edges == 31
    assert create_topology(TorusParams(rows=4, cols=5, use_3d=True)).num_edges == 40
    assert create_topology(HypercubeParams(dimension=4)).num_nodes == 16


def test_create_topology_from_mapping():
    graph = create_topology({"type": "hypercube", "dimension": 2})
    assert isinstance(graph, Graph)
    degrees = Counter(graph.degree(i) for i in range(graph.num_nodes))
    assert degrees == {2: 4}


def test_create_topology_rejects_unknown():
    with pytest.raises(ValueError):
        create_topology({"type": "star"})
    with pytest.raises(ValueError):
        create_topology(object())
