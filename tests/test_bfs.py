"""Adjacency builder and BFS engine tests."""
import pytest

from topograph.analysis import bfs, build_adjacency
from topograph.topology import Graph, generate_hypercube, generate_mesh, generate_ring, generate_torus


def test_adjacency_is_symmetric_and_complete():
    graph = Graph.from_edges(4, [(0, 1), (2, 1)])
    adjacency = build_adjacency(graph)

    assert adjacency == {0: [1], 1: [0, 2], 2: [1], 3: []}


def test_bfs_distances_on_ring():
    graph = generate_ring(12)
    result = bfs(0, build_adjacency(graph), graph.nodes)

    assert result.distances[0] == 0
    assert result.predecessors[0] is None
    assert result.distances[6] == 6
    assert result.distances[11] == 1
    assert result.predecessors[11] == 0


def test_bfs_marks_unreachable_nodes():
    graph = Graph.from_edges(4, [(0, 1), (2, 3)])
    result = bfs(0, build_adjacency(graph), graph.node_ids())

    assert result.distances == {0: 0, 1: 1, 2: None, 3: None}
    assert result.predecessors[2] is None
    assert sorted(result.reachable()) == [0, 1]


@pytest.mark.parametrize(
    "graph",
    [generate_ring(9, 3), generate_mesh(4, 5), generate_torus(4, 5), generate_hypercube(4)],
    ids=["ring", "mesh", "torus", "hypercube"],
)
def test_bfs_reaches_every_node(graph):
    adjacency = build_adjacency(graph)
    for node in graph.nodes:
        result = bfs(node.id, adjacency, graph.nodes)
        assert len(result.reachable()) == graph.num_nodes


def test_bfs_predecessors_are_one_hop_closer():
    graph = generate_torus(4, 5)
    adjacency = build_adjacency(graph)
    result = bfs(7, adjacency, graph.nodes)

    for node_id, parent in result.predecessors.items():
        if node_id == 7:
            continue
        assert node_id in adjacency[parent]
        assert result.distances[parent] == result.distances[node_id] - 1


def test_bfs_farthest_on_hypercube():
    graph = generate_hypercube(3)
    result = bfs(0, build_adjacency(graph), graph.nodes)
    assert result.farthest() == (3, [7])


def test_bfs_unknown_start():
    graph = generate_ring(3)
    with pytest.raises(KeyError):
        bfs(10, build_adjacency(graph), graph.nodes)
