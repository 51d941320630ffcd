"""Adjacency construction for undirected graphs."""

from typing import Dict, List

from topograph.topology.base import Graph

Adjacency = Dict[int, List[int]]
"""Mapping from node id to the ids of its neighbors"""


def build_adjacency(graph: Graph) -> Adjacency:
    """Build a symmetric adjacency mapping with an entry for every node.

    Args:
        graph: Graph whose edges are treated as undirected

    Returns:
        Adjacency mapping; isolated nodes map to an empty list
    """
    adjacency: Adjacency = {node.id: [] for node in graph.nodes}
    for edge in graph.edges:
        adjacency[edge.source].append(edge.target)
        adjacency[edge.target].append(edge.source)
    return adjacency
