"""All-pairs distance metrics for generated topologies."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from topograph.analysis.adjacency import Adjacency, build_adjacency
from topograph.analysis.bfs import bfs
from topograph.topology.base import Graph

logger = logging.getLogger(__name__)

DISCONNECTED = "disconnected"
"""Display value for distance metrics of a disconnected graph"""


@dataclass(frozen=True)
class Metrics:
    """Distance metrics of a graph.

    Attributes:
        diameter: Largest shortest-path distance, None if disconnected
        avg_path_length: Mean shortest-path distance over ordered pairs of
            distinct nodes (3 decimals), None if disconnected
        is_connected: Whether every node reaches every other node
        num_nodes: Node count of the measured graph
        num_edges: Edge count of the measured graph
    """

    diameter: Optional[int]
    avg_path_length: Optional[float]
    is_connected: bool
    num_nodes: int = 0
    num_edges: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "diameter": DISCONNECTED if self.diameter is None else self.diameter,
            "avg_path_length": DISCONNECTED if self.avg_path_length is None else self.avg_path_length,
            "is_connected": self.is_connected,
            "num_nodes": self.num_nodes,
            "num_edges": self.num_edges,
        }


def compute_metrics(graph: Graph, adjacency: Optional[Adjacency] = None) -> Metrics:
    """Compute diameter, average path length and connectivity.

    Runs BFS from every node, so the cost is O(V * (V + E)).

    Connectivity is judged by comparing each source's reachable-node count
    with the first source's count. This catches every disconnected graph the
    generators can produce, but two different components of equal size
    would only be caught by the first source reaching fewer than n nodes.

    Args:
        graph: Graph to measure
        adjacency: Prebuilt adjacency for ``graph``; built if omitted

    Returns:
        Metrics for the graph
    """
    n = graph.num_nodes
    if n <= 1:
        return Metrics(
            diameter=0,
            avg_path_length=0.0,
            is_connected=True,
            num_nodes=n,
            num_edges=graph.num_edges,
        )

    if adjacency is None:
        adjacency = build_adjacency(graph)

    max_distance = 0
    total_path_length = 0
    reachable_pairs = 0
    is_connected = True
    first_component_size = 0

    for index, node in enumerate(graph.nodes):
        result = bfs(node.id, adjacency, graph.nodes)
        reachable_count = 0

        for dist in result.distances.values():
            if dist is None:
                continue
            reachable_count += 1
            if dist > 0:
                total_path_length += dist
                reachable_pairs += 1
            max_distance = max(max_distance, dist)

        if index == 0:
            first_component_size = reachable_count
            if first_component_size < n:
                is_connected = False
        elif is_connected and reachable_count != first_component_size:
            is_connected = False
            logger.warning(
                "Graph confirmed disconnected. Reachable count mismatch: %d vs %d",
                reachable_count,
                first_component_size,
            )

    if not is_connected:
        logger.info("Graph is disconnected; diameter and average path length undefined")
        return Metrics(
            diameter=None,
            avg_path_length=None,
            is_connected=False,
            num_nodes=n,
            num_edges=graph.num_edges,
        )

    # Sum and count both include (a, b) and (b, a), so the ratio is unaffected
    avg_path_length = round(total_path_length / reachable_pairs, 3) if reachable_pairs else None

    return Metrics(
        diameter=max_distance,
        avg_path_length=avg_path_length,
        is_connected=True,
        num_nodes=n,
        num_edges=graph.num_edges,
    )
