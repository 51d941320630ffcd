"""Single-source breadth-first search over an adjacency mapping."""

from collections import deque
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Tuple, Union

from topograph.analysis.adjacency import Adjacency
from topograph.topology.base import Node

DistanceMap = Dict[int, Optional[int]]
"""Hop count per node id; None marks an unreachable node"""

PredecessorMap = Dict[int, Optional[int]]
"""BFS parent per node id; None for the source and for unreached nodes"""


@dataclass
class BFSResult:
    """Distances and predecessor links from one BFS run.

    Attributes:
        source: Node the search started from
        distances: Hop count to every node, None if unreachable
        predecessors: Parent of every reached node on a shortest path
    """

    source: int
    distances: DistanceMap
    predecessors: PredecessorMap

    def reachable(self) -> List[int]:
        """Ids of every node reached from the source, the source included."""
        return [node_id for node_id, dist in self.distances.items() if dist is not None]

    def farthest(self) -> Tuple[int, List[int]]:
        """Return the source's eccentricity and the nodes that attain it."""
        eccentricity = max(dist for dist in self.distances.values() if dist is not None)
        nodes = [node_id for node_id, dist in self.distances.items() if dist == eccentricity]
        return eccentricity, nodes


def bfs(
    start: int,
    adjacency: Adjacency,
    all_nodes: Iterable[Union[int, Node]]
) -> BFSResult:
    """Run breadth-first search from ``start``.

    Args:
        start: Source node id
        adjacency: Symmetric adjacency mapping
        all_nodes: Every node of the graph (ids or Node objects)

    Returns:
        BFSResult with exact unweighted shortest-path distances

    Raises:
        KeyError: If ``start`` is not one of ``all_nodes``
    """
    ids = [node.id if isinstance(node, Node) else node for node in all_nodes]
    distances: DistanceMap = {node_id: None for node_id in ids}
    predecessors: PredecessorMap = {node_id: None for node_id in ids}

    if start not in distances:
        raise KeyError(f"Start node {start} is not in the graph")

    distances[start] = 0
    queue = deque([start])

    while queue:
        u = queue.popleft()
        for v in adjacency.get(u, ()):
            if distances[v] is None:
                distances[v] = distances[u] + 1
                predecessors[v] = u
                queue.append(v)

    return BFSResult(source=start, distances=distances, predecessors=predecessors)
