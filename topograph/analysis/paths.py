"""Shortest-path reconstruction from BFS predecessor links."""

from typing import Iterable, List, Union

from topograph.analysis.adjacency import Adjacency
from topograph.analysis.bfs import PredecessorMap, bfs
from topograph.exceptions import PathReconstructionError
from topograph.topology.base import Node


def reconstruct_path(source: int, target: int, predecessors: PredecessorMap) -> List[int]:
    """Rebuild the shortest path from ``source`` to ``target``.

    Args:
        source: Node the predecessor map was computed from
        target: Node to walk back from
        predecessors: Predecessor links from a BFS rooted at ``source``

    Returns:
        Node ids from ``source`` to ``target``, both included

    Raises:
        PathReconstructionError: If the chain breaks before reaching
            ``source`` or runs longer than the map itself
    """
    if target not in predecessors:
        raise PathReconstructionError(source, target, "target is not in the predecessor map")

    path = [target]
    current = target
    steps = 0
    max_steps = len(predecessors)

    while current != source:
        if steps >= max_steps:
            raise PathReconstructionError(
                source, target, f"no source reached within {max_steps} steps", node=current
            )
        previous = predecessors.get(current)
        if previous is None:
            raise PathReconstructionError(source, target, "predecessor chain broken", node=current)
        path.insert(0, previous)
        current = previous
        steps += 1

    return path


def eccentricity_paths(
    source: int,
    adjacency: Adjacency,
    all_nodes: Iterable[Union[int, Node]]
) -> List[List[int]]:
    """Reconstruct a shortest path to every node farthest from ``source``.

    These are the paths that realise the source's eccentricity, used to
    highlight how far the network stretches from one node. Ties yield one
    path per farthest node, in node-id order.

    Returns:
        List of paths; empty when ``source`` reaches no other node
    """
    result = bfs(source, adjacency, all_nodes)
    eccentricity, farthest = result.farthest()
    if eccentricity == 0:
        return []
    return [reconstruct_path(source, target, result.predecessors) for target in sorted(farthest)]
