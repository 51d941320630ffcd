"""Graph session context tying generation, adjacency and metrics together."""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Union

from topograph.analysis.adjacency import Adjacency, build_adjacency
from topograph.analysis.bfs import BFSResult, bfs
from topograph.analysis.metrics import Metrics, compute_metrics
from topograph.analysis.paths import eccentricity_paths, reconstruct_path
from topograph.config.schema import Config, parse_topology_params
from topograph.topology.base import Graph
from topograph.topology.generators import AnyTopologyParams, create_topology

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphContext:
    """Everything derived from one set of topology parameters.

    A context is never updated in place: changing parameters means building
    a new context with :meth:`regenerate`.
    """

    params: AnyTopologyParams
    graph: Graph
    adjacency: Adjacency
    metrics: Metrics

    @classmethod
    def build(cls, params: Union[AnyTopologyParams, Mapping[str, Any]]) -> "GraphContext":
        """Generate the graph and compute its metrics.

        Args:
            params: Topology parameter record or mapping with a ``type`` key

        Returns:
            Fully populated context
        """
        if isinstance(params, Mapping):
            params = parse_topology_params(params)

        graph = create_topology(params)
        adjacency = build_adjacency(graph)
        metrics = compute_metrics(graph, adjacency)
        logger.info(
            "Built %s: %d nodes, %d edges, diameter=%s, avg_path_length=%s",
            params.type,
            graph.num_nodes,
            graph.num_edges,
            metrics.diameter,
            metrics.avg_path_length,
        )
        return cls(params=params, graph=graph, adjacency=adjacency, metrics=metrics)

    @classmethod
    def from_config(cls, config: Config) -> "GraphContext":
        """Create context from configuration."""
        return cls.build(config.topology)

    def regenerate(self, params: Union[AnyTopologyParams, Mapping[str, Any]]) -> "GraphContext":
        """Return a new context for ``params``; this context is left untouched."""
        return type(self).build(params)

    def bfs_from(self, source: int) -> BFSResult:
        """Run BFS from ``source`` over this context's graph."""
        return bfs(source, self.adjacency, self.graph.nodes)

    def shortest_path(self, source: int, target: int) -> Optional[List[int]]:
        """Find one shortest path between two nodes.

        Returns:
            Node ids from ``source`` to ``target``, or None if ``target``
            cannot be reached from ``source``

        Raises:
            KeyError: If ``source`` is not a node of the graph
            PathReconstructionError: If the predecessor links are inconsistent
        """
        result = self.bfs_from(source)
        if target not in result.distances:
            raise KeyError(f"Target node {target} is not in the graph")
        if result.distances[target] is None:
            return None
        return reconstruct_path(source, target, result.predecessors)

    def highlight_paths(self, source: int) -> List[List[int]]:
        """Shortest paths from ``source`` to each of its farthest nodes."""
        return eccentricity_paths(source, self.adjacency, self.graph.nodes)

    def to_dict(self) -> Dict[str, Any]:
        """Export parameters, graph and metrics as plain data for a renderer."""
        data = self.graph.to_dict()
        data["params"] = self.params.model_dump()
        data["metrics"] = self.metrics.to_dict()
        return data
