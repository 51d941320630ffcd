"""
topograph: interconnection-network topologies and their distance metrics.

topograph builds ring, mesh, torus and hypercube graphs from a small set of
parameters, measures their diameter and average shortest-path length, and
reconstructs shortest paths for highlighting in a renderer.
"""

__version__ = "0.1.0"

from topograph.config import Config
from topograph.core import GraphContext
from topograph.topology import Graph, Node, Edge, create_topology
from topograph.analysis import (
    Metrics,
    bfs,
    build_adjacency,
    compute_metrics,
    reconstruct_path,
    eccentricity_paths,
)
from topograph.exceptions import PathReconstructionError, TopographError

__all__ = [
    "__version__",
    "Config",
    "GraphContext",
    "Graph",
    "Node",
    "Edge",
    "create_topology",
    "Metrics",
    "bfs",
    "build_adjacency",
    "compute_metrics",
    "reconstruct_path",
    "eccentricity_paths",
    "PathReconstructionError",
    "TopographError",
]
