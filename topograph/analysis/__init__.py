"""Distance analysis: adjacency, BFS, metrics and path reconstruction."""

from topograph.analysis.adjacency import Adjacency, build_adjacency
from topograph.analysis.bfs import BFSResult, DistanceMap, PredecessorMap, bfs
from topograph.analysis.metrics import DISCONNECTED, Metrics, compute_metrics
from topograph.analysis.paths import eccentricity_paths, reconstruct_path

__all__ = [
    "Adjacency",
    "build_adjacency",
    "BFSResult",
    "DistanceMap",
    "PredecessorMap",
    "bfs",
    "DISCONNECTED",
    "Metrics",
    "compute_metrics",
    "eccentricity_paths",
    "reconstruct_path",
]
