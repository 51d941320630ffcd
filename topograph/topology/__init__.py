"""Interconnection-network topology generators."""

from topograph.topology.base import Edge, EdgeKey, EdgeSet, Graph, Node, edge_key
from topograph.topology.generators import (
    create_topology,
    generate_hypercube,
    generate_mesh,
    generate_ring,
    generate_torus,
)

__all__ = [
    "Edge",
    "EdgeKey",
    "EdgeSet",
    "Graph",
    "Node",
    "edge_key",
    "create_topology",
    "generate_ring",
    "generate_mesh",
    "generate_torus",
    "generate_hypercube",
]
