"""Network topology generators."""

import logging
from typing import Any, Mapping, Union

from topograph.config.schema import (
    HYPERCUBE_DIMENSION_BOUNDS,
    HypercubeParams,
    MeshParams,
    RingParams,
    TorusParams,
    parse_topology_params,
)
from topograph.topology.base import EdgeSet, Graph, Node

logger = logging.getLogger(__name__)

AnyTopologyParams = Union[RingParams, MeshParams, TorusParams, HypercubeParams]


def create_topology(params: Union[AnyTopologyParams, Mapping[str, Any]]) -> Graph:
    """Create a network topology.

    Args:
        params: A topology parameter record, or a mapping with a ``type`` key
            ('ring', 'mesh', 'torus', 'hypercube') that is validated into one

    Returns:
        Graph object

    Raises:
        ValueError: If the topology type is unknown
    """
    if isinstance(params, Mapping):
        params = parse_topology_params(params)

    if isinstance(params, RingParams):
        return generate_ring(params.nodes, params.skip)
    elif isinstance(params, MeshParams):
        return generate_mesh(params.rows, params.cols)
    elif isinstance(params, TorusParams):
        return generate_torus(params.rows, params.cols)
    elif isinstance(params, HypercubeParams):
        return generate_hypercube(params.dimension)
    else:
        raise ValueError(f"Unknown topology parameters: {params!r}")


def generate_ring(n: int, skip: int = 1) -> Graph:
    """Create a ring where node i links to i+1 and, for skip > 1, to i+skip.

    ``skip`` is clamped to [1, n // 2]; a chord that coincides with a ring
    edge or with its own reverse is kept only once.
    """
    if n < 1:
        return Graph()

    max_skip = max(1, n // 2)
    valid_skip = max(1, min(skip, max_skip))
    if valid_skip != skip:
        logger.warning("Provided skip %d adjusted to %d for n=%d", skip, valid_skip, n)

    nodes = [Node(id=i) for i in range(n)]
    edges = EdgeSet()

    if n > 1:
        for i in range(n):
            edges.add(i, (i + 1) % n)

    if valid_skip > 1 and n >= 3:
        for i in range(n):
            edges.add(i, (i + valid_skip) % n)

    return Graph(nodes=nodes, edges=edges.to_list())


def generate_mesh(rows: int, cols: int) -> Graph:
    """Create a 2D mesh; each node links left and up, with no wraparound."""
    if rows < 1 or cols < 1:
        return Graph()

    nodes = []
    edges = EdgeSet()
    node_grid = [[0] * cols for _ in range(rows)]
    next_id = 0

    for r in range(rows):
        for c in range(cols):
            node_id = next_id
            next_id += 1
            nodes.append(Node(id=node_id, row=r, col=c))
            node_grid[r][c] = node_id

            if c > 0:
                edges.add(node_id, node_grid[r][c - 1])
            if r > 0:
                edges.add(node_id, node_grid[r - 1][c])

    return Graph(nodes=nodes, edges=edges.to_list())


def generate_torus(rows: int, cols: int) -> Graph:
    """Create a 2D torus with node id ``row * cols + col``.

    Every node links down and right with wraparound; up and left links are
    the same edges seen from the other endpoint.
    """
    if rows < 1 or cols < 1:
        return Graph()

    def node_at(r: int, c: int) -> int:
        return (r % rows) * cols + (c % cols)

    nodes = [Node(id=r * cols + c, row=r, col=c) for r in range(rows) for c in range(cols)]
    edges = EdgeSet()

    for r in range(rows):
        for c in range(cols):
            current = node_at(r, c)
            # A single row or column would otherwise wrap onto itself
            if rows > 1:
                edges.add(current, node_at(r + 1, c))
            if cols > 1:
                edges.add(current, node_at(r, c + 1))

    return Graph(nodes=nodes, edges=edges.to_list())


def generate_hypercube(d: int) -> Graph:
    """Create a binary hypercube of dimension ``d`` (clamped to [0, 10]).

    Nodes whose ids differ in exactly one bit are adjacent; each node carries
    its ``d``-bit binary label.
    """
    low, high = HYPERCUBE_DIMENSION_BOUNDS
    valid_d = max(low, min(d, high))
    if valid_d != d:
        logger.warning("Provided dimension %d adjusted to %d", d, valid_d)

    n = 1 << valid_d
    nodes = [Node(id=i, binary=format(i, f"0{valid_d}b") if valid_d else "") for i in range(n)]
    edges = EdgeSet()

    for i in range(n):
        for bit in range(valid_d):
            edges.add(i, i ^ (1 << bit))

    return Graph(nodes=nodes, edges=edges.to_list())
