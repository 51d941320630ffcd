"""Graph data model shared by every topology generator."""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Iterator, List, Optional, Set, Tuple


EdgeKey = Tuple[int, int]
"""Canonical (low, high) pair identifying an undirected edge"""


def edge_key(u: int, v: int) -> EdgeKey:
    """Return the canonical key of the undirected edge ``{u, v}``."""
    return (u, v) if u < v else (v, u)


@dataclass(frozen=True)
class Node:
    """A graph vertex with the metadata its generator attached.

    Attributes:
        id: Dense 0-based identifier
        row: Grid row (mesh and torus only)
        col: Grid column (mesh and torus only)
        binary: Zero-padded binary label (hypercube only)
    """

    id: int
    row: Optional[int] = None
    col: Optional[int] = None
    binary: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"id": self.id}
        if self.row is not None:
            data["row"] = self.row
            data["col"] = self.col
        if self.binary is not None:
            data["binary"] = self.binary
        return data


@dataclass(frozen=True)
class Edge:
    """An unweighted undirected edge between two node ids."""

    source: int
    target: int

    @property
    def key(self) -> EdgeKey:
        return edge_key(self.source, self.target)

    def to_dict(self) -> Dict[str, int]:
        return {"source": self.source, "target": self.target}


class EdgeSet:
    """Ordered edge collector that drops self-loops and repeated pairs.

    Generators discover most edges from both endpoints, so every candidate
    goes through the canonical key set before it is kept.
    """

    def __init__(self):
        self._keys: Set[EdgeKey] = set()
        self._edges: List[Edge] = []

    def add(self, u: int, v: int) -> bool:
        """Add edge ``{u, v}``.

        Returns:
            True if the edge was new, False if it was a self-loop or duplicate
        """
        if u == v:
            return False
        key = edge_key(u, v)
        if key in self._keys:
            return False
        self._keys.add(key)
        self._edges.append(Edge(source=u, target=v))
        return True

    def __contains__(self, pair: EdgeKey) -> bool:
        return edge_key(*pair) in self._keys

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self._edges)

    def to_list(self) -> List[Edge]:
        return list(self._edges)


@dataclass
class Graph:
    """Undirected network topology.

    Attributes:
        nodes: Nodes ordered by id; ids form the dense range [0, n)
        edges: Undirected edges with no self-loops and no repeated pairs
    """

    nodes: List[Node] = field(default_factory=list)
    edges: List[Edge] = field(default_factory=list)

    def __post_init__(self):
        """Validate graph invariants after initialization."""
        ids = [node.id for node in self.nodes]
        if sorted(ids) != list(range(len(ids))):
            raise ValueError(f"Node ids must form the dense range [0, {len(ids)})")

        seen: Set[EdgeKey] = set()
        n = len(ids)
        for edge in self.edges:
            if edge.source == edge.target:
                raise ValueError(f"Self-loop on node {edge.source}")
            if not (0 <= edge.source < n and 0 <= edge.target < n):
                raise ValueError(
                    f"Edge ({edge.source}, {edge.target}) references an unknown node"
                )
            if edge.key in seen:
                raise ValueError(f"Duplicate edge {edge.key}")
            seen.add(edge.key)

    @property
    def num_nodes(self) -> int:
        return len(self.nodes)

    @property
    def num_edges(self) -> int:
        return len(self.edges)

    def node_ids(self) -> List[int]:
        return [node.id for node in self.nodes]

    def edge_keys(self) -> Set[EdgeKey]:
        """Canonical keys of all edges, convenient for set comparisons."""
        return {edge.key for edge in self.edges}

    def degree(self, node_id: int) -> int:
        """Get the degree of a node.

        Args:
            node_id: Node index

        Returns:
            Number of incident edges
        """
        return sum(1 for edge in self.edges if node_id in (edge.source, edge.target))

    def avg_degree(self) -> float:
        """Calculate average node degree."""
        if not self.nodes:
            return 0.0
        return 2 * len(self.edges) / len(self.nodes)

    def disjoint_union(self, other: "Graph") -> "Graph":
        """Place ``other`` beside this graph with no connecting edge.

        Ids of ``other`` are shifted past this graph's ids so the result
        keeps a dense id range. Node metadata is preserved.
        """
        offset = self.num_nodes
        nodes = list(self.nodes)
        nodes.extend(
            Node(id=node.id + offset, row=node.row, col=node.col, binary=node.binary)
            for node in other.nodes
        )
        edges = list(self.edges)
        edges.extend(
            Edge(source=edge.source + offset, target=edge.target + offset)
            for edge in other.edges
        )
        return Graph(nodes=nodes, edges=edges)

    def to_dict(self) -> Dict[str, Any]:
        """Export nodes and edges as plain data for a renderer."""
        return {
            "nodes": [node.to_dict() for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
        }

    @classmethod
    def from_edges(cls, num_nodes: int, pairs: Iterable[EdgeKey]) -> "Graph":
        """Build a metadata-free graph from raw id pairs, collapsing duplicates."""
        edges = EdgeSet()
        for u, v in pairs:
            edges.add(u, v)
        return cls(nodes=[Node(id=i) for i in range(num_nodes)], edges=edges.to_list())
