"""Exception types raised by topograph."""

from typing import Optional


class TopographError(RuntimeError):
    """Base class for topograph errors."""


class PathReconstructionError(TopographError):
    """Predecessor links do not lead from the target back to the source.

    This is an invariant violation, not a "no path" result: a predecessor
    map produced by BFS from ``source`` never triggers it.
    """

    def __init__(self, source: int, target: int, reason: str, node: Optional[int] = None):
        self.source = source
        self.target = target
        self.reason = reason
        self.node = node
        message = f"Cannot reconstruct path {source} -> {target}: {reason}"
        if node is not None:
            message += f" (at node {node})"
        super().__init__(message)
