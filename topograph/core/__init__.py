"""Core session object for topograph."""

from topograph.core.context import GraphContext

__all__ = ["GraphContext"]
