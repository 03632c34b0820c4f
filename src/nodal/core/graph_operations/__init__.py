"""Operations built on top of the graph structure."""

from .snapshot import GraphSnapshot

__all__ = ["GraphSnapshot"]
