"""Compressed edge geometry.

When the graph is compressed, the intermediate nodes of a road segment are
removed from the graph and kept per edge as an ordered bucket of node ids.
This module defines the read-only interface the sampler needs from such a
store, plus a small in-memory implementation.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Protocol, runtime_checkable


@runtime_checkable
class CompressedGeometryStore(Protocol):
    """Read-only view of per-edge interior shape nodes."""

    def has_entry(self, edge_id: int) -> bool:
        """Whether the edge has recorded interior geometry."""
        ...

    def get_bucket(self, edge_id: int) -> Sequence[int]:
        """Interior node ids of the edge, ordered from its source to its target."""
        ...


class CompressedEdgeContainer:
    """In-memory compressed geometry keyed by edge id.

    Edges with an empty bucket are treated as uncompressed.

    Example:
        >>> store = CompressedEdgeContainer({7: [3, 4]})
        >>> store.has_entry(7), store.has_entry(8)
        (True, False)
    """

    def __init__(self, buckets: Mapping[int, Iterable[int]] | None = None) -> None:
        self._buckets: dict[int, tuple[int, ...]] = {}
        for edge_id, nodes in (buckets or {}).items():
            bucket = tuple(nodes)
            if bucket:
                self._buckets[edge_id] = bucket

    def has_entry(self, edge_id: int) -> bool:
        return edge_id in self._buckets

    def get_bucket(self, edge_id: int) -> Sequence[int]:
        return self._buckets.get(edge_id, ())

    def __len__(self) -> int:
        return len(self._buckets)
