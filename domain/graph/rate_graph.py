import logging
from collections.abc import Iterator

from domain.models.currency import EdgeWeight, Vertex

logger = logging.getLogger(__name__)

NO_EDGE = 0.0


class RateGraph:
    """Directed conversion rates between vertices, last-write-wins per edge."""

    def __init__(self):
        self._adjacency: dict[Vertex, dict[Vertex, EdgeWeight]] = {}

    def set_edge(self, source: Vertex, dest: Vertex, weight: float, timestamp: int) -> bool:
        """Store a rate unless a newer or equally recent one is already known.

        Returns True when the stored edge changed.
        """
        existing = self.get_edge(source, dest)
        if existing is not None and timestamp <= existing.last_updated:
            logger.debug(
                f'Ignoring stale update {source} -> {dest} '
                f'(ts={timestamp}, stored ts={existing.last_updated})'
            )
            return False

        self._adjacency.setdefault(source, {})[dest] = EdgeWeight(
            weight=weight, last_updated=timestamp
        )
        return True

    def add_edge_if_absent(self, source: Vertex, dest: Vertex, weight: float, timestamp: int) -> bool:
        if self.has_edge(source, dest):
            return False
        self._adjacency.setdefault(source, {})[dest] = EdgeWeight(
            weight=weight, last_updated=timestamp
        )
        return True

    def get_edge(self, source: Vertex, dest: Vertex) -> EdgeWeight | None:
        return self._adjacency.get(source, {}).get(dest)

    def get_weight(self, source: Vertex, dest: Vertex) -> float:
        edge = self.get_edge(source, dest)
        return NO_EDGE if edge is None else edge.weight

    def has_edge(self, source: Vertex, dest: Vertex) -> bool:
        return self.get_edge(source, dest) is not None

    def neighbours(self, source: Vertex) -> dict[Vertex, EdgeWeight]:
        return dict(self._adjacency.get(source, {}))

    def edges(self) -> Iterator[tuple[Vertex, Vertex, EdgeWeight]]:
        for source, targets in self._adjacency.items():
            for dest, edge in targets.items():
                yield source, dest, edge

    @property
    def edge_count(self) -> int:
        return sum(len(targets) for targets in self._adjacency.values())
