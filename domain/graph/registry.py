import logging
from collections.abc import Iterator

from domain.models.currency import Vertex

logger = logging.getLogger(__name__)


class VertexRegistry:
    """Interns (exchange, currency) vertices.

    Every equal vertex resolves to one canonical instance, and each canonical
    instance gets a stable integer id in insertion order. Vertices are never
    removed.
    """

    def __init__(self):
        self._ids: dict[Vertex, int] = {}
        self._vertices: list[Vertex] = []
        self._by_currency: dict[str, list[Vertex]] = {}

    def add_vertex(self, vertex: Vertex) -> Vertex:
        existing = self.get(vertex)
        if existing is not None:
            return existing

        self._ids[vertex] = len(self._vertices)
        self._vertices.append(vertex)
        self._by_currency.setdefault(vertex.currency, []).append(vertex)
        logger.debug(f'Registered vertex {vertex} (id={self._ids[vertex]})')
        return vertex

    def get(self, vertex: Vertex) -> Vertex | None:
        index = self._ids.get(vertex)
        return None if index is None else self._vertices[index]

    def index_of(self, vertex: Vertex) -> int | None:
        return self._ids.get(vertex)

    def vertices(self) -> list[Vertex]:
        return list(self._vertices)

    def currencies(self) -> set[str]:
        return set(self._by_currency)

    def vertices_for_currency(self, currency: str) -> list[Vertex]:
        return list(self._by_currency.get(currency, []))

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._ids

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[Vertex]:
        return iter(self._vertices)
