import logging
from dataclasses import dataclass, field

from domain.graph.rate_graph import RateGraph
from domain.graph.registry import VertexRegistry
from domain.models.currency import Vertex

logger = logging.getLogger(__name__)


@dataclass
class BestRateTables:
    best_rate: dict[Vertex, dict[Vertex, float]] = field(default_factory=dict)
    next_hop: dict[Vertex, dict[Vertex, Vertex]] = field(default_factory=dict)
    vertex_count: int = 0

    def rate(self, source: Vertex, dest: Vertex) -> float | None:
        return self.best_rate.get(source, {}).get(dest)

    def hop(self, source: Vertex, dest: Vertex) -> Vertex | None:
        return self.next_hop.get(source, {}).get(dest)


class BestRateEngine:
    """All-pairs best multiplicative rate with next-hop pointers.

    A Floyd-Warshall variant that maximises the product of edge weights
    instead of minimising a sum of distances. Every call to recompute starts
    from the raw adjacency, nothing carries over between calls.
    """

    def __init__(self):
        self.tables = BestRateTables()

    def recompute(self, registry: VertexRegistry, rate_graph: RateGraph) -> BestRateTables:
        vertices = registry.vertices()
        best: dict[Vertex, dict[Vertex, float]] = {vertex: {} for vertex in vertices}
        next_hop: dict[Vertex, dict[Vertex, Vertex]] = {vertex: {} for vertex in vertices}

        for source, dest, edge in rate_graph.edges():
            if source == dest:
                continue
            best.setdefault(source, {})[dest] = edge.weight
            next_hop.setdefault(source, {})[dest] = dest

        # Standard Floyd-Warshall: via is the outer loop and legs come from the best table.
        for via in vertices:
            via_rates = best[via]
            if not via_rates:
                continue
            for source in vertices:
                if source == via:
                    continue
                source_rates = best[source]
                to_via = source_rates.get(via)
                if to_via is None:
                    continue
                source_hops = next_hop[source]
                for dest, from_via in via_rates.items():
                    if dest == source or dest == via:
                        continue
                    candidate = to_via * from_via
                    if source_rates.get(dest, 0.0) < candidate:
                        source_rates[dest] = candidate
                        source_hops[dest] = source_hops[via]

        self.tables = BestRateTables(best_rate=best, next_hop=next_hop, vertex_count=len(vertices))
        logger.debug(
            f'Recomputed best rates over {len(vertices)} vertices '
            f'and {rate_graph.edge_count} edges'
        )
        return self.tables
