import logging

from domain.graph.rate_graph import RateGraph
from domain.graph.registry import VertexRegistry
from domain.models.currency import Vertex

logger = logging.getLogger(__name__)

PAR_VALUE = 1.0


class CurrencyLinker:
    """Connects the same currency across exchanges at par.

    Synthetic links only fill missing edges, so a quoted rate between the
    two vertices always wins.
    """

    def __init__(self, rate_graph: RateGraph, weight: float = PAR_VALUE):
        self.rate_graph = rate_graph
        self.weight = weight

    def link(self, vertex: Vertex, registry: VertexRegistry, timestamp: int) -> int:
        added = 0
        for other in registry.vertices_for_currency(vertex.currency):
            if other.exchange == vertex.exchange:
                continue
            if self.rate_graph.add_edge_if_absent(vertex, other, self.weight, timestamp):
                added += 1
            if self.rate_graph.add_edge_if_absent(other, vertex, self.weight, timestamp):
                added += 1

        if added:
            logger.debug(f'Added {added} synthetic {vertex.currency} link(s) for {vertex}')
        return added
