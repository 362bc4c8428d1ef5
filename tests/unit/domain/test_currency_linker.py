# nosec B101


import pytest

from domain.graph.linker import CurrencyLinker
from domain.graph.rate_graph import RateGraph
from domain.graph.registry import VertexRegistry
from domain.models.currency import Vertex

USD1 = Vertex('EXCH1', 'USD')
USD2 = Vertex('EXCH2', 'USD')
USD3 = Vertex('EXCH3', 'USD')
JPY1 = Vertex('EXCH1', 'JPY')


@pytest.fixture
def registry():
    return VertexRegistry()


@pytest.fixture
def rate_graph():
    return RateGraph()


def test_links_same_currency_across_exchanges(registry, rate_graph):
    linker = CurrencyLinker(rate_graph)
    for vertex in (USD1, JPY1, USD2):
        registry.add_vertex(vertex)

    added = linker.link(USD2, registry, 1000)

    assert added == 2
    assert rate_graph.get_weight(USD1, USD2) == 1.0
    assert rate_graph.get_weight(USD2, USD1) == 1.0
    assert not rate_graph.has_edge(USD2, JPY1)
    assert not rate_graph.has_edge(USD2, USD2)


def test_links_to_every_other_exchange(registry, rate_graph):
    linker = CurrencyLinker(rate_graph)
    for vertex in (USD1, USD2, USD3):
        registry.add_vertex(vertex)

    assert linker.link(USD3, registry, 1000) == 4
    assert rate_graph.has_edge(USD3, USD1)
    assert rate_graph.has_edge(USD2, USD3)


def test_existing_priced_edge_is_not_overridden(registry, rate_graph):
    linker = CurrencyLinker(rate_graph)
    registry.add_vertex(USD1)
    registry.add_vertex(USD2)
    rate_graph.set_edge(USD1, USD2, 0.99, 500)

    linker.link(USD2, registry, 1000)
    linker.link(USD1, registry, 2000)

    assert rate_graph.get_weight(USD1, USD2) == 0.99
    assert rate_graph.get_edge(USD1, USD2).last_updated == 500
    assert rate_graph.get_weight(USD2, USD1) == 1.0


def test_relinking_adds_nothing(registry, rate_graph):
    linker = CurrencyLinker(rate_graph)
    registry.add_vertex(USD1)
    registry.add_vertex(USD2)

    assert linker.link(USD2, registry, 1000) == 2
    assert linker.link(USD2, registry, 2000) == 0
    assert rate_graph.edge_count == 2


def test_custom_link_weight(registry, rate_graph):
    linker = CurrencyLinker(rate_graph, weight=0.999)
    registry.add_vertex(USD1)
    registry.add_vertex(USD2)

    linker.link(USD1, registry, 1000)

    assert rate_graph.get_weight(USD1, USD2) == 0.999
