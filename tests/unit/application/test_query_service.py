# nosec B101


import pytest

from application.services.query_service import QueryService
from domain.exceptions.currency import PathReconstructionError
from domain.graph.engine import BestRateEngine, BestRateTables
from domain.models.currency import ExchangeRateRequest, Vertex

USD1 = Vertex('EXCH1', 'USD')
JPY1 = Vertex('EXCH1', 'JPY')
USD2 = Vertex('EXCH2', 'USD')
JPY2 = Vertex('EXCH2', 'JPY')


@pytest.fixture
def engine():
    engine = BestRateEngine()
    engine.tables = BestRateTables(
        best_rate={USD1: {JPY1: 105.0, USD2: 1.0, JPY2: 105.0}},
        next_hop={
            USD1: {JPY1: USD2, USD2: USD2, JPY2: USD2},
            USD2: {JPY1: JPY2, JPY2: JPY2},
            JPY2: {JPY1: JPY1},
        },
        vertex_count=4,
    )
    return engine


def test_best_rate_reads_table(engine):
    service = QueryService(engine)

    assert service.best_rate(USD1, JPY1) == 105.0
    assert service.best_rate(JPY1, USD1) is None


def test_best_path_follows_next_hops(engine):
    service = QueryService(engine)

    assert service.best_path(USD1, JPY1) == [USD1, USD2, JPY2, JPY1]
    assert service.best_path(USD1, USD2) == [USD1, USD2]


def test_best_path_missing_returns_none(engine):
    assert QueryService(engine).best_path(JPY1, USD1) is None


def test_best_path_detects_cycles():
    engine = BestRateEngine()
    engine.tables = BestRateTables(
        best_rate={USD1: {JPY1: 1.0}},
        next_hop={USD1: {JPY1: USD2}, USD2: {JPY1: USD1}},
        vertex_count=3,
    )

    with pytest.raises(PathReconstructionError):
        QueryService(engine).best_path(USD1, JPY1)


def test_best_path_detects_dangling_hop():
    engine = BestRateEngine()
    engine.tables = BestRateTables(
        best_rate={USD1: {JPY1: 1.0}},
        next_hop={USD1: {JPY1: USD2}},
        vertex_count=3,
    )

    with pytest.raises(PathReconstructionError):
        QueryService(engine).best_path(USD1, JPY1)


def test_answer_bundles_rate_and_path(engine):
    request = ExchangeRateRequest('EXCH1', 'USD', 'EXCH1', 'JPY')

    result = QueryService(engine).answer(request)

    assert result.request == request
    assert result.rate == 105.0
    assert result.has_rate
    assert result.path == [USD1, USD2, JPY2, JPY1]


def test_answer_without_rate_is_not_an_error(engine):
    result = QueryService(engine).answer(ExchangeRateRequest('EXCH1', 'JPY', 'EXCH9', 'GBP'))

    assert result.rate is None
    assert not result.has_rate
    assert result.path == []
