from .engine import BestRateEngine, BestRateTables
from .linker import CurrencyLinker
from .rate_graph import NO_EDGE, RateGraph
from .registry import VertexRegistry

__all__ = [
    'NO_EDGE',
    'BestRateEngine',
    'BestRateTables',
    'CurrencyLinker',
    'RateGraph',
    'VertexRegistry',
]
