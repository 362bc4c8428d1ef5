import logging

from domain.exceptions.currency import PathReconstructionError
from domain.graph.engine import BestRateEngine
from domain.models.currency import BestRateResult, ExchangeRateRequest, Vertex

logger = logging.getLogger(__name__)


class QueryService:
    def __init__(self, engine: BestRateEngine):
        self.engine = engine

    def best_rate(self, source: Vertex, dest: Vertex) -> float | None:
        return self.engine.tables.rate(source, dest)

    def best_path(self, source: Vertex, dest: Vertex) -> list[Vertex] | None:
        tables = self.engine.tables
        if tables.hop(source, dest) is None:
            return None

        path = [source]
        current = source
        # A valid path visits each vertex at most once.
        for _ in range(tables.vertex_count):
            current = tables.hop(current, dest)
            if current is None:
                raise PathReconstructionError(f'Next hop table broken between {source} and {dest}')
            path.append(current)
            if current == dest:
                return path

        raise PathReconstructionError(f'Path from {source} to {dest} does not terminate')

    def answer(self, request: ExchangeRateRequest) -> BestRateResult:
        source, dest = request.source, request.destination
        rate = self.best_rate(source, dest)

        try:
            path = self.best_path(source, dest) or []
        except PathReconstructionError as e:
            logger.warning(f'Could not rebuild best path: {e}')
            path = []

        if rate is None:
            logger.info(f'No known rate from {source} to {dest}')
        else:
            logger.info(f'Best rate {source} -> {dest}: {rate} over {len(path)} vertices')
        return BestRateResult(request=request, rate=rate, path=path)
