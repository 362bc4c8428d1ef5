import logging
import math
from collections.abc import Iterable, Iterator

from application.services.query_service import QueryService
from application.services.report_formatter import ReportFormatter
from config.logging_config import time_operation
from domain.exceptions.currency import InvalidRatioError
from domain.graph import BestRateEngine, CurrencyLinker, RateGraph, VertexRegistry
from domain.models.currency import BestRateResult, ExchangeRateRequest, PriceUpdate, Vertex
from infrastructure.parsers.line_parser import InputLineParser, InvalidLine

logger = logging.getLogger(__name__)


class ExchangeRateService:
    """Owns the valuation graph and answers best-rate requests against it."""

    def __init__(
        self,
        registry: VertexRegistry | None = None,
        rate_graph: RateGraph | None = None,
        linker: CurrencyLinker | None = None,
        engine: BestRateEngine | None = None,
        formatter: ReportFormatter | None = None,
    ):
        self.registry = registry if registry is not None else VertexRegistry()
        self.rate_graph = rate_graph or RateGraph()
        self.linker = linker or CurrencyLinker(self.rate_graph)
        self.engine = engine or BestRateEngine()
        self.query_service = QueryService(self.engine)
        self.formatter = formatter or ReportFormatter()

    def ingest_quote(
        self,
        timestamp: int,
        exchange: str,
        source_currency: str,
        dest_currency: str,
        forward_ratio: float,
        backward_ratio: float,
    ) -> None:
        if not all(math.isfinite(ratio) and ratio > 0 for ratio in (forward_ratio, backward_ratio)):
            raise InvalidRatioError(
                f'Rejected quote {exchange} {source_currency}/{dest_currency}: '
                f'ratios must be positive and finite, got {forward_ratio}/{backward_ratio}'
            )

        product = forward_ratio * backward_ratio
        if product <= 0.0 or product > 1.0:
            raise InvalidRatioError(
                f'Rejected quote {exchange} {source_currency}/{dest_currency}: '
                f'forward * backward = {product} is outside (0, 1]'
            )

        source = self.registry.add_vertex(Vertex(exchange, source_currency))
        dest = self.registry.add_vertex(Vertex(exchange, dest_currency))

        self.rate_graph.set_edge(source, dest, forward_ratio, timestamp)
        self.rate_graph.set_edge(dest, source, backward_ratio, timestamp)

        self.linker.link(source, self.registry, timestamp)
        self.linker.link(dest, self.registry, timestamp)
        logger.debug(
            f'Ingested quote {exchange} {source_currency}->{dest_currency} '
            f'{forward_ratio}/{backward_ratio} at {timestamp}'
        )

    def query(self, request: ExchangeRateRequest) -> BestRateResult:
        with time_operation(logger, f'Best rate recompute ({len(self.registry)} vertices)'):
            self.engine.recompute(self.registry, self.rate_graph)
        return self.query_service.answer(request)

    def ingest_query_and_report(
        self, source_exchange: str, source_currency: str, dest_exchange: str, dest_currency: str
    ) -> str:
        request = ExchangeRateRequest(
            source_exchange=source_exchange,
            source_currency=source_currency,
            dest_exchange=dest_exchange,
            dest_currency=dest_currency,
        )
        return self.formatter.format(self.query(request))

    def process(self, event: PriceUpdate | ExchangeRateRequest) -> str | None:
        """Apply one parsed event; returns a report for requests and None for quotes."""
        if isinstance(event, PriceUpdate):
            self.ingest_quote(
                event.timestamp,
                event.exchange,
                event.source_currency,
                event.dest_currency,
                event.forward_ratio,
                event.backward_ratio,
            )
            return None
        return self.formatter.format(self.query(event))

    def run(self, lines: Iterable[str], parser: InputLineParser) -> Iterator[str]:
        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                logger.debug(f'Skipping blank line {line_number}')
                continue

            parsed = parser.classify(line)
            if isinstance(parsed, InvalidLine):
                logger.warning(f'Skipping invalid line {line_number}: {parsed.reason}')
                continue

            report = self.process(parsed)
            if report is not None:
                yield report
