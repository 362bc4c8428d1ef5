import argparse
import logging
import sys

from application.services import ExchangeRateService, ReportFormatter
from config.logging_config import configure_logging
from config.settings import Settings, get_settings
from domain.exceptions.currency import InputSourceError
from domain.graph import CurrencyLinker, RateGraph
from infrastructure.parsers import InputLineParser
from infrastructure.sources import STDIN, FileLineSource

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(
		prog='best-rates',
		description='Replay price updates and answer best exchange rate requests',
	)
	parser.add_argument('input', nargs='?', default=STDIN, help="Input file, '-' for stdin")
	parser.add_argument('--log-level', default=None, help='Logging level (default from LOG_LEVEL)')
	parser.add_argument('--json-logs', action='store_true', help='Emit logs as JSON')
	parser.add_argument('--log-file', default=None, help='Also write JSON logs to this file')
	parser.add_argument(
		'--no-query-marker',
		action='store_true',
		help='Treat any five-token line as a request, whatever its first token',
	)
	return parser


def build_service(settings: Settings) -> ExchangeRateService:
	rate_graph = RateGraph()
	return ExchangeRateService(
		rate_graph=rate_graph,
		linker=CurrencyLinker(rate_graph, weight=settings.SYNTHETIC_LINK_WEIGHT),
		formatter=ReportFormatter(no_rate_placeholder=settings.NO_RATE_PLACEHOLDER),
	)


def main(argv: list[str] | None = None) -> int:
	args = build_parser().parse_args(argv)
	settings = get_settings()

	configure_logging(
		level=args.log_level or settings.LOG_LEVEL,
		json_logs=args.json_logs or settings.LOG_JSON,
		log_file=args.log_file if args.log_file is not None else settings.LOG_FILE,
	)

	line_parser = InputLineParser(
		datetime_format=settings.DATETIME_FORMAT,
		query_marker=settings.QUERY_MARKER,
		require_query_marker=settings.REQUIRE_QUERY_MARKER and not args.no_query_marker,
	)
	service = build_service(settings)
	source = FileLineSource(args.input)

	logger.info(f'{settings.APP_NAME}: reading events from {source.name}')
	try:
		for report in service.run(source.lines(), line_parser):
			print(report, flush=True)
	except InputSourceError as e:
		print(f'Error: {e}. Exiting...', file=sys.stderr)
		return 1

	return 0


if __name__ == '__main__':
	sys.exit(main())
