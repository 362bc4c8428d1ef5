import logging
from dataclasses import dataclass

from pydantic import ValidationError

from domain.exceptions.currency import InvalidInputError, InvalidRatioError
from domain.models.currency import ExchangeRateRequest, PriceUpdate
from infrastructure.parsers.schemas import ExchangeRateRequestLine, PriceUpdateLine

logger = logging.getLogger(__name__)

NUM_TOKENS_PRICE_UPDATE = 6
NUM_TOKENS_EXCHANGE_RATE_REQUEST = 5


@dataclass(frozen=True)
class InvalidLine:
	line: str
	reason: str


ParsedLine = PriceUpdate | ExchangeRateRequest | InvalidLine


class InputLineParser:
	"""Turns raw input lines into domain events.

	Lines are told apart by token count: six tokens make a price update,
	five make an exchange rate request. With require_query_marker set, a
	five-token line must also start with the query marker.
	"""

	def __init__(
		self,
		datetime_format: str = '%Y-%m-%dT%H:%M:%S%z',
		query_marker: str = 'EXCHANGE_RATE_REQUEST',
		require_query_marker: bool = True,
	):
		self.datetime_format = datetime_format
		self.query_marker = query_marker
		self.require_query_marker = require_query_marker

	def parse(self, line: str) -> PriceUpdate | ExchangeRateRequest:
		"""Parse one line, raising InvalidInputError when it is not a valid event."""
		tokens = line.split()

		if len(tokens) == NUM_TOKENS_PRICE_UPDATE:
			return self._parse_price_update(tokens)
		if len(tokens) == NUM_TOKENS_EXCHANGE_RATE_REQUEST:
			return self._parse_exchange_rate_request(tokens)

		raise InvalidInputError(
			f'Input is neither a price update nor an exchange rate request ({len(tokens)} tokens)'
		)

	def classify(self, line: str) -> ParsedLine:
		try:
			return self.parse(line)
		except InvalidInputError as e:
			return InvalidLine(line=line, reason=str(e))

	def _parse_price_update(self, tokens: list[str]) -> PriceUpdate:
		timestamp, exchange, source_currency, dest_currency, forward, backward = tokens
		try:
			parsed = PriceUpdateLine.model_validate(
				{
					'timestamp': timestamp,
					'exchange': exchange,
					'source_currency': source_currency,
					'dest_currency': dest_currency,
					'forward_ratio': forward,
					'backward_ratio': backward,
				},
				context={'datetime_format': self.datetime_format},
			)
		except ValidationError as e:
			if all(not error['loc'] for error in e.errors()):
				raise InvalidRatioError(f'Resultant ratio is invalid: {_describe(e)}') from e
			raise InvalidInputError(f'Invalid price update: {_describe(e)}') from e

		return PriceUpdate(
			timestamp=parsed.timestamp,
			exchange=parsed.exchange,
			source_currency=parsed.source_currency,
			dest_currency=parsed.dest_currency,
			forward_ratio=parsed.forward_ratio,
			backward_ratio=parsed.backward_ratio,
		)

	def _parse_exchange_rate_request(self, tokens: list[str]) -> ExchangeRateRequest:
		marker, source_exchange, source_currency, dest_exchange, dest_currency = tokens
		try:
			parsed = ExchangeRateRequestLine.model_validate(
				{
					'marker': marker,
					'source_exchange': source_exchange,
					'source_currency': source_currency,
					'dest_exchange': dest_exchange,
					'dest_currency': dest_currency,
				},
				context={
					'query_marker': self.query_marker,
					'require_query_marker': self.require_query_marker,
				},
			)
		except ValidationError as e:
			raise InvalidInputError(f'Invalid exchange rate request: {_describe(e)}') from e

		return ExchangeRateRequest(
			source_exchange=parsed.source_exchange,
			source_currency=parsed.source_currency,
			dest_exchange=parsed.dest_exchange,
			dest_currency=parsed.dest_currency,
		)


def _describe(error: ValidationError) -> str:
	return '; '.join(
		f"{'.'.join(str(part) for part in e['loc']) or 'line'}: {e['msg']}" for e in error.errors()
	)
