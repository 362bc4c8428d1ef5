from .line_parser import InputLineParser, InvalidLine, ParsedLine
from .schemas import ExchangeRateRequestLine, PriceUpdateLine

__all__ = [
	'ExchangeRateRequestLine',
	'InputLineParser',
	'InvalidLine',
	'ParsedLine',
	'PriceUpdateLine',
]
