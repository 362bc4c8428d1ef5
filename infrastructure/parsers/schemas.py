from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator, model_validator


class PriceUpdateLine(BaseModel):
	model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

	timestamp: int = Field(..., description='Epoch milliseconds')
	exchange: str = Field(..., min_length=1)
	source_currency: str = Field(..., min_length=1)
	dest_currency: str = Field(..., min_length=1)
	forward_ratio: float = Field(..., gt=0, allow_inf_nan=False)
	backward_ratio: float = Field(..., gt=0, allow_inf_nan=False)

	@field_validator('timestamp', mode='before')
	@classmethod
	def parse_timestamp(cls, v, info: ValidationInfo):
		if isinstance(v, str):
			fmt = (info.context or {}).get('datetime_format', '%Y-%m-%dT%H:%M:%S%z')
			return int(datetime.strptime(v, fmt).timestamp() * 1000)
		return v

	@model_validator(mode='after')
	def ratios_must_not_allow_arbitrage(self):
		product = self.forward_ratio * self.backward_ratio
		if product <= 0.0 or product > 1.0:
			raise ValueError(f'forward * backward ratio must lie in (0, 1], got {product}')
		return self


class ExchangeRateRequestLine(BaseModel):
	model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

	marker: str
	source_exchange: str = Field(..., min_length=1)
	source_currency: str = Field(..., min_length=1)
	dest_exchange: str = Field(..., min_length=1)
	dest_currency: str = Field(..., min_length=1)

	@field_validator('marker')
	@classmethod
	def marker_must_match(cls, v: str, info: ValidationInfo):
		context = info.context or {}
		expected = context.get('query_marker')
		if context.get('require_query_marker') and v != expected:
			raise ValueError(f'expected query marker {expected!r}, got {v!r}')
		return v
