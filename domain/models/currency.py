from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vertex:
    exchange: str
    currency: str

    def __str__(self) -> str:
        return f'<{self.exchange}, {self.currency}>'


@dataclass(frozen=True)
class EdgeWeight:
    weight: float
    last_updated: int  # epoch milliseconds


@dataclass(frozen=True)
class PriceUpdate:
    timestamp: int  # epoch milliseconds
    exchange: str
    source_currency: str
    dest_currency: str
    forward_ratio: float
    backward_ratio: float


@dataclass(frozen=True)
class ExchangeRateRequest:
    source_exchange: str
    source_currency: str
    dest_exchange: str
    dest_currency: str

    @property
    def source(self) -> Vertex:
        return Vertex(self.source_exchange, self.source_currency)

    @property
    def destination(self) -> Vertex:
        return Vertex(self.dest_exchange, self.dest_currency)


@dataclass(frozen=True)
class BestRateResult:
    request: ExchangeRateRequest
    rate: float | None  # None when no rate is known for the pair
    path: list[Vertex] = field(default_factory=list)

    @property
    def has_rate(self) -> bool:
        return self.rate is not None
