from domain.models.currency import BestRateResult


class ReportFormatter:
    BEGIN = 'BEST_RATES_BEGIN'
    END = 'BEST_RATES_END'

    def __init__(self, no_rate_placeholder: str = 'NONE'):
        self.no_rate_placeholder = no_rate_placeholder

    def format_rate(self, rate: float | None) -> str:
        return self.no_rate_placeholder if rate is None else repr(rate)

    def format(self, result: BestRateResult) -> str:
        request = result.request
        lines = [
            f'{self.BEGIN} {request.source_exchange} {request.source_currency} '
            f'{request.dest_exchange} {request.dest_currency} {self.format_rate(result.rate)}'
        ]
        lines.extend(str(vertex) for vertex in result.path)
        lines.append(self.END)
        return '\n'.join(lines)
