from .exchange_rate_service import ExchangeRateService
from .query_service import QueryService
from .report_formatter import ReportFormatter

__all__ = ['ExchangeRateService', 'QueryService', 'ReportFormatter']
