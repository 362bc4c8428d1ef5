import json
import logging
import sys
import time
import traceback
from contextlib import contextmanager
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

CONSOLE_FORMAT = '%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s'


class JSONFormatter(logging.Formatter):
	"""
	Custom formatter that outputs structured JSON logs.
	"""

	def format(self, record: logging.LogRecord) -> str:
		log_entry = {
			'timestamp': datetime.now().isoformat(),
			'level': record.levelname,
			'logger': record.name,
			'message': record.getMessage(),
			'module': record.module,
			'function': record.funcName,
			'line': record.lineno,
		}

		if record.exc_info:
			log_entry['exception'] = {
				'type': record.exc_info[0].__name__,
				'message': str(record.exc_info[1]),
				'traceback': traceback.format_exception(*record.exc_info),
			}

		if hasattr(record, 'extra_data'):
			log_entry['data'] = record.extra_data

		return json.dumps(log_entry, ensure_ascii=False, default=str)


def configure_logging(
	level: str = 'WARNING',
	json_logs: bool = False,
	log_file: str = '',
	max_file_size: int = 10 * 1024 * 1024,
	backup_count: int = 5,
) -> None:
	"""Configure the root logger.

	Console output goes to stderr; stdout is reserved for reports.
	"""
	root_logger = logging.getLogger()
	root_logger.handlers.clear()
	root_logger.setLevel(getattr(logging, level.upper()))

	console_handler = logging.StreamHandler(sys.stderr)
	if json_logs:
		console_handler.setFormatter(JSONFormatter())
	else:
		console_handler.setFormatter(logging.Formatter(CONSOLE_FORMAT, datefmt='%H:%M:%S'))
	root_logger.addHandler(console_handler)

	if log_file:
		path = Path(log_file)
		path.parent.mkdir(parents=True, exist_ok=True)
		file_handler = RotatingFileHandler(
			path, maxBytes=max_file_size, backupCount=backup_count, encoding='utf-8'
		)
		file_handler.setFormatter(JSONFormatter())
		root_logger.addHandler(file_handler)


@contextmanager
def time_operation(logger: logging.Logger, operation_name: str):
	start_time = time.perf_counter()
	try:
		yield
	finally:
		duration_ms = (time.perf_counter() - start_time) * 1000
		logger.debug(f'{operation_name} took {duration_ms:.2f}ms')
