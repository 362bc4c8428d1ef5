import logging
import sys
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from domain.exceptions.currency import InputSourceError

logger = logging.getLogger(__name__)

STDIN = '-'


class FileLineSource:
	"""Yields input lines from a file path, or from stdin for '-'."""

	def __init__(self, path: str = STDIN, encoding: str = 'utf-8', stream: TextIO | None = None):
		self.path = path
		self.encoding = encoding
		self._stream = stream

	@property
	def name(self) -> str:
		return 'stdin' if self.path == STDIN else self.path

	def lines(self) -> Iterator[str]:
		if self.path == STDIN:
			yield from self._read_stream(self._stream or sys.stdin)
			return

		try:
			handle = Path(self.path).open(encoding=self.encoding)
		except OSError as e:
			logger.error(f'Cannot open input {self.path}: {e}')
			raise InputSourceError(f'Cannot open input file {self.path}: {e.strerror or e}') from e

		with handle:
			yield from self._read_stream(handle)

	def _read_stream(self, stream: TextIO) -> Iterator[str]:
		try:
			for line in stream:
				yield line.rstrip('\r\n')
		except (OSError, UnicodeDecodeError) as e:
			logger.error(f'Failed reading input {self.name}: {e}')
			raise InputSourceError(f'Error encountered while reading {self.name}: {e}') from e
