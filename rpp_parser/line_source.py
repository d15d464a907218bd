"""Materialized line sequence that every extraction phase re-scans."""
import logging
from pathlib import Path
from typing import Iterator, Optional, TextIO, Tuple, Union

from .exceptions import OpenFailureError

logger = logging.getLogger(__name__)


class LineSource:
    """
    Indexable, re-scannable sequence of lines read once from the input.

    Lines keep their line endings so that captured FX payloads retain
    their newlines.
    """

    def __init__(self, lines):
        self._lines = tuple(lines)

    @classmethod
    def from_text(cls, text: str) -> "LineSource":
        return cls(text.splitlines(keepends=True))

    @classmethod
    def from_stream(cls, stream: TextIO) -> "LineSource":
        return cls.from_text(stream.read())

    @classmethod
    def from_file(cls, file_path: Union[str, Path]) -> "LineSource":
        """
        Read a project file into memory.

        The handle is closed before this returns, on success and failure.

        Raises:
            OpenFailureError: If the file cannot be opened or read
        """
        try:
            # newline='' keeps carriage returns visible to the FX data rules
            with open(file_path, 'r', encoding='utf-8', errors='replace', newline='') as f:
                source = cls.from_stream(f)
        except OSError as e:
            raise OpenFailureError(
                f"Unable to load Reaper project: {e}",
                str(file_path)
            ) from e

        logger.debug(f"Read {len(source)} lines from {file_path}")
        return source

    def __len__(self) -> int:
        return len(self._lines)

    def __getitem__(self, index):
        return self._lines[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def first_line(self) -> Optional[str]:
        return self._lines[0] if self._lines else None

    def scan(self, start: int = 0, stop: Optional[int] = None) -> Iterator[Tuple[int, str]]:
        """Yield ``(index, line)`` pairs over ``[start, stop)``."""
        if stop is None:
            stop = len(self._lines)
        for index in range(start, min(stop, len(self._lines))):
            yield index, self._lines[index]
