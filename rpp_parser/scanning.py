"""Scope detection and field patterns shared by the extractors."""
import re
from typing import Callable, Iterable, Iterator, Optional, Sequence

from .line_source import LineSource

FLOAT = r"[-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?"
INT = r"[-+]?\d+"

ScanPolicy = Callable[[LineSource], Iterable[str]]

# Field lines are matched regardless of their indentation.
NAME_FORMS: Sequence[re.Pattern] = (
    re.compile(r'\s*NAME\s+"([^"]*)"'),
    re.compile(r"\s*NAME\s+'([^']*)'"),
    re.compile(r'\s*NAME\s+`([^`]*)`'),
    re.compile(r'\s*NAME\s+(\S+)'),
)
VOLPAN = re.compile(rf'\s*VOLPAN\s+({FLOAT})\s+({FLOAT})')


def indentation(line: str) -> str:
    """Leading whitespace of a line."""
    return line[:len(line) - len(line.lstrip(" \t"))]


def closes_scope(line: str, indent: str) -> bool:
    """True if ``line`` is the ``>`` footer for a scope opened at ``indent``."""
    return line.startswith(indent + ">")


def match_name(line: str) -> Optional[str]:
    """Return the name from a NAME line, preferring quoted forms."""
    for pattern in NAME_FORMS:
        match = pattern.match(line)
        if match:
            return match.group(1)
    return None


def whole_document(source: LineSource) -> Iterator[str]:
    """
    Scan policy visiting every line of the document in order.

    Used for top-level properties and master track fields: a matching
    line anywhere in the file, including inside unrelated nested blocks,
    overwrites earlier captures.
    """
    for _, line in source.scan():
        yield line
