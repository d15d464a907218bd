"""Project header and display name extraction."""
import logging
import re
from typing import Tuple

from .exceptions import InvalidFormatError
from .line_source import LineSource
from .models import FormatVersion, Platform
from .scanning import FLOAT, INT

logger = logging.getLogger(__name__)

HEADER = re.compile(
    rf'<REAPER_PROJECT\s+{FLOAT}\s+"(\d+)\.(\d+)[^/"]*/([^"]*)"(?:\s+{INT})?'
)

PLATFORM_TOKENS = {
    "win64": Platform.WINDOWS,
    "win32": Platform.WINDOWS,
    "OSX64": Platform.OSX,
    "OSX32": Platform.OSX,
}


def project_name_from_path(source_path: str) -> str:
    """
    Derive a display name from a file path.

    Strips everything up to the last path separator and everything from
    the last dot, e.g. ``/a/b/Song.rpp`` gives ``Song``.
    """
    name = str(source_path)
    start = max(name.rfind("/"), name.rfind("\\"))
    if start != -1:
        name = name[start + 1:]
    end = name.rfind(".")
    if end != -1:
        name = name[:end]
    return name


def parse_version(header: str) -> FormatVersion:
    """
    Parse the ``<REAPER_PROJECT`` header line.

    Raises:
        InvalidFormatError: If the line is not a project header
    """
    match = HEADER.match(header.lstrip("\ufeff"))
    if not match:
        raise InvalidFormatError(f"Invalid Reaper project header: {header.strip()!r}")

    major, minor, platform = match.groups()
    return FormatVersion(
        major=int(major),
        minor=int(minor),
        platform=PLATFORM_TOKENS.get(platform, Platform.UNDEFINED)
    )


def extract_metadata(source: LineSource, source_path: str) -> Tuple[str, FormatVersion]:
    """
    Extract the project name and format version.

    Args:
        source: Project lines
        source_path: Path the project was read from

    Returns:
        Tuple of (name, version)

    Raises:
        InvalidFormatError: If the first line is missing or not a header
    """
    header = source.first_line()
    if header is None:
        raise InvalidFormatError("Invalid Reaper project: file is empty", source_path or None)

    try:
        version = parse_version(header)
    except InvalidFormatError as e:
        raise InvalidFormatError(e.message, source_path or None) from e

    name = project_name_from_path(source_path)
    logger.debug(f"Project {name!r} written by REAPER {version}")
    return name, version
