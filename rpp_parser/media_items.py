"""Media item (``<ITEM``) extraction."""
import logging
import re
from typing import Tuple

from .line_source import LineSource
from .models import MediaItem, MediaType, ParseOptions
from .scanning import FLOAT, INT, VOLPAN, closes_scope, indentation, match_name
from .units import apply_units

logger = logging.getLogger(__name__)

ITEM_OPEN = re.compile(r'\s*<ITEM(?:\s|$)')
POSITION = re.compile(rf'\s*POSITION\s+({FLOAT})')
LENGTH = re.compile(rf'\s*LENGTH\s+({FLOAT})')
MUTE = re.compile(rf'\s*MUTE\s+({INT})')
SOURCE = re.compile(r'\s*<SOURCE\s+(MIDI|WAVE|MP3)(?:\s|$)')
FILE_FORMS = (
    re.compile(r'\s*FILE\s+"([^"]*)"'),
    re.compile(r'\s*FILE\s+(\S+)'),
)

SAMPLE_SOURCES = ("WAVE", "MP3")


def _match_file(line: str) -> str:
    for pattern in FILE_FORMS:
        match = pattern.match(line)
        if match:
            return match.group(1)
    return ""


def extract_media_item(source: LineSource, start: int, options: ParseOptions) -> Tuple[MediaItem, int]:
    """
    Extract one media item.

    Args:
        source: Project lines
        start: Index of the ``<ITEM`` line
        options: Unit options

    Returns:
        Tuple of (item, index of the first line after the item's footer)
    """
    indent = indentation(source[start])
    fields = {
        "name": "",
        "filepath": "",
        "type": MediaType.UNDEFINED,
        "volume": 0.0,
        "pan": 0.0,
        "muted": False,
        "start": 0.0,
        "length": 0.0,
    }

    index = start + 1
    while index < len(source):
        line = source[index]
        index += 1
        if closes_scope(line, indent):
            break

        match = POSITION.match(line)
        if match:
            fields["start"] = float(match.group(1))
        match = LENGTH.match(line)
        if match:
            fields["length"] = float(match.group(1))
        match = MUTE.match(line)
        if match:
            fields["muted"] = bool(int(match.group(1)))
        name = match_name(line)
        if name is not None:
            fields["name"] = name
        match = VOLPAN.match(line)
        if match:
            fields["volume"] = float(match.group(1))
            fields["pan"] = float(match.group(2))

        match = SOURCE.match(line)
        if not match:
            continue
        if match.group(1) not in SAMPLE_SOURCES:
            fields["type"] = MediaType.MIDI
            fields["filepath"] = ""
            continue

        fields["type"] = MediaType.SAMPLE
        fields["filepath"] = ""
        # The FILE line must immediately follow the source marker
        if index < len(source) and not closes_scope(source[index], indent):
            fields["filepath"] = _match_file(source[index])
            index += 1

    fields["volume"], fields["pan"] = apply_units(fields["volume"], fields["pan"], options)
    item = MediaItem(end=fields["start"] + fields["length"], **fields)
    logger.debug(f"Media item {item.name!r} ({item.type.display_name}) at {item.start}s")
    return item, index
