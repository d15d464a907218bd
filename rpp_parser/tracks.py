"""Master track and track (``<TRACK``) extraction."""
import logging
import re
from typing import List, Tuple

from .fx_chain import FXCHAIN_OPEN, extract_fx_chain
from .line_source import LineSource
from .media_items import ITEM_OPEN, extract_media_item
from .models import MASTER_GUID, MASTER_NAME, ParseOptions, Track
from .scanning import FLOAT, INT, VOLPAN, ScanPolicy, closes_scope, indentation, match_name, whole_document
from .units import apply_units

logger = logging.getLogger(__name__)

TRACK_OPEN = re.compile(r'(\s*)<TRACK\s+\{([^}]*)\}')
IPHASE = re.compile(rf'\s*IPHASE\s+({INT})')
MUTESOLO = re.compile(rf'\s*MUTESOLO\s+({INT})')
MASTER_NCH = re.compile(rf'\s*MASTER_NCH\s+{INT}\s+({INT})')
MASTER_VOLUME = re.compile(rf'\s*MASTER_VOLUME\s+({FLOAT})\s+({FLOAT})')


def extract_master_track(source: LineSource, options: ParseOptions,
                         scan: ScanPolicy = whole_document) -> Track:
    """
    Build the implicit master track.

    ``MASTER_NCH`` and ``MASTER_VOLUME`` are taken from the last matching
    lines visited by ``scan``.
    """
    channels = 0
    volume, pan = 0.0, 0.0

    for line in scan(source):
        match = MASTER_NCH.match(line)
        if match:
            # Second value is the output channel count
            channels = int(match.group(1))
        match = MASTER_VOLUME.match(line)
        if match:
            volume, pan = float(match.group(1)), float(match.group(2))

    volume, pan = apply_units(volume, pan, options)
    return Track(
        name=MASTER_NAME,
        guid=MASTER_GUID,
        numeric_id=0,
        volume=volume,
        pan=pan,
        channels=channels
    )


def extract_track(source: LineSource, start: int, guid: str, numeric_id: int,
                  options: ParseOptions) -> Tuple[Track, int]:
    """
    Extract one track, delegating item and FX chain blocks.

    Args:
        source: Project lines
        start: Index of the ``<TRACK`` line
        guid: Track GUID without braces
        numeric_id: Sequential track number
        options: Unit options

    Returns:
        Tuple of (track, index of the first line after the track's footer)
    """
    indent = indentation(source[start])
    fields = {
        "name": "",
        "volume": 0.0,
        "pan": 0.0,
        "muted": False,
        "phase_inverted": False,
    }
    media_items = []
    fx_chain = []

    index = start + 1
    while index < len(source):
        line = source[index]
        if closes_scope(line, indent):
            index += 1
            break

        if ITEM_OPEN.match(line):
            item, index = extract_media_item(source, index, options)
            media_items.append(item)
            continue
        if FXCHAIN_OPEN.match(line):
            effects, index = extract_fx_chain(source, index)
            fx_chain.extend(effects)
            continue
        index += 1

        name = match_name(line)
        if name is not None:
            fields["name"] = name
        match = VOLPAN.match(line)
        if match:
            fields["volume"] = float(match.group(1))
            fields["pan"] = float(match.group(2))
        match = IPHASE.match(line)
        if match:
            fields["phase_inverted"] = bool(int(match.group(1)))
        match = MUTESOLO.match(line)
        if match:
            fields["muted"] = bool(int(match.group(1)))

    fields["volume"], fields["pan"] = apply_units(fields["volume"], fields["pan"], options)
    track = Track(
        guid=guid,
        numeric_id=numeric_id,
        media_items=tuple(media_items),
        fx_chain=tuple(fx_chain),
        **fields
    )
    logger.debug(
        f"Track {numeric_id} {track.name!r}: {len(track.media_items)} items, "
        f"{len(track.fx_chain)} effects"
    )
    return track, index


def extract_tracks(source: LineSource, options: ParseOptions) -> List[Track]:
    """
    Extract all tracks, master first.

    Returns:
        List of tracks; index 0 is always the master track
    """
    tracks = [extract_master_track(source, options)]

    index = 0
    while index < len(source):
        match = TRACK_OPEN.match(source[index])
        if not match:
            index += 1
            continue
        track, index = extract_track(source, index, match.group(2), len(tracks), options)
        tracks.append(track)

    logger.debug(f"Extracted {len(tracks) - 1} tracks")
    return tracks
