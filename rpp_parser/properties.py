"""Top-level project properties (sample rate, tempo)."""
import logging
import re
from typing import Tuple

from .line_source import LineSource
from .models import Tempo
from .scanning import FLOAT, INT, ScanPolicy, whole_document

logger = logging.getLogger(__name__)

SAMPLERATE = re.compile(rf'\s*SAMPLERATE\s+({INT})')
TEMPO = re.compile(rf'\s*TEMPO\s+({FLOAT})(?:\s+({INT}))?(?:\s+({INT}))?')


def extract_properties(source: LineSource, scan: ScanPolicy = whole_document) -> Tuple[int, Tempo]:
    """
    Extract the sample rate and tempo.

    The last matching line visited by ``scan`` wins for each property.
    Missing lines leave the property at zero.

    Returns:
        Tuple of (sample_rate, tempo)
    """
    sample_rate = 0
    bpm, beats, bars = 0.0, 0, 0

    for line in scan(source):
        match = SAMPLERATE.match(line)
        if match:
            sample_rate = int(match.group(1))

        match = TEMPO.match(line)
        if match:
            bpm = float(match.group(1))
            if match.group(2) is not None:
                beats = int(match.group(2))
            if match.group(3) is not None:
                bars = int(match.group(3))

    logger.debug(f"Sample rate {sample_rate}, tempo {bpm} bpm {beats}/{bars}")
    return sample_rate, Tempo(bpm=bpm, beats=beats, bars=bars)
