"""Volume and pan unit conversion."""
from typing import Tuple

import numpy as np

from .models import ParseOptions


def to_decibel(amplitude: float) -> float:
    """
    Convert an amplitude to decibels.

    Amplitude is expected to be positive. Zero gives -inf and negative
    values give NaN; neither is guarded against.
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(20.0 * np.log10(amplitude))


def apply_units(volume: float, pan: float, options: ParseOptions) -> Tuple[float, float]:
    """Apply the configured volume/pan conversion to a raw pair."""
    if options.convert_volume_to_db:
        volume = to_decibel(volume)
    if not options.normalize_pan:
        pan = pan * 100.0
    return volume, pan
