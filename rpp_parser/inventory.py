"""Tabular inventories of decoded projects."""
import logging
from pathlib import Path
from typing import Iterable

import pandas as pd

from .models import ReaperProject

logger = logging.getLogger(__name__)

TRACK_COLUMNS = [
    "project", "source_path", "numeric_id", "guid", "name", "volume", "pan",
    "channels", "muted", "phase_inverted", "media_items", "effects",
]
ITEM_COLUMNS = [
    "project", "track_id", "track_name", "name", "type", "filepath",
    "start", "length", "end", "volume", "pan", "muted",
]


def build_track_inventory(projects: Iterable[ReaperProject]) -> pd.DataFrame:
    """
    One row per track (master included) across all projects.

    Args:
        projects: Decoded projects

    Returns:
        DataFrame with TRACK_COLUMNS
    """
    rows = []
    for project in projects:
        for track in project.tracks:
            rows.append({
                "project": project.name,
                "source_path": project.source_path,
                "numeric_id": track.numeric_id,
                "guid": track.guid,
                "name": track.name,
                "volume": track.volume,
                "pan": track.pan,
                "channels": track.channels,
                "muted": track.muted,
                "phase_inverted": track.phase_inverted,
                "media_items": len(track.media_items),
                "effects": len(track.fx_chain),
            })
    return pd.DataFrame(rows, columns=TRACK_COLUMNS)


def build_item_inventory(projects: Iterable[ReaperProject]) -> pd.DataFrame:
    """One row per media item across all projects."""
    rows = []
    for project in projects:
        for track in project.tracks:
            for item in track.media_items:
                rows.append({
                    "project": project.name,
                    "track_id": track.numeric_id,
                    "track_name": track.name,
                    "name": item.name,
                    "type": item.type.value,
                    "filepath": item.filepath,
                    "start": item.start,
                    "length": item.length,
                    "end": item.end,
                    "volume": item.volume,
                    "pan": item.pan,
                    "muted": item.muted,
                })
    return pd.DataFrame(rows, columns=ITEM_COLUMNS)


def save_inventory(df: pd.DataFrame, output_path: Path) -> Path:
    """Write an inventory DataFrame to CSV."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_path, index=False)
    logger.info(f"Saved inventory with {len(df)} rows to {output_path}")
    return output_path
