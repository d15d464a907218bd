"""Utility functions for RPP parser."""
import json
import logging
from pathlib import Path
from typing import Dict, Any, List

from .models import MediaType, ReaperProject

logger = logging.getLogger(__name__)

RPP_EXTENSIONS = ['.rpp']


def save_project(project: ReaperProject, output_path: Path) -> Path:
    """
    Save a decoded project to a JSON file.

    Args:
        project: ReaperProject to save
        output_path: Path to save JSON file

    Returns:
        Path to saved file
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(project.to_dict(), f, indent=2, default=str)

    logger.info(f"Saved project to {output_path}")
    return output_path


def load_project_json(json_path: Path) -> Dict[str, Any]:
    """
    Load a saved project from JSON file.

    Args:
        json_path: Path to JSON file

    Returns:
        Dictionary with project data
    """
    with open(json_path, 'r', encoding='utf-8') as f:
        return json.load(f)


def is_rpp_file(file_path: Path) -> bool:
    """Check file extension for a REAPER project (``.rpp``, any case)."""
    return Path(file_path).suffix.lower() in RPP_EXTENSIONS


def find_rpp_files(directory: Path) -> List[Path]:
    """
    Find all REAPER project files in a directory tree.

    Backup files (``.rpp-bak``) are not included.

    Args:
        directory: Directory to search

    Returns:
        Sorted list of Path objects for found project files
    """
    return sorted(
        path for path in Path(directory).rglob("*")
        if path.is_file() and is_rpp_file(path)
    )


def format_project_report(project: ReaperProject) -> str:
    """
    Render a human-readable summary of a project.

    Args:
        project: Decoded project

    Returns:
        Multi-line report text
    """
    lines = [
        f"Reaper project: {project.name}",
        f"Reaper version: {project.version}",
        f"Sample rate: {project.sample_rate}Hz",
        f"Tempo: {project.tempo.bpm:g} bpm {project.tempo.beats}/{project.tempo.bars}",
        "",
    ]

    if project.tracks:
        lines.append("Tracks:")
        lines.append("-" * 28)

    for track in project.tracks:
        lines.append(f"{track.numeric_id}) {track.name} ({track.guid})")
        lines.append(f"Volume: {track.volume:g} Pan: {track.pan:g}")
        lines.append(f"Muted: {'Yes' if track.muted else 'No'}")
        lines.append(f"Phase: {'Flipped' if track.phase_inverted else 'Normal'}")

        if track.media_items:
            lines.append("Items: " + "-" * 21)
            for item in track.media_items:
                lines.append(f'"{item.name}"')
                if item.type == MediaType.SAMPLE:
                    lines.append(f"FILE  : {item.filepath}")
                lines.append(f"START : {item.start:g}s")
                lines.append(f"END   : {item.end:g}s")
                lines.append(f"LENGTH: {item.length:g}s")

        if track.fx_chain:
            lines.append("FX Chain: " + "-" * 18)
            for fx in track.fx_chain:
                lines.append(f"{fx.name} ({fx.filepath})")
                if fx.data:
                    lines.append(fx.data.rstrip("\r\n"))

        lines.append("")

    return "\n".join(lines)
