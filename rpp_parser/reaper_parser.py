"""REAPER (.rpp) project file parser."""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

from .exceptions import FailureKind, RPPParseError
from .line_source import LineSource
from .metadata import extract_metadata
from .models import ParseOptions, ReaperProject
from .properties import extract_properties
from .tracks import extract_tracks

logger = logging.getLogger(__name__)


def decode(source: LineSource, source_path: str = "",
           options: Optional[ParseOptions] = None) -> ReaperProject:
    """
    Run every extraction phase over an already materialized project.

    Raises:
        InvalidFormatError: If the header line is not a REAPER project header
    """
    options = options or ParseOptions()

    name, version = extract_metadata(source, source_path)
    sample_rate, tempo = extract_properties(source)
    tracks = extract_tracks(source, options)

    return ReaperProject(
        name=name,
        source_path=source_path,
        version=version,
        tracks=tuple(tracks),
        tempo=tempo,
        sample_rate=sample_rate,
        valid=True
    )


def parse_rpp_text(text: str, source_path: str = "",
                   options: Optional[ParseOptions] = None) -> ReaperProject:
    """Decode project text held in memory."""
    return decode(LineSource.from_text(text), source_path, options)


class RPPParser:
    """Parser for REAPER .rpp project files."""

    def __init__(self, file_path: Union[str, Path], options: Optional[ParseOptions] = None):
        """
        Initialize parser.

        Args:
            file_path: Path to .rpp file
            options: Volume/pan unit options (defaults to dB volume, normalized pan)
        """
        self.file_path = Path(file_path)
        self.options = options or ParseOptions()

    def parse(self) -> ReaperProject:
        """
        Parse the project file.

        Returns:
            Valid ReaperProject

        Raises:
            OpenFailureError: If the file cannot be read
            InvalidFormatError: If the file is not a REAPER project
        """
        source = LineSource.from_file(self.file_path)
        project = decode(source, str(self.file_path), self.options)

        logger.info(
            f"Successfully parsed {self.file_path.name}: "
            f"{len(project.tracks) - 1} tracks, REAPER {project.version}"
        )
        return project

    def validate(self) -> bool:
        """
        Validate that file can be parsed.

        Returns:
            True if file is valid, False otherwise
        """
        try:
            return self.parse().valid
        except RPPParseError as e:
            logger.warning(f"Validation failed: {e}")
            return False


@dataclass(frozen=True)
class LoadResult:
    """Outcome of loading a project: a project or a failure kind, never both."""
    project: Optional[ReaperProject] = None
    failure: Optional[FailureKind] = None
    error: Optional[RPPParseError] = None

    @property
    def ok(self) -> bool:
        return self.project is not None


def load_project(file_path: Union[str, Path], options: Optional[ParseOptions] = None) -> LoadResult:
    """
    Load a project file, reporting failure as a result instead of raising.

    Args:
        file_path: Path to .rpp file
        options: Volume/pan unit options

    Returns:
        LoadResult with either ``project`` or ``failure`` set
    """
    try:
        project = RPPParser(file_path, options).parse()
    except RPPParseError as e:
        return LoadResult(failure=e.kind, error=e)
    return LoadResult(project=project)
