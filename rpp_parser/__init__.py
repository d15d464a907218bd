"""REAPER project file parser module."""
from .models import (
    ReaperProject,
    FormatVersion,
    Platform,
    Tempo,
    Track,
    MediaItem,
    MediaType,
    Effect,
    FXType,
    ParseOptions,
)
from .line_source import LineSource
from .reaper_parser import RPPParser, LoadResult, load_project, parse_rpp_text
from .config import load_options
from .exceptions import (
    FailureKind,
    RPPParseError,
    OpenFailureError,
    InvalidFormatError,
)

__all__ = [
    "ReaperProject",
    "FormatVersion",
    "Platform",
    "Tempo",
    "Track",
    "MediaItem",
    "MediaType",
    "Effect",
    "FXType",
    "ParseOptions",
    "LineSource",
    "RPPParser",
    "LoadResult",
    "load_project",
    "parse_rpp_text",
    "load_options",
    "FailureKind",
    "RPPParseError",
    "OpenFailureError",
    "InvalidFormatError",
]
