"""Data models for REAPER project extraction."""
from dataclasses import dataclass, field
from typing import Tuple, Dict, Optional, Any
from enum import Enum

MASTER_GUID = "0"
MASTER_NAME = "MASTER"


class Platform(Enum):
    """Platform a project was saved on."""
    UNDEFINED = "undefined"
    WINDOWS = "windows"
    OSX = "osx"
    LINUX = "linux"

    @property
    def display_name(self) -> str:
        return {
            Platform.WINDOWS: "Windows",
            Platform.OSX: "Apple OSX",
            Platform.LINUX: "Linux",
        }.get(self, "Unknown")


class MediaType(Enum):
    """Media item source type."""
    UNDEFINED = "undefined"
    SAMPLE = "sample"
    MIDI = "midi"

    @property
    def display_name(self) -> str:
        return {
            MediaType.SAMPLE: "Sample",
            MediaType.MIDI: "Midi",
        }.get(self, "Unknown")


class FXType(Enum):
    """Effect plugin type."""
    UNDEFINED = "Undefined"
    VST = "VST"
    VST3 = "VST3"
    VSTI = "VSTi"
    VST3I = "VST3i"
    AU = "AU"
    AUI = "AUi"
    JS = "JS"


@dataclass(frozen=True)
class ParseOptions:
    """Unit options applied to every volume/pan pair."""
    # REAPER stores volume as amplitude; True converts to decibels.
    convert_volume_to_db: bool = True
    # True keeps pan in -1..1 as stored; False scales to -100..100 percent.
    normalize_pan: bool = True


@dataclass(frozen=True)
class FormatVersion:
    """REAPER version that wrote the project."""
    major: int = 0
    minor: int = 0
    platform: Platform = Platform.UNDEFINED

    def __str__(self) -> str:
        return f"{self.platform.display_name} {self.major}.{self.minor}"


@dataclass(frozen=True)
class Tempo:
    """Project tempo and time signature."""
    bpm: float = 0.0
    beats: int = 0
    bars: int = 0


@dataclass(frozen=True)
class MediaItem:
    """Media item placed on a track."""
    name: str = ""
    filepath: str = ""  # Only set for sample sources
    type: MediaType = MediaType.UNDEFINED
    volume: float = 0.0
    pan: float = 0.0
    muted: bool = False
    start: float = 0.0  # Seconds
    length: float = 0.0  # Seconds
    end: float = 0.0  # Always start + length


@dataclass(frozen=True)
class Effect:
    """Single entry in a track's FX chain."""
    name: str = ""
    filepath: str = ""
    type: FXType = FXType.UNDEFINED
    data: str = ""  # Opaque preset payload


@dataclass(frozen=True)
class Track:
    """Track with its media items and FX chain."""
    name: str = ""
    guid: str = ""
    numeric_id: int = 0
    volume: float = 0.0
    pan: float = 0.0
    channels: int = 0  # Master only
    muted: bool = False
    phase_inverted: bool = False
    media_items: Tuple[MediaItem, ...] = ()
    fx_chain: Tuple[Effect, ...] = ()

    @property
    def is_master(self) -> bool:
        return self.guid == MASTER_GUID


@dataclass(frozen=True)
class ReaperProject:
    """Complete decoded REAPER project."""
    name: str
    source_path: str
    version: FormatVersion = field(default_factory=FormatVersion)
    tracks: Tuple[Track, ...] = ()
    tempo: Tempo = field(default_factory=Tempo)
    sample_rate: int = 0
    valid: bool = False

    @property
    def master(self) -> Optional[Track]:
        return self.tracks[0] if self.tracks else None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            "name": self.name,
            "source_path": self.source_path,
            "version": {
                "major": self.version.major,
                "minor": self.version.minor,
                "platform": self.version.platform.value,
            },
            "tempo": {
                "bpm": self.tempo.bpm,
                "beats": self.tempo.beats,
                "bars": self.tempo.bars,
            },
            "sample_rate": self.sample_rate,
            "valid": self.valid,
            "tracks": [
                {
                    "name": track.name,
                    "guid": track.guid,
                    "numeric_id": track.numeric_id,
                    "volume": track.volume,
                    "pan": track.pan,
                    "channels": track.channels,
                    "muted": track.muted,
                    "phase_inverted": track.phase_inverted,
                    "media_items": [
                        {
                            "name": item.name,
                            "filepath": item.filepath,
                            "type": item.type.value,
                            "volume": item.volume,
                            "pan": item.pan,
                            "muted": item.muted,
                            "start": item.start,
                            "length": item.length,
                            "end": item.end,
                        }
                        for item in track.media_items
                    ],
                    "fx_chain": [
                        {
                            "name": fx.name,
                            "filepath": fx.filepath,
                            "type": fx.type.value,
                            "data": fx.data,
                        }
                        for fx in track.fx_chain
                    ],
                }
                for track in self.tracks
            ],
        }
