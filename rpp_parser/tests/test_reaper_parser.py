"""Tests for the REAPER project parser."""
import unittest
from pathlib import Path
import sys
import tempfile

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from rpp_parser import (
    RPPParser, ParseOptions, Platform, MediaType, FXType, FailureKind,
    OpenFailureError, InvalidFormatError, load_project, parse_rpp_text
)

FIXTURE = Path(__file__).parent / "fixtures" / "test_project.rpp"


class TestRPPParser(unittest.TestCase):
    """Test cases for RPPParser on the fixture project."""

    def setUp(self):
        """Set up test fixtures."""
        self.project = RPPParser(FIXTURE).parse()

    def test_metadata(self):
        """Test project name and version."""
        self.assertTrue(self.project.valid)
        self.assertEqual(self.project.name, "test_project")
        self.assertEqual(self.project.source_path, str(FIXTURE))
        self.assertEqual(self.project.version.major, 6)
        self.assertEqual(self.project.version.minor, 12)
        self.assertEqual(self.project.version.platform, Platform.WINDOWS)

    def test_properties(self):
        """Test sample rate and tempo."""
        self.assertEqual(self.project.sample_rate, 44100)
        self.assertEqual(self.project.tempo.bpm, 128.0)
        self.assertEqual(self.project.tempo.beats, 4)
        self.assertEqual(self.project.tempo.bars, 4)

    def test_master(self):
        """Test the master track with default unit options."""
        master = self.project.master
        self.assertIs(master, self.project.tracks[0])
        self.assertEqual(master.guid, "0")
        self.assertEqual(master.channels, 2)
        self.assertAlmostEqual(master.volume, -6.0206, places=4)
        self.assertEqual(master.pan, 0.25)

    def test_tracks(self):
        """Test track order, ids and fields."""
        tracks = self.project.tracks
        self.assertEqual(len(tracks), 4)
        self.assertEqual([t.numeric_id for t in tracks], [0, 1, 2, 3])
        self.assertEqual([t.name for t in tracks], ["MASTER", "Drums", "Bass Guitar", ""])

        drums = tracks[1]
        self.assertEqual(drums.guid, "0C6A1E5C-1E3A-4B4E-8B9A-3A7B4A3F3C11")
        self.assertAlmostEqual(drums.volume, 0.0)
        self.assertEqual(drums.pan, -0.5)
        self.assertTrue(drums.muted)
        self.assertTrue(drums.phase_inverted)

        bass = tracks[2]
        self.assertAlmostEqual(bass.volume, -12.0412, places=4)
        self.assertFalse(bass.muted)
        self.assertFalse(bass.phase_inverted)

    def test_media_items(self):
        """Test items of the fixture tracks."""
        kick, melody = self.project.tracks[1].media_items
        self.assertEqual(kick.name, "Kick Loop")
        self.assertEqual(kick.type, MediaType.SAMPLE)
        self.assertEqual(kick.filepath, "loop.wav")
        self.assertEqual((kick.start, kick.length, kick.end), (2.0, 4.5, 6.5))
        self.assertTrue(kick.muted)
        self.assertAlmostEqual(kick.volume, -6.0206, places=4)
        self.assertEqual(kick.pan, 0.5)

        self.assertEqual(melody.name, "Melody")
        self.assertEqual(melody.type, MediaType.MIDI)
        self.assertEqual(melody.filepath, "")
        self.assertEqual(melody.end, 10.0)
        self.assertFalse(melody.muted)

        (bass_item,) = self.project.tracks[2].media_items
        self.assertEqual(bass_item.filepath, "C:\\Samples\\bass line.mp3")
        self.assertEqual(bass_item.type, MediaType.SAMPLE)

        for track in self.project.tracks:
            for item in track.media_items:
                self.assertEqual(item.end, item.start + item.length)

    def test_fx_chain(self):
        """Test effects of the first track."""
        serum, eq = self.project.tracks[1].fx_chain
        self.assertEqual(serum.name, "VST3i: Serum (Xfer Records)")
        self.assertEqual(serum.filepath, "Serum.vst3")
        self.assertEqual(serum.type, FXType.VST3I)
        self.assertEqual(
            serum.data,
            "MjJsUu5e7f4CAAAAAQAAAAAAAAACAAAAAAAAAAIAAAABAAAAAAAAAAIAAAAAAAAAWgAAAAEAAAAAABAA\n"
            "AAAQAAAAAAAAAAAAAA==\n"
        )

        self.assertEqual(eq.name, "loser/3BandEQ")
        self.assertEqual(eq.type, FXType.JS)
        self.assertEqual(eq.filepath, "")
        self.assertEqual(eq.data, "0.000000 200.000000 0.000000 2000.000000 0.000000 - - -\n")

        self.assertEqual(self.project.tracks[2].fx_chain, ())

    def test_percent_pan_and_amplitude(self):
        """Test options flow into every volume/pan pair."""
        options = ParseOptions(convert_volume_to_db=False, normalize_pan=False)
        project = RPPParser(FIXTURE, options).parse()
        self.assertEqual(project.master.volume, 0.5)
        self.assertAlmostEqual(project.master.pan, 25.0)
        self.assertAlmostEqual(project.tracks[1].pan, -50.0)
        self.assertAlmostEqual(project.tracks[1].media_items[0].pan, 50.0)
        self.assertEqual(project.tracks[2].volume, 0.25)

    def test_to_dict(self):
        """Test dictionary conversion."""
        data = self.project.to_dict()
        self.assertEqual(data["name"], "test_project")
        self.assertEqual(data["version"]["platform"], "windows")
        self.assertEqual(len(data["tracks"]), 4)
        self.assertEqual(data["tracks"][1]["media_items"][0]["type"], "sample")
        self.assertEqual(data["tracks"][1]["fx_chain"][0]["type"], "VST3i")

    def test_validate(self):
        """Test validation of a good file."""
        self.assertTrue(RPPParser(FIXTURE).validate())


class TestFailures(unittest.TestCase):
    """Test cases for failed decodes."""

    def test_missing_file(self):
        """Test a nonexistent path is an open failure."""
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "nonexistent.rpp"
            with self.assertRaises(OpenFailureError):
                RPPParser(missing).parse()

            result = load_project(missing)
        self.assertFalse(result.ok)
        self.assertIsNone(result.project)
        self.assertEqual(result.failure, FailureKind.OPEN_FAILURE)
        self.assertIsInstance(result.error, OpenFailureError)

    def test_invalid_header(self):
        """Test a file without a project header is an invalid format."""
        with tempfile.TemporaryDirectory() as tmp:
            bad = Path(tmp) / "bad.rpp"
            bad.write_text("<TRACK {A}\n  NAME x\n>\n", encoding="utf-8")
            with self.assertRaises(InvalidFormatError):
                RPPParser(bad).parse()
            self.assertFalse(RPPParser(bad).validate())

            result = load_project(bad)
        self.assertFalse(result.ok)
        self.assertIsNone(result.project)
        self.assertEqual(result.failure, FailureKind.INVALID_FORMAT)

    def test_load_project_success(self):
        """Test a successful load carries the project and no failure."""
        result = load_project(FIXTURE)
        self.assertTrue(result.ok)
        self.assertIsNone(result.failure)
        self.assertEqual(len(result.project.tracks), 4)


class TestParseText(unittest.TestCase):
    """Test cases for in-memory decoding."""

    def test_minimal_project(self):
        """Test a header-only project."""
        project = parse_rpp_text('<REAPER_PROJECT 0.1 "6.12/win64" 1\n>\n', "/a/b/Song.rpp")
        self.assertEqual(project.name, "Song")
        self.assertEqual(project.sample_rate, 0)
        self.assertEqual(len(project.tracks), 1)
        self.assertEqual(project.tracks[0].name, "MASTER")

    def test_crlf_project(self):
        """Test Windows line endings decode the same fields."""
        text = FIXTURE.read_text(encoding="utf-8").replace("\n", "\r\n")
        project = parse_rpp_text(text, "test_project.rpp")
        self.assertEqual(project.sample_rate, 44100)
        self.assertEqual(project.tracks[1].media_items[0].filepath, "loop.wav")
        self.assertEqual(project.tracks[1].fx_chain[1].data,
                         "0.000000 200.000000 0.000000 2000.000000 0.000000 - - -\r\n")
        self.assertTrue(project.tracks[1].fx_chain[0].data.endswith("==\n"))

    def test_invalid_text(self):
        """Test garbage text is rejected."""
        with self.assertRaises(InvalidFormatError):
            parse_rpp_text("hello\n")


if __name__ == '__main__':
    unittest.main()
