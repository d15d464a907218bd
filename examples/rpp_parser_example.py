"""Example usage of RPP parser."""
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from rpp_parser import RPPParser, ParseOptions, FailureKind, load_project
from rpp_parser.utils import save_project, find_rpp_files, format_project_report
import logging

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

EXAMPLE_PROJECT = Path(__file__).parent.parent / "rpp_parser" / "tests" / "fixtures" / "test_project.rpp"


def example_parse_single_file(rpp_file: Path):
    """Example: Parse a single REAPER project and print a report."""
    print("\n=== Example 1: Parse Single File ===")

    # Decibel volumes and percent pan, as shown on REAPER's track tooltips
    options = ParseOptions(convert_volume_to_db=True, normalize_pan=False)
    result = load_project(rpp_file, options)

    if result.failure == FailureKind.OPEN_FAILURE:
        print(f"File not found or unreadable: {rpp_file}")
        return
    if result.failure == FailureKind.INVALID_FORMAT:
        print(f"Not a REAPER project: {rpp_file}")
        return

    project = result.project
    print(format_project_report(project))

    output_file = Path("data/rpp_projects") / f"{rpp_file.stem}_project.json"
    save_project(project, output_file)
    print(f"Project saved to: {output_file}")


def example_find_rpp_files(projects_dir: Path):
    """Example: Find all REAPER projects in a directory."""
    print("\n=== Example 2: Find RPP Files ===")

    if not projects_dir.exists():
        print(f"Directory not found: {projects_dir}")
        return

    rpp_files = find_rpp_files(projects_dir)

    print(f"\nFound {len(rpp_files)} REAPER projects:")
    for file_path in rpp_files:
        print(f"  {file_path.name}")


def example_validate_file(rpp_file: Path):
    """Example: Check whether a file decodes."""
    print("\n=== Example 3: Validate File ===")

    if RPPParser(rpp_file).validate():
        print(f"✓ {rpp_file.name} is a valid REAPER project")
    else:
        print(f"✗ {rpp_file.name} could not be decoded")


if __name__ == "__main__":
    print("RPP Parser Examples")
    print("=" * 50)

    target = Path(sys.argv[1]) if len(sys.argv) > 1 else EXAMPLE_PROJECT

    example_find_rpp_files(target.parent)
    example_validate_file(target)
    example_parse_single_file(target)

    print("\n" + "=" * 50)
    print("Examples complete!")
