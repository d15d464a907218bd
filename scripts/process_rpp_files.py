"""Script to process REAPER project files and extract their contents."""
import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional, Tuple
import sys

from tqdm import tqdm

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from rpp_parser import RPPParser, ParseOptions, ReaperProject, RPPParseError, load_options
from rpp_parser.exceptions import InvalidFormatError
from rpp_parser.inventory import build_item_inventory, build_track_inventory, save_inventory
from rpp_parser.utils import find_rpp_files, format_project_report, save_project

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def process_rpp_file(file_path: Path, output_dir: Path,
                     options: ParseOptions) -> Tuple[dict, Optional[ReaperProject]]:
    """
    Process a single project file and save its JSON.

    Args:
        file_path: Path to .rpp file
        output_dir: Directory to save extracted project data
        options: Volume/pan unit options

    Returns:
        Tuple of (processing result dictionary, decoded project or None)
    """
    try:
        project = RPPParser(file_path, options).parse()

        output_file = save_project(project, output_dir / f"{file_path.stem}_project.json")

        return {
            "file": str(file_path),
            "status": "success",
            "output": str(output_file),
            "tracks": len(project.tracks) - 1,
            "media_items": sum(len(track.media_items) for track in project.tracks),
            "effects": sum(len(track.fx_chain) for track in project.tracks)
        }, project

    except InvalidFormatError as e:
        return {
            "file": str(file_path),
            "status": "error",
            "error": f"Invalid format: {e}"
        }, None
    except RPPParseError as e:
        return {
            "file": str(file_path),
            "status": "error",
            "error": f"Parse error: {e}"
        }, None


def resolve_options(args: argparse.Namespace) -> ParseOptions:
    """Combine the optional YAML config with command line overrides."""
    options = load_options(args.config) if args.config else ParseOptions()
    return ParseOptions(
        convert_volume_to_db=options.convert_volume_to_db and not args.amplitude,
        normalize_pan=options.normalize_pan and not args.percent_pan
    )


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Process REAPER project files and extract tracks, items and FX chains"
    )
    parser.add_argument(
        "input",
        type=Path,
        help="REAPER project file or directory containing project files"
    )
    parser.add_argument(
        "-o", "--output",
        type=Path,
        default=Path("data/rpp_projects"),
        help="Output directory for extracted project data (default: data/rpp_projects)"
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        help="YAML file with parse_options"
    )
    parser.add_argument(
        "--amplitude",
        action="store_true",
        help="Keep volumes as amplitude instead of converting to dB"
    )
    parser.add_argument(
        "--percent-pan",
        action="store_true",
        help="Report pan as -100..100 percent instead of -1..1"
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Print a text report for each decoded project"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    input_path = Path(args.input)
    output_dir = Path(args.output)

    if not input_path.exists():
        logger.error(f"Input path does not exist: {input_path}")
        return 1

    options = resolve_options(args)

    if input_path.is_file():
        logger.info(f"Processing single file: {input_path}")
        files = [input_path]
    else:
        logger.info(f"Processing directory: {input_path}")
        files = find_rpp_files(input_path)

    results = []
    projects = []
    for file_path in tqdm(files, desc="Decoding projects", disable=len(files) < 2):
        result, project = process_rpp_file(file_path, output_dir, options)
        results.append(result)
        if project is not None:
            projects.append(project)
            if args.report:
                print(format_project_report(project))

    successful = len(projects)
    failed = len(results) - successful

    logger.info("Processing complete:")
    logger.info(f"  Successful: {successful}")
    logger.info(f"  Failed: {failed}")
    logger.info(f"  Total: {len(results)}")

    output_dir.mkdir(parents=True, exist_ok=True)
    if projects:
        save_inventory(build_track_inventory(projects), output_dir / "track_inventory.csv")
        save_inventory(build_item_inventory(projects), output_dir / "item_inventory.csv")

    summary_file = output_dir / "processing_summary.json"
    with open(summary_file, 'w', encoding='utf-8') as f:
        json.dump({
            "total": len(results),
            "successful": successful,
            "failed": failed,
            "results": results
        }, f, indent=2, default=str)

    logger.info(f"Summary saved to: {summary_file}")

    return 0 if failed == 0 else 1


if __name__ == "__main__":
    sys.exit(main())
