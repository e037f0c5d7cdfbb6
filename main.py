"""
DOCU Archive Extractor

Extracts the files embedded in a ".env" DOCU archive into an output directory.

Usage:
  # Extract into ./output
  python main.py sample.env

  # Extract somewhere else and keep a report
  python main.py sample.env -o extracted --report
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from docu_extractor import __version__
from docu_extractor.errors import ArchiveError, ErrorMessage
from docu_extractor.extractor import ArchiveExtractor
from docu_extractor.markers import ARCHIVE_SUFFIX, DEFAULT_OUTPUT_DIR
from docu_extractor.report import ReportGenerator, render_tree


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Configure logging for the application."""
    level = logging.DEBUG if verbose else logging.INFO

    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a"))

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )


def is_valid_format(name: str, suffix: str = ARCHIVE_SUFFIX) -> bool:
    """Check that a filename ends with the archive suffix (".env")."""
    return bool(name) and name.endswith(suffix)


def extract(
    archive_path: str,
    output_dir: str = DEFAULT_OUTPUT_DIR,
    legacy_offset: bool = False,
    show_progress: bool = True,
    write_report: bool = False,
) -> List[str]:
    """
    Extract one archive and print the tree of extracted files.

    Args:
        archive_path: Path to the .env archive
        output_dir: Directory that receives the extracted files
        legacy_offset: Reproduce the one-byte-early payload start of older extractors
        show_progress: Display a progress bar while scanning
        write_report: Save extraction_report.txt/.json into the output directory

    Returns:
        Names of the extracted files.
    """
    logger = logging.getLogger(__name__)

    extractor = ArchiveExtractor(output_dir=output_dir, legacy_offset=legacy_offset, show_progress=show_progress)
    filenames = extractor.extract(archive_path)

    if write_report:
        report_gen = ReportGenerator(Path(output_dir))
        report_gen.set_archive_info(archive_path, Path(archive_path).stat().st_size)
        report_gen.add_extracted_files(extractor.manifest)
        report_path = report_gen.save_report()
        logger.info(f"Report saved to: {report_path}")

    print(f"Content saved into {output_dir} directory")
    print(render_tree(Path(output_dir).name or output_dir, filenames))
    return filenames


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Extract the files embedded in a DOCU (.env) archive",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Extract into ./output
  python main.py sample.env

  # Extract into another directory without a progress bar
  python main.py sample.env -o extracted --no-progress

Output Structure:
  output/
    ├── <embedded file>           # One file per archive block
    ├── extraction_report.txt     # With --report: human-readable summary
    └── extraction_report.json    # With --report: machine-readable manifest
""",
    )

    parser.add_argument(
        "archive",
        help="Path to the .env archive",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=f"./{DEFAULT_OUTPUT_DIR}",
        help=f"Output directory (default: ./{DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument(
        "--report",
        action="store_true",
        help="Save an extraction report into the output directory",
    )
    parser.add_argument(
        "--legacy-offset",
        action="store_true",
        help="Start payloads one byte early, matching older extractors",
    )
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable the progress bar",
    )
    parser.add_argument(
        "--log-file",
        help="Also append log output to this file",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"DOCU Archive Extractor v{__version__}",
    )

    args = parser.parse_args(argv)

    setup_logging(verbose=args.verbose, log_file=args.log_file)
    logger = logging.getLogger(__name__)

    if not is_valid_format(args.archive):
        logger.error(f'Invalid format type. The extension should be "{ARCHIVE_SUFFIX.lstrip(".")}"')
        return 1

    if not Path(args.archive).exists():
        logger.error(ErrorMessage.FILE_NOT_FOUND_ERROR.format(args.archive))
        return 1

    try:
        extract(
            archive_path=args.archive,
            output_dir=args.output,
            legacy_offset=args.legacy_offset,
            show_progress=not args.no_progress,
            write_report=args.report,
        )
    except KeyboardInterrupt:
        logger.warning("\nExtraction interrupted by user")
        return 130
    except ArchiveError as e:
        logger.error(f"Parser error: {e}")
        if args.verbose:
            import traceback

            traceback.print_exc()
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
