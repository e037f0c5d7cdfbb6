"""
Report generation for DOCU archive extraction.

Produces the tree listing printed after every run and, on request, a text and
JSON report saved next to the extracted files.
"""

import json
import logging
from dataclasses import asdict, dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List

from .utils import format_size
from .writer import ExtractedFile

logger = logging.getLogger(__name__)


def render_tree(root_name: str, filenames: List[str]) -> str:
    """
    Render extracted filenames as a tree under the output directory.

    Example:
        output/
        ├── note.txt
        └── image.png
    """
    lines = [f"{root_name.rstrip('/')}/"]
    for i, name in enumerate(filenames):
        branch = "└── " if i == len(filenames) - 1 else "├── "
        lines.append(branch + name)
    return "\n".join(lines)


@dataclass
class ExtractionReport:
    """Complete extraction report."""

    archive_file: str = ""
    archive_size: int = 0
    extraction_time: str = ""
    output_dir: str = ""

    total_files: int = 0
    total_bytes: int = 0
    text_files: int = 0
    binary_files: int = 0
    files: List[Dict[str, Any]] = field(default_factory=list)


class ReportGenerator:
    """Generate extraction reports."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = Path(output_dir)
        self.report = ExtractionReport(output_dir=str(self.output_dir))

    def set_archive_info(self, archive_path: str, archive_size: int) -> None:
        """Set basic archive information."""
        self.report.archive_file = Path(archive_path).name
        self.report.archive_size = archive_size
        self.report.extraction_time = datetime.now().isoformat()

    def add_extracted_files(self, manifest: List[ExtractedFile]) -> None:
        for entry in manifest:
            self.report.files.append(asdict(entry))
            self.report.total_files += 1
            self.report.total_bytes += entry.size
            if entry.is_text:
                self.report.text_files += 1
            else:
                self.report.binary_files += 1

    def generate_text_report(self) -> str:
        """Generate a human-readable text report."""
        lines: List[str] = []

        lines.append("=" * 70)
        lines.append("DOCU ARCHIVE EXTRACTION REPORT")
        lines.append("=" * 70)
        lines.append("")
        lines.append(f"Archive File: {self.report.archive_file}")
        lines.append(f"Archive Size: {format_size(self.report.archive_size)}")
        lines.append(f"Extracted:    {self.report.extraction_time}")
        lines.append("")

        lines.append("-" * 70)
        lines.append("EXTRACTED FILES")
        lines.append("-" * 70)
        lines.append(f"Total Files:  {self.report.total_files:,} ({self.report.text_files} text, {self.report.binary_files} binary)")
        lines.append(f"Total Size:   {format_size(self.report.total_bytes)}")
        lines.append("")

        if self.report.files:
            lines.append(f"{'Name':<40} {'Offset':>10} {'Size':>15}")
            lines.append("-" * 67)
            for entry in self.report.files:
                name = entry["filename"]
                if len(name) > 39:
                    name = name[:36] + "..."
                lines.append(f"{name:<40} {entry['offset']:>10X} {format_size(entry['size']):>15}")
            lines.append("")

        lines.append("=" * 70)
        return "\n".join(lines)

    def save_report(self) -> Path:
        """Save the report to the output directory."""
        text_path = self.output_dir / "extraction_report.txt"
        with open(text_path, "w", encoding="utf-8") as f:
            f.write(self.generate_text_report())

        json_path = self.output_dir / "extraction_report.json"
        with open(json_path, "w", encoding="utf-8") as f:
            json.dump(asdict(self.report), f, indent=2)

        logger.debug(f"Saved report to {json_path}")
        return text_path
