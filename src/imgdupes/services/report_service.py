"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/report_service.py
Console and JSON output of duplicate groups.
"""
import json
import logging
import sys
from pathlib import Path
from typing import List, Dict, TextIO

from imgdupes.core.models import DuplicateGroup, display_path

logger = logging.getLogger(__name__)


class ReportService:
    """
    Pure consumers of the finalized duplicate groups.
    Groups with a single file never reach the output.
    """

    @staticmethod
    def print_identical_files(groups: List[DuplicateGroup], stream: TextIO = None) -> None:
        """Prints a header, one indented line per path and a blank line for each group."""
        stream = stream or sys.stdout
        for group in groups:
            if not group.is_duplicate():
                continue
            print("Identical files:", file=stream)
            for path in group.files:
                print(f"  {display_path(path)}", file=stream)
            print(file=stream)

    @staticmethod
    def build_report(groups: List[DuplicateGroup]) -> List[Dict[str, object]]:
        """Serializable records with 'checksum' and 'files' keys."""
        return [group.to_dict() for group in groups if group.is_duplicate()]

    @classmethod
    def write_json(cls, groups: List[DuplicateGroup], output_file: str) -> Path:
        """
        Writes the duplicate report as a pretty-printed JSON array.
        Raises:
            RuntimeError: report file could not be written
        """
        path = Path(output_file)
        document = json.dumps(cls.build_report(groups), indent=2, ensure_ascii=False)
        try:
            path.write_text(document, encoding="utf-8")
        except OSError as e:
            logger.error(f"Failed to write report {path}: {e}")
            raise RuntimeError(f"Failed to write JSON report: {e}") from e
        logger.debug(f"Wrote {len(groups)} groups to {path}")
        return path
