#!/usr/bin/env python3
"""
imgdupes CLI: command line interface for checksum-based duplicate image detection.
Scans a directory tree, prints identical files, writes a JSON report and
optionally moves redundant copies to a target directory or to the system trash.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from pathlib import Path
from typing import List, NoReturn
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

# === EARLY DEPENDENCY VALIDATION ===
_MISSING_DEPS = []
try:
    import xxhash
except ImportError:
    _MISSING_DEPS.append("xxhash")

try:
    import tqdm
except ImportError:
    _MISSING_DEPS.append("tqdm")

try:
    import send2trash
except ImportError:
    _MISSING_DEPS.append("send2trash")

if _MISSING_DEPS:
    print("❌ Missing required dependencies:", file=sys.stderr)
    print(f"   pip install {' '.join(_MISSING_DEPS)}", file=sys.stderr)
    print("\nOr install the package with all dependencies:", file=sys.stderr)
    print("   pip install -e .", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from imgdupes.core.models import DuplicateGroup, ExecutionMode, ScanConfig, ScanParams
from imgdupes.commands import ScanCommand
from imgdupes.services.report_service import ReportService
from imgdupes.services.file_service import FileService, RelocationError
from imgdupes.services.duplicate_service import DuplicateService
from imgdupes.aliases import EXECUTION_MODE_ALIASES, EXTENSIONS_HELP_TEXT, EPILOG_TEXT


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        if hasattr(sys.stdout, "reconfigure"):
            sys.stdout.reconfigure(encoding='utf-8', errors='backslashreplace')
        if hasattr(sys.stderr, "reconfigure"):
            sys.stderr.reconfigure(encoding='utf-8', errors='backslashreplace')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments. Missing required arguments exit with status 2."""
        parser = argparse.ArgumentParser(
            prog="imgdupes",
            description="imgdupes: find identical images by content checksum",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        # Positional arguments
        parser.add_argument(
            "folder_path",
            type=str,
            help="Directory to scan recursively for duplicate images"
        )
        parser.add_argument(
            "target_directory",
            nargs="?",
            default=None,
            type=str,
            help="Optional directory that receives redundant copies (created if missing)"
        )

        # Scan options
        parser.add_argument(
            "--extensions", "-x",
            nargs="+",
            default=list(ScanConfig.DEFAULT_IMAGE_EXTENSIONS),
            type=str,
            metavar='',
            help=EXTENSIONS_HELP_TEXT
        )
        parser.add_argument(
            "--mode",
            choices=list(EXECUTION_MODE_ALIASES.keys()),
            default="parallel",
            type=str,
            help="Hashing strategy: \n"
                 "  'parallel' (thread pool, default), \n"
                 "  'sequential' (calling thread only, reproducible group order)\n"
        )
        parser.add_argument(
            "--workers", "-w",
            default=None,
            type=int,
            metavar='',
            help="Thread pool size in parallel mode. Default: number of CPUs"
        )

        # Output options
        parser.add_argument(
            "--output", "-o",
            default=ScanConfig.DEFAULT_OUTPUT_FILE,
            type=str,
            metavar='',
            help=f"JSON report file. Default: {ScanConfig.DEFAULT_OUTPUT_FILE}"
        )

        # Actions
        parser.add_argument(
            "--trash",
            action="store_true",
            help="Move redundant copies to the system trash instead of a target directory"
        )

        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress progress bars and the console report"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show debug logging and scan statistics"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        root_path = Path(args.folder_path)
        if not root_path.exists():
            self.error_exit(f"Directory not found: {args.folder_path}")
        if not root_path.is_dir():
            self.error_exit(f"Path is not a directory: {args.folder_path}")

        if args.trash and args.target_directory:
            self.error_exit("--trash cannot be combined with a target directory")

        if args.workers is not None and args.workers < 1:
            self.error_exit("--workers must be at least 1")

        if args.target_directory:
            target_path = Path(args.target_directory)
            if target_path.exists() and not target_path.is_dir():
                self.error_exit(f"Target path is not a directory: {args.target_directory}")

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments."""
        try:
            return ScanParams(
                root_dir=args.folder_path,
                target_dir=args.target_directory,
                output_file=args.output,
                extensions=args.extensions,
                mode=EXECUTION_MODE_ALIASES.get(args.mode, ExecutionMode.PARALLEL),
                workers=args.workers,
                use_trash=args.trash,
                show_progress=not self.quiet,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def run_scan(self, params: ScanParams) -> List[DuplicateGroup]:
        """Execute the scan workflow."""
        command = ScanCommand()
        if self.verbose:
            print(f"Scanning directory: {params.root_dir} (mode: {params.mode.display_name})")

        try:
            groups, stats = command.execute(params)
        except RuntimeError as e:
            self.error_exit(f"Scan failed: {e}")

        if self.verbose:
            print("\n" + stats.print_summary() + "\n")
        return groups

    def output_results(self, groups: List[DuplicateGroup]) -> None:
        if self.quiet:
            return
        ReportService.print_identical_files(groups)

    def write_report(self, groups: List[DuplicateGroup], output_file: str) -> None:
        try:
            ReportService.write_json(groups, output_file)
        except RuntimeError as e:
            self.error_exit(str(e))
        if not self.quiet:
            print(f"JSON output written to {output_file}")

    def execute_relocation(self, groups: List[DuplicateGroup], target_dir: str) -> None:
        """Move redundant copies into target_dir. A failure ends the run with status 1."""
        try:
            FileService.relocate_duplicates(groups, target_dir, show_progress=not self.quiet)
        except RelocationError as e:
            print(f"Error moving duplicate files: {e}", file=sys.stderr)
            sys.exit(1)
        if not self.quiet:
            print(f"Duplicate files moved to {target_dir}")

    def execute_trash(self, groups: List[DuplicateGroup]) -> None:
        """Move redundant copies to trash, continuing past individual failures."""
        count = DuplicateService.count_redundant(groups)
        if not count:
            if not self.quiet:
                print("No files to move to trash.")
            return

        if not self.quiet:
            print(f"Moving {count} files to trash...")
        try:
            FileService.trash_duplicates(groups)
        except RuntimeError as e:
            self.error_exit(str(e))
        if not self.quiet:
            print(f"✅ Successfully moved {count} files to trash.")

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point with conditional output behavior."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        if self.verbose:
            logging.getLogger().setLevel(logging.DEBUG)

        self.validate_args(args)
        params = self.create_params(args)

        groups = self.run_scan(params)
        if not groups and self.verbose:
            self.warning("No duplicate groups found.")

        self.output_results(groups)
        self.write_report(groups, params.output_file)

        if params.target_dir:
            self.execute_relocation(groups, params.target_dir)
        elif params.use_trash:
            self.execute_trash(groups)

        # Show completion time
        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"\n✅ Completed in {elapsed:.2f} seconds")


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)")
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
