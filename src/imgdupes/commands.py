"""
Unified command orchestrator for the duplicate scan.
This is the SINGLE source of truth for the scan workflow, used by the CLI and library callers.
"""
from typing import List, Optional, Tuple
from imgdupes.core.models import ChecksumMap, DuplicateGroup, ScanParams, ScanStats
from imgdupes.core.filters import ExtensionFilter
from imgdupes.core.grouper import ChecksumGrouper
from imgdupes.core.hasher import HasherImpl
from imgdupes.core.progress import ProgressIndicator
from imgdupes.core.scanner import DirectoryScanner


class ScanCommand:
    """
    Orchestrates the scan workflow:
    1. Build the traversal driver from parameters
    2. Walk, hash and group the tree
    3. Reduce the finalized map to duplicate groups

    Usage:
        params = ScanParams(root_dir="~/Pictures")
        command = ScanCommand()
        groups, stats = command.execute(params)
    """

    def __init__(self):
        self.scanner: Optional[DirectoryScanner] = None
        self.checksum_map: Optional[ChecksumMap] = None

    def execute(self, params: ScanParams) -> Tuple[List[DuplicateGroup], ScanStats]:
        """
        Execute a scan with given parameters.

        Args:
            params: Validated scan parameters

        Returns:
            Tuple of (duplicate_groups, statistics)

        Raises:
            RuntimeError: If the root directory cannot be scanned
        """
        self.scanner = DirectoryScanner(
            root_dir=params.root_dir,
            extension_filter=ExtensionFilter(params.extensions),
            hasher=HasherImpl(),
            mode=params.mode,
            workers=params.workers,
            progress=ProgressIndicator(enabled=params.show_progress),
        )

        self.checksum_map = self.scanner.scan()
        groups = ChecksumGrouper.duplicate_groups(self.checksum_map)
        return groups, self.scanner.stats

    def get_checksum_map(self) -> ChecksumMap:
        """Full digest -> paths map of the last run, unique files included."""
        if self.checksum_map is None:
            raise RuntimeError("Execute command first before accessing the checksum map")
        return self.checksum_map
