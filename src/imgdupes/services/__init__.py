"""Report output, file relocation and duplicate group management services."""

from .file_service import FileService, RelocationError
from .duplicate_service import DuplicateService
from .report_service import ReportService

__all__ = ["FileService", "RelocationError", "DuplicateService", "ReportService"]
