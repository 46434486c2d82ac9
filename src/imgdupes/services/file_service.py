"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

services/file_service.py
File operations applied to redundant duplicate copies:
relocation into a target directory and moving to the system trash.
"""
import os
import sys
import logging
from pathlib import Path
from typing import List

from send2trash import send2trash
from tqdm import tqdm

from imgdupes.core.models import DuplicateGroup, ScanConfig, display_path
from imgdupes.services.duplicate_service import DuplicateService

logger = logging.getLogger(__name__)


class RelocationError(RuntimeError):
    """The relocation step failed; moves already performed are kept."""


class FileService:
    """
    Moves every file of a duplicate group except the first one.
    Errors abort the whole step and are not rolled back.
    """

    @staticmethod
    def prepare_target_directory(target_dir: str) -> Path:
        """Creates the target directory, including parents, if it does not exist."""
        path = Path(target_dir)
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise RelocationError(f"Cannot create target directory {path}: {e}") from e
        if not path.is_dir():
            raise RelocationError(f"Target path is not a directory: {path}")
        return path

    @staticmethod
    def move_file(file_path: str, target_dir: Path) -> Path:
        """
        Renames a file into target_dir under its original name.
        An existing file of that name is never overwritten.
        """
        source = Path(file_path)
        new_path = target_dir / source.name
        if new_path.exists():
            raise RelocationError(f"File already exists in target directory: {new_path}")
        try:
            os.rename(source, new_path)
        except OSError as e:
            raise RelocationError(f"Failed to move {source} to {new_path}: {e}") from e
        return new_path

    @classmethod
    def relocate_duplicates(
            cls,
            groups: List[DuplicateGroup],
            target_dir: str,
            show_progress: bool = True,
            file=None,
    ) -> List[Path]:
        """
        Moves the redundant copies of every group into target_dir.
        Returns:
            New locations of the moved files
        Raises:
            RelocationError: target could not be prepared or a move failed
        """
        target_path = cls.prepare_target_directory(target_dir)
        total = DuplicateService.count_redundant(groups)
        moved = []

        progress_bar = tqdm(
            total=total,
            file=file or sys.stderr,
            disable=not show_progress,
            bar_format=ScanConfig.PROGRESS_BAR_FORMAT,
            ascii=ScanConfig.PROGRESS_CHARS,
            dynamic_ncols=True,
        )
        try:
            for path in DuplicateService.files_to_move(groups):
                new_path = cls.move_file(path, target_path)
                moved.append(new_path)
                logger.debug(f"Moved {path} -> {new_path}")
                progress_bar.update(1)
                progress_bar.set_description_str(f"Moving: {display_path(new_path)}", refresh=False)
            progress_bar.set_description_str("File moving complete", refresh=False)
        finally:
            progress_bar.close()

        return moved

    @staticmethod
    def move_to_trash(file_path: str):
        """Moves a file to the system trash."""
        path = Path(file_path).resolve()

        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")

        try:
            send2trash(str(path))
        except Exception as e:
            raise RuntimeError(f"Failed to move to trash: {e}") from e

    @classmethod
    def trash_duplicates(cls, groups: List[DuplicateGroup]) -> List[str]:
        """
        Moves the redundant copies of every group to trash with error aggregation.
        Returns:
            Paths that were moved to trash
        """
        file_paths = DuplicateService.files_to_move(groups)
        trashed = []
        errors = []
        for path in file_paths:
            try:
                cls.move_to_trash(path)
                trashed.append(path)
            except Exception as e:
                errors.append((path, str(e)))

        if errors:
            error_summary = "\n".join(
                f"  • {Path(p).name}: {msg.split(':')[-1].strip()}"
                for p, msg in errors[:5]
            )
            if len(errors) > 5:
                error_summary += f"\n  • ...and {len(errors) - 5} more files"
            raise RuntimeError(
                f"Failed to move {len(errors)} file(s) to trash:\n{error_summary}"
            )
        return trashed
