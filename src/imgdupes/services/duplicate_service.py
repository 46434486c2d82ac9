from typing import List
from imgdupes.core.models import DuplicateGroup


class DuplicateService:
    @staticmethod
    def files_to_move(groups: List[DuplicateGroup]) -> List[str]:
        """
        Keeps the first file of every group and returns the rest.

        Args:
            groups (List[DuplicateGroup]): Duplicate groups in report order.

        Returns:
            List[str]: Paths of redundant copies, group by group.
        """
        files_to_move = []
        for group in groups:
            if group.is_duplicate():
                files_to_move.extend(group.redundant)
        return files_to_move

    @staticmethod
    def count_redundant(groups: List[DuplicateGroup]) -> int:
        """Sum of (group size - 1) over all duplicate groups."""
        return sum(group.duplicate_count - 1 for group in groups if group.is_duplicate())
