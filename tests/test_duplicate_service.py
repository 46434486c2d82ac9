"""
Unit tests for DuplicateService.
Verifies which copies are selected for relocation or trash.
"""
from imgdupes.core.models import DuplicateGroup
from imgdupes.services.duplicate_service import DuplicateService


class TestDuplicateService:

    def test_files_to_move_skips_first_of_each_group(self):
        groups = [
            DuplicateGroup(checksum=1, files=["/a", "/b", "/c"]),
            DuplicateGroup(checksum=2, files=["/d", "/e"]),
        ]
        assert DuplicateService.files_to_move(groups) == ["/b", "/c", "/e"]
        assert DuplicateService.count_redundant(groups) == 3

    def test_single_file_groups_contribute_nothing(self):
        groups = [DuplicateGroup(checksum=1, files=["/a"])]
        assert DuplicateService.files_to_move(groups) == []
        assert DuplicateService.count_redundant(groups) == 0

    def test_empty_input(self):
        assert DuplicateService.files_to_move([]) == []
        assert DuplicateService.count_redundant([]) == 0

    def test_original_is_never_selected(self):
        group = DuplicateGroup(checksum=9, files=["/keep.jpg", "/drop1.jpg", "/drop2.jpg"])
        selected = DuplicateService.files_to_move([group])
        assert group.original not in selected
        assert selected == group.redundant
