"""
Tests for ScanCommand and ScanParams, the entry point shared by CLI and library callers.
"""
import pytest
from imgdupes.commands import ScanCommand
from imgdupes.core.models import ExecutionMode, ScanConfig, ScanParams


class TestScanParams:

    def test_defaults(self):
        params = ScanParams(root_dir="/photos")
        assert params.extensions == list(ScanConfig.DEFAULT_IMAGE_EXTENSIONS)
        assert params.mode == ExecutionMode.PARALLEL
        assert params.output_file == "identical_files.json"
        assert params.target_dir is None
        assert params.workers is None

    def test_extensions_normalized(self):
        params = ScanParams(root_dir="/photos", extensions=["JPG", " .Png ", ""])
        assert params.extensions == [".jpg", ".png"]

    def test_empty_root_rejected(self):
        with pytest.raises(ValueError, match="Root directory"):
            ScanParams(root_dir="")

    def test_invalid_workers_rejected(self):
        with pytest.raises(ValueError, match="Worker count"):
            ScanParams(root_dir="/photos", workers=0)

    def test_trash_and_target_are_exclusive(self):
        with pytest.raises(ValueError):
            ScanParams(root_dir="/photos", target_dir="/dupes", use_trash=True)

    def test_empty_extension_list_rejected(self):
        with pytest.raises(ValueError, match="extension"):
            ScanParams(root_dir="/photos", extensions=["  "])


class TestScanCommand:

    def test_execute_returns_duplicate_groups_and_stats(self, image_tree):
        params = ScanParams(
            root_dir=str(image_tree["a"].parent),
            mode=ExecutionMode.SEQUENTIAL,
            show_progress=False,
        )
        command = ScanCommand()
        groups, stats = command.execute(params)

        assert sorted(g.duplicate_count for g in groups) == [2, 3]
        assert stats.hashed_files == 6
        assert stats.total_entries == 9
        assert "Files hashed: 6" in stats.print_summary()

        # Full map keeps unique files, the group list does not
        checksum_map = command.get_checksum_map()
        assert len(checksum_map) == 3

    def test_extension_override(self, image_tree):
        params = ScanParams(
            root_dir=str(image_tree["a"].parent),
            extensions=["png"],
            mode=ExecutionMode.PARALLEL,
            workers=2,
            show_progress=False,
        )
        groups, _ = ScanCommand().execute(params)

        assert len(groups) == 1
        assert sorted(groups[0].files) == sorted([str(image_tree["d"]), str(image_tree["e"])])

    def test_checksum_map_before_execute(self):
        with pytest.raises(RuntimeError):
            ScanCommand().get_checksum_map()

    def test_missing_root_raises(self, tmp_path):
        params = ScanParams(root_dir=str(tmp_path / "missing"), show_progress=False)
        with pytest.raises(RuntimeError):
            ScanCommand().execute(params)
