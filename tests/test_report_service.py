"""
Unit tests for ReportService.
Verifies console layout and JSON report structure.
"""
import io
import json
import pytest
from imgdupes.core.models import DuplicateGroup
from imgdupes.services.report_service import ReportService


@pytest.fixture
def groups():
    return [
        DuplicateGroup(checksum=17, files=["/p/a.jpg", "/p/b.jpg"]),
        DuplicateGroup(checksum=2 ** 64 - 1, files=["/p/c.png", "/q/c.png", "/r/c.png"]),
    ]


class TestConsoleReport:

    def test_prints_header_indented_paths_and_blank_line(self, groups):
        stream = io.StringIO()
        ReportService.print_identical_files(groups, stream=stream)

        assert stream.getvalue() == (
            "Identical files:\n"
            "  /p/a.jpg\n"
            "  /p/b.jpg\n"
            "\n"
            "Identical files:\n"
            "  /p/c.png\n"
            "  /q/c.png\n"
            "  /r/c.png\n"
            "\n"
        )

    def test_single_file_groups_are_not_printed(self):
        stream = io.StringIO()
        ReportService.print_identical_files([DuplicateGroup(checksum=1, files=["/only.jpg"])], stream=stream)
        assert stream.getvalue() == ""

    def test_no_groups_no_output(self, capsys):
        ReportService.print_identical_files([])
        assert capsys.readouterr().out == ""


class TestJsonReport:

    def test_build_report_uses_checksum_and_files_keys(self, groups):
        report = ReportService.build_report(groups)
        assert report == [
            {"checksum": 17, "files": ["/p/a.jpg", "/p/b.jpg"]},
            {"checksum": 2 ** 64 - 1, "files": ["/p/c.png", "/q/c.png", "/r/c.png"]},
        ]

    def test_write_json_round_trips_full_64_bit_values(self, groups, tmp_path):
        output = tmp_path / "identical_files.json"
        ReportService.write_json(groups, str(output))

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data[1]["checksum"] == 18446744073709551615
        assert [list(entry.keys()) for entry in data] == [["checksum", "files"]] * 2

    def test_write_json_is_pretty_printed(self, groups, tmp_path):
        output = tmp_path / "report.json"
        ReportService.write_json(groups, str(output))
        text = output.read_text(encoding="utf-8")
        assert text.startswith("[\n  {\n    \"checksum\": 17,")

    def test_empty_report_is_empty_array(self, tmp_path):
        output = tmp_path / "report.json"
        ReportService.write_json([], str(output))
        assert json.loads(output.read_text(encoding="utf-8")) == []

    def test_single_file_groups_are_not_written(self, tmp_path):
        output = tmp_path / "report.json"
        ReportService.write_json([DuplicateGroup(checksum=1, files=["/only.jpg"])], str(output))
        assert json.loads(output.read_text(encoding="utf-8")) == []

    def test_unwritable_location_raises_runtime_error(self, groups, tmp_path):
        with pytest.raises(RuntimeError, match="Failed to write JSON report"):
            ReportService.write_json(groups, str(tmp_path / "missing" / "report.json"))

    def test_non_ascii_paths_are_kept_readable(self, tmp_path):
        output = tmp_path / "report.json"
        ReportService.write_json([DuplicateGroup(checksum=3, files=["/фото/a.jpg", "/фото/b.jpg"])], str(output))
        assert "/фото/a.jpg" in output.read_text(encoding="utf-8")


class TestUndecodableNames:
    """File names holding bytes that are not valid UTF-8 arrive as surrogate escapes."""

    @pytest.fixture
    def undecodable(self):
        return [DuplicateGroup(checksum=5, files=["/p/a\udcff.jpg", "/p/b.jpg"])]

    def test_console_report_never_emits_surrogates(self, undecodable):
        buffer = io.BytesIO()
        stream = io.TextIOWrapper(buffer, encoding="utf-8")  # strict, like a reconfigured stdout
        ReportService.print_identical_files(undecodable, stream=stream)
        stream.flush()

        text = buffer.getvalue().decode("utf-8")
        assert "�.jpg" in text
        assert "  /p/b.jpg\n" in text

    def test_json_report_is_written_with_replacement_characters(self, undecodable, tmp_path):
        output = tmp_path / "report.json"
        ReportService.write_json(undecodable, str(output))

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data[0]["files"][1] == "/p/b.jpg"
        assert "�" in data[0]["files"][0]
        assert "\udcff" not in data[0]["files"][0]

    def test_groups_keep_real_paths(self, undecodable):
        undecodable[0].to_dict()
        assert undecodable[0].files[0] == "/p/a\udcff.jpg"
