import os
from pathlib import Path

import pytest

from kidneyscan.analysis.fingerprint import fingerprint
from kidneyscan.analysis.models import MediaCategory
from kidneyscan.intake.exceptions import UnsupportedFileTypeError
from kidneyscan.intake.file_loader import FileLoader


class TestDescribeImages:
    def test_png_is_image(self, tmp_path: Path) -> None:
        path = tmp_path / "scan.png"
        path.write_bytes(b"\x89PNG" + b"\x00" * 88)

        descriptor = FileLoader().describe(path)

        assert descriptor.name == "scan.png"
        assert descriptor.byte_size == 92
        assert descriptor.media_category is MediaCategory.IMAGE

    def test_declared_mime_wins_over_suffix(self, tmp_path: Path) -> None:
        path = tmp_path / "tissue.bin"
        path.write_bytes(b"raw")

        descriptor = FileLoader().describe(path, mime_type="image/tiff")

        assert descriptor.media_category is MediaCategory.IMAGE


class TestDescribeReports:
    @pytest.mark.parametrize("name", ["labs.csv", "labs.xlsx", "labs.pdf", "LABS.PDF"])
    def test_report_formats_are_documents(self, tmp_path: Path, name: str) -> None:
        path = tmp_path / name
        path.write_bytes(b"content")

        descriptor = FileLoader().describe(path)

        assert descriptor.media_category is MediaCategory.DOCUMENT
        assert descriptor.byte_size == 7


class TestDescribeRejects:
    def test_raises_for_unsupported_type(self, tmp_path: Path) -> None:
        path = tmp_path / "notes.txt"
        path.write_text("hello")

        with pytest.raises(UnsupportedFileTypeError, match="notes.txt"):
            FileLoader().describe(path)

    def test_raises_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="missing"):
            FileLoader().describe(tmp_path / "missing.png")


class TestDescribeUndecodableNames:
    def test_name_with_invalid_utf8_byte(self, tmp_path: Path) -> None:
        path = tmp_path / os.fsdecode(b"scan\xff.png")
        path.write_bytes(b"\x00" * 10)

        descriptor = FileLoader().describe(path)

        assert descriptor.name == "scan\udcff.png"
        assert fingerprint(descriptor) == 19
