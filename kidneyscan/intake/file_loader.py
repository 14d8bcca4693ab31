import mimetypes
from pathlib import Path

from kidneyscan.analysis.models import FileDescriptor, MediaCategory
from kidneyscan.intake.exceptions import UnsupportedFileTypeError


class FileLoader:
    """Turns a file on disk into a FileDescriptor without reading its content."""

    REPORT_SUFFIXES = frozenset({".csv", ".xlsx", ".pdf"})

    def describe(self, path: Path, mime_type: str | None = None) -> FileDescriptor:
        """Build the descriptor for path.

        Args:
            path: File to submit for analysis.
            mime_type: Declared MIME type; guessed from the suffix when omitted.

        Raises:
            FileNotFoundError: if the file does not exist.
            UnsupportedFileTypeError: if the file is not an image or a report.
        """
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        resolved_mime = mime_type or self._guess_mime(path)
        category = MediaCategory.from_mime(resolved_mime)
        if category is MediaCategory.DOCUMENT and path.suffix.lower() not in self.REPORT_SUFFIXES:
            raise UnsupportedFileTypeError(
                f"'{path.name}' ({resolved_mime}) is not an image or a "
                f"{'/'.join(sorted(self.REPORT_SUFFIXES))} report"
            )
        return FileDescriptor(
            name=path.name,
            byte_size=path.stat().st_size,
            media_category=category,
        )

    @staticmethod
    def _guess_mime(path: Path) -> str:
        guessed, _encoding = mimetypes.guess_type(path.name)
        return guessed or "application/octet-stream"
