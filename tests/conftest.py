import pytest

from kidneyscan.analysis.models import FileDescriptor, MediaCategory
from kidneyscan.config.settings import Settings


@pytest.fixture()
def fast_settings() -> Settings:
    """Settings whose wall clock runs twenty times faster than simulated time."""
    return Settings(clock_speed=20.0)


@pytest.fixture()
def image_file() -> FileDescriptor:
    """Image whose fingerprint is 100 (8-char name, 92 bytes)."""
    return FileDescriptor(name="scan.png", byte_size=92, media_category=MediaCategory.IMAGE)


@pytest.fixture()
def report_file() -> FileDescriptor:
    """Report whose fingerprint is 100 (10-char name, 90 bytes)."""
    return FileDescriptor(
        name="report.pdf", byte_size=90, media_category=MediaCategory.DOCUMENT
    )
