class IntakeError(Exception):
    """Base exception for all file intake errors."""


class UnsupportedFileTypeError(IntakeError):
    """Raised when a file is neither an image nor a supported report format."""
