import logging
import sys


class Log:
    """Centralized logging with structured format.

    Messages tied to an analysis session carry a ``[session N]`` prefix so that
    interleaved output from a superseded session is easy to tell apart.
    """

    _logger: logging.Logger = logging.getLogger("kidneyscan")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Configure the logger with the specified level and stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def info(cls, message: str, session: int | None = None, **kwargs: object) -> None:
        """Log an info message."""
        cls._logger.info(cls._prefixed(message, session), extra=kwargs)

    @classmethod
    def error(cls, message: str, session: int | None = None, **kwargs: object) -> None:
        """Log an error message."""
        cls._logger.error(cls._prefixed(message, session), extra=kwargs)

    @classmethod
    def warning(cls, message: str, session: int | None = None, **kwargs: object) -> None:
        """Log a warning message."""
        cls._logger.warning(cls._prefixed(message, session), extra=kwargs)

    @classmethod
    def debug(cls, message: str, session: int | None = None, **kwargs: object) -> None:
        """Log a debug message."""
        cls._logger.debug(cls._prefixed(message, session), extra=kwargs)

    @staticmethod
    def _prefixed(message: str, session: int | None) -> str:
        if session is None:
            return message
        return f"[session {session}] {message}"
