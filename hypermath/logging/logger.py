import logging
import sys


class Log:
    """Shared logger for the arithmetic engine and the command line."""

    _logger: logging.Logger = logging.getLogger("hypermath")

    @classmethod
    def configure(cls, log_level: str) -> None:
        """Set the level and attach a single stdout handler."""
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(
                logging.Formatter("%(asctime)s [%(levelname)s] %(message)s")
            )
            cls._logger.addHandler(handler)

    @classmethod
    def error(cls, message: str) -> None:
        """Log a failed operation."""
        cls._logger.error(message)

    @classmethod
    def debug(cls, message: str) -> None:
        """Log an operand, a rejection or a result."""
        cls._logger.debug(message)
