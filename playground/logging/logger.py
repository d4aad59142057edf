import logging
import sys
from typing import TextIO


class Log:
    """Centralized logging for the playground.

    Messages describe outcomes (field names, counts), never raw transaction
    values.
    """

    _logger: logging.Logger = logging.getLogger("playground")
    _FORMAT = "%(asctime)s [%(levelname)s] %(message)s"

    @classmethod
    def configure(cls, log_level: str, stream: TextIO | None = None) -> None:
        """Set the level and attach one handler writing to *stream* (stdout by default).

        The CLI passes stderr so that JSON written to stdout stays parseable.
        """
        cls._logger.setLevel(log_level.upper())
        if not cls._logger.handlers:
            handler = logging.StreamHandler(stream or sys.stdout)
            handler.setFormatter(logging.Formatter(cls._FORMAT))
            cls._logger.addHandler(handler)

    @classmethod
    def enabled(cls, level: str) -> bool:
        return cls._logger.isEnabledFor(logging.getLevelName(level.upper()))

    @classmethod
    def info(cls, message: str, **kwargs: object) -> None:
        cls._logger.info(message, extra=kwargs)

    @classmethod
    def debug(cls, message: str, **kwargs: object) -> None:
        cls._logger.debug(message, extra=kwargs)
