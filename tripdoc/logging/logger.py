import logging
import sys


class Log:
    """Process-wide logger for the extraction pipeline.

    Keyword arguments are rendered after the message as ``key=value`` pairs.
    Callers pass sizes, counts and kinds only, never document text.
    Output goes to stderr; stdout is reserved for extracted text.
    """

    _logger: logging.Logger = logging.getLogger("tripdoc")

    @classmethod
    def configure(cls, log_level: str) -> None:
        cls._logger.setLevel(log_level.upper())
        if cls._logger.handlers:
            return
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        )
        cls._logger.addHandler(handler)

    @staticmethod
    def _render(message: str, fields: dict[str, object]) -> str:
        if not fields:
            return message
        pairs = " ".join(f"{key}={value}" for key, value in fields.items())
        return f"{message} {pairs}"

    @classmethod
    def debug(cls, message: str, **fields: object) -> None:
        if cls._logger.isEnabledFor(logging.DEBUG):
            cls._logger.debug(cls._render(message, fields))

    @classmethod
    def info(cls, message: str, **fields: object) -> None:
        cls._logger.info(cls._render(message, fields))

    @classmethod
    def warning(cls, message: str, **fields: object) -> None:
        cls._logger.warning(cls._render(message, fields))

    @classmethod
    def error(cls, message: str, **fields: object) -> None:
        cls._logger.error(cls._render(message, fields))
