import logging
from typing import TextIO

_SHORT_LEVELS = {
    "DEBUG": "DBG",
    "INFO": "INF",
    "WARNING": "WRN",
    "ERROR": "ERR",
    "CRITICAL": "CRT",
}


class ProfessionalFormatter(logging.Formatter):
    """Pipe-separated records with three-letter level codes."""

    def __init__(self):
        super().__init__(
            fmt="%(asctime)s | %(shortlevel)-3s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    def format(self, record) -> str:
        record.shortlevel = _SHORT_LEVELS.get(record.levelname, "???")
        return super().format(record)


def configure_logging(
    level=logging.WARNING, stream: TextIO | None = None
) -> logging.Logger:
    """Attach a stderr (or ``stream``) handler to the root logger once and return it.

    The level is applied on every call so the CLI verbosity flags take effect
    even when a handler is already installed.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    if not root_logger.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(ProfessionalFormatter())
        root_logger.addHandler(handler)
    return root_logger
