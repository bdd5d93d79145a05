import logging
import sys
from typing import TextIO

# Emojis per level
EMOJI_MAP = {
    "DEBUG": "🐞",
    "INFO": "💡",
    "WARNING": "⚠️",
    "ERROR": "🔥",
    "CRITICAL": "💀",
}

_DEFAULT_RECORD_ATTRS = frozenset(
    logging.LogRecord(
        name="",
        level=logging.NOTSET,
        pathname="",
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    ).__dict__
) | {"message", "asctime", "taskName"}


class EmojiFormatter(logging.Formatter):
    """Formatter that adds a level emoji, the logger name and any extra fields."""

    def format(self, record: logging.LogRecord) -> str:
        emoji = EMOJI_MAP.get(record.levelname, "")
        log_line = (
            f"{emoji} [{record.levelname:<8}] ({record.name}) {record.getMessage()}"
        )

        extra_attrs = {
            k: v
            for k, v in record.__dict__.items()
            if k not in _DEFAULT_RECORD_ATTRS and not k.startswith("_")
        }
        if extra_attrs:
            extra_str = " ".join(f"{k}={v!r}" for k, v in extra_attrs.items())
            log_line = f"{log_line} | {extra_str}"

        if record.exc_info:
            log_line = f"{log_line}\n{self.formatException(record.exc_info)}"

        return log_line


def setup_logging(level: int = logging.INFO, stream: TextIO | None = None) -> None:
    """Configure root logger with emoji formatter."""
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(EmojiFormatter())

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    # SDK loggers echo request URLs and headers at DEBUG
    for noisy in ("httpx", "httpcore", "openai", "anthropic", "pymongo"):
        logging.getLogger(noisy).setLevel(max(level, logging.WARNING))


def get_logger(name: str) -> logging.Logger:
    """Get a subsystem logger."""
    return logging.getLogger(f"majin.{name}")
