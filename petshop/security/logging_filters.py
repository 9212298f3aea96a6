"""Logging filters that scrub sensitive content."""

from __future__ import annotations

import logging
import re

_SENSITIVE_PATTERN = re.compile(
    r"(Authorization: Bearer\s+[\w\.-]+"
    r"|Bearer\s+[\w-]+\.[\w-]+\.[\w-]+"
    r"|\"?(?:access_token|token)\"?\s*[:=]\s*\"?[^\"\s,}]+\"?"
    r"|\"?(?:senha|password)\"?\s*[:=]\s*\"?[^\"\s,}]+\"?)",
    re.IGNORECASE,
)

REDACTED = "**REDACTED**"


def scrub(text: str) -> str:
    """Replace tokens and passwords in ``text`` with a redaction marker."""
    return _SENSITIVE_PATTERN.sub(REDACTED, text)


class SensitiveFilter(logging.Filter):
    """Replace sensitive tokens in log messages with a redaction marker."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = scrub(record.msg)
        if isinstance(record.args, tuple):
            record.args = tuple(
                scrub(arg) if isinstance(arg, str) else arg for arg in record.args
            )
        return True


def install_sensitive_filter(
    logger_names: tuple[str, ...] = ("uvicorn", "uvicorn.access", "uvicorn.error", ""),
) -> None:
    """Attach one :class:`SensitiveFilter` to each named logger."""
    for name in logger_names:
        target = logging.getLogger(name)
        if not any(isinstance(flt, SensitiveFilter) for flt in target.filters):
            target.addFilter(SensitiveFilter())


__all__ = ["REDACTED", "SensitiveFilter", "install_sensitive_filter", "scrub"]
