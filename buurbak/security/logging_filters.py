"""Logging filters that scrub credentials from log records."""

from __future__ import annotations

import logging
import re

_SENSITIVE_PATTERN = re.compile(
    r"(Bearer\s+[\w\.-]+"
    r"|access_token\"?\s*[:=]\s*\"?[^\"&\s,]+\"?"
    r"|(?:hashed_)?password\"?\s*[:=]\s*\"?[^\"&\s,]+\"?)",
    re.IGNORECASE,
)

REDACTED = "**REDACTED**"


def scrub(value: str) -> str:
    """Replace bearer tokens and password fields in ``value``."""
    return _SENSITIVE_PATTERN.sub(REDACTED, value)


class SensitiveFilter(logging.Filter):
    """Redact tokens and passwords from messages and string arguments."""

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = scrub(record.msg)
        if isinstance(record.args, tuple):
            record.args = tuple(
                scrub(arg) if isinstance(arg, str) else arg for arg in record.args
            )
        return True


def install_sensitive_filter(*names: str) -> None:
    """Attach a single :class:`SensitiveFilter` to each named logger."""
    for name in names:
        target = logging.getLogger(name)
        if not any(isinstance(flt, SensitiveFilter) for flt in target.filters):
            target.addFilter(SensitiveFilter())


__all__ = ["REDACTED", "SensitiveFilter", "install_sensitive_filter", "scrub"]
