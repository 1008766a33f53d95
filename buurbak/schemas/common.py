"""Shared schema types."""

from __future__ import annotations

from datetime import time
from typing import Annotated

from pydantic import PlainSerializer

HourMinute = Annotated[
    time,
    PlainSerializer(
        lambda value: value.strftime("%H:%M"), return_type=str, when_used="json"
    ),
]
"""A wall-clock time exchanged as ``HH:MM``; Python dumps keep ``time``."""
