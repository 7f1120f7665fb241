"""Whitespace clean-up for strings."""

from __future__ import annotations

import re

_WHITESPACE_RUN = re.compile(r"[ \t\n\v\f\r]{2,}")


def collapse_whitespace(text: str) -> str:
    """Replace each run of whitespace with the run's last character."""
    return _WHITESPACE_RUN.sub(lambda match: match.group()[-1], text)