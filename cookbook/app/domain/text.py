from __future__ import annotations

import re
from typing import Any, Optional

_LINE_BREAK = re.compile(r"\r?\n")


def clean_str(value: Any) -> Optional[str]:
    if isinstance(value, str):
        stripped = value.strip()
        return stripped or None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def to_lines(value: Any) -> list[str]:
    """Accept a list of strings or one newline-separated string; return trimmed, non-blank lines."""
    if value is None:
        return []
    if isinstance(value, str):
        items: list[Any] = _LINE_BREAK.split(value)
    elif isinstance(value, (list, tuple)):
        items = list(value)
    else:
        return []
    out: list[str] = []
    for item in items:
        text = clean_str(item)
        if text:
            out.append(text)
    return out
