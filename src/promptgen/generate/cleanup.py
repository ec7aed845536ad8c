# Post-processing of generated text.

from __future__ import annotations
import re

# Bare fences, python-tagged fences and blank lines. Other language tags stay.
# Whitespace is the ASCII set only; NBSP and other Unicode spaces are content.
_CLEANUP_RE = re.compile(r"^```python$|^```$|^[ \t\n\f\r]*$", re.MULTILINE)


def remove_first_line(text: str) -> str:
    """Drop the first line unconditionally (the API usually opens with a fence)."""
    lines = text.split("\n")
    if len(lines) > 1:
        return "\n".join(lines[1:])
    return ""


def clean_result_text(text: str) -> str:
    return _CLEANUP_RE.sub("", text)
