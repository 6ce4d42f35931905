from __future__ import annotations
from datetime import datetime
from typing import Optional
import re

_CAPTURE_MARKER = re.compile(r"--- captured.*?---", re.IGNORECASE)
_NEWLINES = re.compile(r"\n+")
_WS = re.compile(r"\s+")

NO_TRANSCRIPT = "[No transcript captured]"

def clean_transcript(text: str) -> str:
    """Strip capture markers and collapse whitespace before summarizing."""
    t = _CAPTURE_MARKER.sub("", text or "")
    t = _NEWLINES.sub(" ", t)
    return _WS.sub(" ", t).strip()

def capture_marker(when: Optional[datetime] = None) -> str:
    when = when or datetime.now()
    return f"--- captured {when.strftime('%Y-%m-%d %H:%M:%S')} ---"

def append_capture(buffer: str, current: str, when: Optional[datetime] = None) -> str:
    if not (current or "").strip():
        return buffer + f"\n{NO_TRANSCRIPT}\n"
    return buffer + f"\n{capture_marker(when)}\n{current.strip()}\n"
