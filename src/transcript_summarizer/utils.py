from __future__ import annotations
from typing import Callable, Iterable, List, Sequence
import re

_WS = re.compile(r"\s+")
_SPACE_BEFORE_PUNCT = re.compile(r"\s+([,.!?])")
_LEADING_QUOTE = re.compile(r"^[\"']")

ELLIPSIS = "…"

def clean(s: str) -> str:
    """Trim, collapse whitespace runs and drop whitespace before , . ! ?"""
    t = _WS.sub(" ", s.strip())
    return _SPACE_BEFORE_PUNCT.sub(r"\1", t)

def strip_leading_quote(s: str) -> str:
    return _LEADING_QUOTE.sub("", s, count=1)

def capitalize_first(s: str) -> str:
    return s[:1].upper() + s[1:]

def pipeline(*steps: Callable[[str], str]) -> Callable[[str], str]:
    def run(s: str) -> str:
        for step in steps:
            s = step(s)
        return s
    return run

# clean again: a stripped quote can leave a leading space
sentence_to_line = pipeline(clean, strip_leading_quote, clean, capitalize_first)

def truncate(s: str, limit: int = 120) -> str:
    if len(s) <= limit:
        return s
    return s[: limit - 3].rstrip() + ELLIPSIS

def compile_patterns(patterns: Iterable[str], flags: int = 0) -> List[re.Pattern]:
    return [re.compile(p, flags) for p in patterns or []]

def any_match(patterns: List[re.Pattern], text: str) -> bool:
    return any(p.search(text) for p in patterns)

def contains_any(text: str, needles: Sequence[str]) -> bool:
    lowered = text.lower()
    return any(n in lowered for n in needles)
