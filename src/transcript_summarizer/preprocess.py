from __future__ import annotations
from collections import Counter
from dataclasses import dataclass
from typing import FrozenSet, Iterable, Iterator, List
import re

_NEWLINES = re.compile(r"\n+")
_SENT_SPLIT = re.compile(r"(?<=[.!?])\s+")
_NON_WORD = re.compile(r"[^a-z0-9\s']")

STOPWORDS: FrozenSet[str] = frozenset({
    "a", "an", "and", "are", "as", "at", "be", "by", "for", "from", "in", "is",
    "it", "of", "on", "or", "that", "the", "this", "to", "was", "with", "will",
    "we", "you", "i", "they", "he", "she", "but", "if", "so", "than", "then",
    "their", "there", "these", "those",
})

@dataclass(frozen=True)
class Sentence:
    text: str
    index: int

class Tokens:
    """Lowercase word tokens of a string, recomputed on every iteration."""

    __slots__ = ("_text",)

    def __init__(self, text: str):
        self._text = text

    def __iter__(self) -> Iterator[str]:
        normalized = _NON_WORD.sub(" ", self._text.lower())
        for tok in normalized.split():
            yield tok

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"Tokens({list(self)!r})"

def split_sentences(text: str) -> List[str]:
    flat = _NEWLINES.sub(" ", text or "")
    return [s.strip() for s in _SENT_SPLIT.split(flat) if s.strip()]

def sentences_of(text: str) -> List[Sentence]:
    return [Sentence(text=s, index=i) for i, s in enumerate(split_sentences(text))]

def tokenize(text: str) -> Tokens:
    return Tokens(text)

def content_tokens(tokens: Iterable[str], stopwords: FrozenSet[str] = STOPWORDS) -> Iterator[str]:
    return (t for t in tokens if t not in stopwords)

def frequency_table(sentences: Iterable[Sentence], stopwords: FrozenSet[str] = STOPWORDS) -> Counter:
    # one table per document; stopwords never enter it
    freq: Counter = Counter()
    for s in sentences:
        freq.update(content_tokens(tokenize(s.text), stopwords))
    return freq
