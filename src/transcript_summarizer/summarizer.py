from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Sequence
import math
import re

from .preprocess import STOPWORDS, Sentence, frequency_table, sentences_of, tokenize
from .utils import compile_patterns, any_match, contains_any, sentence_to_line, truncate

CONCISE = "concise"
EXECUTIVE = "executive"
ACTION = "action"
DETAILED = "detailed"
DEFAULT = "default"

STYLES = (CONCISE, EXECUTIVE, ACTION, DETAILED)

LENGTH_COUNTS: Dict[str, int] = {"short": 1, "medium": 3, "long": 6}
DEFAULT_LENGTH = "medium"

EXECUTIVE_LINE_LIMIT = 120
DETAILED_MIN, DETAILED_MAX = 3, 5
MAX_NEXT_STEPS = 3

ACTION_KEYWORDS = (
    "should", "will", "need", "plan", "recommend", "follow", "action",
    "next", "implement", "assign", "review", "consider", "start",
)

# (patterns, prefix); first match wins, no match -> "Consider:"
NEXT_STEP_RULES = [
    (compile_patterns([r"\b(review|audit|check|inspect|verify)\b"], re.IGNORECASE), "Review and confirm:"),
    (compile_patterns([r"\b(plan|schedule|set up|organize)\b"], re.IGNORECASE), "Schedule a follow-up to:"),
    (compile_patterns([r"\b(assign|delegate|appoint)\b"], re.IGNORECASE), "Assign ownership for:"),
]
NEXT_STEP_FALLBACK = "Consider:"

@dataclass(frozen=True)
class ScoredSentence:
    sentence: Sentence
    score: float

    @property
    def text(self) -> str:
        return self.sentence.text

    @property
    def index(self) -> int:
        return self.sentence.index

def normalize_style(style: object) -> str:
    if isinstance(style, str):
        s = style.strip().lower()
        if s in STYLES:
            return s
    return DEFAULT

def normalize_length(length_key: object) -> str:
    if isinstance(length_key, str):
        k = length_key.strip().lower()
        if k in LENGTH_COUNTS:
            return k
    return DEFAULT_LENGTH

def clamp(n: int, lo: int, hi: int) -> int:
    return min(max(lo, n), hi)

def sentence_count(length_key: object, total: int) -> int:
    return clamp(LENGTH_COUNTS[normalize_length(length_key)], 1, total)

def score_sentences(sentences: Sequence[Sentence]) -> List[ScoredSentence]:
    """
    Frequency score per sentence:
    - build a document frequency table over non-stopword tokens
    - sum the frequencies of each sentence's non-stopword tokens
    - divide by sqrt of the sentence's full token count (stopwords included)
    """
    freq = frequency_table(sentences)
    scored = []
    for s in sentences:
        toks = tokenize(s.text)
        total = sum(freq.get(t, 0) for t in toks if t not in STOPWORDS)
        words = max(1, len(toks))
        scored.append(ScoredSentence(sentence=s, score=total / math.sqrt(words)))
    return scored

def rank(scored: Sequence[ScoredSentence]) -> List[ScoredSentence]:
    # sorted() is stable, so equal scores keep document order
    return sorted(scored, key=lambda x: x.score, reverse=True)

def top_n(ranked: Sequence[ScoredSentence], n: int) -> List[ScoredSentence]:
    return list(ranked[:n])

def in_document_order(chosen: Sequence[ScoredSentence]) -> List[ScoredSentence]:
    return sorted(chosen, key=lambda x: x.index)

def top_sentences(ranked: Sequence[ScoredSentence], n: int) -> List[str]:
    return [x.text for x in in_document_order(top_n(ranked, n))]

# ---- style formatters ----

def format_concise(ranked: Sequence[ScoredSentence], count: int) -> str:
    parts = top_sentences(ranked, count)
    lead = sentence_to_line(parts[0])
    follow = " ".join(sentence_to_line(p) for p in parts[1:])
    return lead + (" " + follow if follow else "")

def format_executive(ranked: Sequence[ScoredSentence], count: int) -> str:
    return "\n".join(
        "• " + truncate(sentence_to_line(s), EXECUTIVE_LINE_LIMIT)
        for s in top_sentences(ranked, count)
    )

def next_step(sentence: str) -> str:
    short = sentence_to_line(sentence)
    if short.endswith("."):
        short = short[:-1]
    prefix = NEXT_STEP_FALLBACK
    for patterns, label in NEXT_STEP_RULES:
        if any_match(patterns, short):
            prefix = label
            break
    return f"- {prefix} {short}."

def suggested_next_steps(ranked: Sequence[ScoredSentence]) -> List[str]:
    steps: List[str] = []
    for x in top_n(ranked, MAX_NEXT_STEPS):
        step = next_step(x.text)
        if step not in steps:
            steps.append(step)
    return steps[:MAX_NEXT_STEPS]

def format_action(ranked: Sequence[ScoredSentence], count: int) -> str:
    candidates = [x for x in ranked if contains_any(x.text, ACTION_KEYWORDS)]
    seeds = top_n(candidates or ranked, count)
    bullets = ["- " + sentence_to_line(x.text) for x in seeds]
    return "\n".join(bullets + ["", "Suggested next steps:"] + suggested_next_steps(ranked))

def format_detailed(ranked: Sequence[ScoredSentence], count: int) -> str:
    desired = clamp(count, DETAILED_MIN, DETAILED_MAX)
    return " ".join(sentence_to_line(s) for s in top_sentences(ranked, desired))

def format_default(ranked: Sequence[ScoredSentence], count: int) -> str:
    return " ".join(sentence_to_line(s) for s in top_sentences(ranked, count))

FORMATTERS: Dict[str, Callable[[Sequence[ScoredSentence], int], str]] = {
    CONCISE: format_concise,
    EXECUTIVE: format_executive,
    ACTION: format_action,
    DETAILED: format_detailed,
    DEFAULT: format_default,
}

def summarize(text: str, style: Optional[str] = CONCISE, length_key: Optional[str] = DEFAULT_LENGTH) -> str:
    """
    Extractive summary of `text`:
    - split into sentences, score by normalized token frequency
    - pick top-N by score (N from the length class)
    - format according to the style

    Returns "" when the text has no sentences.
    """
    sentences = sentences_of(text)
    if not sentences:
        return ""
    count = sentence_count(length_key, len(sentences))
    ranked = rank(score_sentences(sentences))
    return FORMATTERS[normalize_style(style)](ranked, count)
