# tests/test_summarizer.py
import math
import pytest
from transcript_summarizer.preprocess import sentences_of, split_sentences
from transcript_summarizer.summarizer import (
    next_step, normalize_length, normalize_style, rank, score_sentences,
    sentence_count, suggested_next_steps, summarize,
)

MEETING = [
    "Apples grow on trees.",
    "The project budget was approved by the board.",
    "Budget reviews happen every quarter for the project.",
    "Cats sleep a lot.",
    "The board discussed the project budget again.",
    "Rain fell.",
    "Project budget numbers look strong this quarter.",
    "Music played softly.",
]
MEETING_TEXT = " ".join(MEETING)

WORDS = ["alpha", "bravo", "charlie", "delta", "echo", "foxtrot", "golf", "hotel", "india", "juliet"]
TEN = " ".join(f"Topic {w} came up in the meeting." for w in WORDS)

def test_score_is_frequency_over_sqrt_length():
    scored = score_sentences(sentences_of("The cat sat. The cat slept. Dogs bark loudly outside."))
    assert scored[0].score == pytest.approx(3 / math.sqrt(3))
    assert scored[1].score == pytest.approx(3 / math.sqrt(3))
    assert scored[2].score == pytest.approx(4 / math.sqrt(4))

def test_single_sentence_example():
    out = summarize("The cat sat. The cat slept. Dogs bark loudly outside.", "concise", "short")
    assert out == "Dogs bark loudly outside."

def test_ties_prefer_earlier_sentence():
    ranked = rank(score_sentences(sentences_of("Red fox. Blue owl.")))
    assert [x.index for x in ranked] == [0, 1]
    assert summarize("Red fox. Blue owl.", "concise", "short") == "Red fox."

def test_empty_input_returns_empty_string():
    for style in ("concise", "executive", "action", "detailed", "bogus", None):
        for length in ("short", "medium", "long", "bogus", None):
            assert summarize("", style, length) == ""
    assert summarize("   \n  ", "action", "long") == ""

def test_deterministic():
    for style in ("concise", "executive", "action", "detailed", "other"):
        assert summarize(MEETING_TEXT, style, "long") == summarize(MEETING_TEXT, style, "long")

@pytest.mark.parametrize("style", ["concise", "detailed", "default", "whatever"])
@pytest.mark.parametrize("length", ["short", "medium", "long"])
def test_document_order_preserved(style, length):
    out = summarize(MEETING_TEXT, style, length)
    idx = [MEETING.index(s) for s in split_sentences(out)]
    assert idx == sorted(idx)

def test_top_scored_sentences_chosen():
    out = summarize(MEETING_TEXT, "concise", "medium")
    assert "Apples grow on trees." not in out
    assert "Project budget numbers look strong this quarter." in out

@pytest.mark.parametrize("length,expected", [("short", 1), ("medium", 3), ("long", 6), ("nope", 3)])
def test_length_policy(length, expected):
    assert len(split_sentences(summarize(TEN, "concise", length))) == expected
    assert len(summarize(TEN, "executive", length).split("\n")) == expected

@pytest.mark.parametrize("length,expected", [("short", 3), ("medium", 3), ("long", 5)])
def test_detailed_between_three_and_five(length, expected):
    assert len(split_sentences(summarize(TEN, "detailed", length))) == expected

def test_count_never_exceeds_available_sentences():
    text = "First point made. Second point made."
    assert len(split_sentences(summarize(text, "concise", "long"))) == 2
    assert len(split_sentences(summarize(text, "detailed", "short"))) == 2
    assert sentence_count("long", 2) == 2
    assert sentence_count("short", 10) == 1

def test_style_and_length_normalization():
    assert normalize_style("Executive ") == "executive"
    assert normalize_style("fancy") == "default"
    assert normalize_style(None) == "default"
    assert normalize_style(42) == "default"
    assert normalize_length("LONG") == "long"
    assert normalize_length(None) == "medium"

def test_unknown_style_falls_back_to_plain_join():
    assert summarize(MEETING_TEXT, "fancy", "medium") == summarize(MEETING_TEXT, "concise", "medium")

def test_output_is_cleaned_and_capitalized():
    out = summarize('"the  launch slipped a week .', "concise", "short")
    assert out == "The launch slipped a week."

def test_executive_truncates_long_bullets():
    sentence = "A" + "b" * 150 + "."
    out = summarize(sentence, "executive", "medium")
    assert out == "• " + ("A" + "b" * 116) + "…"
    assert len(out) == 2 + 117 + 1

def test_executive_bullets():
    out = summarize(MEETING_TEXT, "executive", "medium")
    lines = out.split("\n")
    assert len(lines) == 3
    assert all(line.startswith("• ") for line in lines)

def test_action_without_keywords_falls_back_to_top_n():
    text = (
        "The weather was sunny today. Birds sang in the park. "
        "The river flowed gently past the old mill. Children laughed near the fountain."
    )
    lines = summarize(text, "action", "medium").split("\n")
    cut = lines.index("Suggested next steps:")
    assert lines[cut - 1] == ""
    bullets, steps = lines[: cut - 1], lines[cut + 1:]
    assert len(bullets) == 3
    assert all(b.startswith("- ") for b in bullets)
    assert 1 <= len(steps) <= 3
    assert len(set(steps)) == len(steps)
    assert all(s.startswith("- Consider: ") for s in steps)

def test_action_prefers_keyword_sentences():
    text = "The sky is blue today. We should fix the build. The sky is very blue."
    lines = summarize(text, "action", "short").split("\n")
    assert lines[0] == "- We should fix the build."
    assert lines[1] == ""

def test_action_steps_are_deduplicated():
    steps = suggested_next_steps(rank(score_sentences(sentences_of("Ship it. Ship it. Ship it."))))
    assert steps == ["- Consider: Ship it."]

@pytest.mark.parametrize("sentence,expected", [
    ("we should review the budget.", "- Review and confirm: We should review the budget."),
    ("Let's set up a call.", "- Schedule a follow-up to: Let's set up a call."),
    ("plan the offsite.", "- Schedule a follow-up to: Plan the offsite."),
    ("delegate the report", "- Assign ownership for: Delegate the report."),
    ("lunch was good.", "- Consider: Lunch was good."),
    ("the reviewer left.", "- Consider: The reviewer left."),
])
def test_next_step_rules(sentence, expected):
    assert next_step(sentence) == expected
