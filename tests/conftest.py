import pytest
from transcript_summarizer.config import SummarizerConfig

TRANSCRIPT = (
    "The team reviewed the quarterly roadmap. "
    "We should assign an owner for the billing migration. "
    "Lunch was catered by the usual place. "
    "The billing migration is blocked on the new database schema. "
    "Next week we will plan the schema rollout with the platform team. "
    "Someone mentioned the office plants need water."
)

@pytest.fixture
def transcript() -> str:
    return TRANSCRIPT

@pytest.fixture
def cfg() -> SummarizerConfig:
    return SummarizerConfig(endpoint="http://testserver/api/summarize", timeout_s=1.0)
