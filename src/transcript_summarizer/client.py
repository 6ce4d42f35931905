from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging
import httpx
from .config import SummarizerConfig
from .server.models import SummarizeRequest
from .summarizer import summarize

logger = logging.getLogger(__name__)

REMOTE = "remote"
LOCAL = "local"

class RemoteSummarizerError(Exception):
    """The summarizer endpoint answered, but not with a usable summary."""

@dataclass(frozen=True)
class SummaryOutcome:
    summary: str
    source: str

async def fetch_summary(
    client: httpx.AsyncClient,
    cfg: SummarizerConfig,
    text: str,
    style: Optional[str],
    length_key: Optional[str],
) -> str:
    body = SummarizeRequest(text=text, style=style, length_key=length_key).model_dump(by_alias=True)
    r = await client.post(cfg.endpoint, json=body, timeout=httpx.Timeout(cfg.timeout_s))
    if not r.is_success:
        raise RemoteSummarizerError(f"{cfg.endpoint} returned HTTP {r.status_code}")
    try:
        data = r.json()
    except ValueError as ex:
        raise RemoteSummarizerError(f"malformed JSON from {cfg.endpoint}") from ex
    summary = data.get("summary") if isinstance(data, dict) else None
    if not isinstance(summary, str):
        raise RemoteSummarizerError(f"no summary in response from {cfg.endpoint}")
    return summary

async def summarize_with_fallback(
    text: str,
    style: Optional[str] = None,
    length_key: Optional[str] = None,
    cfg: Optional[SummarizerConfig] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> SummaryOutcome:
    """
    Ask the remote summarizer first; on any failure run the same algorithm
    locally. The failure is only logged.
    """
    cfg = cfg or SummarizerConfig()
    style = style or cfg.default_style
    length_key = length_key or cfg.default_length
    try:
        if client is not None:
            summary = await fetch_summary(client, cfg, text, style, length_key)
        else:
            async with httpx.AsyncClient() as own:
                summary = await fetch_summary(own, cfg, text, style, length_key)
        return SummaryOutcome(summary=summary, source=REMOTE)
    except (httpx.HTTPError, httpx.InvalidURL, RemoteSummarizerError) as ex:
        logger.warning("Remote summarizer unavailable, using local fallback: %r", ex)
    return SummaryOutcome(summary=summarize(text, style, length_key), source=LOCAL)

def summarize_local(
    text: str,
    style: Optional[str] = None,
    length_key: Optional[str] = None,
    cfg: Optional[SummarizerConfig] = None,
) -> SummaryOutcome:
    cfg = cfg or SummarizerConfig()
    return SummaryOutcome(
        summary=summarize(text, style or cfg.default_style, length_key or cfg.default_length),
        source=LOCAL,
    )
