from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from .models import ErrorResponse, SummaryResponse
from ..config import SummarizerConfig, load_or_default
from ..summarizer import summarize
from pathlib import Path
import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = "summarizer.json"

def _error(status: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status, content=ErrorResponse(error=message).model_dump())

def create_app(cfg: SummarizerConfig) -> FastAPI:
    app = FastAPI(title="Summarizer Service", version="0.1")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def _http_error(request: Request, exc: StarletteHTTPException):
        message = "Not found" if exc.status_code == 404 else str(exc.detail)
        return _error(exc.status_code, message)

    @app.get("/health")
    def health():
        return {"ok": True}

    @app.post(
        "/api/summarize",
        response_model=SummaryResponse,
        responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    )
    async def summarize_endpoint(request: Request):
        try:
            raw = await request.body()
            data = json.loads(raw or b"{}")
            if not isinstance(data, dict):
                data = {}
            text = data.get("text")
            if not text or not isinstance(text, str):
                return _error(400, "Missing text field")
            summary = summarize(text, data.get("style"), data.get("lengthKey"))
            logger.debug("summarized %d chars -> %d chars", len(text), len(summary))
            return SummaryResponse(summary=summary)
        except Exception as ex:
            logger.exception("summarize request failed")
            return _error(500, str(ex))

    return app

def get_app() -> FastAPI:
    """App factory for `uvicorn --factory`; reads SUMMARIZER_CONFIG at call time."""
    return create_app(load_or_default(Path(os.environ.get("SUMMARIZER_CONFIG", DEFAULT_CONFIG_PATH))))
