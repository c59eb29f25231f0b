"""HTTP boundary for AppGap."""

from functools import lru_cache
from typing import Any, Dict, Optional, Tuple

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.concurrency import run_in_threadpool

from .core.config import settings
from .core.errors import to_error_response
from .services.app_store_client import AppStoreService
from .services.analyzer import ReviewAnalyzer
from .services.llm import LLMServiceFactory, OpenAIService


@lru_cache(maxsize=1)
def get_llm_service() -> OpenAIService:
    """Process-wide completion service built from the global settings."""
    return LLMServiceFactory.create(settings)


def build_analyzer() -> ReviewAnalyzer:
    """Analyzer for one request.

    The completion service is shared. Each analyzer gets its own
    AppStoreService, so a requests.Session is never used from two
    worker threads at once.
    """
    return ReviewAnalyzer(AppStoreService(settings), get_llm_service())


def handle_analyze(payload: Any, analyzer: ReviewAnalyzer) -> Tuple[Dict[str, Any], int]:
    """Run one analysis request and return ``(body, status)``.

    ``payload`` is the decoded JSON body, expected to look like
    ``{"input": "<App Store URL or id>"}``.
    """
    raw_input = payload.get("input") if isinstance(payload, dict) else None
    try:
        result = analyzer.analyze(raw_input)
    except Exception as e:
        return to_error_response(e)
    return result.to_dict(), 200


def create_app(analyzer: Optional[ReviewAnalyzer] = None) -> FastAPI:
    """Build the FastAPI application."""
    app = FastAPI(title="AppGap", description="Unmet-need themes from App Store reviews")

    @app.post("/api/analyze")
    async def analyze(request: Request) -> JSONResponse:
        try:
            payload = await request.json()
        except ValueError:
            payload = None
        body, status = await run_in_threadpool(handle_analyze, payload, analyzer or build_analyzer())
        return JSONResponse(body, status_code=status)

    @app.get("/health")
    async def health() -> Dict[str, str]:
        return {"status": "ok"}

    return app
