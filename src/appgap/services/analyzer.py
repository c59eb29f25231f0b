"""End-to-end unmet-needs analysis for one app."""

import logging
from typing import List, Sequence

from ..core.constants import ErrorConstants
from ..core.errors import AnalysisError
from ..core.identifier import extract_app_id
from ..core.models import AnalysisResult
from ..core.parser import parse_analysis_response
from ..core.prompts import build_prompt
from ..core.reducer import flatten_review, reduce_texts, estimate_tokens
from .app_store_client import AppStoreService
from .llm import OpenAIService

logger = logging.getLogger(__name__)


class ReviewAnalyzer:
    """Runs fetch -> reduce -> prompt -> completion -> parse for one request.

    Both collaborators are passed in so the process can share one client
    across requests and tests can substitute their own.
    """

    def __init__(self, store: AppStoreService, llm: OpenAIService):
        self.store = store
        self.llm = llm

    def analyze(self, raw_input) -> AnalysisResult:
        """Analyze the reviews of the app named by an id or store URL."""
        app_id = extract_app_id(raw_input)
        logger.info(f"Analyzing app {app_id}")

        app_info = self.store.fetch_app_info(app_id)
        report = self.store.fetch_reviews_report(app_id)
        entries = report.entries
        if not entries:
            logger.warning(f"No reviews fetched for app {app_id}, analyzing an empty corpus")

        result = self.analyze_reviews([flatten_review(entry) for entry in entries])
        result.app_info = app_info
        result.fetch_report = report
        return result

    def analyze_reviews(self, reviews: Sequence[str]) -> AnalysisResult:
        """Ask the model for themes across already-flattened review texts."""
        packed: List[str] = reduce_texts(reviews)
        prompt = build_prompt(packed)
        logger.info(f"Prompt built from {len(packed)} reviews (~{estimate_tokens(prompt)} tokens)")

        try:
            raw = self.llm.complete(prompt)
        except AnalysisError:
            raise
        except Exception as e:
            logger.error(f"Error analyzing reviews with GPT: {e}")
            raise AnalysisError.upstream_unavailable(ErrorConstants.ANALYSIS_FAILED) from e

        result = parse_analysis_response(raw)
        logger.info(
            f"Analysis returned {len(result.themes)} themes, "
            f"{len(result.prioritized_themes)} prioritized"
        )
        return result
