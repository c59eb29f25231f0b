"""Core modules for AppGap."""

from .models import *
from .config import settings
from .errors import AnalysisError, ErrorKind, to_error_response
from .identifier import extract_app_id
from .reducer import estimate_tokens, flatten_review, reduce_reviews, reduce_texts, truncate_to_tokens
from .prompts import SYSTEM_PROMPT, build_prompt
from .parser import parse_analysis_response

__all__ = [
    "settings",
    "RawReviewEntry",
    "Theme",
    "PrioritizedTheme",
    "Impact",
    "AppInfo",
    "AnalysisResult",
    "FetchReport",
    "FetchStopReason",
    "AnalysisError",
    "ErrorKind",
    "to_error_response",
    "extract_app_id",
    "estimate_tokens",
    "flatten_review",
    "reduce_reviews",
    "reduce_texts",
    "truncate_to_tokens",
    "SYSTEM_PROMPT",
    "build_prompt",
    "parse_analysis_response",
]
