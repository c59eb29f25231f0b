"""Parse the model's analysis response."""

import json
import logging
import re
from typing import Any, List

from .constants import ErrorConstants
from .errors import AnalysisError
from .models import AnalysisResult

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"^```(?:json)?\n?|\n?```$", re.IGNORECASE)


def _strip_code_fences(s: str) -> str:
    return _FENCE_RE.sub("", s.strip()).strip()


def _as_list(value: Any) -> List[Any]:
    return value if isinstance(value, list) else []


def parse_analysis_response(raw: str) -> AnalysisResult:
    """Parse raw completion text into an :class:`AnalysisResult`.

    Markdown fences around the JSON are removed. Missing or non-list
    ``themes`` / ``prioritizedThemes`` become empty lists; the items
    themselves are not checked.

    Raises:
        AnalysisError: (validation) if the text is not JSON.
    """
    raw = raw or ""
    cleaned = _strip_code_fences(raw)
    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError as e:
        logger.error(f"Error parsing JSON response: {e}")
        logger.error(f"Raw response: {raw[:ErrorConstants.RAW_RESPONSE_LOG_CHARS]}")
        raise AnalysisError.validation(ErrorConstants.PARSE_FAILED) from e

    if not isinstance(data, dict):
        logger.warning(f"Analysis response is a JSON {type(data).__name__}, not an object")
        data = {}

    return AnalysisResult(
        themes=_as_list(data.get("themes")),
        prioritized_themes=_as_list(data.get("prioritizedThemes")),
    )
