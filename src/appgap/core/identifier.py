"""App Store identifier extraction."""

import re

from .constants import ErrorConstants
from .errors import AnalysisError

APP_ID_RE = re.compile(r"^\d{7,12}$", re.ASCII)
STORE_URL_ID_RE = re.compile(r"/id(\d{7,12})", re.ASCII)


def extract_app_id(value) -> str:
    """Return the numeric app id from a bare id or an App Store URL.

    >>> extract_app_id("https://apps.apple.com/us/app/instagram/id389801252")
    '389801252'
    """
    if not isinstance(value, str) or not value.strip():
        raise AnalysisError.validation(ErrorConstants.MISSING_INPUT)

    trimmed = value.strip()
    if APP_ID_RE.match(trimmed):
        return trimmed

    match = STORE_URL_ID_RE.search(value)
    if match:
        return match.group(1)

    raise AnalysisError.validation(ErrorConstants.INVALID_INPUT)
