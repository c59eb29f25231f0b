"""Flatten reviews into prompt text and keep them inside the token budget."""

import logging
import math
from typing import Iterable, List

from .constants import BudgetConstants
from .models import RawReviewEntry

logger = logging.getLogger(__name__)


def flatten_review(entry: RawReviewEntry) -> str:
    """Render a review as ``[Rating: N/5] title`` followed by the body."""
    return f"[Rating: {entry.rating}/5] {entry.title}\n{entry.body}"


def estimate_tokens(text: str) -> int:
    """Estimate tokens at roughly four characters per token."""
    return math.ceil(len(text) / BudgetConstants.CHARS_PER_TOKEN)


def truncate_to_tokens(text: str, max_tokens: int) -> str:
    """Cut ``text`` to ``max_tokens`` estimated tokens, marker included."""
    if estimate_tokens(text) <= max_tokens:
        return text
    max_chars = max_tokens * BudgetConstants.CHARS_PER_TOKEN - len(BudgetConstants.TRUNCATION_MARKER)
    return text[:max(max_chars, 0)] + BudgetConstants.TRUNCATION_MARKER


def reduce_texts(
    texts: Iterable[str],
    max_reviews: int = BudgetConstants.MAX_REVIEWS,
    max_tokens_per_review: int = BudgetConstants.MAX_TOKENS_PER_REVIEW,
    max_total_tokens: int = BudgetConstants.MAX_TOTAL_TOKENS,
) -> List[str]:
    """Pack review blocks under the per-review and total token caps.

    Order is preserved. When the total is over budget, blocks are dropped
    from the end until it fits.
    """
    kept = [text for text in texts if isinstance(text, str) and text]
    processed = [truncate_to_tokens(text, max_tokens_per_review) for text in kept[:max_reviews]]

    total = sum(estimate_tokens(text) for text in processed)
    if total > max_total_tokens:
        logger.warning(f"Total tokens ({total}) exceeds limit ({max_total_tokens}), truncating reviews")
        while total > max_total_tokens and processed:
            total -= estimate_tokens(processed.pop())

    logger.debug(f"Packed {len(processed)} of {len(kept)} reviews (~{total} tokens)")
    return processed


def reduce_reviews(
    entries: Iterable[RawReviewEntry],
    max_reviews: int = BudgetConstants.MAX_REVIEWS,
    max_tokens_per_review: int = BudgetConstants.MAX_TOKENS_PER_REVIEW,
    max_total_tokens: int = BudgetConstants.MAX_TOTAL_TOKENS,
) -> List[str]:
    """Flatten feed entries and pack them with :func:`reduce_texts`."""
    return reduce_texts(
        (flatten_review(entry) for entry in entries),
        max_reviews=max_reviews,
        max_tokens_per_review=max_tokens_per_review,
        max_total_tokens=max_total_tokens,
    )
