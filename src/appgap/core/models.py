"""Data models for AppGap."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Any


def _label(node: Any, default: str = "") -> str:
    """Read the ``label`` of an RSS node like ``{"label": "5"}``."""
    if isinstance(node, dict):
        value = node.get("label")
        if isinstance(value, str):
            return value
    return default


class Impact(Enum):
    """Impact ratings the model is asked to use."""
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


@dataclass
class RawReviewEntry:
    """One review as delivered by the customer review feed."""
    rating: str
    title: str
    body: str
    review_id: Optional[str] = None
    author: Optional[str] = None
    version: Optional[str] = None
    updated: Optional[str] = None

    @classmethod
    def from_feed_entry(cls, entry: Dict[str, Any]) -> "RawReviewEntry":
        """Build an entry from a raw feed ``entry`` object."""
        if not isinstance(entry, dict):
            entry = {}
        author = entry.get("author")
        author_name = _label(author.get("name")) if isinstance(author, dict) else ""
        return cls(
            rating=_label(entry.get("im:rating"), "0") or "0",
            title=_label(entry.get("title")),
            body=_label(entry.get("content")),
            review_id=_label(entry.get("id")) or None,
            author=author_name or None,
            version=_label(entry.get("im:version")) or None,
            updated=_label(entry.get("updated")) or None,
        )


@dataclass
class Theme:
    """A synthesized unmet-need insight."""
    title: str
    summary: str
    quote: str
    impact: str
    feature: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Theme":
        """Build a theme for display; missing fields become empty strings."""
        data = data if isinstance(data, dict) else {}
        return cls(
            title=str(data.get("title") or ""),
            summary=str(data.get("summary") or ""),
            quote=str(data.get("quote") or ""),
            impact=str(data.get("impact") or ""),
            feature=str(data.get("feature") or ""),
        )


@dataclass
class PrioritizedTheme:
    """Title and impact of a theme, in the model's priority order."""
    title: str
    impact: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PrioritizedTheme":
        data = data if isinstance(data, dict) else {}
        return cls(title=str(data.get("title") or ""), impact=str(data.get("impact") or ""))


@dataclass
class AppInfo:
    """Store metadata for an app."""
    name: str = ""
    description: str = ""
    average_user_rating: Optional[float] = None
    user_rating_count: Optional[int] = None
    artwork_url_512: Optional[str] = None

    @classmethod
    def empty(cls) -> "AppInfo":
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "averageUserRating": self.average_user_rating,
            "userRatingCount": self.user_rating_count,
            "artworkUrl512": self.artwork_url_512,
        }


@dataclass
class AnalysisResult:
    """Themes returned by the model.

    Items are kept exactly as the model produced them; both lists are
    always present.
    """
    themes: List[Dict[str, Any]] = field(default_factory=list)
    prioritized_themes: List[Dict[str, Any]] = field(default_factory=list)
    app_info: Optional[AppInfo] = None
    fetch_report: Optional["FetchReport"] = None  # not serialized

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "themes": self.themes,
            "prioritizedThemes": self.prioritized_themes,
        }
        if self.app_info is not None:
            data["appInfo"] = self.app_info.to_dict()
        return data


class FetchStopReason(Enum):
    """Why the paginated fetch stopped."""
    EXHAUSTED = "exhausted"  # a page came back empty
    PAGE_FAILED = "page_failed"  # a page request failed
    THRESHOLD = "threshold"  # enough reviews were collected
    PAGE_CEILING = "page_ceiling"  # every allowed page was fetched


@dataclass
class FetchReport:
    """Outcome of a paginated review fetch."""
    entries: List[RawReviewEntry] = field(default_factory=list)
    pages_requested: int = 0
    failed_pages: List[int] = field(default_factory=list)
    stop_reason: FetchStopReason = FetchStopReason.EXHAUSTED
