"""App Store data collection service for AppGap."""

import logging
import time
from typing import Any, Callable, Dict, List, Optional

import requests

from ..core.config import Settings, settings as default_settings
from ..core.constants import FeedConstants
from ..core.models import AppInfo, FetchReport, FetchStopReason, RawReviewEntry

logger = logging.getLogger(__name__)

REVIEWS_URL = "{root}/{country}/rss/customerreviews/page={page}/id={app_id}/sortBy=mostRecent/json"


class AppStoreService:
    """Reads the public customer review RSS feed and the iTunes lookup API."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
        max_pages: int = FeedConstants.RSS_PAGES,
        max_reviews: int = FeedConstants.MAX_REVIEWS_TOTAL,
        page_delay: float = FeedConstants.RSS_DELAY_SECONDS,
    ):
        self.settings = settings or default_settings
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.settings.apple_rss_user_agent})
        self.sleep = sleep
        self.max_pages = max_pages
        self.max_reviews = max_reviews
        self.page_delay = page_delay

    def _reviews_url(self, app_id: str, page: int) -> str:
        return REVIEWS_URL.format(
            root=self.settings.review_feed_root.rstrip("/"),
            country=self.settings.app_store_country,
            page=page,
            app_id=app_id,
        )

    def fetch_reviews_page(self, app_id: str, page: int) -> Optional[List[Dict[str, Any]]]:
        """Fetch one feed page.

        Returns the raw ``entry`` objects, or ``None`` if the request failed.
        """
        url = self._reviews_url(app_id, page)
        try:
            response = self.session.get(url, timeout=self.settings.request_timeout)
            if not response.ok:
                logger.error(f"Failed to fetch page {page}: {response.status_code}")
                return None
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Error fetching page {page}: {e}")
            return None

        feed = data.get("feed") if isinstance(data, dict) else None
        if not isinstance(feed, dict):
            logger.error(f"Malformed feed on page {page}: no feed object")
            return None

        entries = feed.get("entry")
        if isinstance(entries, dict):
            # A feed with a single review is not wrapped in a list
            return [entries]
        if not isinstance(entries, list):
            return []
        return [entry for entry in entries if isinstance(entry, dict)]

    def fetch_reviews_report(self, app_id: str) -> FetchReport:
        """Fetch pages in order until the feed runs dry or enough reviews are in."""
        report = FetchReport(stop_reason=FetchStopReason.PAGE_CEILING)

        for page in range(1, self.max_pages + 1):
            raw_entries = self.fetch_reviews_page(app_id, page)
            report.pages_requested += 1

            failed = raw_entries is None
            if failed:
                report.failed_pages.append(page)

            if not raw_entries:
                # A failed page ends the fetch the same way an empty page does
                report.stop_reason = FetchStopReason.PAGE_FAILED if failed else FetchStopReason.EXHAUSTED
                break

            report.entries.extend(RawReviewEntry.from_feed_entry(entry) for entry in raw_entries)

            if len(report.entries) >= self.max_reviews:
                del report.entries[self.max_reviews:]
                report.stop_reason = FetchStopReason.THRESHOLD
                break

            if page < self.max_pages:
                self.sleep(self.page_delay)

        logger.info(
            f"Fetched {len(report.entries)} reviews for app {app_id} "
            f"from {report.pages_requested} pages ({report.stop_reason.value})"
        )
        if report.failed_pages:
            logger.warning(f"Review pages failed for app {app_id}: {report.failed_pages}")
        return report

    def fetch_reviews(self, app_id: str) -> List[RawReviewEntry]:
        """Fetch up to ``max_reviews`` reviews, most recent first. Never raises."""
        return self.fetch_reviews_report(app_id).entries

    def fetch_app_info(self, app_id: str) -> AppInfo:
        """Look up store metadata for an app; empty values on any failure."""
        params = {"id": app_id, "country": "us", "entity": "software"}
        try:
            response = self.session.get(
                self.settings.lookup_root,
                params=params,
                timeout=self.settings.request_timeout,
            )
            if not response.ok:
                logger.error(f"Failed to fetch app info: {response.status_code}")
                return AppInfo.empty()
            data = response.json()
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Error fetching app info: {e}")
            return AppInfo.empty()

        results = data.get("results") if isinstance(data, dict) else None
        result = results[0] if isinstance(results, list) and results else None
        if not isinstance(result, dict):
            logger.info(f"No lookup result for app {app_id}")
            return AppInfo.empty()

        rating = result.get("averageUserRating")
        count = result.get("userRatingCount")
        artwork = result.get("artworkUrl512")
        return AppInfo(
            name=result.get("trackName") or "",
            description=result.get("description") or "",
            average_user_rating=rating if isinstance(rating, (int, float)) and not isinstance(rating, bool) else None,
            user_rating_count=count if isinstance(count, int) and not isinstance(count, bool) else None,
            artwork_url_512=artwork if isinstance(artwork, str) else None,
        )
