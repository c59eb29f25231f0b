"""Tests for the paginated review fetcher and the lookup call."""

from unittest.mock import Mock

import requests

from appgap.core.models import AppInfo, FetchStopReason
from appgap.services.app_store_client import AppStoreService

from conftest import make_entry, make_page, make_session, page_requests


class TestFetchReviews:
    """Paging, stop conditions and failure absorption."""

    def setup_method(self):
        self.sleep = Mock()

    def _service(self, session, settings, **kwargs):
        return AppStoreService(settings, session=session, sleep=self.sleep, **kwargs)

    def test_stops_on_empty_page(self, test_settings):
        pages = {1: make_page(0, 50), 2: make_page(50, 50), 3: make_page(100, 50)}
        pages.update({n: make_page(n * 50, 50) for n in range(5, 11)})  # never reached
        session = make_session(pages)

        report = self._service(session, test_settings).fetch_reviews_report("284882215")

        assert len(report.entries) == 150
        assert [e.title for e in report.entries[:2]] == ["Title 0", "Title 1"]
        assert report.entries[-1].title == "Title 149"
        assert page_requests(session) == [1, 2, 3, 4]
        assert report.stop_reason is FetchStopReason.EXHAUSTED
        assert report.failed_pages == []

    def test_threshold_truncates_exactly(self, test_settings):
        pages = {n: make_page((n - 1) * 60, 60) for n in range(1, 11)}
        session = make_session(pages)

        report = self._service(session, test_settings).fetch_reviews_report("284882215")

        assert len(report.entries) == 500
        assert report.entries[-1].title == "Title 499"
        assert page_requests(session) == list(range(1, 10))
        assert report.stop_reason is FetchStopReason.THRESHOLD

    def test_page_ceiling(self, test_settings):
        pages = {n: make_page((n - 1) * 10, 10) for n in range(1, 15)}
        session = make_session(pages)

        report = self._service(session, test_settings).fetch_reviews_report("284882215")

        assert len(report.entries) == 100
        assert page_requests(session) == list(range(1, 11))
        assert report.stop_reason is FetchStopReason.PAGE_CEILING
        # delay between pages but not after the last one
        assert self.sleep.call_count == 9
        self.sleep.assert_called_with(0.1)

    def test_never_more_than_ten_pages(self, test_settings):
        pages = {n: make_page(n, 1) for n in range(1, 50)}
        session = make_session(pages)
        self._service(session, test_settings).fetch_reviews("284882215")
        assert len(page_requests(session)) == 10

    def test_error_status_is_absorbed(self, test_settings):
        session = make_session({1: make_page(0, 50), 2: 500, 3: make_page(50, 50)})

        report = self._service(session, test_settings).fetch_reviews_report("284882215")

        assert len(report.entries) == 50
        assert report.failed_pages == [2]
        assert report.stop_reason is FetchStopReason.PAGE_FAILED

    def test_network_error_is_absorbed(self, test_settings):
        session = make_session({1: requests.ConnectionError("down")})
        service = self._service(session, test_settings)

        assert service.fetch_reviews("284882215") == []
        assert service.fetch_reviews_report("284882215").failed_pages == [1]

    def test_invalid_json_is_absorbed(self, test_settings):
        session = make_session({})
        bad = Mock(ok=True, status_code=200)
        bad.json = Mock(side_effect=ValueError("Expecting value"))
        session.get = Mock(return_value=bad)

        assert self._service(session, test_settings).fetch_reviews("284882215") == []

    def test_missing_feed_object_is_a_failed_page(self, test_settings):
        for body in ({"unexpected": True}, ["not", "a", "feed"], {"feed": "oops"}):
            session = make_session({1: make_page(0, 5), 2: body})

            report = self._service(session, test_settings).fetch_reviews_report("284882215")

            assert len(report.entries) == 5
            assert report.failed_pages == [2]
            assert report.stop_reason is FetchStopReason.PAGE_FAILED

    def test_feed_without_entries_is_exhausted(self, test_settings):
        session = make_session({1: make_page(0, 5), 2: {"feed": {"author": {}}}})

        report = self._service(session, test_settings).fetch_reviews_report("284882215")

        assert report.failed_pages == []
        assert report.stop_reason is FetchStopReason.EXHAUSTED

    def test_single_entry_page(self, test_settings):
        session = make_session({1: {"feed": {"entry": make_entry(7)}}})

        entries = self._service(session, test_settings).fetch_reviews("284882215")

        assert len(entries) == 1
        assert entries[0].title == "Title 7"

    def test_request_url_and_headers(self, test_settings):
        session = make_session({1: make_page(0, 1)})
        self._service(session, test_settings).fetch_reviews("284882215")

        url = session.get.call_args_list[0].args[0]
        assert url == "https://itunes.apple.com/us/rss/customerreviews/page=1/id=284882215/sortBy=mostRecent/json"
        assert session.headers["User-Agent"] == "AppStoreReviewAnalyzer/1.0"


class TestFetchAppInfo:

    def test_maps_first_result(self, test_settings):
        lookup = {"results": [{
            "trackName": "Yelp",
            "description": "Find local businesses",
            "averageUserRating": 4.7,
            "userRatingCount": 123456,
            "artworkUrl512": "https://example.com/icon.png",
        }]}
        session = make_session({}, lookup=lookup)

        info = AppStoreService(test_settings, session=session).fetch_app_info("284910350")

        assert info == AppInfo("Yelp", "Find local businesses", 4.7, 123456, "https://example.com/icon.png")
        call = session.get.call_args
        assert call.args[0] == "https://itunes.apple.com/lookup"
        assert call.kwargs["params"] == {"id": "284910350", "country": "us", "entity": "software"}

    def test_wrong_types_become_none(self, test_settings):
        lookup = {"results": [{"trackName": "X", "averageUserRating": "4.5", "userRatingCount": None, "artworkUrl512": 5}]}
        info = AppStoreService(test_settings, session=make_session({}, lookup=lookup)).fetch_app_info("1234567")
        assert info == AppInfo(name="X")

    def test_failures_return_empty(self, test_settings):
        for lookup in (404, requests.Timeout("slow"), {"results": []}, {"unexpected": True}):
            info = AppStoreService(test_settings, session=make_session({}, lookup=lookup)).fetch_app_info("1234567")
            assert info == AppInfo.empty()
            assert info.to_dict()["averageUserRating"] is None
