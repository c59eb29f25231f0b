"""Tests for the command-line interface."""

import json
from unittest.mock import patch

import pytest

from appgap import cli
from appgap.core.errors import AnalysisError
from appgap.core.models import AnalysisResult, FetchReport, FetchStopReason, RawReviewEntry


class TestCli:

    def test_no_command_prints_help(self, capsys):
        cli.main([])
        assert "usage" in capsys.readouterr().out.lower()

    def test_analyze_prints_themes(self, capsys):
        result = AnalysisResult(
            themes=[{"title": "Offline mode", "summary": "s", "quote": "q", "impact": "High", "feature": "f"}],
            prioritized_themes=[{"title": "Offline mode", "impact": "High"}],
        )
        with patch.object(cli.ReviewAnalyzer, "analyze", return_value=result), \
             patch.object(cli.LLMServiceFactory, "create"):
            cli.main(["analyze", "284882215"])
        out = capsys.readouterr().out
        assert "Offline mode (High)" in out
        assert "[High] Offline mode" in out

    def test_analyze_invalid_input_exits(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["analyze", "nope"])
        assert exc_info.value.code == 1
        assert "Error (400)" in capsys.readouterr().err

    def test_reviews_command(self, capsys):
        report = FetchReport(
            entries=[RawReviewEntry(rating="3", title="Meh", body="It is fine")],
            pages_requested=2,
            stop_reason=FetchStopReason.EXHAUSTED,
        )
        with patch.object(cli.AppStoreService, "fetch_reviews_report", return_value=report):
            cli.main(["reviews", "https://apps.apple.com/us/app/x/id284882215"])
        out = capsys.readouterr().out
        assert "Fetched 1 reviews for app 284882215" in out
        assert "[Rating: 3/5] Meh" in out

    def test_upstream_failure_exits(self, capsys):
        with patch.object(cli.ReviewAnalyzer, "analyze",
                          side_effect=AnalysisError.upstream_unavailable("boom")), \
             patch.object(cli.LLMServiceFactory, "create"):
            with pytest.raises(SystemExit):
                cli.main(["analyze", "284882215"])
        assert "Error (503)" in capsys.readouterr().err

    def test_analyze_export_includes_fetch_report(self, tmp_path, capsys):
        report = FetchReport(pages_requested=3, failed_pages=[3], stop_reason=FetchStopReason.PAGE_FAILED)
        result = AnalysisResult(themes=[], fetch_report=report)
        out_file = tmp_path / "result.json"

        with patch.object(cli.ReviewAnalyzer, "analyze", return_value=result), \
             patch.object(cli.LLMServiceFactory, "create"):
            cli.main(["analyze", "284882215", "--out", str(out_file)])

        data = json.loads(out_file.read_text(encoding="utf-8"))
        assert data["metadata"]["app_id"] == "284882215"
        assert data["metadata"]["fetch"] == {
            "reviews": 0,
            "pages_requested": 3,
            "failed_pages": [3],
            "stop_reason": "page_failed",
        }
        assert data["metadata"]["export_timestamp"]
