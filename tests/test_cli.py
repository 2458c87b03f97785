"""Tests for the CLI module."""

from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

import httpx
import pytest

from page_mirror.cli import main, run_batch
from page_mirror.exceptions import NetworkError, ParseError
from page_mirror.pipeline import MirrorOrchestrator
from page_mirror.reporters import MetadataReporter
from schemas.page_metadata import PageMetadata

PAGE_URL = "https://example.com/page"


def make_metadata(url):
    return PageMetadata(
        site=url,
        num_links=1,
        num_images=2,
        last_fetch=datetime(2026, 1, 15, 14, 30, 5, tzinfo=timezone.utc),
    )


@pytest.fixture
def mock_orchestrator():
    return MagicMock(spec=MirrorOrchestrator)


@pytest.fixture
def mock_reporter():
    reporter = MagicMock(spec=MetadataReporter)
    reporter.report.side_effect = make_metadata
    return reporter


class TestRunBatch:
    """Tests for run_batch()."""

    def test_processes_urls_in_order(self, mock_orchestrator, mock_reporter):
        urls = ["https://a.example.com/", "https://b.example.com/"]

        report = run_batch(urls, mock_orchestrator, mock_reporter)

        assert [c.args[0] for c in mock_orchestrator.mirror.call_args_list] == urls
        assert [c.args[0] for c in mock_reporter.report.call_args_list] == urls
        assert report.mirrored == urls
        assert report.reported == urls
        assert report.ok

    def test_prints_metadata_block(self, mock_orchestrator, mock_reporter, capsys):
        run_batch([PAGE_URL], mock_orchestrator, mock_reporter)

        assert capsys.readouterr().out.splitlines() == [
            f"site: {PAGE_URL}",
            "num_links: 1",
            "num_images: 2",
            "last_fetch: Thu, 15 Jan 2026 14:30:05 UTC",
        ]

    def test_mirror_failure_still_reports_metadata(
        self, mock_orchestrator, mock_reporter, caplog
    ):
        """A failed mirror is logged and the same URL is still reported."""
        mock_orchestrator.mirror.side_effect = NetworkError(
            f"Failed to fetch {PAGE_URL}: refused", url=PAGE_URL, stage="fetch"
        )

        report = run_batch([PAGE_URL], mock_orchestrator, mock_reporter)

        assert report.mirrored == []
        assert report.reported == [PAGE_URL]
        assert not report.ok
        assert f"Failed to fetch {PAGE_URL}: refused" in caplog.text

    def test_failure_does_not_stop_batch(self, mock_orchestrator, mock_reporter):
        """One bad page never stops the remaining URLs."""
        mock_orchestrator.mirror.side_effect = [ParseError("bad html"), None]
        mock_reporter.report.side_effect = [NetworkError("down"), make_metadata("b")]

        report = run_batch(["a", "b"], mock_orchestrator, mock_reporter)

        assert report.mirrored == ["b"]
        assert report.reported == ["b"]
        assert report.errors == ["bad html", "down"]


class TestMain:
    """Tests for main()."""

    def test_requires_urls(self):
        """At least one URL is required."""
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 2

    @patch("page_mirror.cli.MetadataReporter")
    @patch("page_mirror.cli.MirrorOrchestrator")
    def test_success_returns_zero(self, mock_orch_class, mock_reporter_class):
        mock_reporter_class.return_value.report.side_effect = make_metadata

        result = main([PAGE_URL])

        assert result == 0
        mock_orch_class.return_value.mirror.assert_called_once_with(PAGE_URL)

    @patch("page_mirror.cli.MetadataReporter")
    @patch("page_mirror.cli.MirrorOrchestrator")
    def test_any_failure_returns_one(self, mock_orch_class, mock_reporter_class):
        mock_orch_class.return_value.mirror.side_effect = [NetworkError("down"), None]
        mock_reporter_class.return_value.report.side_effect = make_metadata

        result = main(["https://a.example.com/", "https://b.example.com/"])

        assert result == 1
        assert mock_orch_class.return_value.mirror.call_count == 2

    @patch("page_mirror.cli.MetadataReporter")
    @patch("page_mirror.cli.MirrorOrchestrator")
    def test_options_are_passed_through(self, mock_orch_class, mock_reporter_class, tmp_path):
        mock_reporter_class.return_value.report.side_effect = make_metadata

        main([
            "--assets-dir", str(tmp_path / "a"),
            "--output-dir", str(tmp_path / "o"),
            "--per-page-assets",
            "--origin-join",
            PAGE_URL,
        ])

        kwargs = mock_orch_class.call_args.kwargs
        assert kwargs["assets_dir"] == tmp_path / "a"
        assert kwargs["output_dir"] == tmp_path / "o"
        assert kwargs["per_page_assets"] is True
        assert kwargs["origin_join"] is True

    @patch("page_mirror.cli.WebClient")
    def test_end_to_end(self, mock_client_class, sample_site, web_client, tmp_path, capsys):
        """Mirror and report a page through the real pipeline."""
        sample_site["https://cdn.x/a.js"] = httpx.ConnectError("Connection refused")
        mock_client = MagicMock()
        mock_client.__enter__ = MagicMock(return_value=web_client)
        mock_client.__exit__ = MagicMock(return_value=False)
        mock_client_class.return_value = mock_client

        result = main([
            "--assets-dir", str(tmp_path / "assets"),
            "--output-dir", str(tmp_path),
            PAGE_URL,
        ])

        assert result == 0
        content = (tmp_path / "example.com" / "page.html").read_bytes()
        assert b'src="https://cdn.x/a.js"' in content
        assert (tmp_path / "assets" / "logo.png").exists()
        out = capsys.readouterr().out
        assert "num_links: 2" in out
        assert "num_images: 3" in out
