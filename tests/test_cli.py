import logging

import httpx
from pytest_httpx import HTTPXMock
from rich.logging import RichHandler
from typer.testing import CliRunner

from chartmuseum_sync.cli.app import app, configure_logging
from chartmuseum_sync.cli.commands import sync_cmd
from chartmuseum_sync.cli.options import OutputOption
from chartmuseum_sync.config.settings import settings
from chartmuseum_sync.output.formatters import console

from conftest import DEST, SOURCE, listing

runner = CliRunner()


def _add_probes(httpx_mock: HTTPXMock) -> None:
    httpx_mock.add_response(method="GET", url=f"{SOURCE}/info", json={"version": "v0.16.2"})
    httpx_mock.add_response(method="GET", url=f"{DEST}/info", json={"version": "v0.16.2"})


def test_sync_without_endpoints_prints_usage() -> None:
    result = runner.invoke(app, ["sync"])

    assert result.exit_code == 1
    assert "at least one source or one destination" in result.output


def test_probe_failure_exits_before_listing(httpx_mock: HTTPXMock) -> None:
    httpx_mock.add_response(method="GET", url=f"{SOURCE}/info", json={"name": "not a museum"})

    result = runner.invoke(app, ["sync", "-s", SOURCE, "-d", DEST])

    assert result.exit_code == 1
    assert "Error checking source" in result.output
    assert len(httpx_mock.get_requests()) == 1


def test_destination_defaults_when_only_source_given(httpx_mock: HTTPXMock) -> None:
    httpx_mock.add_response(method="GET", url=f"{SOURCE}/info", json={"version": "v0.16.2"})
    httpx_mock.add_response(method="GET", url="http://localhost:8080/info", json={"version": "v0.16.2"})

    result = runner.invoke(app, ["probe", "-s", SOURCE])

    assert result.exit_code == 0
    assert "localhost:8080" in result.output


def test_diff_lists_missing_versions(httpx_mock: HTTPXMock) -> None:
    _add_probes(httpx_mock)
    httpx_mock.add_response(
        method="GET", url=f"{SOURCE}/api/charts", json={"app": listing("1.0.0", "1.1.0")},
    )
    httpx_mock.add_response(method="GET", url=f"{DEST}/api/charts", json={"app": listing("1.0.0")})

    result = runner.invoke(app, ["diff", "-s", SOURCE, "-d", DEST, "-o", "yaml"])

    assert result.exit_code == 0
    assert "1.1.0" in result.output
    assert not httpx_mock.get_requests(method="POST")


def test_sync_copies_and_summarises(httpx_mock: HTTPXMock) -> None:
    _add_probes(httpx_mock)
    httpx_mock.add_response(
        method="GET", url=f"{SOURCE}/api/charts", json={"app": listing("1.0.0", "1.1.0")},
    )
    httpx_mock.add_response(method="GET", url=f"{DEST}/api/charts", json={"app": listing("1.0.0")})
    httpx_mock.add_response(method="GET", url=f"{SOURCE}/charts/app-1.1.0.tgz", content=b"tgz")
    httpx_mock.add_response(method="POST", url=f"{DEST}/api/charts", status_code=201, json={"saved": True})

    result = runner.invoke(app, ["sync", "-s", SOURCE, "-d", DEST, "-o", "json"])

    assert result.exit_code == 0
    assert "app-1.1.0" in result.output


def test_sync_listing_failure_exits_non_zero(httpx_mock: HTTPXMock) -> None:
    _add_probes(httpx_mock)
    httpx_mock.add_response(method="GET", url=f"{SOURCE}/api/charts", json={})
    httpx_mock.add_response(method="GET", url=f"{DEST}/api/charts", status_code=500)

    result = runner.invoke(app, ["sync", "-s", SOURCE, "-d", DEST])

    assert result.exit_code == 1
    assert "Error fetching charts" in result.output


def test_invalid_source_url_reports_endpoint_check_error() -> None:
    result = runner.invoke(app, ["probe", "-s", "http://[::1", "-d", DEST])

    assert result.exit_code == 1
    assert "Error checking source" in result.output
    assert not isinstance(result.exception, httpx.InvalidURL)


def test_output_option_defaults_to_configured_format() -> None:
    assert OutputOption.default == settings.default_output


def test_logging_and_progress_share_one_console() -> None:
    configure_logging(verbose=False)

    handlers = [h for h in logging.getLogger().handlers if isinstance(h, RichHandler)]
    assert handlers
    assert all(h.console is console for h in handlers)
    assert sync_cmd.console is console
