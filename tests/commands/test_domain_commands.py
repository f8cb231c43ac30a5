"""Tests for the support, check, run, show and thresholds commands."""

from __future__ import annotations

import json
from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from expiryctl.cli import cli
from tests.conftest import whois_response


def _expiring_in(days: int) -> str:
    return whois_response((datetime.now(UTC) + timedelta(days=days, hours=6)).isoformat())


@pytest.mark.usefixtures("_isolated_root")
class TestSupportCommand:
    def test_url_target(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "support", "https://www.example.co.uk/x"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["data"] == {"domain": "example.co.uk", "tld": "uk"}

    def test_hostname_type(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["support", "mail.example.org", "--type", "smtp"])
        assert result.exit_code == 0
        assert "example.org" in result.output

    def test_ip_rejected(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "support", "192.0.2.7", "--type", "ping"])
        assert result.exit_code == 1
        assert json.loads(result.output)["error"]["code"] == "TARGET_IS_IP"

    def test_type_without_domain(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["support", "example.com", "--type", "push"])
        assert result.exit_code == 1
        assert "ERROR" in result.output


@pytest.mark.usefixtures("_isolated_root")
class TestCheckCommand:
    def test_up(self, cli_runner: CliRunner, whois: Any) -> None:
        whois.answers["example.com"] = _expiring_in(60)
        result = cli_runner.invoke(
            cli, ["--json", "check", "https://example.com", "--name", "site"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["monitor"] == "site"
        assert data["status"] == "up"
        assert data["days_remaining"] == 60
        assert whois.lookups == ["example.com"]

    def test_second_check_is_throttled(
        self, cli_runner: CliRunner, whois: Any
    ) -> None:
        whois.answers["example.com"] = _expiring_in(60)
        cli_runner.invoke(cli, ["check", "example.com", "--type", "dns"])
        result = cli_runner.invoke(cli, ["check", "example.com", "--type", "dns"])
        assert result.exit_code == 0
        assert whois.lookups == ["example.com"]

    def test_expired_exits_nonzero(
        self, cli_runner: CliRunner, whois: Any
    ) -> None:
        whois.answers["example.com"] = whois_response("2001-01-01T00:00:00Z")
        result = cli_runner.invoke(cli, ["--json", "check", "example.com", "--no-notify"])
        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["error"]["code"] == "DOMAIN_EXPIRED"
        assert payload["data"]["status"] == "down"

    def test_unavailable(self, cli_runner: CliRunner, whois: Any) -> None:
        result = cli_runner.invoke(cli, ["check", "example.com"])
        assert result.exit_code == 1
        assert "No registry expiry date" in result.output

    def test_log_provider_notifies(
        self, cli_runner: CliRunner, whois: Any, tmp_path: Path
    ) -> None:
        (tmp_path / "expiryctl.toml").write_text(
            '[[notifications.providers]]\nname = "log"\nconfig = { prefix = "EXPIRY:" }\n'
        )
        whois.answers["example.com"] = _expiring_in(5)
        result = cli_runner.invoke(cli, ["check", "example.com"])
        assert result.exit_code == 0
        assert "notification_sent: 7" in result.output


@pytest.mark.usefixtures("_isolated_root")
class TestRunCommand:
    def test_no_monitors(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["run"])
        assert result.exit_code == 2
        assert "No monitors configured" in result.output

    def test_runs_configured_monitors(
        self, cli_runner: CliRunner, whois: Any, tmp_path: Path
    ) -> None:
        (tmp_path / "expiryctl.toml").write_text(
            "[[monitors]]\n"
            'name = "web"\n'
            'type = "http"\n'
            'url = "https://www.example.com"\n'
            "[[monitors]]\n"
            'name = "mail"\n'
            'type = "smtp"\n'
            'hostname = "mx.example.net"\n'
        )
        whois.answers["example.com"] = _expiring_in(100)
        whois.answers["example.net"] = _expiring_in(200)
        result = cli_runner.invoke(cli, ["--json", "run", "--no-notify"])
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["count"] == 2
        assert {row["domain"] for row in data["results"]} == {"example.com", "example.net"}

    def test_quiet_lists_domains(
        self, cli_runner: CliRunner, whois: Any, tmp_path: Path
    ) -> None:
        (tmp_path / "expiryctl.toml").write_text(
            '[[monitors]]\ntype = "dns"\nhostname = "example.com"\n'
        )
        whois.answers["example.com"] = _expiring_in(100)
        result = cli_runner.invoke(cli, ["-q", "run", "--no-notify"])
        assert result.exit_code == 0
        assert result.output.strip() == "example.com"


@pytest.mark.usefixtures("_isolated_root")
class TestShowCommand:
    def test_show_after_check(self, cli_runner: CliRunner, whois: Any) -> None:
        whois.answers["example.com"] = _expiring_in(30)
        cli_runner.invoke(cli, ["check", "example.com", "--no-notify"])
        result = cli_runner.invoke(cli, ["--json", "show", "Example.com"])
        assert result.exit_code == 0
        data = json.loads(result.output)["data"]
        assert data["domain"] == "example.com"
        assert data["whois_info"]["Domain Name"] == "EXAMPLE.COM"

    def test_show_missing(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["show", "nothing.example"])
        assert result.exit_code == 1
        assert "No expiry record" in result.output

    def test_list_all(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "show"])
        assert result.exit_code == 0
        assert json.loads(result.output)["op"] == "list"


@pytest.mark.usefixtures("_isolated_root")
class TestThresholdsCommand:
    def test_defaults(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "thresholds"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["days"] == [7, 14, 21]

    def test_set(self, cli_runner: CliRunner) -> None:
        cli_runner.invoke(cli, ["thresholds", "--set", "30, 3,7"])
        result = cli_runner.invoke(cli, ["--json", "thresholds"])
        assert json.loads(result.output)["data"]["days"] == [3, 7, 30]

    def test_set_rejects_words(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["thresholds", "--set", "week"])
        assert result.exit_code == 2

    def test_set_rejects_negative(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["thresholds", "--set=-1"])
        assert result.exit_code == 1
