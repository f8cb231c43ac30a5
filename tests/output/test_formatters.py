"""Tests for the format_result dispatcher and OutputSettings."""

from __future__ import annotations

import json

from expiryctl.output.formatters import OutputSettings, format_result
from expiryctl.services.result import ServiceError, ServiceResult


def _ok(op: str = "test", **data: object) -> ServiceResult:
    return ServiceResult(ok=True, op=op, data=dict(data))


def _err(op: str = "test", msg: str = "fail") -> ServiceResult:
    return ServiceResult(ok=False, op=op, error=ServiceError(code="ERR", message=msg))


class TestFormatResult:
    def test_json_mode(self) -> None:
        output = format_result(_ok("support", domain="example.com"), settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["data"]["domain"] == "example.com"

    def test_json_wins_over_quiet(self) -> None:
        settings = OutputSettings(json_output=True, quiet=True)
        assert json.loads(format_result(_ok(), settings=settings))["op"] == "test"

    def test_quiet_ok(self) -> None:
        assert format_result(_ok("thresholds", days=[7]), settings=OutputSettings(quiet=True)) == "OK: thresholds"

    def test_quiet_lists_domains(self) -> None:
        result = _ok("list", items=[{"domain": "a.com"}, {"domain": "b.org"}], count=2)
        assert format_result(result, settings=OutputSettings(quiet=True)) == "a.com\nb.org"

    def test_quiet_error(self) -> None:
        output = format_result(_err("check", "boom"), settings=OutputSettings(quiet=True))
        assert output.startswith("ERROR: check")
        assert "boom" in output

    def test_default_is_rich(self) -> None:
        output = format_result(_ok("support", domain="example.com", tld="com"))
        assert output.startswith("OK")
        assert "domain: example.com" in output
