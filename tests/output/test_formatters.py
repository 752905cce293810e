"""Tests for the format_result dispatcher and OutputSettings."""

import json

from exclctl.output.formatters import OutputSettings, format_result
from exclctl.services.result import ServiceResult

EXPAND_RESULT = ServiceResult(
    ok=True,
    op="expand",
    data={
        "start": "2024-12-24T00:00:00",
        "end": "2024-12-26T00:00:00",
        "count": 1,
        "items": [
            {
                "rule": "exc day off 2024-12-25",
                "additive": False,
                "start": "2024-12-25T00:00:00",
                "end": "2024-12-26T00:00:00",
            }
        ],
    },
)


class TestOutputSettings:
    def test_defaults(self) -> None:
        s = OutputSettings()
        assert s.json_output is False
        assert s.quiet is False
        assert s.verbose is False
        assert s.time_format == "%Y-%m-%d %H:%M:%S"


class TestFormatResult:
    def test_json_mode(self) -> None:
        output = format_result(EXPAND_RESULT, settings=OutputSettings(json_output=True))
        data = json.loads(output)
        assert data["ok"] is True
        assert data["data"]["items"][0]["start"] == "2024-12-25T00:00:00"

    def test_json_wins_over_quiet(self) -> None:
        output = format_result(EXPAND_RESULT, settings=OutputSettings(json_output=True, quiet=True))
        assert json.loads(output)["op"] == "expand"

    def test_quiet_mode(self) -> None:
        output = format_result(EXPAND_RESULT, settings=OutputSettings(quiet=True))
        assert output == "2024-12-25 00:00:00\t2024-12-26 00:00:00"

    def test_quiet_custom_time_format(self) -> None:
        settings = OutputSettings(quiet=True, time_format="%d/%m %H:%M")
        assert format_result(EXPAND_RESULT, settings=settings) == "25/12 00:00\t26/12 00:00"

    def test_human_is_default(self) -> None:
        output = format_result(EXPAND_RESULT)
        assert output.startswith("OK")
        assert "exc day off 2024-12-25" in output
