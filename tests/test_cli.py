"""Tests for the command line entry point."""

import json
import subprocess
from unittest.mock import MagicMock, patch

import pytest
from pydantic_core import PydanticSerializationError

from timedate_status.cli import main, render
from timedate_status.errors import (
    ExecutionError,
    InvalidTimezoneError,
    SerializationError,
    TimestampParseError,
)
from timedate_status.models import TimeStatus

NEW_YORK_OUTPUT = """\
Timezone=America/New_York
LocalRTC=no
NTP=yes
NTPSynchronized=yes
TimeUSec=Mon 2024-01-15 10:30:00 EST
RTCTimeUSec=Mon 2024-01-15 10:30:00 EST
"""


def test_main_prints_json(capsys: pytest.CaptureFixture[str]) -> None:
    """Test end-to-end output for a stubbed timedatectl."""
    result = subprocess.CompletedProcess(
        args=["/usr/bin/timedatectl", "show"], returncode=0, stdout=NEW_YORK_OUTPUT, stderr=""
    )
    with patch("timedate_status.collector.subprocess.run", return_value=result):
        main()

    out = capsys.readouterr().out
    assert json.loads(out) == {
        "local_time": "2024-01-15T10:30:00-05:00",
        "rtc_time": "2024-01-15T10:30:00-05:00",
        "rtc_in_localtime": False,
        "location": "America/New_York",
        "ntp_synchronized": True,
        "ntp_enabled": True,
    }


@pytest.mark.parametrize(
    "error",
    [
        ExecutionError("cannot run /usr/bin/timedatectl: not found"),
        InvalidTimezoneError("Not/AZone"),
        TimestampParseError("garbage"),
    ],
)
def test_main_reports_errors(error: Exception, capsys: pytest.CaptureFixture[str]) -> None:
    """Test that failures print an error line to stdout and exit 1."""
    with patch("timedate_status.cli.collect_status", side_effect=error):
        with pytest.raises(SystemExit) as exc_info:
            main()

    assert exc_info.value.code == 1
    out = capsys.readouterr().out
    assert out == f"error: {error}\n"
    assert "{" not in out


def failing_status() -> MagicMock:
    status = MagicMock(spec=TimeStatus)
    status.to_json.side_effect = PydanticSerializationError("boom")
    return status


def test_main_serialization_error(capsys: pytest.CaptureFixture[str]) -> None:
    """Test that a serialization failure is reported like other errors."""
    with patch("timedate_status.cli.collect_status", return_value=failing_status()):
        with pytest.raises(SystemExit) as exc_info:
            main()

    assert exc_info.value.code == 1
    out = capsys.readouterr().out
    assert out.startswith("error: ")
    assert "boom" in out


def test_render() -> None:
    """Test rendering a status record."""
    assert json.loads(render(TimeStatus()))["location"] == "UTC"


def test_render_wraps_serialization_error() -> None:
    """Test that pydantic serialization errors become SerializationError."""
    with pytest.raises(SerializationError, match="boom"):
        render(failing_status())
