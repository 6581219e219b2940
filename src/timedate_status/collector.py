"""Collect system clock status from ``timedatectl show``."""

import logging
import subprocess

from timedate_status.config import Config, get_config
from timedate_status.errors import ExecutionError
from timedate_status.models import TimeStatus
from timedate_status.timezone_utils import parse_timestamp, resolve_timezone

logger = logging.getLogger(__name__)

TIMEZONE_KEY = "Timezone"
LOCAL_TIME_KEY = "TimeUSec"
RTC_TIME_KEY = "RTCTimeUSec"

# Keys whose value is a yes/no flag, mapped to TimeStatus field names
FLAG_KEYS = {
    "LocalRTC": "rtc_in_local_time",
    "NTP": "ntp_enabled",
    "NTPSynchronized": "ntp_synchronized",
}


def run_timedatectl(path: str, timeout: float | None = None) -> str:
    """Run ``<path> show`` and return its standard output.

    Args:
        path: Path of the timedatectl executable
        timeout: Seconds to wait before giving up (None waits forever)

    Returns:
        Captured standard output

    Raises:
        ExecutionError: If the command cannot be started, times out or fails
    """
    command = [path, "show"]
    logger.debug("Running %s", " ".join(command))

    try:
        result = subprocess.run(
            command,
            capture_output=True,
            text=True,
            timeout=timeout,
            check=False,
        )
    except subprocess.TimeoutExpired as e:
        raise ExecutionError(f"{path} timed out after {timeout}s") from e
    except OSError as e:
        raise ExecutionError(f"cannot run {path}: {e}") from e

    if result.returncode != 0:
        message = f"{path} exited with status {result.returncode}"
        stderr = (result.stderr or "").strip()
        if stderr:
            message = f"{message}: {stderr}"
        raise ExecutionError(message)

    return result.stdout


def parse_show_output(output: str) -> dict[str, str]:
    """Split ``Key=Value`` lines into a mapping.

    Empty lines and lines without ``=`` are skipped. Only the first ``=``
    separates key from value; a repeated key keeps its last value.
    """
    fields: dict[str, str] = {}
    for line in output.splitlines():
        if not line:
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        fields[key] = value
    return fields


def parse_yes_no(value: str) -> bool:
    """Return True for "yes", False for anything else.

    Values other than "yes"/"no" are logged since they most likely mean the
    output format changed.
    """
    if value not in ("yes", "no"):
        logger.warning("Unexpected yes/no value %r, treating as no", value)
    return value == "yes"


def build_status(fields: dict[str, str], config: Config | None = None) -> TimeStatus:
    """Build a TimeStatus from parsed ``timedatectl show`` fields.

    The timezone is resolved first so both timestamps are parsed in it,
    whatever order the lines came in. A missing Timezone means UTC.

    Args:
        fields: Mapping returned by parse_show_output
        config: Optional configuration (defaults to get_config())

    Returns:
        Fully populated TimeStatus

    Raises:
        InvalidTimezoneError: If the Timezone value is not a known zone
        TimestampParseError: If TimeUSec or RTCTimeUSec is malformed
    """
    config = config or get_config()
    tz = resolve_timezone(fields.get(TIMEZONE_KEY, "UTC"))

    values: dict[str, object] = {
        field: parse_yes_no(fields[key]) for key, field in FLAG_KEYS.items() if key in fields
    }

    if LOCAL_TIME_KEY in fields:
        values["local_time"] = parse_timestamp(fields[LOCAL_TIME_KEY], tz, config.timestamp_format)
    if RTC_TIME_KEY in fields:
        values["rtc_time"] = parse_timestamp(fields[RTC_TIME_KEY], tz, config.timestamp_format)

    values["location"] = str(tz)

    return TimeStatus(**values)


def collect_status(config: Config | None = None) -> TimeStatus:
    """Query timedatectl and return the current clock status.

    Args:
        config: Optional configuration (defaults to get_config())

    Returns:
        TimeStatus snapshot

    Raises:
        ExecutionError: If timedatectl cannot be run
        InvalidTimezoneError: If the reported timezone is unknown
        TimestampParseError: If a reported timestamp is malformed
    """
    config = config or get_config()
    output = run_timedatectl(config.timedatectl_path, timeout=config.command_timeout)

    fields = parse_show_output(output)
    logger.debug("Parsed timedatectl keys: %s", ", ".join(sorted(fields)))

    return build_status(fields, config)
