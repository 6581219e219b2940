"""Command line entry point: print timedatectl status as JSON."""

import logging
import sys

from pydantic_core import PydanticSerializationError

from timedate_status.collector import collect_status
from timedate_status.errors import SerializationError, TimedateStatusError
from timedate_status.models import TimeStatus


def render(status: TimeStatus) -> str:
    """Serialize a status record to JSON.

    Raises:
        SerializationError: If the record cannot be serialized
    """
    try:
        return status.to_json()
    except PydanticSerializationError as e:
        raise SerializationError(str(e)) from e


def main() -> None:
    """Main entry point for the CLI."""
    # Diagnostics go to stderr so stdout only ever carries the JSON or the error line
    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
        stream=sys.stderr,
    )

    try:
        output = render(collect_status())
    except TimedateStatusError as e:
        print(f"error: {e}")
        sys.exit(1)

    print(output)


if __name__ == "__main__":
    main()
