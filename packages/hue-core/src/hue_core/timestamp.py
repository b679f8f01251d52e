"""Codec for the timestamps reported by the bridge.

The bridge reports local wall-clock time as ``YYYY-MM-DDTHH:MM:SS`` without a
zone offset or fractional seconds, and uses an empty string for events that
have not happened yet (e.g. a whitelisted user that never made a request).
Decoded values are naive datetimes and must be read as bridge-local time.
"""

import re
from datetime import datetime
from typing import Optional, Union

from .const import TIME_FORMAT
from .exceptions import FormatError

_TIME_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}")


def decode_bridge_time(token: Union[str, bytes]) -> Optional[datetime]:
    """
    Decode a raw JSON string token such as ``"2013-01-01T12:00:00"``.

    Args:
        token: The token as it appears in the JSON document, quotes included

    Returns:
        The parsed time, or None for the empty string ``""``

    Raises:
        FormatError: If the token is not a JSON string or does not match the layout
    """
    if isinstance(token, bytes):
        try:
            token = token.decode("utf-8")
        except UnicodeDecodeError as e:
            raise FormatError("not a JSON string") from e

    if len(token) < 2 or token[0] != '"' or token[-1] != '"':
        raise FormatError("not a JSON string")

    return parse_bridge_time(token[1:-1])


def parse_bridge_time(text: str) -> Optional[datetime]:
    """Parse an unquoted bridge timestamp; the empty string yields None."""
    if text == "":
        return None

    if not _TIME_PATTERN.fullmatch(text):
        cause = ValueError(f"time data {text!r} does not match format {TIME_FORMAT!r}")
        raise FormatError(f"time {text!r} does not match layout YYYY-MM-DDTHH:MM:SS") from cause

    try:
        return datetime.strptime(text, TIME_FORMAT)
    except ValueError as e:
        raise FormatError(f"invalid time {text!r}: {e}") from e


def format_bridge_time(value: datetime) -> str:
    """Render a time in the bridge's layout."""
    # isoformat zero-pads years below 1000, strftime("%Y") does not on every platform
    return value.replace(microsecond=0, tzinfo=None).isoformat(timespec="seconds")
