"""Hue Core - client for the local API of a Hue bridge."""

from .bridge import Bridge
from .client import HueClient
from .const import __version__
from .exceptions import *
from .models import BridgeConfiguration, SoftwareUpdate, WhitelistEntry
from .states import *
from .timestamp import decode_bridge_time, parse_bridge_time, format_bridge_time

__all__ = [
    "Bridge",
    "HueClient",
    "BridgeConfiguration",
    "SoftwareUpdate",
    "WhitelistEntry",
    "HueError",
    "TransportError",
    "DecodeError",
    "ProtocolError",
    "FormatError",
    "BridgeError",
    "ApiErrorType",
    "SoftwareUpdateState",
    "decode_bridge_time",
    "parse_bridge_time",
    "format_bridge_time",
]
