"""Errors raised by the Hue bridge client."""

from .states import ApiErrorType


class HueError(Exception):
    """Base class for every error raised by hue_core."""


class TransportError(HueError):
    """The HTTP request could not be completed."""


class DecodeError(HueError):
    """The response body is not valid JSON or has an unexpected shape."""


class ProtocolError(HueError):
    """The response is valid JSON but breaks the one-response-per-request contract."""


class FormatError(HueError):
    """A timestamp is not a JSON string or does not match the bridge's layout."""


class BridgeError(HueError):
    """Error reported by the bridge itself, e.g. when the link button was not pressed."""

    def __init__(self, description: str, type: int = 0, address: str = ""):
        super().__init__(description)
        self.description = description
        self.type = type
        self.address = address

    @property
    def error_type(self) -> ApiErrorType:
        return ApiErrorType.parse(self.type)

    def __repr__(self) -> str:
        return f"BridgeError(type={self.type}, address={self.address!r}, description={self.description!r})"
