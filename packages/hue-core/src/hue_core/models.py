from datetime import datetime
from typing import Optional, Dict, Any, Annotated

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, PlainSerializer, model_validator

from .const import NO_PROXY_ADDRESS
from .exceptions import FormatError
from .states import SoftwareUpdateState
from .timestamp import parse_bridge_time, format_bridge_time


def _to_bridge_time(value: Any) -> Any:
    if isinstance(value, str):
        return parse_bridge_time(value)
    if value is None or isinstance(value, datetime):
        return value
    raise FormatError("not a JSON string")


def _from_bridge_time(value: Optional[datetime]) -> str:
    if value is None:
        return ""
    return format_bridge_time(value)


# Optional bridge-local time; "" on the wire means "never happened"
BridgeTime = Annotated[
    Optional[datetime],
    BeforeValidator(_to_bridge_time),
    PlainSerializer(_from_bridge_time, return_type=str, when_used="json"),
]


class BridgeModel(BaseModel):
    """
    Base for records decoded from bridge responses.

    Validation is strict, so a JSON value of the wrong type is rejected instead
    of coerced. Unknown keys are ignored and keys that are absent or null keep
    their defaults.
    """
    model_config = ConfigDict(strict=True, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class SoftwareUpdate(BridgeModel):
    update_state: int = Field(default=0, alias="updatestate")
    url: str = ""
    text: str = ""
    notify: bool = False

    @property
    def state(self) -> SoftwareUpdateState:
        return SoftwareUpdateState.parse(self.update_state)


class WhitelistEntry(BridgeModel):
    """A credential registered on the bridge."""
    last_use_date: BridgeTime = Field(default=None, alias="last use date")
    create_date: BridgeTime = Field(default=None, alias="create date")
    name: str = ""  # device type the application registered with


class BridgeConfiguration(BridgeModel):
    """Global configuration values of a bridge, as returned by GET /api/<username>/config."""

    # Port of the proxy being used by the bridge. 0 means no proxy.
    proxy_port: int = Field(default=0, ge=0, le=65535, alias="proxyport")
    # Current time stored on the bridge
    utc: BridgeTime = None
    # Name of the bridge (4..16 characters), also its uPnP name
    name: str = ""
    sw_update: SoftwareUpdate = Field(default_factory=SoftwareUpdate, alias="swupdate")
    # Whitelisted usernames mapped to their details
    whitelist: Dict[str, WhitelistEntry] = Field(default_factory=dict)
    sw_version: str = Field(default="", alias="swversion")
    # IP address of the proxy server, "none" when no proxy is used
    proxy_address: str = Field(default="", alias="proxyaddress")
    mac: str = ""
    # Whether the link button was pressed within the last 30 seconds
    link_button: bool = Field(default=False, alias="linkbutton")
    ip_address: str = Field(default="", alias="ipaddress")
    netmask: str = ""
    gateway: str = ""
    dhcp: bool = False
    # Whether the bridge synchronizes data with a portal account
    portal_services: bool = Field(default=False, alias="portalservices")

    @property
    def uses_proxy(self) -> bool:
        return self.proxy_port != 0 and self.proxy_address not in ("", NO_PROXY_ADDRESS)

    def __str__(self) -> str:
        return f"Bridge {self.name!r} (sw {self.sw_version}) @ {self.ip_address} mac {self.mac} with {len(self.whitelist)} users"
