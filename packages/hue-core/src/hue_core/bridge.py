import logging
from typing import Dict, Optional

from .client import HueClient
from .const import API_PATH, CONFIG_PATH
from .envelope import decode_configuration, decode_envelopes, expect_single
from .models import BridgeConfiguration

logger = logging.getLogger(__name__)

class Bridge:
    """
    A Hue bridge reachable at a network address.

    The credential (``username``) is empty until the application has paired.
    No method changes the address or the credential, so a Bridge can be shared
    between threads; use with_username() to adopt a new credential.
    """

    def __init__(self, address: str, username: str = "", client: Optional[HueClient] = None):
        self.address = address
        self.username = username
        self.client = client if client is not None else HueClient()

    def __repr__(self) -> str:
        return f"Bridge(address={self.address!r}, username={'***' if self.username else ''!r})"

    def with_username(self, username: str) -> 'Bridge':
        """Return a copy of this bridge that uses the given credential."""
        return Bridge(self.address, username, client=self.client)

    def close(self) -> None:
        """Close the HTTP client, which is shared with every copy made by with_username()."""
        self.client.close()

    def __enter__(self) -> 'Bridge':
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def url(self) -> str:
        """Base URL for authenticated requests, including the bridge address and username."""
        return f"http://{self.address}{API_PATH}/{self.username}"

    def name(self) -> str:
        """Fetch the configuration and return the name of the bridge."""
        return self.fetch_configuration().name

    def create_user(self, device_type: str, new_username: str = "") -> str:
        """
        Create a new user on the bridge.

        The link button on the bridge must have been pressed within the last
        30 seconds to prove physical access. The bridge chooses the username
        when new_username is empty. The returned username is not stored on
        this Bridge; call with_username() to use it.

        Args:
            device_type: Application identifier, usually "<application>#<device>"
            new_username: Username to request, or "" to let the bridge pick one

        Returns:
            str: The username issued by the bridge, or "" if the bridge did not report one

        Raises:
            TransportError: If the request could not be completed
            DecodeError: If the response is not a JSON array of envelopes
            ProtocolError: If the response does not hold exactly one envelope
            BridgeError: If the bridge rejected the request
        """
        request_data: Dict[str, str] = {"devicetype": device_type}
        if new_username:
            request_data["username"] = new_username

        url = f"http://{self.address}{API_PATH}"
        logger.info(f"Requesting new user for device type '{device_type}' on bridge {self.address}")
        payload = self.client.post_json(url, json=request_data)

        success = expect_single(decode_envelopes(payload))
        username = success.get("username", "")
        if not username:
            logger.warning(f"Bridge {self.address} accepted the user but returned no username: {success}")
        return username

    def fetch_configuration(self) -> BridgeConfiguration:
        """Fetch the global configuration of the bridge."""
        payload = self.client.get_json(self.url() + CONFIG_PATH)
        return decode_configuration(payload)
