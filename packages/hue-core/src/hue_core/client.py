import logging
import requests
from typing import Dict, Any, Optional

from .const import USER_AGENT
from .exceptions import TransportError, DecodeError

logger = logging.getLogger(__name__)

class HueClient:
    def __init__(self, session: Optional[requests.Session] = None):
        self.session = session if session is not None else requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})

    def get(self, url: str, headers: Optional[Dict[str, Any]] = None) -> requests.Response:
        """Make a GET request with proper headers and error handling."""
        if headers is None:
            headers = {}

        # Set default headers if not provided
        if "Accept" not in headers:
            headers["Accept"] = "application/json"

        logger.debug(f"GET {url}")
        try:
            response = self.session.get(url, headers=headers)
            response.raise_for_status()
        except requests.RequestException as e:
            raise TransportError(f"GET {url} failed: {e}") from e
        return response

    def post(self, url: str, headers: Optional[Dict[str, Any]] = None,
             json: Optional[Dict[str, Any]] = None) -> requests.Response:
        """Make a POST request with a JSON body."""
        if headers is None:
            headers = {}
        if json is None:
            json = {}

        # Set default headers if not provided
        if "Content-Type" not in headers:
            headers["Content-Type"] = "application/json"
        if "Accept" not in headers:
            headers["Accept"] = "application/json"

        logger.debug(f"POST {url}")
        try:
            response = self.session.post(url, headers=headers, json=json)
            response.raise_for_status()
        except requests.RequestException as e:
            raise TransportError(f"POST {url} failed: {e}") from e
        return response

    def get_json(self, url: str, headers: Optional[Dict[str, Any]] = None) -> Any:
        """Make a GET request and return the decoded JSON response."""
        response = self.get(url, headers)
        return self._decode(url, response)

    def post_json(self, url: str, headers: Optional[Dict[str, Any]] = None,
                  json: Optional[Dict[str, Any]] = None) -> Any:
        """Make a POST request and return the decoded JSON response."""
        response = self.post(url, headers, json)
        return self._decode(url, response)

    def close(self) -> None:
        self.session.close()

    def _decode(self, url: str, response: requests.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            # Errors are left to the caller, the body is only traced
            logger.debug(f"Response Text for {url}: {response.text[:500]}...")
            raise DecodeError(
                f"Failed to parse JSON response from {url} (status {response.status_code}): {e}; "
                f"body starts with {response.text[:100]!r}"
            ) from e
