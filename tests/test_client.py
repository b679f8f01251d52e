"""Unit tests for HueClient."""

import logging

import pytest
import requests

from hue_core import DecodeError, HueClient, TransportError
from hue_core.const import USER_AGENT

from conftest import DummyResponse


def test_session_gets_user_agent(client, session) -> None:
    assert session.headers["User-Agent"] == USER_AGENT


def test_get_json(client, session) -> None:
    session.queue(DummyResponse({"name": "Philips hue"}))

    assert client.get_json("http://bridge/api/user/config") == {"name": "Philips hue"}
    assert session.calls[0]["method"] == "GET"
    assert session.calls[0]["headers"]["Accept"] == "application/json"


def test_post_json_sends_json_body(client, session) -> None:
    session.queue(DummyResponse([{"success": {"username": "abc"}}]))

    result = client.post_json("http://bridge/api", json={"devicetype": "app#dev"})

    assert result == [{"success": {"username": "abc"}}]
    call = session.calls[0]
    assert call["method"] == "POST"
    assert call["json"] == {"devicetype": "app#dev"}
    assert call["headers"]["Content-Type"] == "application/json"


def test_connection_error_becomes_transport_error(client, session) -> None:
    cause = requests.ConnectionError("no route to host")
    session.queue(cause)

    with pytest.raises(TransportError) as exc_info:
        client.get_json("http://bridge/api/user/config")
    assert exc_info.value.__cause__ is cause


def test_timeout_becomes_transport_error(client, session) -> None:
    session.queue(requests.Timeout("timed out"))

    with pytest.raises(TransportError):
        client.post_json("http://bridge/api", json={"devicetype": "x"})


def test_http_status_becomes_transport_error(client, session) -> None:
    session.queue(DummyResponse({}, status=503))

    with pytest.raises(TransportError, match="HTTP 503"):
        client.get_json("http://bridge/api/user/config")


def test_invalid_json_becomes_decode_error(client, session) -> None:
    session.queue(DummyResponse(text="<html>not json</html>"))

    with pytest.raises(DecodeError, match="Failed to parse JSON response"):
        client.get_json("http://bridge/api/user/config")


def test_close_closes_session(client, session) -> None:
    client.close()
    assert session.closed is True


def test_default_session_is_created() -> None:
    client = HueClient()
    assert isinstance(client.session, requests.Session)
    client.close()


def test_decode_error_is_not_logged_as_error(client, session, caplog) -> None:
    session.queue(DummyResponse(text="<html>", status=200))

    with caplog.at_level(logging.DEBUG, logger="hue_core"):
        with pytest.raises(DecodeError) as exc_info:
            client.get_json("http://bridge/api/user/config")

    assert "status 200" in str(exc_info.value)
    assert "<html>" in str(exc_info.value)
    assert not [record for record in caplog.records if record.levelno >= logging.ERROR]
