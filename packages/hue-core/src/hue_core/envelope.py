"""
Decoding of the two response shapes used by the bridge.

"Get" style requests answer with a single JSON object that is the result
itself. "Action" style requests (such as creating a user) answer with an array
of envelopes, each holding either a ``success`` mapping or an ``error``
record::

    [{"success": {"username": "83b7780291a6ceffbe0bd049104df"}}]
    [{"error": {"type": 101, "address": "", "description": "link button not pressed"}}]
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from pydantic import Field, ValidationError

from .exceptions import BridgeError, DecodeError, ProtocolError
from .models import BridgeConfiguration, BridgeModel

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ApiSuccess:
    values: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ApiFailure:
    type: int
    address: str
    description: str

    def to_error(self) -> BridgeError:
        return BridgeError(self.description, type=self.type, address=self.address)


Envelope = Union[ApiSuccess, ApiFailure]


class _ErrorRecord(BridgeModel):
    type: int = 0
    address: str = ""
    description: str = ""


class _EnvelopeRecord(BridgeModel):
    success: Dict[str, str] = Field(default_factory=dict)
    error: Union[_ErrorRecord, None] = None


def decode_configuration(payload: Any) -> BridgeConfiguration:
    """Validate a decoded JSON object as a BridgeConfiguration."""
    try:
        return BridgeConfiguration.model_validate(payload)
    except ValidationError as e:
        raise DecodeError(f"Invalid bridge configuration: {e}") from e


def decode_envelopes(payload: Any) -> List[Envelope]:
    """Turn a decoded JSON array of envelopes into ApiSuccess/ApiFailure values."""
    if not isinstance(payload, list):
        raise DecodeError(f"Expected a JSON array of responses, got {type(payload).__name__}")

    envelopes: List[Envelope] = []
    for item in payload:
        try:
            record = _EnvelopeRecord.model_validate(item)
        except ValidationError as e:
            raise DecodeError(f"Invalid response envelope: {e}") from e

        # An error record takes precedence over a success mapping
        if record.error is not None:
            envelopes.append(ApiFailure(
                type=record.error.type,
                address=record.error.address,
                description=record.error.description,
            ))
        else:
            envelopes.append(ApiSuccess(values=dict(record.success)))
    return envelopes


def expect_single(envelopes: List[Envelope]) -> Dict[str, str]:
    """
    Unwrap the only envelope of an action response.

    Raises:
        ProtocolError: If there is not exactly one envelope
        BridgeError: If the envelope carries an error
    """
    if len(envelopes) == 0:
        raise ProtocolError("empty response array")
    if len(envelopes) > 1:
        raise ProtocolError("unexpected multiple responses")

    envelope = envelopes[0]
    if isinstance(envelope, ApiFailure):
        logger.debug(f"Bridge reported error {envelope.type} at {envelope.address!r}: {envelope.description}")
        raise envelope.to_error()
    return envelope.values
