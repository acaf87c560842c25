"""
Wire encoding and signing of gateway requests.

The gateway receives two form fields:

* ``data`` - base64 of the UTF-8 JSON serialization of the request;
* ``signature`` - base64 of ``Hash(private_key + data + private_key)``.

Which optional keys appear in the JSON is part of the signed content, so unset
optional fields are always omitted rather than sent as ``null``.
"""

from __future__ import annotations

import base64
import binascii
import hmac
import json
from typing import Any, Dict

from pydantic_core import PydanticSerializationError

from .contract import HashAlgorithm, LiqPayRequest, contract_for
from .errors import DecodeError, SerializationError

__all__ = [
    "DATA_FIELD",
    "SIGNATURE_FIELD",
    "build_form_data",
    "decode_payload",
    "encode_payload",
    "serialize_request",
    "sign",
    "verify_signature",
]

DATA_FIELD = "data"
SIGNATURE_FIELD = "signature"


def serialize_request(request: LiqPayRequest) -> str:
    """
    Serialize ``request`` to compact JSON using its wire field names.
    """
    try:
        values = request.model_dump(by_alias=True, exclude_none=True)
        return json.dumps(
            values,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        )
    except (TypeError, ValueError, PydanticSerializationError) as exc:
        raise SerializationError(
            f"{type(request).__name__} cannot be represented as JSON: {exc}"
        ) from exc


def encode_payload(request: LiqPayRequest) -> str:
    """Return the base64 ``data`` field for ``request``."""
    text = serialize_request(request)
    return base64.b64encode(text.encode("utf-8")).decode("ascii")


def decode_payload(payload: str) -> Dict[str, Any]:
    """
    Decode a base64 ``data`` field back into its JSON object.

    Useful for inspecting outgoing payloads and the ``data`` field of gateway
    callbacks.
    """
    try:
        raw = base64.b64decode(payload, validate=True)
        value = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise DecodeError(f"Payload is not base64-encoded JSON: {exc}", body=payload) from exc
    if not isinstance(value, dict):
        raise DecodeError("Payload does not contain a JSON object", body=payload)
    return value


def sign(private_key: str, payload: str, algorithm: HashAlgorithm) -> str:
    digest = algorithm.digest(f"{private_key}{payload}{private_key}".encode("utf-8"))
    return base64.b64encode(digest).decode("ascii")


def verify_signature(
    private_key: str,
    payload: str,
    signature: str,
    algorithm: HashAlgorithm,
) -> bool:
    """
    Check ``signature`` against ``payload`` in constant time.
    """
    expected = sign(private_key, payload, algorithm)
    return hmac.compare_digest(expected.encode("ascii"), signature.encode("utf-8"))


def build_form_data(private_key: str, request: LiqPayRequest) -> Dict[str, str]:
    """
    Encode and sign ``request`` with the algorithm bound to its type.

    This is the side-effect free half of a dispatch, shared by the blocking
    and the awaitable clients.
    """
    contract = contract_for(request)
    payload = encode_payload(request)
    return {
        DATA_FIELD: payload,
        SIGNATURE_FIELD: sign(private_key, payload, contract.algorithm),
    }
