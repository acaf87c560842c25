"""
Public facade for the LiqPay gateway client.

The most useful pieces are re-exported so integrators can
``from liqpay_client import ...`` without navigating the package.
"""

from . import schemas
from .api import create_async_client, create_client, send_request
from .core import (
    DEFAULT_API_URL,
    AsyncLiqPayClient,
    ClientConfig,
    ConfigError,
    ContractError,
    DecodeError,
    DispatchCancelledError,
    HashAlgorithm,
    LiqPayClient,
    LiqPayError,
    LiqPayRequest,
    LiqPayResponse,
    PendingDispatch,
    SerializationError,
    TransportError,
    binds,
    build_form_data,
    contract_for,
    decode_payload,
    encode_payload,
    load_client_config,
    sign,
    verify_signature,
)

__all__ = (
    "DEFAULT_API_URL",
    "AsyncLiqPayClient",
    "ClientConfig",
    "ConfigError",
    "ContractError",
    "DecodeError",
    "DispatchCancelledError",
    "HashAlgorithm",
    "LiqPayClient",
    "LiqPayError",
    "LiqPayRequest",
    "LiqPayResponse",
    "PendingDispatch",
    "SerializationError",
    "TransportError",
    "binds",
    "build_form_data",
    "contract_for",
    "create_async_client",
    "create_client",
    "decode_payload",
    "encode_payload",
    "load_client_config",
    "schemas",
    "send_request",
    "sign",
    "verify_signature",
)
