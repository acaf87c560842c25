"""
Core primitives: request contracts, wire encoding and signing, and dispatch.
"""

from .client import AsyncLiqPayClient, LiqPayClient, PendingDispatch, send_request
from .config import DEFAULT_API_URL, ClientConfig, ConfigError, load_client_config
from .contract import (
    Contract,
    HashAlgorithm,
    LiqPayRequest,
    LiqPayResponse,
    binds,
    contract_for,
    registered_contracts,
)
from .environment import GatewayEnvironment, build_environment, load_env_file
from .errors import (
    ContractError,
    DecodeError,
    DispatchCancelledError,
    LiqPayError,
    SerializationError,
    TransportError,
)
from .signing import (
    build_form_data,
    decode_payload,
    encode_payload,
    serialize_request,
    sign,
    verify_signature,
)

__all__ = [
    "AsyncLiqPayClient",
    "ClientConfig",
    "ConfigError",
    "Contract",
    "ContractError",
    "DEFAULT_API_URL",
    "DecodeError",
    "DispatchCancelledError",
    "GatewayEnvironment",
    "HashAlgorithm",
    "LiqPayClient",
    "LiqPayError",
    "LiqPayRequest",
    "LiqPayResponse",
    "PendingDispatch",
    "SerializationError",
    "TransportError",
    "binds",
    "build_environment",
    "build_form_data",
    "contract_for",
    "decode_payload",
    "encode_payload",
    "load_client_config",
    "load_env_file",
    "registered_contracts",
    "send_request",
    "serialize_request",
    "sign",
    "verify_signature",
]
