"""
Static binding of gateway request types to their response type and hash algorithm.

Each concrete request model names its response type twice: as the generic
parameter, which type checkers read, and in :func:`binds`, which fills the
runtime registry::

    @binds(StatusResponse, HashAlgorithm.SHA3_256)
    class StatusRequest(GatewayRequest[StatusResponse]):
        ...

:func:`binds` rejects a request whose generic parameter disagrees with the
bound response type. The registry is filled at import time and is read-only
afterwards. Lookups are by exact type: a subclass of a bound request is
unbound until it is decorated itself.
"""

from __future__ import annotations

import hashlib
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Generic, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ConfigDict

from .errors import ContractError

__all__ = [
    "Contract",
    "HashAlgorithm",
    "LiqPayRequest",
    "LiqPayResponse",
    "ResponseT",
    "binds",
    "contract_for",
    "registered_contracts",
]


class HashAlgorithm(Enum):
    """Signature hash algorithms accepted by the gateway."""

    # API version 3 endpoints
    SHA1 = "sha1"
    # API version 7 endpoints
    SHA3_256 = "sha3_256"

    def digest(self, data: bytes) -> bytes:
        return hashlib.new(self.value, data).digest()


class LiqPayResponse(BaseModel):
    """
    Base class for decoded gateway responses.

    Optional fields the gateway did not send stay ``None`` and are absent from
    ``model_fields_set``.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        extra="ignore",
    )


ResponseT = TypeVar("ResponseT", bound=LiqPayResponse)


class LiqPayRequest(BaseModel, Generic[ResponseT]):
    """
    Base class for every request sent to the gateway, parametrized by the
    response type the gateway answers it with.

    Field aliases are the wire names; optional fields left as ``None`` are
    omitted from the serialized payload.
    """

    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        use_enum_values=True,
        validate_default=True,
        extra="forbid",
    )


RequestT = TypeVar("RequestT", bound=LiqPayRequest)


@dataclass(frozen=True)
class Contract:
    request_type: Type[LiqPayRequest]
    response_type: Type[LiqPayResponse]
    algorithm: HashAlgorithm


_CONTRACTS: Dict[Type[LiqPayRequest], Contract] = {}


def _declared_response_type(request_type: Type[LiqPayRequest]) -> Optional[type]:
    # nearest parametrized base, e.g. GatewayRequest[StatusResponse]
    for base in request_type.__mro__:
        metadata = getattr(base, "__pydantic_generic_metadata__", None)
        if not metadata or metadata["origin"] is None:
            continue
        declared = metadata["args"][0] if metadata["args"] else None
        if isinstance(declared, type):
            return declared
    return None


def binds(
    response_type: Type[LiqPayResponse],
    algorithm: HashAlgorithm,
) -> Callable[[Type[RequestT]], Type[RequestT]]:
    """
    Class decorator binding a request type to ``response_type`` and ``algorithm``.
    """
    if not (isinstance(response_type, type) and issubclass(response_type, LiqPayResponse)):
        raise ContractError(f"{response_type!r} is not a LiqPayResponse subclass")
    if not isinstance(algorithm, HashAlgorithm):
        raise ContractError(f"{algorithm!r} is not a HashAlgorithm")

    def decorator(request_type: Type[RequestT]) -> Type[RequestT]:
        if not (isinstance(request_type, type) and issubclass(request_type, LiqPayRequest)):
            raise ContractError(f"{request_type!r} is not a LiqPayRequest subclass")
        if request_type in _CONTRACTS:
            raise ContractError(f"{request_type.__name__} is already bound")
        declared = _declared_response_type(request_type)
        if declared is not None and declared is not response_type:
            raise ContractError(
                f"{request_type.__name__} declares {declared.__name__} but is bound "
                f"to {response_type.__name__}"
            )
        _CONTRACTS[request_type] = Contract(request_type, response_type, algorithm)
        return request_type

    return decorator


def contract_for(request: Union[LiqPayRequest, Type[LiqPayRequest]]) -> Contract:
    """Return the binding for a request instance or request type."""
    request_type = request if isinstance(request, type) else type(request)
    try:
        return _CONTRACTS[request_type]
    except KeyError:
        raise ContractError(
            f"{request_type.__name__} has no bound response type and hash algorithm"
        ) from None


def registered_contracts() -> Dict[Type[LiqPayRequest], Contract]:
    return dict(_CONTRACTS)
