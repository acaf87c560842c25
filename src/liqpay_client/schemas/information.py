"""
Informational operations: payment status, archive reports, receipts and
merchant data attached to a payment.
"""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import Field

from ..core.contract import HashAlgorithm, binds
from .common import GatewayRequest, GatewayResponse, PaymentResponse
from .enums import Action, Language, ResponseFormat, Result, Status, Version

__all__ = [
    "AddDataRequest",
    "AddDataResponse",
    "ArchiveEntry",
    "ArchiveRequest",
    "ArchiveResponse",
    "SendReceiptRequest",
    "SendReceiptResponse",
    "StatusRequest",
    "StatusResponse",
]


class StatusResponse(PaymentResponse):
    pass


@binds(StatusResponse, HashAlgorithm.SHA3_256)
class StatusRequest(GatewayRequest[StatusResponse]):
    """Look up the current state of a payment by ``order_id``."""

    version: Literal[Version.SEVEN] = Version.SEVEN
    action: Literal[Action.STATUS] = Action.STATUS
    order_id: str


class ArchiveEntry(PaymentResponse):
    """One payment in an archive report; reports omit ``result``."""

    result: Optional[Result] = None


class ArchiveResponse(GatewayResponse):
    result: Result
    status: Optional[Status] = None
    data: Optional[List[ArchiveEntry]] = None


@binds(ArchiveResponse, HashAlgorithm.SHA3_256)
class ArchiveRequest(GatewayRequest[ArchiveResponse]):
    """
    Payments between two dates. Dates are millisecond Unix timestamps or
    ``YYYY-MM-DD HH:MM:SS`` strings, passed through as given.
    """

    version: Literal[Version.SEVEN] = Version.SEVEN
    action: Literal[Action.REPORTS] = Action.REPORTS
    date_from: str
    date_to: str
    response_format: ResponseFormat = Field(default=ResponseFormat.JSON, alias="resp_format")


class SendReceiptResponse(GatewayResponse):
    result: Result
    status: Optional[Status] = None


@binds(SendReceiptResponse, HashAlgorithm.SHA3_256)
class SendReceiptRequest(GatewayRequest[SendReceiptResponse]):
    version: Literal[Version.SEVEN] = Version.SEVEN
    action: Literal[Action.TICKET] = Action.TICKET
    email: str
    order_id: str
    payment_id: Optional[str] = None
    language: Optional[Language] = None


class AddDataResponse(PaymentResponse):
    pass


@binds(AddDataResponse, HashAlgorithm.SHA3_256)
class AddDataRequest(GatewayRequest[AddDataResponse]):
    """Attach free-form ``info`` to an existing payment."""

    version: Literal[Version.SEVEN] = Version.SEVEN
    action: Literal[Action.DATA] = Action.DATA
    order_id: str
    info: str
