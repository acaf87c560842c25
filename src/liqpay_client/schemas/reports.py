"""
Settlement reports: the daily registry of operations, compensation
(payout) reports, and the CSV report files generated for them.

Report files are produced asynchronously: request one with
:class:`CompensationReportFileRequest` or
:class:`P2PCompensationReportFileRequest`, then poll
:class:`CompensationReportFileStatusRequest` with the returned
``registration_token`` until a ``file_link`` is present.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Literal, Optional

from pydantic import Field, model_validator

from ..core.contract import HashAlgorithm, binds
from .common import GatewayRequest, GatewayResponse
from .enums import Action, Bonus, Currency, PayType, ResponseFormat, Result, Status, Version

__all__ = [
    "Channel",
    "CompensationReportFileRequest",
    "CompensationReportFileResponse",
    "CompensationReportFileStatusRequest",
    "CompensationReportFileStatusResponse",
    "CompensationReportRequest",
    "CompensationReportResponse",
    "P2PCompensationReportFileRequest",
    "P2PReportType",
    "RegistryEntry",
    "RegistryRequest",
    "RegistryResponse",
]


class Channel(str, Enum):
    CHECKOUT = "checkout"
    CHECKOUT_JS = "checkoutjs"
    API = "api"


class P2PReportType(str, Enum):
    P2P = "p2p"
    P2P_CREDIT = "p2pcredit"


class RegistryEntry(GatewayResponse):
    """One operation in a registry or compensation report."""

    id: int
    creation_date: str = Field(alias="create_date")
    end_date: Optional[str] = None
    transaction_type: Optional[str] = Field(default=None, alias="trans_type")
    transaction_amount: Optional[float] = Field(default=None, alias="trans_amount")
    transaction_fee_debit: Optional[float] = Field(default=None, alias="trans_fee_debit")
    transaction_fee_credit: Optional[float] = Field(default=None, alias="trans_fee_credit")
    transaction_bonus: Optional[float] = Field(default=None, alias="trans_bonus")
    transaction_total: Optional[float] = Field(default=None, alias="trans_total")
    transaction_currency: Optional[Currency] = Field(default=None, alias="trans_currency")
    action: Optional[Action] = None
    channel: Optional[Channel] = None
    pay_type: Optional[PayType] = Field(default=None, alias="paytype")
    order_id: Optional[str] = None
    liqpay_order_id: Optional[str] = None
    authcode_debit: Optional[str] = None
    description: Optional[str] = None
    ip: Optional[str] = None
    customer: Optional[str] = None
    bonus_type: Optional[Bonus] = None
    sender_bonus: Optional[float] = None
    sender_card: Optional[str] = None
    sender_card_bank: Optional[str] = None
    sender_card_country: Optional[int] = None
    sender_card_type: Optional[str] = None
    sender_email: Optional[str] = None
    sender_first_name: Optional[str] = None
    sender_last_name: Optional[str] = None
    sender_phone: Optional[str] = None
    sender_card_product_type: Optional[str] = None


class CompensationReportResponse(GatewayResponse):
    result: Result
    status: Optional[Status] = None
    data: Optional[List[RegistryEntry]] = None


@binds(CompensationReportResponse, HashAlgorithm.SHA3_256)
class CompensationReportRequest(GatewayRequest[CompensationReportResponse]):
    """
    Operations included in one payout, looked up either by compensation id
    or by date. Exactly one of the two must be given.
    """

    version: Literal[Version.SEVEN] = Version.SEVEN
    action: Literal[Action.REPORTS_COMPENSATION] = Action.REPORTS_COMPENSATION
    compensation_id: Optional[str] = None
    date: Optional[str] = None
    response_format: Literal[ResponseFormat.JSON] = Field(
        default=ResponseFormat.JSON, alias="resp_format"
    )

    @model_validator(mode="after")
    def _one_selector(self) -> "CompensationReportRequest":
        if (self.compensation_id is None) == (self.date is None):
            raise ValueError("pass exactly one of compensation_id and date")
        return self

    @classmethod
    def by_compensation_id(cls, compensation_id: str, **options) -> "CompensationReportRequest":
        return cls(compensation_id=compensation_id, **options)

    @classmethod
    def by_date(cls, date: str, **options) -> "CompensationReportRequest":
        return cls(date=date, **options)


class RegistryResponse(GatewayResponse):
    result: Result
    status: Optional[Status] = None
    data: Optional[List[RegistryEntry]] = None


@binds(RegistryResponse, HashAlgorithm.SHA3_256)
class RegistryRequest(GatewayRequest[RegistryResponse]):
    """All operations settled on ``date`` (``YYYY-MM-DD``)."""

    version: Literal[Version.SEVEN] = Version.SEVEN
    action: Literal[Action.REGISTRY] = Action.REGISTRY
    format: Literal[ResponseFormat.JSON] = ResponseFormat.JSON
    date: str


class CompensationReportFileResponse(GatewayResponse):
    result: Result
    status: Optional[Status] = None
    registration_token: Optional[str] = Field(default=None, alias="register_token")


@binds(CompensationReportFileResponse, HashAlgorithm.SHA3_256)
class CompensationReportFileRequest(GatewayRequest[CompensationReportFileResponse]):
    """Start generating a compensation report file, by compensation id or date."""

    version: Literal[Version.SEVEN] = Version.SEVEN
    action: Literal[Action.REPORTS_COMPENSATION_FILE] = Action.REPORTS_COMPENSATION_FILE
    response_format: Literal[ResponseFormat.CSV] = ResponseFormat.CSV
    compensation_id: Optional[str] = None
    date: Optional[str] = None

    @model_validator(mode="after")
    def _one_selector(self) -> "CompensationReportFileRequest":
        if (self.compensation_id is None) == (self.date is None):
            raise ValueError("pass exactly one of compensation_id and date")
        return self

    @classmethod
    def by_compensation_id(
        cls, compensation_id: str, **options
    ) -> "CompensationReportFileRequest":
        return cls(compensation_id=compensation_id, **options)

    @classmethod
    def by_date(cls, date: str, **options) -> "CompensationReportFileRequest":
        return cls(date=date, **options)


@binds(CompensationReportFileResponse, HashAlgorithm.SHA3_256)
class P2PCompensationReportFileRequest(GatewayRequest[CompensationReportFileResponse]):
    """Start generating the compensation report file of P2P transfers for ``date``."""

    version: Literal[Version.SEVEN] = Version.SEVEN
    action: Literal[Action.REPORTS_COMPENSATION_FILE] = Action.REPORTS_COMPENSATION_FILE
    response_format: Literal[ResponseFormat.CSV] = ResponseFormat.CSV
    operation_type: P2PReportType = Field(alias="type")
    date: str


class CompensationReportFileStatusResponse(GatewayResponse):
    result: Result
    status: Optional[Status] = None
    file_link: Optional[str] = Field(default=None, alias="filelink")


@binds(CompensationReportFileStatusResponse, HashAlgorithm.SHA3_256)
class CompensationReportFileStatusRequest(
    GatewayRequest[CompensationReportFileStatusResponse]
):
    version: Literal[Version.SEVEN] = Version.SEVEN
    action: Literal[
        Action.REPORTS_COMPENSATION_FILE_STATUS
    ] = Action.REPORTS_COMPENSATION_FILE_STATUS
    registration_token: str = Field(alias="register_token")
