"""
Cardholder verification: one-time password confirmation, card checks and
3-D Secure (MPI) lookups.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.contract import HashAlgorithm, binds
from .common import GatewayRequest, GatewayResponse, PaymentResponse
from .enums import Action, Currency, Language, Result, Status, Version

__all__ = [
    "BrowserColorDepth",
    "CardVerificationRequest",
    "CardVerificationResponse",
    "MpiRequest",
    "MpiResponse",
    "MpiStatus",
    "OtpRequest",
    "OtpResponse",
    "ThreeDsInfo",
]


class OtpResponse(PaymentResponse):
    pass


@binds(OtpResponse, HashAlgorithm.SHA3_256)
class OtpRequest(GatewayRequest[OtpResponse]):
    """
    Confirm a payment left in ``otp_verify`` status.

    ``token`` is the confirmation token returned with that status.
    """

    version: Literal[Version.SEVEN] = Version.SEVEN
    action: Literal[Action.CONFIRM] = Action.CONFIRM
    otp: str = Field(repr=False)
    token: str = Field(alias="confirm_token")


class CardVerificationResponse(PaymentResponse):
    pass


@binds(CardVerificationResponse, HashAlgorithm.SHA3_256)
class CardVerificationRequest(GatewayRequest[CardVerificationResponse]):
    """
    Check that a card is valid without charging it.

    Set ``verify_code="Y"`` to have the gateway send a verification code to
    the cardholder.
    """

    version: Literal[Version.SEVEN] = Version.SEVEN
    action: Literal[Action.CARD_VERIFICATION] = Action.CARD_VERIFICATION
    card: str = Field(repr=False)
    card_exp_month: str
    card_exp_year: str
    order_id: str
    description: str
    card_cvv: Optional[str] = Field(default=None, repr=False)
    ip: Optional[str] = None
    language: Optional[Language] = None
    verify_code: Optional[Literal["Y"]] = None


class BrowserColorDepth(str, Enum):
    ONE = "1"
    TWO = "2"
    FOUR = "4"
    EIGHT = "8"
    FIFTEEN = "15"
    SIXTEEN = "16"
    TWENTY_FOUR = "24"
    THIRTY_TWO = "32"
    FORTY_EIGHT = "48"


class ThreeDsInfo(BaseModel):
    """Payer browser details required for 3-D Secure 2."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, use_enum_values=True)

    notification_url: str = Field(alias="notificationURL")
    browser_language: str = Field(alias="browserLanguage")
    three_ds_requestor_url: str = Field(alias="threeDSRequestorURL")
    browser_screen_height: str = Field(alias="browserScreenHeight")
    browser_color_depth: BrowserColorDepth = Field(alias="browserColorDepth")
    browser_screen_width: str = Field(alias="browserScreenWidth")
    browser_accept_header: str = Field(alias="browserAcceptHeader")
    # minutes, UTC minus local time (UTC+2 is -120)
    browser_tz: int = Field(alias="browserTZ")
    browser_user_agent: str = Field(alias="browserUserAgent")
    browser_javascript_enabled: Optional[bool] = Field(
        default=None, alias="browserJavascriptEnabled"
    )
    browser_java_enabled: Optional[bool] = Field(default=None, alias="browserJavaEnabled")

    @staticmethod
    def utc_offset_minutes(hours: int) -> int:
        return -hours * 60


class MpiStatus(str, Enum):
    # 3DS 1.0: card enrolled; 3DS 2.0: no further verification
    Y = "Y"
    # 3DS 2.0: attempted, no further verification
    A = "A"
    # 3DS 2.0: challenge required
    C = "C"
    N = "N"
    U = "U"


class MpiResponse(GatewayResponse):
    status: Status
    result: Optional[Result] = None
    mpi_req_md: Optional[str] = None
    mpi_req_pareq: Optional[str] = None
    mpi_req_url: Optional[str] = None
    mpi_status: Optional[MpiStatus] = None
    mpi_version: Optional[str] = None
    mpi_form: Optional[str] = None
    mpi_cres: Optional[str] = None


@binds(MpiResponse, HashAlgorithm.SHA3_256)
class MpiRequest(GatewayRequest[MpiResponse]):
    """
    Check whether a card takes part in 3-D Secure before paying with it.

    ``action_payment`` names the operation the check is for.
    """

    version: Literal[Version.SEVEN] = Version.SEVEN
    action: Literal[Action.MPI] = Action.MPI
    amount: float
    card: str = Field(repr=False)
    card_exp_month: str
    card_exp_year: str
    currency: Currency
    order_id: str
    description: str
    card_cvv: Optional[str] = Field(default=None, repr=False)
    email: Optional[str] = None
    ip: Optional[str] = None
    action_payment: Optional[
        Literal[
            Action.PAY,
            Action.HOLD,
            Action.SUBSCRIBE,
            Action.PAY_DONATE,
            Action.AUTH,
            Action.P2P,
            Action.P2P_DEBIT,
        ]
    ] = None
    language: Optional[Language] = None
    sender_first_name: Optional[str] = None
    sender_last_name: Optional[str] = None
    three_ds_info: Optional[ThreeDsInfo] = Field(default=None, alias="threeDSInfo")
