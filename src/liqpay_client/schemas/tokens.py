"""
Card token lifecycle.
"""

from __future__ import annotations

from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.contract import HashAlgorithm, binds
from .common import GatewayRequest, GatewayResponse
from .enums import Action, CardTokenAction, Result, Status, Version

__all__ = [
    "CardTokenDecision",
    "CardTokenInfo",
    "CardTokenStatus",
    "ChangeTokenStatusRequest",
    "ChangeTokenStatusResponse",
    "CreateTokenRequest",
    "CreateTokenResponse",
]


class CardTokenStatus(str, Enum):
    INACTIVE = "INACTIVE"
    ACTIVE = "ACTIVE"
    SUSPENDED = "SUSPENDED"
    DELETED = "DELETED"


class CardTokenDecision(str, Enum):
    APPROVED = "APPROVED"
    REQUIRE_ADDITIONAL_AUTHENTICATION = "REQUIRE_ADDITIONAL_AUTHENTICATION"
    DECLINED = "DECLINED"
    CANCELLED = "CANCELLED"
    ERROR = "ERROR"


class CardTokenInfo(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    token_ref: Optional[str] = Field(default=None, alias="tokenRef")
    token_suffix: Optional[str] = Field(default=None, alias="tokenSuffix")
    token_exp_date: Optional[str] = Field(default=None, alias="tokenExpDate")
    status: Optional[CardTokenStatus] = None
    decision: CardTokenDecision


class CreateTokenResponse(GatewayResponse):
    result: Result
    status: Optional[Status] = None
    card_token: Optional[str] = None
    card_token_info: Optional[CardTokenInfo] = None


@binds(CreateTokenResponse, HashAlgorithm.SHA3_256)
class CreateTokenRequest(GatewayRequest[CreateTokenResponse]):
    """
    Tokenize a card for later debit or credit operations.

    Build requests with one of the constructors: :meth:`from_card`,
    :meth:`for_token_connect` (Mastercard) or :meth:`for_enrollment_hub`
    (Visa). :meth:`unique` turns any of them into a single-use token that
    expires on the given date.
    """

    version: Literal[Version.SEVEN] = Version.SEVEN
    action: Literal[Action.CREATE_TOKEN, Action.CREATE_UNIQUE_TOKEN] = Action.CREATE_TOKEN
    is_debit: bool
    is_credit: bool
    push_account_receipt: Optional[str] = Field(default=None, alias="pushAccountReceipt")
    push_data: Optional[str] = Field(default=None, alias="pushData")
    customer: Optional[str] = None
    card: Optional[str] = Field(default=None, repr=False)
    card_cvv: Optional[str] = Field(default=None, repr=False)
    card_exp_month: Optional[str] = None
    card_exp_year: Optional[str] = None
    expiration_date: Optional[str] = Field(default=None, alias="expired_date")

    @classmethod
    def from_card(
        cls,
        card: str,
        card_cvv: str,
        card_exp_month: str,
        card_exp_year: str,
        *,
        is_debit: bool = True,
        **options,
    ) -> "CreateTokenRequest":
        return cls(
            is_debit=is_debit,
            is_credit=not is_debit,
            card=card,
            card_cvv=card_cvv,
            card_exp_month=card_exp_month,
            card_exp_year=card_exp_year,
            **options,
        )

    @classmethod
    def for_token_connect(
        cls, push_account_receipt: str, *, is_debit: bool = True, **options
    ) -> "CreateTokenRequest":
        return cls(
            is_debit=is_debit,
            is_credit=not is_debit,
            push_account_receipt=push_account_receipt,
            **options,
        )

    @classmethod
    def for_enrollment_hub(
        cls, push_data: str, customer: str, *, is_debit: bool = True, **options
    ) -> "CreateTokenRequest":
        return cls(
            is_debit=is_debit,
            is_credit=not is_debit,
            push_data=push_data,
            customer=customer,
            **options,
        )

    def unique(self, expiration_date: str) -> "CreateTokenRequest":
        """Return a copy requesting a single-use token valid until ``expiration_date``."""
        values = self.model_dump(exclude={"version", "action"}, exclude_none=True)
        values.update(action=Action.CREATE_UNIQUE_TOKEN, expiration_date=expiration_date)
        return type(self)(**values)


class ChangeTokenStatusResponse(GatewayResponse):
    result: Result
    status: Optional[Status] = None
    card_token: Optional[str] = None
    card_token_info: Optional[CardTokenInfo] = None


@binds(ChangeTokenStatusResponse, HashAlgorithm.SHA3_256)
class ChangeTokenStatusRequest(GatewayRequest[ChangeTokenStatusResponse]):
    """Suspend, reactivate or delete a card token."""

    version: Literal[Version.SEVEN] = Version.SEVEN
    action: Literal[Action.UPDATE_TOKEN] = Action.UPDATE_TOKEN
    card_token: str
    card_token_action: CardTokenAction
