"""
Shared request and response building blocks.
"""

from __future__ import annotations

from typing import Any, Generic, Optional

from pydantic import Field, field_validator

from ..core.contract import LiqPayRequest, LiqPayResponse, ResponseT
from .enums import Action, Bonus, Currency, Language, MpiEci, PayType, Result, Status, Version

__all__ = [
    "GatewayRequest",
    "GatewayResponse",
    "PaymentResponse",
]


class GatewayRequest(LiqPayRequest[ResponseT], Generic[ResponseT]):
    """
    Envelope fields present on every gateway request.

    Concrete requests narrow ``version`` and ``action`` to ``Literal`` types
    with matching defaults, so a request cannot be built for a different API
    version or operation than the one its hash algorithm is bound to.

    ``public_key`` may be left out: the clients fill it in from
    :class:`ClientConfig` before signing.
    """

    version: Version
    public_key: Optional[str] = None
    action: Action


class GatewayResponse(LiqPayResponse):
    """Error fields the gateway may attach to any response."""

    error_code: Optional[str] = Field(default=None, alias="err_code")
    error_description: Optional[str] = Field(default=None, alias="err_description")


class PaymentResponse(GatewayResponse):
    """
    Full payment record returned by status, payment and confirmation calls.

    ``result``/``status`` carry business outcome: a declined card is a
    successfully decoded response with ``status == Status.FAILURE``.
    """

    result: Result
    status: Status
    acquirer_id: Optional[int] = Field(default=None, alias="acq_id")
    action: Optional[Action] = None
    agent_commission: Optional[float] = None
    amount: Optional[float] = None
    amount_bonus: Optional[float] = None
    amount_credit: Optional[float] = None
    amount_debit: Optional[float] = None
    authcode_credit: Optional[str] = None
    authcode_debit: Optional[str] = None
    bonus_percent: Optional[float] = Field(default=None, alias="bonus_procent")
    bonus_type: Optional[Bonus] = None
    card_token: Optional[str] = None
    commission_credit: Optional[float] = None
    commission_debit: Optional[float] = None
    confirm_phone: Optional[str] = None
    creation_date: Optional[int] = Field(default=None, alias="create_date")
    currency: Optional[str] = None
    currency_credit: Optional[Currency] = None
    currency_debit: Optional[Currency] = None
    description: Optional[str] = None
    end_date: Optional[int] = None
    info: Optional[str] = None
    ip: Optional[str] = None
    is_3ds: Optional[bool] = None
    language: Optional[Language] = None
    liqpay_order_id: Optional[str] = None
    moment_part: Optional[str] = None
    mpi_eci: Optional[MpiEci] = None
    mpi_cres: Optional[str] = None
    order_id: Optional[str] = None
    payment_id: Optional[int] = None
    pay_type: Optional[PayType] = Field(default=None, alias="paytype")
    public_key: Optional[str] = None
    receiver_commission: Optional[float] = None
    redirect_to: Optional[str] = None
    retrieval_reference_number_credit: Optional[str] = Field(default=None, alias="rrn_credit")
    retrieval_reference_number_debit: Optional[str] = Field(default=None, alias="rrn_debit")
    sender_bonus: Optional[float] = None
    sender_card_bank: Optional[str] = None
    sender_card_country: Optional[int] = None
    sender_card_mask: Optional[str] = Field(default=None, alias="sender_card_mask2")
    sender_card_type: Optional[str] = None
    sender_commission: Optional[float] = None
    sender_first_name: Optional[str] = None
    sender_last_name: Optional[str] = None
    sender_phone: Optional[str] = None
    transaction_id: Optional[int] = None
    operation_type: Optional[str] = Field(default=None, alias="type")
    version: Optional[int] = None
    wait_reserve_status: Optional[str] = None

    @field_validator("authcode_credit", "authcode_debit", "mpi_eci", mode="before")
    @classmethod
    def _numbers_as_text(cls, value: Any) -> Any:
        # the gateway sends these either quoted or bare
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value
