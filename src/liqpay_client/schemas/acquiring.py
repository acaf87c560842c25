"""
Internet acquiring: card and token payments, refunds, invoices,
subscriptions and two-step (hold, then complete) payments.
"""

from __future__ import annotations

import base64
import json
from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.contract import HashAlgorithm, binds
from .common import GatewayRequest, GatewayResponse, PaymentResponse
from .enums import (
    Action,
    Currency,
    Language,
    PayType,
    Prepare,
    Result,
    Status,
    SubscribePeriodicity,
    Version,
)

__all__ = [
    "CancelInvoiceRequest",
    "CancelInvoiceResponse",
    "CancelSubscriptionRequest",
    "CancelSubscriptionResponse",
    "CardPaymentRequest",
    "CardPaymentResponse",
    "DetailAddenda",
    "DigitalWallet",
    "FundsBlockingRequest",
    "FundsBlockingResponse",
    "InvoiceUnit",
    "InvoiceUnitsRequest",
    "InvoiceUnitsResponse",
    "PaymentCompletionRequest",
    "PaymentCompletionResponse",
    "RefundRequest",
    "RefundResponse",
    "RroInfo",
    "RroItem",
    "SendInvoiceRequest",
    "SendInvoiceResponse",
    "SubscribeRequest",
    "SubscribeResponse",
    "TokenPaymentRequest",
    "TokenPaymentResponse",
    "UpdateSubscriptionRequest",
    "UpdateSubscriptionResponse",
]


class DetailAddenda(BaseModel):
    """
    Airline ticket details, sent as the base64 ``dae`` field of a payment.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    airline: Optional[str] = Field(default=None, alias="airLine")
    ticket_number: Optional[str] = Field(default=None, alias="ticketNumber")
    passenger_name: Optional[str] = Field(default=None, alias="passengerName")
    flight_number: Optional[str] = Field(default=None, alias="flightNumber")
    origin_city: Optional[str] = Field(default=None, alias="originCity")
    destination_city: Optional[str] = Field(default=None, alias="destinationCity")
    departure_date: Optional[int] = Field(default=None, alias="departureDate")

    def to_base64(self) -> str:
        text = json.dumps(
            self.model_dump(by_alias=True, exclude_none=True),
            separators=(",", ":"),
            ensure_ascii=False,
        )
        return base64.b64encode(text.encode("utf-8")).decode("ascii")


class RroItem(BaseModel):
    """A fiscal receipt line (goods id, quantity, total cost and unit price)."""

    model_config = ConfigDict(frozen=True)

    id: int
    amount: int
    cost: float
    price: float


class RroInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    items: Optional[List[RroItem]] = None
    delivery_emails: Optional[List[str]] = None


class CardPaymentResponse(PaymentResponse):
    pass


@binds(CardPaymentResponse, HashAlgorithm.SHA3_256)
class CardPaymentRequest(GatewayRequest[CardPaymentResponse]):
    """
    Direct charge of card details collected by the merchant.

    Not safe to retry blindly: check the payment with :class:`StatusRequest`
    before charging the same ``order_id`` again.
    """

    version: Literal[Version.SEVEN] = Version.SEVEN
    action: Literal[Action.PAY] = Action.PAY
    amount: float
    card: str = Field(repr=False)
    card_exp_month: str
    card_exp_year: str
    currency: Currency
    order_id: str
    description: str
    card_cvv: Optional[str] = Field(default=None, repr=False)
    ip: Optional[str] = None
    phone: Optional[str] = None
    pay_type: Optional[PayType] = Field(default=None, alias="paytype")
    tavv: Optional[str] = None
    tid: Optional[str] = None
    language: Optional[Language] = None
    prepare: Optional[Prepare] = None
    recurring_by_token: Optional[str] = Field(default=None, alias="recurringbytoken")
    result_url: Optional[str] = None
    recurring: Optional[bool] = None
    server_url: Optional[str] = None
    eci: Optional[str] = None
    cavv: Optional[str] = None
    tdsv: Optional[str] = None
    ds_trans_id: Optional[str] = Field(default=None, alias="dsTransID")
    rro_info: Optional[RroInfo] = None
    split_rules: Optional[str] = None
    split_tickets_only: Optional[bool] = None
    sender_first_name: Optional[str] = None
    sender_last_name: Optional[str] = None
    sender_email: Optional[str] = None
    sender_country_code: Optional[str] = None
    sender_city: Optional[str] = None
    sender_address: Optional[str] = None
    sender_state: Optional[str] = None
    sender_shipping_state: Optional[str] = None
    sender_postal_code: Optional[str] = None
    customer: Optional[str] = None
    detail_addenda: Optional[str] = Field(default=None, alias="dae")
    info: Optional[str] = None
    product_category: Optional[str] = None
    product_description: Optional[str] = None
    product_name: Optional[str] = None
    product_url: Optional[str] = None


class TokenPaymentResponse(PaymentResponse):
    pass


@binds(TokenPaymentResponse, HashAlgorithm.SHA1)
class TokenPaymentRequest(GatewayRequest[TokenPaymentResponse]):
    """Charge a previously tokenized card (legacy API version)."""

    version: Literal[Version.THREE] = Version.THREE
    action: Literal[Action.PAY] = Action.PAY
    amount: float
    card_token: str
    currency: Currency
    order_id: str
    description: str
    ip: Optional[str] = None
    phone: Optional[str] = None
    language: Optional[Language] = None
    prepare: Optional[str] = None
    server_url: Optional[str] = None
    split_rules: Optional[str] = None
    split_tickets_only: Optional[bool] = None
    sender_address: Optional[str] = None
    sender_city: Optional[str] = None
    sender_country_code: Optional[str] = None
    sender_first_name: Optional[str] = None
    sender_last_name: Optional[str] = None
    sender_postal_code: Optional[str] = None
    customer: Optional[str] = None
    detail_addenda: Optional[str] = Field(default=None, alias="dae")
    info: Optional[str] = None
    product_category: Optional[str] = None
    product_description: Optional[str] = None
    product_name: Optional[str] = None
    product_url: Optional[str] = None
    is_recurring: Optional[bool] = None


class RefundResponse(GatewayResponse):
    result: Result
    status: Status
    wait_amount: Optional[bool] = None
    action: Optional[Action] = None
    payment_id: Optional[int] = None


@binds(RefundResponse, HashAlgorithm.SHA3_256)
class RefundRequest(GatewayRequest[RefundResponse]):
    version: Literal[Version.SEVEN] = Version.SEVEN
    action: Literal[Action.REFUND] = Action.REFUND
    order_id: str
    amount: float


class CancelInvoiceResponse(GatewayResponse):
    result: Result
    invoice_id: Optional[int] = None


@binds(CancelInvoiceResponse, HashAlgorithm.SHA3_256)
class CancelInvoiceRequest(GatewayRequest[CancelInvoiceResponse]):
    version: Literal[Version.SEVEN] = Version.SEVEN
    action: Literal[Action.CANCEL_INVOICE] = Action.CANCEL_INVOICE
    order_id: str


class InvoiceUnit(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    rro_unit_id: Optional[int] = None
    full_name_en: Optional[str] = None
    full_name_uk: Optional[str] = None
    full_name: Optional[str] = None
    short_name: Optional[str] = None
    short_name_en: Optional[str] = None
    short_name_uk: Optional[str] = None


class InvoiceUnitsResponse(GatewayResponse):
    result: Result
    status: Status
    units: Optional[List[InvoiceUnit]] = None


@binds(InvoiceUnitsResponse, HashAlgorithm.SHA1)
class InvoiceUnitsRequest(GatewayRequest[InvoiceUnitsResponse]):
    """
    Measurement units for invoice items.

    Use :meth:`full` for every translation or :meth:`by_language` for one.
    """

    version: Literal[Version.THREE] = Version.THREE
    action: Literal[
        Action.GET_INVOICE_UNITS, Action.GET_INVOICE_UNITS_BY_LANGUAGE
    ] = Action.GET_INVOICE_UNITS
    hide_language_name: Optional[bool] = Field(default=None, alias="hide_name_lang")
    language: Optional[Language] = None

    @classmethod
    def full(cls, **options) -> "InvoiceUnitsRequest":
        return cls(action=Action.GET_INVOICE_UNITS, **options)

    @classmethod
    def by_language(cls, language: Language, **options) -> "InvoiceUnitsRequest":
        return cls(action=Action.GET_INVOICE_UNITS_BY_LANGUAGE, language=language, **options)


class CancelSubscriptionResponse(PaymentResponse):
    pass


@binds(CancelSubscriptionResponse, HashAlgorithm.SHA3_256)
class CancelSubscriptionRequest(GatewayRequest[CancelSubscriptionResponse]):
    version: Literal[Version.SEVEN] = Version.SEVEN
    action: Literal[Action.UNSUBSCRIBE] = Action.UNSUBSCRIBE
    order_id: str


class SubscribeResponse(PaymentResponse):
    pass


@binds(SubscribeResponse, HashAlgorithm.SHA3_256)
class SubscribeRequest(GatewayRequest[SubscribeResponse]):
    """
    Charge a card now and then on a fixed schedule.

    ``subscribe_date_start`` is a UTC ``YYYY-MM-DD HH:MM:SS`` string. Use
    :class:`UpdateSubscriptionRequest` to change the amount and
    :class:`CancelSubscriptionRequest` to stop it.
    """

    version: Literal[Version.SEVEN] = Version.SEVEN
    action: Literal[Action.SUBSCRIBE] = Action.SUBSCRIBE
    amount: float
    card: str = Field(repr=False)
    card_exp_month: str
    card_exp_year: str
    currency: Currency
    order_id: str
    description: str
    subscribe_date_start: str
    subscribe_periodicity: SubscribePeriodicity
    card_cvv: Optional[str] = Field(default=None, repr=False)
    ip: Optional[str] = None
    phone: Optional[str] = None
    language: Optional[Language] = None
    prepare: Optional[Prepare] = None
    recurring_by_token: Optional[str] = Field(default=None, alias="recurringbytoken")
    recurring: Optional[bool] = None
    server_url: Optional[str] = None
    subscribe: Optional[str] = None
    sender_address: Optional[str] = None
    sender_city: Optional[str] = None
    sender_country_code: Optional[str] = None
    sender_first_name: Optional[str] = None
    sender_last_name: Optional[str] = None
    sender_postal_code: Optional[str] = None
    customer: Optional[str] = None
    detail_addenda: Optional[str] = Field(default=None, alias="dae")
    info: Optional[str] = None
    product_category: Optional[str] = None
    product_description: Optional[str] = None
    product_name: Optional[str] = None
    product_url: Optional[str] = None


class UpdateSubscriptionResponse(PaymentResponse):
    pass


@binds(UpdateSubscriptionResponse, HashAlgorithm.SHA3_256)
class UpdateSubscriptionRequest(GatewayRequest[UpdateSubscriptionResponse]):
    version: Literal[Version.SEVEN] = Version.SEVEN
    action: Literal[Action.UPDATE_SUBSCRIPTION] = Action.UPDATE_SUBSCRIPTION
    amount: float
    currency: Currency
    order_id: str
    description: str


class SendInvoiceResponse(GatewayResponse):
    result: Result
    status: Status
    action: Optional[Action] = None
    amount: Optional[float] = None
    currency: Optional[str] = None
    description: Optional[str] = None
    href: Optional[str] = None
    id: Optional[int] = None
    order_id: Optional[str] = None
    receiver_type: Optional[str] = None
    receiver_value: Optional[str] = None
    token: Optional[str] = None


@binds(SendInvoiceResponse, HashAlgorithm.SHA3_256)
class SendInvoiceRequest(GatewayRequest[SendInvoiceResponse]):
    """
    Email an invoice to a customer.

    ``action_payment`` picks what paying the invoice does: ``pay`` (the
    gateway default), ``hold``, ``subscribe`` or ``paydonate``. Withdraw an
    unpaid invoice with :class:`CancelInvoiceRequest`.
    """

    version: Literal[Version.SEVEN] = Version.SEVEN
    action: Literal[Action.SEND_INVOICE] = Action.SEND_INVOICE
    amount: float
    currency: Currency
    order_id: str
    email: str
    description: Optional[str] = None
    phone: Optional[str] = None
    rro_info: Optional[RroInfo] = None
    action_payment: Optional[
        Literal[Action.PAY, Action.HOLD, Action.SUBSCRIBE, Action.PAY_DONATE]
    ] = None
    expiration_date: Optional[str] = Field(default=None, alias="expired_date")
    goods: Optional[str] = None
    language: Optional[Language] = None
    result_url: Optional[str] = None
    server_url: Optional[str] = None


class DigitalWallet(Enum):
    APPLE_PAY = "applepay_token"
    GOOGLE_PAY = "gpay_token"


class FundsBlockingResponse(PaymentResponse):
    pass


@binds(FundsBlockingResponse, HashAlgorithm.SHA3_256)
class FundsBlockingRequest(GatewayRequest[FundsBlockingResponse]):
    """
    First step of a two-step payment: reserve ``amount`` on the payer's card.

    Capture the reserved funds later with :class:`PaymentCompletionRequest`.
    Build requests with :meth:`from_card` or :meth:`from_wallet`.
    """

    version: Literal[Version.SEVEN] = Version.SEVEN
    action: Literal[Action.HOLD] = Action.HOLD
    amount: float
    currency: Currency
    order_id: str
    description: str
    apple_pay_token: Optional[str] = Field(default=None, alias="applepay_token", repr=False)
    card: Optional[str] = Field(default=None, repr=False)
    card_cvv: Optional[str] = Field(default=None, repr=False)
    card_exp_month: Optional[str] = None
    card_exp_year: Optional[str] = None
    google_pay_token: Optional[str] = Field(default=None, alias="gpay_token", repr=False)
    ip: Optional[str] = None
    phone: Optional[str] = None
    pay_type: Optional[PayType] = Field(default=None, alias="paytype")
    tid: Optional[str] = None
    language: Optional[Language] = None
    prepare: Optional[Prepare] = None
    recurring_by_token: Optional[str] = Field(default=None, alias="recurringbytoken")
    recurring: Optional[bool] = None
    server_url: Optional[str] = None
    tavv: Optional[str] = None
    eci: Optional[str] = None
    cavv: Optional[str] = None
    tdsv: Optional[str] = None
    ds_trans_id: Optional[str] = Field(default=None, alias="dsTransID")
    sender_first_name: Optional[str] = None
    sender_last_name: Optional[str] = None
    sender_email: Optional[str] = None
    sender_country_code: Optional[str] = None
    sender_city: Optional[str] = None
    sender_address: Optional[str] = None
    sender_state: Optional[str] = None
    sender_shipping_state: Optional[str] = None
    sender_postal_code: Optional[str] = None
    split_rules: Optional[str] = None
    customer: Optional[str] = None
    detail_addenda: Optional[str] = Field(default=None, alias="dae")
    info: Optional[str] = None

    @classmethod
    def from_card(
        cls,
        card: str,
        card_exp_month: str,
        card_exp_year: str,
        **options,
    ) -> "FundsBlockingRequest":
        return cls(
            card=card,
            card_exp_month=card_exp_month,
            card_exp_year=card_exp_year,
            **options,
        )

    @classmethod
    def from_wallet(
        cls, wallet: DigitalWallet, token: str, **options
    ) -> "FundsBlockingRequest":
        """Reserve funds with a raw Apple Pay or Google Pay token."""
        pay_type = PayType.APPLE_PAY if wallet is DigitalWallet.APPLE_PAY else PayType.GOOGLE_PAY
        encoded = base64.b64encode(token.encode("utf-8")).decode("ascii")
        return cls(**{wallet.value: encoded, "paytype": pay_type}, **options)


class PaymentCompletionResponse(PaymentResponse):
    pass


@binds(PaymentCompletionResponse, HashAlgorithm.SHA3_256)
class PaymentCompletionRequest(GatewayRequest[PaymentCompletionResponse]):
    """Capture funds reserved by :class:`FundsBlockingRequest`, fully or in part."""

    version: Literal[Version.SEVEN] = Version.SEVEN
    action: Literal[Action.HOLD_COMPLETION] = Action.HOLD_COMPLETION
    amount: float
    order_id: str
    rro_info: Optional[RroInfo] = None
    split_tickets_only: Optional[bool] = None
