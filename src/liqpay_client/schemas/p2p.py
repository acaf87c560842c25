"""
Person-to-person transfers: payouts to a card or account (credit) and
collection from a payer's card (debit).
"""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import Field

from ..core.contract import HashAlgorithm, binds
from .common import GatewayRequest, PaymentResponse
from .enums import Action, Currency, Language, MpiEci, Prepare, Version

__all__ = [
    "P2PCreditRequest",
    "P2PCreditResponse",
    "P2PDebitRequest",
    "P2PDebitResponse",
]


class P2PCreditResponse(PaymentResponse):
    pass


@binds(P2PCreditResponse, HashAlgorithm.SHA3_256)
class P2PCreditRequest(GatewayRequest[P2PCreditResponse]):
    """
    Pay out to a card, a card token or a bank account.

    Use :meth:`to_card`, :meth:`to_card_token` or :meth:`to_account` so that
    exactly one receiver is set.
    """

    version: Literal[Version.SEVEN] = Version.SEVEN
    action: Literal[Action.P2P_CREDIT] = Action.P2P_CREDIT
    amount: float
    currency: Currency
    order_id: str
    description: str
    ip: Optional[str] = None
    language: Optional[Language] = None
    server_url: Optional[str] = None
    taxed: Optional[str] = None
    receiver_account: Optional[str] = None
    receiver_mfo: Optional[str] = None
    receiver_okpo: Optional[str] = None
    receiver_company: Optional[str] = None
    receiver_card: Optional[str] = Field(default=None, repr=False)
    receiver_card_token: Optional[str] = None
    receiver_first_name: Optional[str] = None
    receiver_last_name: Optional[str] = None
    sender_first_name: Optional[str] = None
    sender_last_name: Optional[str] = None
    sender_country_code: Optional[str] = None
    sender_city: Optional[str] = None
    sender_address: Optional[str] = None
    sender_postal_code: Optional[str] = None
    customer: Optional[str] = None
    info: Optional[str] = None

    @classmethod
    def to_card(cls, card: str, **options) -> "P2PCreditRequest":
        return cls(receiver_card=card, **options)

    @classmethod
    def to_card_token(cls, card_token: str, **options) -> "P2PCreditRequest":
        return cls(receiver_card_token=card_token, **options)

    @classmethod
    def to_account(
        cls, account: str, mfo: str, okpo: str, company: str, **options
    ) -> "P2PCreditRequest":
        return cls(
            receiver_account=account,
            receiver_mfo=mfo,
            receiver_okpo=okpo,
            receiver_company=company,
            **options,
        )


class P2PDebitResponse(PaymentResponse):
    pass


@binds(P2PDebitResponse, HashAlgorithm.SHA3_256)
class P2PDebitRequest(GatewayRequest[P2PDebitResponse]):
    """Collect funds from a payer's card, given in full or as a card token."""

    version: Literal[Version.SEVEN] = Version.SEVEN
    action: Literal[Action.P2P_DEBIT] = Action.P2P_DEBIT
    amount: float
    currency: Currency
    order_id: str
    description: str
    card: Optional[str] = Field(default=None, repr=False)
    card_cvv: Optional[str] = Field(default=None, repr=False)
    card_exp_month: Optional[str] = None
    card_exp_year: Optional[str] = None
    card_token: Optional[str] = None
    phone: Optional[str] = None
    language: Optional[Language] = None
    prepare: Optional[Prepare] = None
    recurring_by_token: Optional[str] = Field(default=None, alias="recurringbytoken")
    result_url: Optional[str] = None
    server_url: Optional[str] = None
    sandbox: Optional[str] = None
    sender_first_name: Optional[str] = None
    sender_last_name: Optional[str] = None
    sender_email: Optional[str] = None
    sender_country_code: Optional[str] = None
    sender_city: Optional[str] = None
    sender_address: Optional[str] = None
    sender_state: Optional[str] = None
    sender_shipping_state: Optional[str] = None
    sender_postal_code: Optional[str] = None
    mpi_eci: Optional[MpiEci] = None
    mpi_cres: Optional[str] = None

    @classmethod
    def from_card(
        cls,
        card: str,
        card_cvv: str,
        card_exp_month: str,
        card_exp_year: str,
        **options,
    ) -> "P2PDebitRequest":
        return cls(
            card=card,
            card_cvv=card_cvv,
            card_exp_month=card_exp_month,
            card_exp_year=card_exp_year,
            **options,
        )

    @classmethod
    def from_card_token(cls, card_token: str, **options) -> "P2PDebitRequest":
        return cls(card_token=card_token, **options)
