"""
Enumerated wire values shared by the gateway schemas.
"""

from __future__ import annotations

from enum import Enum

__all__ = [
    "Action",
    "Bonus",
    "CardTokenAction",
    "Currency",
    "Language",
    "MpiEci",
    "PayType",
    "Prepare",
    "ResponseFormat",
    "Result",
    "Status",
    "SubscribePeriodicity",
    "Version",
]


class Version(str, Enum):
    # legacy endpoints, signed with SHA-1
    THREE = "3"
    # current endpoints, signed with SHA3-256
    SEVEN = "7"


class Action(str, Enum):
    PAY = "pay"
    SEND_INVOICE = "invoice_send"
    CANCEL_INVOICE = "invoice_cancel"
    PAY_QR_CODE = "payqr"
    CREATE_QR_CODE = "staticQrCreate"
    PAY_TOKEN = "paytoken"
    PAY_CASH = "paycash"
    PAY_TRACK = "paytrack"
    REFUND = "refund"
    HOLD = "hold"
    HOLD_COMPLETION = "hold_completion"
    SUBSCRIBE = "subscribe"
    UPDATE_SUBSCRIPTION = "subscribe_update"
    PAY_DONATE = "paydonate"
    AUTH = "auth"
    STATUS = "status"
    UNSUBSCRIBE = "unsubscribe"
    TICKET = "ticket"
    PAY_SPLIT = "paysplit"
    REGULAR = "regular"
    PREPARE_PAYMENT = "payment_prepare"
    P2P_CREDIT = "p2pcredit"
    P2P_DEBIT = "p2pdebit"
    P2P = "p2p"
    CARD_VERIFICATION = "cardverification"
    REPORTS = "reports"
    CREATE_TOKEN = "token_create"
    CREATE_UNIQUE_TOKEN = "token_create_unique"
    UPDATE_TOKEN = "token_update"
    REPORTS_COMPENSATION = "reports_compensation"
    REPORTS_COMPENSATION_FILE = "reports_compensation_file"
    REPORTS_COMPENSATION_FILE_STATUS = "reports_compensation_file_status"
    REGISTRY = "register"
    DATA = "data"
    CREATE_SHOP = "agent_shop_create"
    REGISTER_SHOP = "agent_shop_register"
    EDIT_SHOP = "agent_shop_edit"
    MCC_CODES = "agent_info_mcc_codes"
    MERCHANT_INFO = "agent_info_merchant"
    USER_INFO = "agent_info_user"
    GET_INVOICE_UNITS = "invoice_units_get_list"
    GET_INVOICE_UNITS_BY_LANGUAGE = "invoice_units_get_list_by_lang"
    CONFIRM = "confirm"
    MPI = "mpi"


class Bonus(str, Enum):
    BONUS_PLUS = "bonusplus"
    DISCOUNT_CLUB = "discount_club"
    PERSONAL = "personal"
    PROMO = "promo"


class Currency(str, Enum):
    UAH = "UAH"
    EUR = "EUR"
    USD = "USD"


class Language(str, Enum):
    EN = "en"
    UK = "uk"


class MpiEci(str, Enum):
    SUCCESS_3DS = "5"
    NOT_SUPPORTED_3DS = "6"
    WITHOUT_3DS = "7"


class PayType(str, Enum):
    CARD = "card"
    LIQPAY = "liqpay"
    PRIVAT24 = "privat24"
    MASTERPASS = "masterpass"
    MOMENT_PART = "moment_part"
    PAY_PART = "paypart"
    CASH = "cash"
    INVOICE = "invoice"
    QR = "qr"
    APPLE_PAY = "apay"
    GOOGLE_PAY = "gpay"
    APPLE_PAY_DECRYPTED = "apay_tavv"
    GOOGLE_PAY_DECRYPTED = "gpay_tavv"
    TAVV = "tavv"


class Result(str, Enum):
    OK = "ok"
    ERROR = "error"
    # reports endpoints answer with "success" instead of "ok"
    SUCCESS = "success"


class Status(str, Enum):
    """Payment and request statuses reported by the gateway."""

    ERROR = "error"
    FAILURE = "failure"
    REVERSED = "reversed"
    SUCCESS = "success"
    VERIFY_3DS = "3ds_verify"
    VERIFY_CVV = "cvv_verify"
    VERIFY_OTP = "otp_verify"
    VERIFY_IVR = "ivr_verify"
    VERIFY_PASSWORD = "password_verify"
    VERIFY_PHONE = "phone_verify"
    VERIFY_PIN = "pin_verify"
    VERIFY_RECEIVER = "receiver_verify"
    VERIFY_SENDER = "sender_verify"
    VERIFY_SENDER_APP = "senderapp_verify"
    VERIFY_CAPTCHA = "captcha_verify"
    VERIFY_MASTERPASS = "mp_verify"
    VERIFY_P24 = "p24_verify"
    WAIT_ACCEPT = "wait_accept"
    WAIT_CARD = "wait_card"
    WAIT_COMPENSATION = "wait_compensation"
    WAIT_LC = "wait_lc"
    WAIT_RESERVE = "wait_reserve"
    WAIT_SECURE = "wait_secure"
    WAIT_QR = "wait_qr"
    WAIT_SENDER = "wait_sender"
    WAIT_CASH = "cash_wait"
    WAIT_HOLD = "hold_wait"
    WAIT_INVOICE = "invoice_wait"
    SUBSCRIBED = "subscribed"
    UNSUBSCRIBED = "unsubscribed"
    PREPARED = "prepared"
    PROCESSING = "processing"
    TRY_AGAIN = "try_again"
    ACTIVE = "active"
    SANDBOX = "sandbox"


class Prepare(str, Enum):
    ENABLE = "1"
    TARIFFS = "tariffs"


class ResponseFormat(str, Enum):
    JSON = "json"
    CSV = "csv"
    XML = "xml"


class CardTokenAction(str, Enum):
    SUSPEND = "SUSPEND"
    UNSUSPEND = "UNSUSPEND"
    DELETE = "DELETE"


class SubscribePeriodicity(str, Enum):
    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
