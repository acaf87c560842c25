"""
Request and response models for the gateway operations.

Importing this package registers every request type with its response type
and hash algorithm.
"""

from .acquiring import (
    CancelInvoiceRequest,
    CancelInvoiceResponse,
    CancelSubscriptionRequest,
    CancelSubscriptionResponse,
    CardPaymentRequest,
    CardPaymentResponse,
    DetailAddenda,
    DigitalWallet,
    FundsBlockingRequest,
    FundsBlockingResponse,
    InvoiceUnit,
    InvoiceUnitsRequest,
    InvoiceUnitsResponse,
    PaymentCompletionRequest,
    PaymentCompletionResponse,
    RefundRequest,
    RefundResponse,
    RroInfo,
    RroItem,
    SendInvoiceRequest,
    SendInvoiceResponse,
    SubscribeRequest,
    SubscribeResponse,
    TokenPaymentRequest,
    TokenPaymentResponse,
    UpdateSubscriptionRequest,
    UpdateSubscriptionResponse,
)
from .common import GatewayRequest, GatewayResponse, PaymentResponse
from .enums import (
    Action,
    Bonus,
    CardTokenAction,
    Currency,
    Language,
    MpiEci,
    PayType,
    Prepare,
    ResponseFormat,
    Result,
    Status,
    SubscribePeriodicity,
    Version,
)
from .information import (
    AddDataRequest,
    AddDataResponse,
    ArchiveEntry,
    ArchiveRequest,
    ArchiveResponse,
    SendReceiptRequest,
    SendReceiptResponse,
    StatusRequest,
    StatusResponse,
)
from .p2p import P2PCreditRequest, P2PCreditResponse, P2PDebitRequest, P2PDebitResponse
from .partner import (
    DocumentType,
    MccCode,
    MccCodesRequest,
    MccCodesResponse,
    MccDocument,
    MccDocumentsRequest,
    MccDocumentsResponse,
)
from .reports import (
    Channel,
    CompensationReportFileRequest,
    CompensationReportFileResponse,
    CompensationReportFileStatusRequest,
    CompensationReportFileStatusResponse,
    CompensationReportRequest,
    CompensationReportResponse,
    P2PCompensationReportFileRequest,
    P2PReportType,
    RegistryEntry,
    RegistryRequest,
    RegistryResponse,
)
from .tokens import (
    CardTokenDecision,
    CardTokenInfo,
    CardTokenStatus,
    ChangeTokenStatusRequest,
    ChangeTokenStatusResponse,
    CreateTokenRequest,
    CreateTokenResponse,
)
from .verification import (
    BrowserColorDepth,
    CardVerificationRequest,
    CardVerificationResponse,
    MpiRequest,
    MpiResponse,
    MpiStatus,
    OtpRequest,
    OtpResponse,
    ThreeDsInfo,
)

__all__ = [
    "Action",
    "AddDataRequest",
    "AddDataResponse",
    "ArchiveEntry",
    "ArchiveRequest",
    "ArchiveResponse",
    "Bonus",
    "BrowserColorDepth",
    "CancelInvoiceRequest",
    "CancelInvoiceResponse",
    "CancelSubscriptionRequest",
    "CancelSubscriptionResponse",
    "CardPaymentRequest",
    "CardPaymentResponse",
    "CardTokenAction",
    "CardTokenDecision",
    "CardTokenInfo",
    "CardTokenStatus",
    "CardVerificationRequest",
    "CardVerificationResponse",
    "ChangeTokenStatusRequest",
    "ChangeTokenStatusResponse",
    "Channel",
    "CompensationReportFileRequest",
    "CompensationReportFileResponse",
    "CompensationReportFileStatusRequest",
    "CompensationReportFileStatusResponse",
    "CompensationReportRequest",
    "CompensationReportResponse",
    "CreateTokenRequest",
    "CreateTokenResponse",
    "Currency",
    "DetailAddenda",
    "DigitalWallet",
    "DocumentType",
    "FundsBlockingRequest",
    "FundsBlockingResponse",
    "GatewayRequest",
    "GatewayResponse",
    "InvoiceUnit",
    "InvoiceUnitsRequest",
    "InvoiceUnitsResponse",
    "Language",
    "MccCode",
    "MccCodesRequest",
    "MccCodesResponse",
    "MccDocument",
    "MccDocumentsRequest",
    "MccDocumentsResponse",
    "MpiEci",
    "MpiRequest",
    "MpiResponse",
    "MpiStatus",
    "OtpRequest",
    "OtpResponse",
    "P2PCompensationReportFileRequest",
    "P2PCreditRequest",
    "P2PCreditResponse",
    "P2PDebitRequest",
    "P2PDebitResponse",
    "P2PReportType",
    "PayType",
    "PaymentCompletionRequest",
    "PaymentCompletionResponse",
    "PaymentResponse",
    "Prepare",
    "RefundRequest",
    "RefundResponse",
    "RegistryEntry",
    "RegistryRequest",
    "RegistryResponse",
    "ResponseFormat",
    "Result",
    "RroInfo",
    "RroItem",
    "SendInvoiceRequest",
    "SendInvoiceResponse",
    "SendReceiptRequest",
    "SendReceiptResponse",
    "Status",
    "StatusRequest",
    "StatusResponse",
    "SubscribePeriodicity",
    "SubscribeRequest",
    "SubscribeResponse",
    "ThreeDsInfo",
    "TokenPaymentRequest",
    "TokenPaymentResponse",
    "UpdateSubscriptionRequest",
    "UpdateSubscriptionResponse",
    "Version",
]
