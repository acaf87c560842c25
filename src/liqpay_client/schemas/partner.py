"""
Partner (agent) reference data: merchant category codes and the documents
each code requires.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.contract import HashAlgorithm, binds
from .common import GatewayRequest, GatewayResponse
from .enums import Action, Language, Result, Status, Version

__all__ = [
    "DocumentType",
    "MccCode",
    "MccCodesRequest",
    "MccCodesResponse",
    "MccDocument",
    "MccDocumentsRequest",
    "MccDocumentsResponse",
]


class MccCode(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    mcc_code: Optional[int] = None
    name: Optional[str] = None
    parent_id: Optional[int] = None


class MccCodesResponse(GatewayResponse):
    result: Result
    status: Status
    mcc_codes: Optional[List[MccCode]] = None


@binds(MccCodesResponse, HashAlgorithm.SHA1)
class MccCodesRequest(GatewayRequest[MccCodesResponse]):
    version: Literal[Version.THREE] = Version.THREE
    action: Literal[Action.MCC_CODES] = Action.MCC_CODES
    language: Optional[Language] = None


class DocumentType(str, Enum):
    REQUIRED = "required"
    ALL_OF = "allof"
    OPTIONAL = "optional"


class MccDocument(BaseModel):
    model_config = ConfigDict(frozen=True)

    doc_id: int
    doc_type: DocumentType
    name: str
    alt_docs: List[int] = Field(default_factory=list)
    description: str = ""


class MccDocumentsResponse(GatewayResponse):
    result: Result
    status: Status
    mcc_docs: Optional[List[MccDocument]] = None


@binds(MccDocumentsResponse, HashAlgorithm.SHA1)
class MccDocumentsRequest(GatewayRequest[MccDocumentsResponse]):
    """Documents a merchant must upload to register under ``mcc_code``."""

    version: Literal[Version.THREE] = Version.THREE
    action: Literal[Action.MCC_CODES] = Action.MCC_CODES
    mcc_code: int
    language: Optional[Language] = None
