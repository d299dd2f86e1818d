"""Models module - Pydantic data models"""

from .config import DiffSettings, JsonSettings, ServerSettings
from .diff import DiffKind, DiffRecord, DiffResult
from .document import (
    CompareRequest,
    CompareResponse,
    FormatRequest,
    FormatResponse,
    LinesDiffRequest,
    MinifyRequest,
    SideStatus,
    TextDiffRequest,
    ValidateRequest,
    ValidateResponse,
    ValidationResult,
)

__all__ = [
    # Settings models
    "DiffSettings",
    "JsonSettings",
    "ServerSettings",
    # Diff models
    "DiffKind",
    "DiffRecord",
    "DiffResult",
    # Document models
    "CompareRequest",
    "CompareResponse",
    "FormatRequest",
    "FormatResponse",
    "LinesDiffRequest",
    "MinifyRequest",
    "SideStatus",
    "TextDiffRequest",
    "ValidateRequest",
    "ValidateResponse",
    "ValidationResult",
]
