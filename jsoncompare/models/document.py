"""JSON document and comparison data models"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from .diff import DiffResult


class ValidationResult(BaseModel):
    """Outcome of parsing one document"""

    valid: bool
    value: Any = None  # parsed document, only meaningful when valid
    message: str
    line: int | None = None  # 1-indexed position of the parse failure
    column: int | None = None


class ValidateRequest(BaseModel):
    """Request to validate a JSON document"""

    text: str


class ValidateResponse(BaseModel):
    """Validation response"""

    valid: bool
    message: str
    line: int | None = None
    column: int | None = None


class FormatRequest(BaseModel):
    """Request to pretty-print a JSON document"""

    text: str
    sort_keys: bool | None = None  # None means use the configured default
    indent: int | None = Field(default=None, ge=1, le=8)


class MinifyRequest(BaseModel):
    """Request to minify a JSON document"""

    text: str
    sort_keys: bool | None = None


class FormatResponse(BaseModel):
    """Re-serialized document"""

    text: str
    sort_keys: bool


class LinesDiffRequest(BaseModel):
    """Request to diff two pre-split line sequences"""

    left: list[str]
    right: list[str]


class TextDiffRequest(BaseModel):
    """Request to diff two plain texts"""

    left: str
    right: str


class CompareRequest(BaseModel):
    """Request to compare two JSON documents"""

    left: str
    right: str
    sort_keys: bool | None = None


class SideStatus(BaseModel):
    """Validation status of one side of a comparison"""

    valid: bool
    message: str
    line: int | None = None
    column: int | None = None


class CompareResponse(BaseModel):
    """Canonical forms of both documents and their line diff"""

    left: str
    right: str
    left_status: SideStatus
    right_status: SideStatus
    sort_keys: bool
    diff: DiffResult
