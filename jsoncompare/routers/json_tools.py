"""JSON document API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException

from jsoncompare.exceptions import InvalidJsonError
from jsoncompare.models.document import (
    FormatRequest,
    FormatResponse,
    MinifyRequest,
    ValidateRequest,
    ValidateResponse,
)
from jsoncompare.services.config_manager import ConfigManager
from jsoncompare.services.json_document import (
    DEFAULT_INDENT,
    format_json,
    minify_json,
    parse_json,
    validate_json,
)

router = APIRouter()


def _parse_or_400(text: str):
    try:
        return parse_json(text)
    except InvalidJsonError as e:
        raise HTTPException(status_code=400, detail=e.to_dict())


@router.post("/validate", response_model=ValidateResponse)
async def validate(request: ValidateRequest) -> ValidateResponse:
    """Check whether a document is valid JSON"""
    result = validate_json(request.text)
    return ValidateResponse(
        valid=result.valid,
        message=result.message,
        line=result.line,
        column=result.column,
    )


@router.post("/format", response_model=FormatResponse)
async def format_document(request: FormatRequest) -> FormatResponse:
    """Pretty-print a document"""
    json_config = ConfigManager.get_instance().get_config().get("json", {})
    sort_keys = request.sort_keys if request.sort_keys is not None else json_config.get("sortKeys", False)
    indent = request.indent or json_config.get("indent", DEFAULT_INDENT)

    value = _parse_or_400(request.text)
    return FormatResponse(text=format_json(value, indent=indent, sort_keys=sort_keys), sort_keys=sort_keys)


@router.post("/minify", response_model=FormatResponse)
async def minify_document(request: MinifyRequest) -> FormatResponse:
    """Serialize a document without whitespace"""
    json_config = ConfigManager.get_instance().get_config().get("json", {})
    sort_keys = request.sort_keys if request.sort_keys is not None else json_config.get("sortKeys", False)

    value = _parse_or_400(request.text)
    return FormatResponse(text=minify_json(value, sort_keys=sort_keys), sort_keys=sort_keys)
