"""Diff API endpoints"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from starlette.concurrency import run_in_threadpool

from jsoncompare.exceptions import DocumentComparisonError
from jsoncompare.models.diff import DiffResult
from jsoncompare.models.document import (
    CompareRequest,
    CompareResponse,
    LinesDiffRequest,
    SideStatus,
    TextDiffRequest,
)
from jsoncompare.services.comparator import JsonComparator
from jsoncompare.services.config_manager import ConfigManager
from jsoncompare.services.diff_engine import DEFAULT_MAX_CELLS, DiffEngine
from jsoncompare.services.json_document import DEFAULT_INDENT

router = APIRouter()


def build_engine() -> DiffEngine:
    """Create an engine using the configured table ceiling"""
    config = ConfigManager.get_instance().get_config()
    return DiffEngine(max_cells=config.get("diff", {}).get("maxCells", DEFAULT_MAX_CELLS))


# The engine is CPU bound; each request gets its own engine and table and runs
# in the threadpool so the event loop stays responsive.


@router.post("/lines", response_model=DiffResult)
async def diff_lines(request: LinesDiffRequest) -> DiffResult:
    """Diff two pre-split line sequences"""
    engine = build_engine()
    return await run_in_threadpool(engine.diff, request.left, request.right)


@router.post("/text", response_model=DiffResult)
async def diff_text(request: TextDiffRequest) -> DiffResult:
    """Diff two texts line by line"""
    engine = build_engine()
    return await run_in_threadpool(engine.diff_texts, request.left, request.right)


@router.post("/json", response_model=CompareResponse)
async def diff_json(request: CompareRequest) -> CompareResponse:
    """Canonicalize two JSON documents and diff them"""
    config = ConfigManager.get_instance().get_config()
    json_config = config.get("json", {})
    sort_keys = request.sort_keys if request.sort_keys is not None else json_config.get("sortKeys", False)

    comparator = JsonComparator(build_engine(), indent=json_config.get("indent", DEFAULT_INDENT))

    try:
        return await run_in_threadpool(comparator.compare, request.left, request.right, sort_keys)
    except DocumentComparisonError as e:
        statuses = {
            "left": SideStatus(valid=True, message="Valid JSON"),
            "right": SideStatus(valid=True, message="Valid JSON"),
        }
        for error in e.errors:
            statuses[error.side] = SideStatus(
                valid=False,
                message=error.message,
                line=error.line,
                column=error.column,
            )
        raise HTTPException(
            status_code=400,
            detail={
                "message": e.message,
                "left": statuses["left"].model_dump(),
                "right": statuses["right"].model_dump(),
            },
        )
