"""
JSON Comparator - Canonicalize two JSON documents and diff their lines
"""

from __future__ import annotations

import logging

from jsoncompare.exceptions import DocumentComparisonError, InvalidJsonError
from jsoncompare.models.document import CompareResponse, SideStatus
from jsoncompare.services.diff_engine import DiffEngine
from jsoncompare.services.json_document import DEFAULT_INDENT, canonicalize

logger = logging.getLogger(__name__)

LEFT = "left"
RIGHT = "right"
EMPTY_DOCUMENT = "{}"


class JsonComparator:
    """Compare two JSON documents line by line after canonicalization"""

    def __init__(self, engine: DiffEngine | None = None, indent: int = DEFAULT_INDENT):
        self.engine = engine or DiffEngine()
        self.indent = indent

    def compare(self, left_text: str, right_text: str, sort_keys: bool = False) -> CompareResponse:
        """Validate both sides, pretty-print them the same way and diff the results.

        A blank side is compared as an empty object. Both sides are validated
        before failing so that the error reports every invalid side at once.
        """
        canonical: dict[str, str] = {}
        errors: list[InvalidJsonError] = []

        for side, text in ((LEFT, left_text), (RIGHT, right_text)):
            if not text.strip():
                text = EMPTY_DOCUMENT
            try:
                canonical[side] = canonicalize(text, sort_keys=sort_keys, indent=self.indent, side=side)
            except InvalidJsonError as e:
                errors.append(e)

        if errors:
            logger.info("Comparison rejected: %s", "; ".join(f"{e.side}: {e.message}" for e in errors))
            raise DocumentComparisonError(errors)

        diff = self.engine.diff_texts(canonical[LEFT], canonical[RIGHT])
        logger.info(
            "Compared documents: +%d -%d ~%d%s",
            diff.added_count,
            diff.removed_count,
            diff.changed_count,
            " (approximate)" if diff.approximate else "",
        )

        valid = SideStatus(valid=True, message="Valid JSON")
        return CompareResponse(
            left=canonical[LEFT],
            right=canonical[RIGHT],
            left_status=valid,
            right_status=valid.model_copy(),
            sort_keys=sort_keys,
            diff=diff,
        )
