"""
Diff Engine - Line-level alignment of two documents
"""

from __future__ import annotations

import logging
from array import array
from typing import Optional, Sequence

from jsoncompare.models.diff import DiffKind, DiffRecord, DiffResult

logger = logging.getLogger(__name__)

# Largest m * n for which the exact LCS table is built. Above it the engine
# falls back to positional alignment and flags the result as approximate.
DEFAULT_MAX_CELLS = 10_000_000

# (kind, left_line, right_line) before line numbers are assigned
RawRecord = tuple[DiffKind, Optional[str], Optional[str]]


def _build_lcs_table(left: Sequence[str], right: Sequence[str]) -> list[array]:
    """Build the (m+1) x (n+1) table of LCS lengths of all prefix pairs"""
    width = len(right) + 1
    table = [array("i", [0]) * width]

    for left_line in left:
        prev = table[-1]
        row = array("i", [0]) * width
        for j, right_line in enumerate(right, 1):
            if left_line == right_line:
                row[j] = prev[j - 1] + 1
            elif prev[j] >= row[j - 1]:
                row[j] = prev[j]
            else:
                row[j] = row[j - 1]
        table.append(row)

    return table


def _backtrack(left: Sequence[str], right: Sequence[str], table: list[array]) -> list[RawRecord]:
    """Walk the table from (m, n) back to (0, 0) and return records in document order.

    Ties between dropping a right line and dropping a left line go to the
    right line (reported as added), so a plain replacement comes out as
    removed-then-added once reversed.
    """
    path: list[RawRecord] = []
    i, j = len(left), len(right)

    while i > 0 or j > 0:
        if i > 0 and j > 0 and left[i - 1] == right[j - 1]:
            path.append((DiffKind.UNCHANGED, left[i - 1], right[j - 1]))
            i -= 1
            j -= 1
        elif j > 0 and (i == 0 or table[i][j - 1] >= table[i - 1][j]):
            path.append((DiffKind.ADDED, None, right[j - 1]))
            j -= 1
        else:
            path.append((DiffKind.REMOVED, left[i - 1], None))
            i -= 1

    path.reverse()
    return path


def _coalesce(path: list[RawRecord]) -> list[RawRecord]:
    """Merge each removed record directly followed by an added one into a change.

    Single pass, no fixpoint: ``removed, removed, added, added`` becomes
    ``removed, changed, added``.
    """
    merged: list[RawRecord] = []
    k = 0

    while k < len(path):
        kind, left_line, right_line = path[k]
        if kind == DiffKind.REMOVED and k + 1 < len(path) and path[k + 1][0] == DiffKind.ADDED:
            merged.append((DiffKind.CHANGED, left_line, path[k + 1][2]))
            k += 2
        else:
            merged.append(path[k])
            k += 1

    return merged


def _align_positional(left: Sequence[str], right: Sequence[str]) -> list[RawRecord]:
    """Compare line i with line i, without any realignment"""
    m, n = len(left), len(right)
    path: list[RawRecord] = []

    for i in range(max(m, n)):
        if i < m and i < n:
            kind = DiffKind.UNCHANGED if left[i] == right[i] else DiffKind.CHANGED
            path.append((kind, left[i], right[i]))
        elif i < m:
            path.append((DiffKind.REMOVED, left[i], None))
        else:
            path.append((DiffKind.ADDED, None, right[i]))

    return path


def _assemble(path: list[RawRecord], approximate: bool) -> DiffResult:
    """Number the lines of each side and wrap the records into a result"""
    records = []
    left_number = right_number = 0

    for kind, left_line, right_line in path:
        left_no = right_no = None
        if left_line is not None:
            left_number += 1
            left_no = left_number
        if right_line is not None:
            right_number += 1
            right_no = right_number
        records.append(
            DiffRecord(
                kind=kind,
                left_line=left_line,
                right_line=right_line,
                left_number=left_no,
                right_number=right_no,
            )
        )

    return DiffResult(records=records, approximate=approximate)


class DiffEngine:
    """Align two line sequences and classify every aligned position"""

    def __init__(self, max_cells: int = DEFAULT_MAX_CELLS):
        if max_cells < 0:
            raise ValueError("max_cells must be non-negative")
        self.max_cells = max_cells

    def is_exact(self, left_count: int, right_count: int) -> bool:
        """Whether an m x n comparison fits under the table ceiling"""
        return left_count * right_count <= self.max_cells

    def diff(self, left: Sequence[str], right: Sequence[str]) -> DiffResult:
        """Diff two line sequences"""
        m, n = len(left), len(right)

        if not self.is_exact(m, n):
            logger.warning(
                "Comparison of %d x %d lines exceeds %d cells, using positional alignment",
                m,
                n,
                self.max_cells,
            )
            return _assemble(_align_positional(left, right), approximate=True)

        logger.debug("Exact diff of %d x %d lines", m, n)
        table = _build_lcs_table(left, right)
        path = _coalesce(_backtrack(left, right, table))
        return _assemble(path, approximate=False)

    def diff_texts(self, left_text: str, right_text: str) -> DiffResult:
        """Diff two texts split on newlines; line endings are not normalized"""
        return self.diff(left_text.split("\n"), right_text.split("\n"))


def diff_lines(
    left: Sequence[str],
    right: Sequence[str],
    max_cells: int = DEFAULT_MAX_CELLS,
) -> DiffResult:
    """Diff two line sequences with a one-off engine"""
    return DiffEngine(max_cells).diff(left, right)
