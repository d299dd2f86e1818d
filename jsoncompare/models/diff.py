"""Diff-related data models"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, computed_field, model_validator


class DiffKind(str, Enum):
    """Classification of one aligned position"""

    UNCHANGED = "unchanged"
    ADDED = "added"
    REMOVED = "removed"
    CHANGED = "changed"


class DiffRecord(BaseModel):
    """A single aligned line pair"""

    kind: DiffKind
    left_line: str | None = None
    right_line: str | None = None
    left_number: int | None = None  # 1-indexed, set during result assembly
    right_number: int | None = None

    @model_validator(mode="after")
    def check_sides(self) -> "DiffRecord":
        if self.kind == DiffKind.ADDED:
            if self.left_line is not None or self.right_line is None:
                raise ValueError("added record must carry only a right line")
        elif self.kind == DiffKind.REMOVED:
            if self.right_line is not None or self.left_line is None:
                raise ValueError("removed record must carry only a left line")
        else:
            if self.left_line is None or self.right_line is None:
                raise ValueError(f"{self.kind.value} record must carry both lines")
            if self.kind == DiffKind.UNCHANGED and self.left_line != self.right_line:
                raise ValueError("unchanged record lines must be equal")
        return self


class DiffResult(BaseModel):
    """Complete line diff of two documents"""

    records: list[DiffRecord] = []
    approximate: bool = False  # True when the positional fallback was used

    def _count(self, kind: DiffKind) -> int:
        return sum(1 for record in self.records if record.kind == kind)

    @computed_field
    @property
    def added_count(self) -> int:
        return self._count(DiffKind.ADDED)

    @computed_field
    @property
    def removed_count(self) -> int:
        return self._count(DiffKind.REMOVED)

    @computed_field
    @property
    def changed_count(self) -> int:
        return self._count(DiffKind.CHANGED)

    @computed_field
    @property
    def unchanged_count(self) -> int:
        return len(self.records) - self.added_count - self.removed_count - self.changed_count
