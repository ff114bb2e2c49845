"""
Cell-level DTOs.

    Cell: one non-blank cell as read from the source grid
    ClassifiedCell: Cell plus the per-cell heuristics (type, header, keywords)
    FillableInfo: the placeholder match for a fillable cell, if any
"""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PatternType(str, Enum):
    """Recognised placeholder syntaxes, in detection precedence order."""

    DOUBLE_BRACKET = "double_bracket"
    SINGLE_BRACKET_CAPS = "single_bracket_caps"
    DOUBLE_CURLY = "double_curly"
    SINGLE_CURLY_CAPS = "single_curly_caps"
    ANGLE_BRACKETS = "angle_brackets"


class DataType(str, Enum):
    CURRENCY = "currency"
    NUMBER = "number"
    DATE = "date"
    EMAIL = "email"
    PHONE = "phone"
    TEXT = "text"


class FillableInfo(BaseModel):
    pattern_type: PatternType
    field_name: str
    placeholder_text: str


class Cell(BaseModel):
    model_config = ConfigDict(frozen=True)

    row: int = Field(ge=1)
    column: int = Field(ge=1)
    raw_text: str


class ClassifiedCell(Cell):
    cell: str  # A1-style reference, e.g. "B2"
    data_type: DataType
    is_header: bool
    keywords: List[str] = []
    fillable: Optional[FillableInfo] = None

    @property
    def is_fillable(self) -> bool:
        return self.fillable is not None
