"""
Field-level DTOs: named field candidates and the fillable-field inventory.
"""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field

from dto.cell_data import DataType, PatternType


class FieldCandidate(BaseModel):
    """A proposed template field, derived from a header or a column pattern."""

    field_name: str
    display_name: str
    source_cell: str
    data_type: DataType
    keywords: List[str] = []
    confidence: float = Field(ge=0.0, le=1.0)
    inferred: bool = False


class FillableField(BaseModel):
    """One placeholder cell, flattened for the inventory."""

    cell: str
    value: str
    row: int
    column: int
    pattern_type: PatternType
    field_name: str
    placeholder_text: str
    data_type: DataType


class FillableInventory(BaseModel):
    fields: List[FillableField] = []
    patterns: Dict[PatternType, int] = {}
    field_mapping: Dict[str, str] = {}
    total_count: int = 0
