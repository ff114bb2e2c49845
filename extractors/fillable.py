"""
Fillable-field inventory: every placeholder cell, counted by syntax.
"""

from __future__ import annotations

from typing import Dict, List

from dto.cell_data import ClassifiedCell, PatternType
from dto.fields import FillableField, FillableInventory


def extract_fillable_fields(cells: List[ClassifiedCell]) -> FillableInventory:
    fields: List[FillableField] = []
    patterns: Dict[PatternType, int] = {}
    field_mapping: Dict[str, str] = {}

    for cell in cells:
        info = cell.fillable
        if info is None:
            continue

        fields.append(
            FillableField(
                cell=cell.cell,
                value=cell.raw_text,
                row=cell.row,
                column=cell.column,
                pattern_type=info.pattern_type,
                field_name=info.field_name,
                placeholder_text=info.placeholder_text,
                data_type=cell.data_type,
            )
        )
        patterns[info.pattern_type] = patterns.get(info.pattern_type, 0) + 1
        field_mapping[info.field_name] = cell.cell

    return FillableInventory(
        fields=fields,
        patterns=patterns,
        field_mapping=field_mapping,
        total_count=len(fields),
    )
