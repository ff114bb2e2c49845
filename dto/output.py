"""
Top-level output DTOs for the analysis report.

    AnalysisReport
      ├─ sheets: List[SheetSummary]        (one per readable sheet)
      ├─ header_candidates / data_cells    (classified cells, disjoint)
      ├─ field_candidates                  (header-derived + inferred)
      ├─ fillable_fields                   (placeholder inventory)
      ├─ suggestions                       (field_name -> cell reference)
      └─ data_structure                    (layout + TableStructure)

The field names are the wire format consumed by the HTTP layer; keep them
stable.
"""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel

from dto.cell_data import ClassifiedCell
from dto.fields import FieldCandidate, FillableInventory
from dto.structure import DataStructure


class SheetSummary(BaseModel):
    """Size of a single worksheet."""

    sheet_name: str
    row_count: int = 0
    column_count: int = 0
    non_empty_cell_count: int = 0


class AnalysisReport(BaseModel):
    """Structured analysis of one workbook."""

    file_name: str
    sheet_names: List[str] = []
    active_sheet: str
    sheets: List[SheetSummary] = []

    row_count: int = 0
    column_count: int = 0
    analyzed_row_count: int = 0
    analyzed_column_count: int = 0

    cell_data: Dict[str, str] = {}
    header_candidates: List[ClassifiedCell] = []
    data_cells: List[ClassifiedCell] = []
    field_candidates: List[FieldCandidate] = []
    fillable_fields: FillableInventory = FillableInventory()
    suggestions: Dict[str, str] = {}
    data_structure: DataStructure
