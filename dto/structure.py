"""
Sheet-shape DTOs produced by the table-structure analyzer.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class TemplateSizeClass(str, Enum):
    SIMPLE = "simple_template"
    MEDIUM = "medium_template"
    LARGE_ADMIN = "large_admin_template"


class TableStructure(BaseModel):
    is_tabular: bool = True
    has_headers: bool = False
    uniform_columns: bool = True
    varying_widths: bool = False
    data_density: float = Field(default=0.0, ge=0.0, le=1.0)
    empty_row_count: int = 0
    max_columns: int = 0
    common_column_count: int = 0
    column_variation_count: int = 0
    template_size_class: TemplateSizeClass = TemplateSizeClass.SIMPLE


class DataStructure(BaseModel):
    """Layout facts about the analysed sheet."""

    likely_header_row: int = 0  # 1-based; 0 when the first rows are all blank
    data_start_row: int = 1
    has_merged_cells: bool = False
    table_structure: TableStructure
