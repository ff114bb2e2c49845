"""
Table-structure analysis over the full (unsampled) rows of a sheet.

Rows are ragged: density and column statistics use each row's own length,
never a padded rectangle.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import List

from dto.structure import TableStructure, TemplateSizeClass
from errors import SheetReadError
from extractors.workbook import Document

logger = logging.getLogger(__name__)

# Size-class thresholds: (max_columns >, row_count >)
_LARGE_ADMIN_THRESHOLD = (10, 20)
_MEDIUM_THRESHOLD = (5, 10)

# The likely header row is searched among the first rows only.
_HEADER_SEARCH_ROWS = 5


def _template_size_class(max_columns: int, row_count: int) -> TemplateSizeClass:
    cols, rows = _LARGE_ADMIN_THRESHOLD
    if max_columns > cols and row_count > rows:
        return TemplateSizeClass.LARGE_ADMIN
    cols, rows = _MEDIUM_THRESHOLD
    if max_columns > cols and row_count > rows:
        return TemplateSizeClass.MEDIUM
    return TemplateSizeClass.SIMPLE


def analyze_table_structure(rows: List[List[str]]) -> TableStructure:
    if len(rows) < 2:
        return TableStructure(is_tabular=False, has_headers=len(rows) > 0)

    # Counter keeps first-seen order, so most_common() breaks ties that way.
    column_counts: Counter = Counter()
    total_cells = 0
    filled_cells = 0
    empty_rows = 0

    for row in rows:
        column_counts[len(row)] += 1
        filled = sum(1 for value in row if value.strip())
        total_cells += len(row)
        filled_cells += filled
        if filled == 0:
            empty_rows += 1

    max_columns = max(column_counts)
    common_column_count = column_counts.most_common(1)[0][0]
    uniform = len(column_counts) == 1

    return TableStructure(
        is_tabular=True,
        has_headers=True,
        uniform_columns=uniform,
        varying_widths=not uniform,
        data_density=filled_cells / total_cells if total_cells else 0.0,
        empty_row_count=empty_rows,
        max_columns=max_columns,
        common_column_count=common_column_count,
        column_variation_count=len(column_counts),
        template_size_class=_template_size_class(max_columns, len(rows)),
    )


def find_likely_header_row(rows: List[List[str]]) -> int:
    """
    1-based index of the row with the most non-empty cells among the first
    five; the earliest wins ties.  0 when those rows are all blank.
    """
    header_row = 0
    max_cells = 0
    for i, row in enumerate(rows[:_HEADER_SEARCH_ROWS]):
        filled = sum(1 for value in row if value.strip())
        if filled > max_cells:
            max_cells = filled
            header_row = i + 1
    return header_row


def find_data_start_row(rows: List[List[str]]) -> int:
    return find_likely_header_row(rows) + 1


def has_merged_cells(document: Document, sheet_name: str) -> bool:
    try:
        return len(document.merged_regions(sheet_name)) > 0
    except SheetReadError:
        logger.warning("Could not read merged cells of '%s'", sheet_name, exc_info=True)
        return False
