"""
Sheet selection: picks the worksheet that carries the most data.

Multi-sheet workbooks often hold cover pages, lookup lists or empty
defaults next to the real template; the sheet with the most non-empty
cells is analysed.  Sheets that cannot be read are skipped.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple

from dto.output import SheetSummary
from errors import SheetReadError
from extractors.workbook import Document

logger = logging.getLogger(__name__)


def count_non_empty(rows: List[List[str]]) -> int:
    """Number of cells whose text is not blank after trimming."""
    return sum(1 for row in rows for value in row if value.strip())


def _read_rows(document: Document, sheet_name: str) -> Optional[List[List[str]]]:
    try:
        return document.rows(sheet_name)
    except SheetReadError:
        logger.warning("Skipping unreadable sheet '%s'", sheet_name, exc_info=True)
        return None


def summarize_sheets(document: Document) -> List[SheetSummary]:
    """Return a size summary for every readable sheet, in workbook order."""
    summaries: List[SheetSummary] = []
    for sheet_name in document.sheet_names():
        rows = _read_rows(document, sheet_name)
        if rows is None:
            continue
        summaries.append(
            SheetSummary(
                sheet_name=sheet_name,
                row_count=len(rows),
                column_count=max((len(r) for r in rows), default=0),
                non_empty_cell_count=count_non_empty(rows),
            )
        )
    return summaries


def select_sheet(document: Document) -> Tuple[str, List[List[str]]]:
    """
    Return ``(sheet_name, rows)`` of the sheet with the most non-empty cells.

    Ties go to the earlier sheet.  If no sheet has any data the first sheet
    is returned, with no rows if it cannot be read either.
    """
    sheet_names = document.sheet_names()

    best_sheet: Optional[str] = None
    best_rows: List[List[str]] = []
    max_cells = 0

    for sheet_name in sheet_names:
        rows = _read_rows(document, sheet_name)
        if rows is None:
            continue
        cells = count_non_empty(rows)
        if cells > max_cells:
            max_cells = cells
            best_sheet = sheet_name
            best_rows = rows

    if best_sheet is None:
        best_sheet = sheet_names[0]
        best_rows = _read_rows(document, best_sheet) or []

    logger.info("Selected sheet '%s' (%d non-empty cells)", best_sheet, max_cells)
    return best_sheet, best_rows
