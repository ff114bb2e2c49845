"""
Workbook reading: turns an .xlsx file into ragged rows of cell strings.

The analysis pipeline only talks to the ``Document`` interface, so any
source that can list sheets and hand back rows of strings can be analysed.
``WorkbookDocument`` is the openpyxl-backed implementation.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Iterator, List

import openpyxl
from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.cell_range import CellRange

from errors import CoordinateError, DocumentOpenError, SheetReadError

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Coordinate helpers
# ------------------------------------------------------------------

def coordinate_to_reference(column: int, row: int) -> str:
    """Return an A1-style reference from 1-based column/row indices."""
    if row < 1:
        raise CoordinateError(column, row)
    try:
        return f"{get_column_letter(column)}{row}"
    except ValueError as exc:
        raise CoordinateError(column, row) from exc


def _cell_text(value: Any) -> str:
    return "" if value is None else str(value)


def _trim_row(values: List[str]) -> List[str]:
    """Drop trailing blank cells so rows keep their natural (ragged) width."""
    end = len(values)
    while end > 0 and not values[end - 1].strip():
        end -= 1
    return values[:end]


# ------------------------------------------------------------------
# Document interface
# ------------------------------------------------------------------

class Document(ABC):
    """Read-only view of a multi-sheet spreadsheet."""

    @abstractmethod
    def sheet_names(self) -> List[str]:
        ...

    @abstractmethod
    def rows(self, sheet_name: str) -> List[List[str]]:
        """
        Return the sheet's rows as lists of cell strings.

        Rows may differ in length.  Raises ``SheetReadError`` if the sheet
        cannot be read.
        """
        ...

    @abstractmethod
    def merged_regions(self, sheet_name: str) -> List[Any]:
        """Return the sheet's merged ranges (only their presence matters)."""
        ...

    def close(self) -> None:
        pass


class WorkbookDocument(Document):
    """``Document`` over an openpyxl ``Workbook``."""

    def __init__(self, workbook: Workbook):
        self._workbook = workbook

    def _worksheet(self, sheet_name: str):
        try:
            return self._workbook[sheet_name]
        except KeyError as exc:
            raise SheetReadError(sheet_name, "no such sheet") from exc

    def sheet_names(self) -> List[str]:
        return list(self._workbook.sheetnames)

    def rows(self, sheet_name: str) -> List[List[str]]:
        ws = self._worksheet(sheet_name)
        try:
            raw_rows = ws.iter_rows(min_row=1, min_col=1, values_only=True)
            rows = [_trim_row([_cell_text(v) for v in row]) for row in raw_rows]
        except (AttributeError, TypeError, ValueError) as exc:
            # Chartsheets and other non-grid sheets have no cells.
            raise SheetReadError(sheet_name, str(exc)) from exc

        while rows and not rows[-1]:
            rows.pop()
        return rows

    def merged_regions(self, sheet_name: str) -> List[CellRange]:
        ws = self._worksheet(sheet_name)
        try:
            return list(ws.merged_cells.ranges)
        except AttributeError as exc:
            raise SheetReadError(sheet_name, str(exc)) from exc

    def close(self) -> None:
        self._workbook.close()


def load_document(path: str) -> WorkbookDocument:
    """Load *path* with openpyxl; any failure becomes ``DocumentOpenError``."""
    logger.info("Loading workbook: %s", path)
    try:
        workbook = openpyxl.load_workbook(path, data_only=True)
    except Exception as exc:
        raise DocumentOpenError(path, str(exc)) from exc
    return WorkbookDocument(workbook)


@contextmanager
def open_document(path: str, loader=load_document) -> Iterator[Document]:
    """
    Open a spreadsheet for the duration of a ``with`` block.

    The document is closed on every exit path, including errors raised by
    the caller.
    """
    document = loader(path)
    try:
        yield document
    finally:
        document.close()
