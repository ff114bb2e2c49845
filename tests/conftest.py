from __future__ import annotations

from typing import Dict, List, Optional, Sequence

import pytest

from errors import SheetReadError
from extractors.workbook import Document


class FakeDocument(Document):
    """In-memory Document: ``{sheet_name: rows}`` in sheet order."""

    def __init__(
        self,
        sheets: Dict[str, List[List[str]]],
        merged: Optional[Dict[str, list]] = None,
        broken: Sequence[str] = (),
    ):
        self._sheets = sheets
        self._merged = merged or {}
        self._broken = set(broken)
        self.closed = False

    def sheet_names(self) -> List[str]:
        return list(self._sheets)

    def rows(self, sheet_name: str) -> List[List[str]]:
        if sheet_name in self._broken:
            raise SheetReadError(sheet_name, "broken")
        return self._sheets[sheet_name]

    def merged_regions(self, sheet_name: str) -> list:
        if sheet_name in self._broken:
            raise SheetReadError(sheet_name, "broken")
        return self._merged.get(sheet_name, [])

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def make_document():
    return FakeDocument


@pytest.fixture
def invoice_grid() -> List[List[str]]:
    return [
        ["Vendor Name:", "[VENDOR_NAME]"],
        ["Invoice Number:", "[INVOICE_NUMBER]"],
    ]
