"""
Cell classifier: runs every per-cell heuristic over one cell.
"""

from __future__ import annotations

from dto.cell_data import Cell, ClassifiedCell
from detection.data_type import detect_data_type
from detection.header import is_likely_header
from detection.keywords import extract_keywords
from detection.placeholder import detect_fillable


def classify_cell(cell: Cell, reference: str) -> ClassifiedCell:
    """Classify *cell*; *reference* is its A1-style coordinate."""
    text = cell.raw_text
    return ClassifiedCell(
        row=cell.row,
        column=cell.column,
        raw_text=text,
        cell=reference,
        data_type=detect_data_type(text),
        is_header=is_likely_header(text, cell.row - 1, cell.column - 1),
        keywords=extract_keywords(text),
        fillable=detect_fillable(text),
    )
