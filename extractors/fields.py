"""
Field-candidate generation.

Two independent sources, concatenated without merging:
  1. Header cells       → one candidate each, named from the header text
  2. Data-cell columns  → one *inferred* candidate per column whose cells
                          share a dominant data type

The suggestions map is then built from the candidate list in order; when
two candidates share a field_name the later one silently replaces the
earlier one.
"""

from __future__ import annotations

import logging
from collections import Counter
from typing import Dict, List

from dto.cell_data import ClassifiedCell
from dto.fields import FieldCandidate
from errors import CoordinateError
from extractors.workbook import coordinate_to_reference

logger = logging.getLogger(__name__)

_BASE_CONFIDENCE = 0.5
_TOP_ROWS_BONUS = 0.3  # rows 1-2
_EARLY_ROWS_BONUS = 0.1  # rows 3-5
_KEYWORD_BONUS = 0.2

_INFERRED_CONFIDENCE = 0.6
_MIN_COLUMN_CELLS = 3
_MIN_DOMINANT_COUNT = 2


def generate_field_name(display_name: str) -> str:
    """
    Turn header text into an identifier: ``"Invoice Number:"`` → ``"invoice_number"``.

    ``:#()`` are dropped before spaces and hyphens become underscores, so
    ``"Invoice #"`` gives ``"invoice"``.  Names starting with a digit are
    prefixed with ``field_``.
    """
    name = display_name.lower()
    for ch in ":#()":
        name = name.replace(ch, "")
    name = name.strip().replace(" ", "_").replace("-", "_")

    name = "".join(ch for ch in name if ch.isalpha() or ch.isdigit() or ch == "_")

    if name and name[0].isdigit():
        name = "field_" + name
    return name


def calculate_confidence(cell: ClassifiedCell) -> float:
    confidence = _BASE_CONFIDENCE

    if cell.row <= 2:
        confidence += _TOP_ROWS_BONUS
    elif cell.row <= 5:
        confidence += _EARLY_ROWS_BONUS

    if cell.keywords:
        confidence += _KEYWORD_BONUS

    return confidence


def _header_candidates(header_cells: List[ClassifiedCell]) -> List[FieldCandidate]:
    return [
        FieldCandidate(
            field_name=generate_field_name(header.raw_text),
            display_name=header.raw_text,
            source_cell=header.cell,
            data_type=header.data_type,
            keywords=header.keywords,
            confidence=calculate_confidence(header),
            inferred=False,
        )
        for header in header_cells
    ]


def _inferred_candidates(data_cells: List[ClassifiedCell]) -> List[FieldCandidate]:
    columns: Dict[int, List[ClassifiedCell]] = {}
    for cell in data_cells:
        columns.setdefault(cell.column, []).append(cell)

    candidates: List[FieldCandidate] = []
    for column, cells in columns.items():
        if len(cells) < _MIN_COLUMN_CELLS:
            continue

        dominant_type, count = Counter(c.data_type for c in cells).most_common(1)[0]
        if count < _MIN_DOMINANT_COUNT:
            continue

        # Anchored to row 1 of the column, whether or not that cell exists.
        try:
            ref = coordinate_to_reference(column, 1)
        except CoordinateError:
            logger.debug("Skipping column %d: no cell reference", column)
            continue

        type_name = dominant_type.value
        candidates.append(
            FieldCandidate(
                field_name=f"column_{ref.lower()}_{type_name}",
                display_name=f"Column {ref} ({type_name.title()})",
                source_cell=ref,
                data_type=dominant_type,
                keywords=[type_name, "column", ref.lower()],
                confidence=_INFERRED_CONFIDENCE,
                inferred=True,
            )
        )
    return candidates


def generate_field_candidates(
    header_cells: List[ClassifiedCell],
    data_cells: List[ClassifiedCell],
) -> List[FieldCandidate]:
    return _header_candidates(header_cells) + _inferred_candidates(data_cells)


def generate_suggestions(candidates: List[FieldCandidate]) -> Dict[str, str]:
    """``field_name → source_cell``; later candidates overwrite earlier ones."""
    suggestions: Dict[str, str] = {}
    for candidate in candidates:
        if candidate.field_name:
            suggestions[candidate.field_name] = candidate.source_cell
    return suggestions
