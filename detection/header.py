"""
Header heuristic.

A cell in the first six rows is a likely header if any of these hold:
  - its text contains a common business-document term (name, invoice, ...)
  - it ends with ":" or "#"
  - it is a single word longer than 2 and shorter than 20 characters

Biased towards recall: short data values in the top rows will also match.
"""

from __future__ import annotations

from detection.constants import HEADER_INDICATORS, MAX_HEADER_ROW_INDEX


def is_likely_header(text: str, row_index: int, col_index: int) -> bool:
    """*row_index* and *col_index* are 0-based."""
    if row_index > MAX_HEADER_ROW_INDEX:
        return False

    value = text.strip().lower()

    if any(indicator in value for indicator in HEADER_INDICATORS):
        return True

    if value.endswith(":") or value.endswith("#"):
        return True

    return len(value.split()) == 1 and 2 < len(value) < 20
