"""
Row sampling for large sheets.

Sheets with more than ``_FULL_SCAN_MAX_ROWS`` rows are reduced to:
  - the first 10 rows (headers and early data)
  - every 5th row of the middle section, until 30 rows are collected
  - the last 5 rows

The sampler also returns, for every sampled row, the index of the row it
came from so cell coordinates keep pointing at the real sheet location.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

logger = logging.getLogger(__name__)

_FULL_SCAN_MAX_ROWS = 50
_HEAD_ROWS = 10
_STRIDE = 5
_MAX_HEAD_AND_MIDDLE_ROWS = 30
_TAIL_ROWS = 5

# Only the first columns of very wide sheets are analysed.
MAX_ANALYSIS_COLUMNS = 20


def sample_rows(rows: List[List[str]]) -> Tuple[List[List[str]], List[int]]:
    """
    Return ``(sampled_rows, row_mapping)``.

    ``row_mapping[i]`` is the 0-based index in *rows* of ``sampled_rows[i]``.
    Small sheets come back unchanged with an identity mapping.
    """
    total = len(rows)
    if total <= _FULL_SCAN_MAX_ROWS:
        return rows, list(range(total))

    mapping: List[int] = list(range(_HEAD_ROWS))

    for i in range(_HEAD_ROWS, total - _TAIL_ROWS, _STRIDE):
        if len(mapping) >= _MAX_HEAD_AND_MIDDLE_ROWS:
            break
        mapping.append(i)

    for i in range(total - _TAIL_ROWS, total):
        if i > _HEAD_ROWS:
            mapping.append(i)

    logger.info(
        "Large sheet detected: %d rows. Analysing %d sample rows", total, len(mapping)
    )
    return [rows[i] for i in mapping], mapping


def find_max_columns(rows: List[List[str]]) -> int:
    return max((len(row) for row in rows), default=0)


def analysis_column_limit(rows: List[List[str]]) -> int:
    """Number of leading columns to analyse: the widest row, capped."""
    max_cols = find_max_columns(rows)
    if max_cols > MAX_ANALYSIS_COLUMNS:
        logger.info(
            "Wide sheet detected: %d columns. Analysing first %d columns",
            max_cols,
            MAX_ANALYSIS_COLUMNS,
        )
        return MAX_ANALYSIS_COLUMNS
    return max_cols
