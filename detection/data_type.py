"""
Per-cell data-type inference.

Checks run in order and the first hit wins, so "$100" is currency rather
than number:  currency → number → date → email → phone → text.
"""

from __future__ import annotations

import math
import re

from dto.cell_data import DataType

_DATE_PATTERNS = [
    re.compile(r"\d{1,2}/\d{1,2}/\d{2,4}"),
    re.compile(r"\d{1,2}-\d{1,2}-\d{2,4}"),
    re.compile(r"\d{4}-\d{1,2}-\d{1,2}"),
]

# Phone numbers: 8..19 characters, more than 60% of them digits.
_PHONE_MIN_LEN = 8
_PHONE_MAX_LEN = 19
_PHONE_DIGIT_RATIO = 0.6

_INF_LITERALS = {"inf", "infinity"}


def _looks_numeric(val: str) -> bool:
    cleaned = val.replace(",", "").replace("$", "")
    # float() also takes "1_000" and non-ASCII digits; neither counts here.
    if "_" in cleaned or not cleaned.isascii():
        return False
    try:
        number = float(cleaned)
    except ValueError:
        return False
    # Overflow ("1e400") is not a number; an explicit "inf" literal is.
    if math.isinf(number):
        return cleaned.strip().lstrip("+-").lower() in _INF_LITERALS
    return True


def _looks_like_phone(val: str) -> bool:
    if not _PHONE_MIN_LEN <= len(val) <= _PHONE_MAX_LEN:
        return False
    digits = sum(1 for ch in val if ch.isdigit())
    return digits / len(val) > _PHONE_DIGIT_RATIO


def detect_data_type(text: str) -> DataType:
    value = text.strip()

    if value.startswith("$") or value.endswith("$"):
        return DataType.CURRENCY
    if _looks_numeric(value):
        return DataType.NUMBER
    if any(p.search(value) for p in _DATE_PATTERNS):
        return DataType.DATE
    if "@" in value and "." in value:
        return DataType.EMAIL
    if _looks_like_phone(value):
        return DataType.PHONE
    return DataType.TEXT
