"""
Detector for fillable placeholder cells.

Recognised syntaxes, evaluated in this fixed order (first match wins):
  1. [[free text]]   → double_bracket
  2. [CAPS_ID]       → single_bracket_caps
  3. {{free text}}   → double_curly
  4. {CAPS_ID}       → single_curly_caps
  5. <CAPS_ID>       → angle_brackets

Only the first occurrence of the winning pattern is used; a cell holding
several placeholders yields a single FillableInfo.
"""

from __future__ import annotations

import re
from typing import Callable, List, Optional, Tuple

from dto.cell_data import FillableInfo, PatternType


def _free_text_name(text: str) -> str:
    return text.replace(" ", "_").lower()


def _identifier_name(text: str) -> str:
    return text.lower()


_PATTERNS: List[Tuple[PatternType, "re.Pattern[str]", Callable[[str], str]]] = [
    (PatternType.DOUBLE_BRACKET, re.compile(r"\[\[([^\]]+)\]\]"), _free_text_name),
    (PatternType.SINGLE_BRACKET_CAPS, re.compile(r"\[([A-Z_][A-Z0-9_]*)\]"), _identifier_name),
    (PatternType.DOUBLE_CURLY, re.compile(r"\{\{([^}]+)\}\}"), _free_text_name),
    (PatternType.SINGLE_CURLY_CAPS, re.compile(r"\{([A-Z_][A-Z0-9_]*)\}"), _identifier_name),
    (PatternType.ANGLE_BRACKETS, re.compile(r"<([A-Z_][A-Z0-9_]*)>"), _identifier_name),
]


def detect_fillable(text: str) -> Optional[FillableInfo]:
    """Return the placeholder found in *text*, or ``None`` if it is not fillable."""
    value = text.strip()
    for pattern_type, regex, to_field_name in _PATTERNS:
        m = regex.search(value)
        if m:
            placeholder = m.group(1)
            return FillableInfo(
                pattern_type=pattern_type,
                field_name=to_field_name(placeholder),
                placeholder_text=placeholder,
            )
    return None
