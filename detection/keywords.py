from __future__ import annotations

from typing import List

from detection.constants import STOP_WORDS


def extract_keywords(text: str) -> List[str]:
    """Lowercased words of *text* minus punctuation, short words and stop words."""
    value = text.strip().lower()
    value = value.replace(":", "").replace("#", "")
    value = value.replace("-", " ").replace("_", " ")

    return [w for w in value.split() if len(w) > 2 and w not in STOP_WORDS]
