# kedia/core/dates.py
import re
from datetime import date, timedelta
from typing import Optional, Tuple

# Single-word offsets, English and transliterated Hindi.
DAY_OFFSETS = {
    "yesterday": 1,
    "kal": 1,
    "parso": 2,
}
DAY_UNITS = ("days", "din")
DAY_DIRECTIONS = ("back", "pehle", "ago")

_COUNT_RX = re.compile(r"[0-9]+")


def _days_back_at(words, i):
    if i >= len(words) - 2:
        return None
    if not _COUNT_RX.fullmatch(words[i]):
        return None
    if words[i + 1] in DAY_UNITS and words[i + 2] in DAY_DIRECTIONS:
        return int(words[i])
    return None


def parse_date(text: str, today: Optional[date] = None) -> Tuple[date, str]:
    """Resolve the first relative-date expression in ``text``.

    Returns the resolved date and the text with the expression removed.
    Only one expression is resolved. Without a match the date is ``today``
    and the text comes back untouched; with a match the rest of the text is
    returned lowercased. A day count too large to subtract from ``today``
    does not match.
    """
    today = today or date.today()
    words = text.lower().split(" ")

    for i, word in enumerate(words):
        if word in DAY_OFFSETS:
            resolved = today - timedelta(days=DAY_OFFSETS[word])
            return resolved, " ".join(words[:i] + words[i + 1:])

        days = _days_back_at(words, i)
        if days is not None:
            try:
                resolved = today - timedelta(days=days)
            except OverflowError:
                # counts reaching past date.min are not a date expression
                continue
            return resolved, " ".join(words[:i] + words[i + 3:])

    return today, text
