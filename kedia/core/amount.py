# kedia/core/amount.py
import re
from decimal import Decimal
from typing import Tuple

from kedia.core.errors import NoAmountError

CURRENCY_GLYPH = "₹"

_AMOUNT_TOKEN_RX = re.compile(r"₹?[0-9]+(\.[0-9]+)?")
_EMBEDDED_NUMBER_RX = re.compile(r"[0-9]+(\.[0-9]+)?")


def is_amount(token: str) -> bool:
    """True when ``token`` reads as a money value, e.g. ``500``, ``₹2,500.50``."""
    return bool(_AMOUNT_TOKEN_RX.fullmatch(token.replace(",", "")))


def extract_amount(text: str) -> Tuple[Decimal, str]:
    """Pull the first amount out of ``text``.

    Whole tokens are tried left to right first. When none qualifies, the
    first digit run embedded anywhere in the text is used instead and only
    that run is cut out. Raises :class:`NoAmountError` if the text has no
    digits at all.
    """
    words = text.split(" ")
    for i, word in enumerate(words):
        if is_amount(word):
            amount = Decimal(word.replace(CURRENCY_GLYPH, "").replace(",", ""))
            remaining = words[:i] + words[i + 1:]
            return amount, " ".join(remaining)

    match = _EMBEDDED_NUMBER_RX.search(text)
    if match:
        number = match.group(0)
        return Decimal(number), text.replace(number, "", 1).strip()

    raise NoAmountError(text)
