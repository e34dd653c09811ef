# kedia/core/parser.py
import logging
from datetime import date, datetime

from kedia.core.amount import extract_amount
from kedia.core.categorizer import guess_category
from kedia.core.dates import parse_date
from kedia.core.models import ParsedTransaction

logger = logging.getLogger(__name__)


def _as_date(now):
    if now is None:
        return date.today()
    if isinstance(now, datetime):
        return now.date()
    return now


def parse_transaction_text(text, now=None, keywords=None):
    """Turn a phrase like ``"500 pizza parso"`` into a :class:`ParsedTransaction`.

    ``now`` is the reference day for relative dates ("kal", "2 days back")
    and defaults to today. ``keywords`` overrides the packaged category
    table. Raises :class:`~kedia.core.errors.NoAmountError` when the phrase
    holds no number.
    """
    amount, after_amount = extract_amount(text)
    when, description = parse_date(after_amount, _as_date(now))
    description = description.strip()
    category = guess_category(description, keywords)

    logger.debug(
        "Parsed %r -> amount=%s description=%r category=%s date=%s",
        text, amount, description, category.value, when.isoformat(),
    )
    return ParsedTransaction(
        amount=amount,
        description=description,
        category=category,
        date=when,
    )
