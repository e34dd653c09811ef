# kedia/manual.py
from datetime import datetime
import yaml

from kedia.core.models import TransactionType
from kedia.core.parser import parse_transaction_text


def _entry_type(entry):
    value = entry.get('type') or TransactionType.DEBIT.value
    try:
        return TransactionType(str(value).lower())
    except ValueError:
        raise ValueError(f"Unrecognized type '{value}' in entry: {entry}") from None


def read_entries(path):
    """Read a YAML file of quick entries without parsing the phrases.

    Each entry is either a bare phrase or a mapping with ``text`` and the
    optional ``type`` (debit/credit) and ``date`` override. Returns a list of
    ``(text, type, override_date)`` tuples in file order. Malformed entries
    raise ``ValueError``.
    """
    with open(path, encoding='utf-8') as f:
        data = yaml.safe_load(f) or []

    entries = []
    for entry in data:
        if entry is not None and not isinstance(entry, (dict, list)):
            entry = {'text': str(entry)}
        if not isinstance(entry, dict) or not entry.get('text'):
            raise ValueError(f"Missing 'text' in entry: {entry}")

        override = entry.get('date')
        if override is not None and not hasattr(override, 'year'):
            override = datetime.fromisoformat(str(override)).date()

        entries.append((str(entry['text']), _entry_type(entry), override))
    return entries


def load_entries(path, now=None, keywords=None):
    """Parse every phrase in a YAML file of quick entries.

    Returns ``(parsed, type, override_date)`` tuples. The first phrase
    without an amount raises :class:`~kedia.core.errors.NoAmountError`.
    """
    return [
        (parse_transaction_text(text, now=now, keywords=keywords), kind, override)
        for text, kind, override in read_entries(path)
    ]
