from kedia.core.errors import NoAmountError, ParseError
from kedia.core.models import Category, ParsedTransaction
from kedia.core.parser import parse_transaction_text

__all__ = [
    "Category",
    "NoAmountError",
    "ParseError",
    "ParsedTransaction",
    "parse_transaction_text",
]
