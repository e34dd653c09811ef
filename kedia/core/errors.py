# kedia/core/errors.py


class ParseError(ValueError):
    """Raised when a transaction phrase cannot be turned into a record."""


class NoAmountError(ParseError):
    def __init__(self, text):
        self.text = text
        super().__init__(f"No valid amount found in transaction text: {text!r}")
