# kedia/core/models.py
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class Category(Enum):
    FOOD = "Food"
    TRANSPORT = "Transport"
    SHOPPING = "Shopping"
    ENTERTAINMENT = "Entertainment"
    BILLS = "Bills"
    HEALTH = "Health"
    EDUCATION = "Education"
    LENT = "Lent"
    OTHER = "Other"

    @classmethod
    def parse(cls, name):
        """Look up a category by display name, ignoring case."""
        key = str(name).strip().lower()
        for cat in cls:
            if cat.value.lower() == key:
                return cat
        raise ValueError(f"Unknown category '{name}'")

    def __str__(self):
        return self.value


class TransactionType(Enum):
    DEBIT = "debit"
    CREDIT = "credit"


@dataclass(frozen=True)
class ParsedTransaction:
    amount: Decimal
    description: str
    category: Category
    date: date


@dataclass
class Transaction:
    id: str
    user_id: str
    amount: Decimal
    description: str
    category: Category
    date: date
