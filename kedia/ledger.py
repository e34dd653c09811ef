# kedia/ledger.py
"""Bookkeeping around parsed records.

The parser only ever produces an unsigned :class:`ParsedTransaction`. The
helpers here give it an owner, an id and a sign, and answer the questions the
app asks of the stored list (date ranges, per-category totals). All of them
return new objects and leave their inputs alone.
"""
from __future__ import annotations

import dataclasses
import uuid
from datetime import date
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from kedia.core.models import Category, ParsedTransaction, Transaction, TransactionType
from kedia.core.parser import parse_transaction_text


def signed_amount(amount: Decimal, kind: TransactionType) -> Decimal:
    magnitude = abs(amount)
    return -magnitude if kind is TransactionType.DEBIT else magnitude


def transaction_type(tx: Transaction) -> TransactionType:
    return TransactionType.DEBIT if tx.amount < 0 else TransactionType.CREDIT


def to_transaction(
    parsed: ParsedTransaction,
    user_id: str,
    kind: TransactionType = TransactionType.DEBIT,
    override_date: Optional[date] = None,
    tx_id: Optional[str] = None,
) -> Transaction:
    if not user_id:
        raise ValueError("A user id is required to record a transaction")
    return Transaction(
        id=tx_id or uuid.uuid4().hex,
        user_id=user_id,
        amount=signed_amount(parsed.amount, kind),
        description=parsed.description,
        category=parsed.category,
        date=override_date or parsed.date,
    )


def add_transaction(
    transactions: Iterable[Transaction],
    text: str,
    user_id: str,
    now: Optional[date] = None,
    kind: TransactionType = TransactionType.DEBIT,
    override_date: Optional[date] = None,
) -> List[Transaction]:
    """Parse ``text`` and return a new list with the result first."""
    parsed = parse_transaction_text(text, now=now)
    tx = to_transaction(parsed, user_id, kind=kind, override_date=override_date)
    return [tx] + list(transactions)


def edit_transaction(transactions: Iterable[Transaction], tx_id: str, **changes) -> List[Transaction]:
    return [
        dataclasses.replace(tx, **changes) if tx.id == tx_id else tx
        for tx in transactions
    ]


def delete_transaction(transactions: Iterable[Transaction], tx_id: str) -> List[Transaction]:
    return [tx for tx in transactions if tx.id != tx_id]


def set_transaction_type(tx: Transaction, kind: TransactionType) -> Transaction:
    return dataclasses.replace(tx, amount=signed_amount(tx.amount, kind))


def filter_by_date_range(transactions: Iterable[Transaction], start: date, end: date) -> List[Transaction]:
    """Transactions dated between ``start`` and ``end``, both inclusive."""
    return [tx for tx in transactions if start <= tx.date <= end]


def category_totals(
    transactions: Iterable[Transaction],
    start: Optional[date] = None,
    end: Optional[date] = None,
) -> Dict[Category, Decimal]:
    if start is not None and end is not None:
        transactions = filter_by_date_range(transactions, start, end)
    totals = {cat: Decimal("0") for cat in Category}
    for tx in transactions:
        totals[tx.category] += abs(tx.amount)
    return totals


def dedupe_transactions(transactions: Iterable[Transaction]) -> List[Transaction]:
    """
    Remove duplicates based on (date, description, amount, category).
    """
    seen = set()
    unique = []
    for tx in transactions:
        key = (tx.date, tx.description, tx.amount, tx.category)
        if key not in seen:
            seen.add(key)
            unique.append(tx)
    return unique
