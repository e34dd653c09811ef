import csv
from datetime import date
from decimal import Decimal

from kedia.core.models import Category, Transaction
from kedia.outputs import get_output
from kedia.outputs.csv_output import CSVOutput


def _tx(tx_id, day, amount="-500"):
    return Transaction(tx_id, "u1", Decimal(amount), "pizza", Category.FOOD, day)


def read_rows(path):
    with open(path, newline='') as f:
        return list(csv.reader(f))


def test_csv_output_sorts_by_date(tmp_path):
    out = CSVOutput({'output_dir': str(tmp_path / 'data')})
    written = out.write([_tx('b', date(2024, 6, 9)), _tx('a', date(2024, 6, 1), '25000')])

    assert written == 2
    path = tmp_path / 'data' / 'transactions.csv'
    rows = read_rows(path)
    assert rows[0] == ['id', 'user_id', 'date', 'description', 'category', 'amount']
    assert rows[1] == ['a', 'u1', '2024-06-01', 'pizza', 'Food', '25000.00']
    assert rows[2] == ['b', 'u1', '2024-06-09', 'pizza', 'Food', '-500.00']


def test_csv_output_appends_without_repeating_ids(tmp_path):
    path = tmp_path / 'ledger.csv'
    out = get_output('csv', {})
    assert out.write([_tx('a', date(2024, 6, 1))], str(path)) == 1
    assert out.write([_tx('a', date(2024, 6, 1)), _tx('b', date(2024, 6, 2))], str(path)) == 1

    rows = read_rows(path)
    assert [r[0] for r in rows] == ['id', 'a', 'b']


def test_csv_output_with_nothing_to_write(tmp_path):
    path = tmp_path / 'ledger.csv'
    assert CSVOutput({}).write([], str(path)) == 0
    assert not path.exists()
