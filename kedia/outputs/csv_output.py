# kedia/outputs/csv_output.py

import os
import csv
import logging
from decimal import Decimal
from kedia.outputs.base import BaseOutput

logger = logging.getLogger(__name__)

FIELDS = ['id', 'user_id', 'date', 'description', 'category', 'amount']


class CSVOutput(BaseOutput):
    """
    Writes transactions to a CSV file, sorted by date (oldest to latest).
    An existing file is extended; rows whose id is already present are skipped.
    The default file is transactions.csv under the configured output_dir.
    """
    def __init__(self, config):
        self.config     = config
        self.output_dir = config.get('output_dir', 'data')

    def _existing_ids(self, path):
        if not os.path.exists(path):
            return set()
        with open(path, newline='', encoding='utf-8') as f:
            return {row['id'] for row in csv.DictReader(f)}

    def write(self, transactions, path=None):
        out_path = path or os.path.join(self.output_dir, 'transactions.csv')
        if not transactions:
            logger.info("No transactions to write.")
            return 0

        parent = os.path.dirname(out_path)
        if parent:
            os.makedirs(parent, exist_ok=True)

        seen = self._existing_ids(out_path)
        new_file = not os.path.exists(out_path)
        rows = []
        for tx in sorted(transactions, key=lambda t: t.date):
            if tx.id in seen:
                continue
            seen.add(tx.id)
            rows.append([
                tx.id,
                tx.user_id,
                tx.date.isoformat(),
                tx.description.strip(),
                tx.category.value,
                f"{Decimal(tx.amount):.2f}",
            ])

        with open(out_path, 'a', newline='', encoding='utf-8') as f:
            writer = csv.writer(f)
            if new_file:
                writer.writerow(FIELDS)
            writer.writerows(rows)

        logger.info("Written %d transaction(s) to %s", len(rows), out_path)
        return len(rows)
