import logging
import os
from datetime import date

import click
from dotenv import load_dotenv

from kedia.config import keywords_from_config, load_config
from kedia.core.errors import ParseError
from kedia.core.models import TransactionType
from kedia.core.parser import parse_transaction_text
from kedia.ledger import to_transaction
from kedia.manual import read_entries
from kedia.outputs import get_output


def _parse_today(ctx, param, value):
    if value is None:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"expected YYYY-MM-DD, got '{value}'")


def _format(tx):
    return f"{tx.date.isoformat()} | {tx.category.value} | {tx.description} | {tx.amount:.2f}"


@click.command()
@click.argument('phrases', nargs=-1)
@click.option(
    '--file', 'entries_file',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='YAML file of phrases to parse in addition to the arguments'
)
@click.option(
    '--today',
    default=None,
    callback=_parse_today,
    help='Reference date (YYYY-MM-DD) for words like "kal" or "2 days back"'
)
@click.option(
    '--credit',
    is_flag=True,
    default=False,
    help='Record command-line phrases as credits (default: debits)'
)
@click.option(
    '--user', 'user_id',
    default=None,
    help='Owner recorded on each transaction (default from config)'
)
@click.option(
    '--config', 'config_path',
    default='config.yaml',
    type=click.Path(dir_okay=False),
    help='Path to config.yaml'
)
@click.option(
    '--csv', 'csv_path',
    default=None,
    type=click.Path(dir_okay=False),
    help='Also append the parsed transactions to this CSV file'
)
@click.option(
    '--env-file', 'env_file',
    default=None,
    type=click.Path(exists=True, dir_okay=False),
    help='Optional .env file, e.g. setting KEDIA_LOG_LEVEL'
)
@click.option(
    '--log-level',
    default=None,
    type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
    help='Logging verbosity (default: KEDIA_LOG_LEVEL or config)'
)
def main(phrases, entries_file, today, credit, user_id, config_path,
         csv_path, env_file, log_level):
    """
    Parse quick transaction phrases such as "500 pizza parso" or
    "200 uber 2 days back" and print the amount, category and date found
    in each. Phrases without any number are reported and make the command
    exit with status 1.
    """
    if env_file:
        load_dotenv(env_file)

    try:
        cfg = load_config(config_path)
        keywords = keywords_from_config(cfg)
    except (OSError, ValueError) as e:
        raise click.ClickException(f"Could not load config: {e}")

    level = log_level or os.getenv('KEDIA_LOG_LEVEL') or cfg['log_level']
    logging.basicConfig(level=str(level).upper())

    if not phrases and not entries_file:
        raise click.UsageError('Give at least one phrase or --file.')

    user_id = user_id or cfg['default_user']
    default_kind = TransactionType.CREDIT if credit else TransactionType.DEBIT

    work = [(text, default_kind, None) for text in phrases]
    if entries_file:
        try:
            work.extend(read_entries(entries_file))
        except ValueError as e:
            raise click.ClickException(f"Error loading {entries_file}: {e}")

    txs = []
    failed = 0
    for text, kind, override in work:
        try:
            parsed = parse_transaction_text(text, now=today, keywords=keywords)
        except ParseError as e:
            click.echo(f"Could not parse '{text}': {e}", err=True)
            failed += 1
            continue
        txs.append(to_transaction(parsed, user_id, kind=kind, override_date=override))

    for tx in txs:
        click.echo(_format(tx))

    if csv_path and txs:
        written = get_output('csv', cfg).write(txs, csv_path)
        click.echo(f"Appended {written} transaction(s) to {csv_path}.")

    if failed:
        raise SystemExit(1)
