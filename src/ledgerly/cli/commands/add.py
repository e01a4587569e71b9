"""Add expense and income commands."""

import click
from datetime import datetime

from ledgerly.cli.error_handling import handle_domain_error
from ledgerly.cli.formatting import format_amount
from ledgerly.domain.categories import (
    DEFAULT_INCOME_SOURCE,
    DEFAULT_PAYMENT_METHOD,
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    INCOME_SOURCES,
    PAYMENT_METHODS,
    category_label,
)
from ledgerly.domain.entry import build_expense, build_income
from ledgerly.domain.errors import DomainError
from ledgerly.utils.date_parser import at_time_of, parse_date


def _resolve_date(ctx, date_text: str | None) -> datetime:
    if date_text is None:
        return datetime.now()
    try:
        return at_time_of(parse_date(date_text))
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)


def _report(txn) -> None:
    click.echo(f"Recorded {category_label(txn.category_key)}: {format_amount(txn.amount, signed=True)}")
    click.echo(f"  Date: {txn.date:%Y-%m-%d %H:%M}")
    if txn.payment:
        click.echo(f"  Payment: {txn.payment}")
    if txn.note:
        click.echo(f"  Note: {txn.note}")
    click.echo(f"  ID: {txn.id}")


@click.command("add")
@click.option("--amount", required=True, help="Amount spent (e.g., 500 or 12,50)")
@click.option(
    "--category",
    required=True,
    type=click.Choice([c.key for c in EXPENSE_CATEGORIES]),
    help="Expense category key",
)
@click.option(
    "--date",
    help="Date (YYYY-MM-DD or relative like 'today', 'yesterday'); defaults to now",
)
@click.option("--note", help="Free-text note")
@click.option(
    "--payment",
    type=click.Choice(PAYMENT_METHODS),
    default=DEFAULT_PAYMENT_METHOD,
    show_default=True,
    help="Payment method",
)
@click.pass_context
def add_expense(ctx, amount: str, category: str, date: str | None, note: str | None, payment: str):
    """Record an expense.

    Examples:
        ledgerly add --amount 500 --category food
        ledgerly add --amount "1 250,90" --category groceries --date yesterday --payment Cash
    """
    store = ctx.obj["store"]
    txn_date = _resolve_date(ctx, date)

    try:
        txn = build_expense(amount, category, date=txn_date, note=note, payment=payment)
        store.add(txn)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    _report(txn)


@click.command("income")
@click.option("--amount", required=True, help="Amount received (e.g., 2000)")
@click.option(
    "--category",
    type=click.Choice([c.key for c in INCOME_CATEGORIES]),
    default="salary",
    show_default=True,
    help="Income category key",
)
@click.option(
    "--source",
    type=click.Choice(INCOME_SOURCES),
    default=DEFAULT_INCOME_SOURCE,
    show_default=True,
    help="Income source",
)
@click.option(
    "--date",
    help="Date (YYYY-MM-DD or relative like 'today', 'yesterday'); defaults to now",
)
@click.option("--note", help="Free-text note")
@click.pass_context
def add_income(ctx, amount: str, category: str, source: str, date: str | None, note: str | None):
    """Record an income.

    Examples:
        ledgerly income --amount 2000
        ledgerly income --amount 350 --category freelance --source Freelance
    """
    store = ctx.obj["store"]
    txn_date = _resolve_date(ctx, date)

    try:
        txn = build_income(amount, category, date=txn_date, note=note, source=source)
        store.add(txn)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    _report(txn)


def register_commands(cli):
    """Register add and income commands with main CLI."""
    cli.add_command(add_expense)
    cli.add_command(add_income)
