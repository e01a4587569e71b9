"""Balance and monthly spending commands."""

import click
from datetime import datetime

from ledgerly.cli.formatting import format_amount
from ledgerly.domain.summary import (
    month_summary,
    monthly_expense_total,
    total_balance,
    total_expense,
    total_income,
)


def _month_title(start: datetime) -> str:
    return f"{start:%B %Y}"


@click.command("balance")
@click.option(
    "--offset",
    type=int,
    default=0,
    show_default=True,
    help="Month relative to the current one (-1 is last month)",
)
@click.pass_context
def show_balance(ctx, offset: int):
    """Show income, expense and balance for a month plus all-time totals."""
    store = ctx.obj["store"]
    transactions = store.transactions
    summary = month_summary(transactions, datetime.now(), offset)

    click.echo(f"\n{_month_title(summary.start)}")
    click.echo("-" * 40)
    click.echo(f"{'Income':<20} {format_amount(summary.income):>19}")
    click.echo(f"{'Expense':<20} {format_amount(-summary.expense):>19}")
    click.echo(f"{'Balance':<20} {format_amount(summary.balance, signed=True):>19}")

    click.echo("\nAll time")
    click.echo("-" * 40)
    click.echo(f"{'Balance':<20} {format_amount(total_balance(transactions), signed=True):>19}")
    click.echo(f"{'Income':<20} {format_amount(total_income(transactions)):>19}")
    click.echo(f"{'Expense':<20} {format_amount(-total_expense(transactions)):>19}")


@click.command("monthly")
@click.option(
    "--offset",
    type=int,
    default=0,
    show_default=True,
    help="Month relative to the current one (-1 is last month)",
)
@click.pass_context
def show_monthly(ctx, offset: int):
    """Show how much was spent in a month."""
    store = ctx.obj["store"]
    now = datetime.now()
    summary = month_summary(store.transactions, now, offset)
    spent = monthly_expense_total(store.transactions, now, offset)
    click.echo(f"Spent in {_month_title(summary.start)}: {format_amount(spent)}")


def register_commands(cli):
    """Register balance commands with main CLI."""
    cli.add_command(show_balance)
    cli.add_command(show_monthly)
