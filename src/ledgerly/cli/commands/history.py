"""Transaction history command."""

import click

from ledgerly.cli.date_filters import collect_period_flags, period_options, resolve_cli_date_range
from ledgerly.cli.formatting import describe_transaction, format_amount
from ledgerly.domain.categories import category_label
from ledgerly.domain.summary import group_by_day


@click.command("history")
@click.option("--start-date", help="Start date (YYYY-MM-DD or relative like 'last month')")
@click.option("--end-date", help="End date (YYYY-MM-DD or relative like 'today')")
@period_options
@click.option("--verbose", "-v", is_flag=True, help="Show all fields including ids")
@click.pass_context
def view_history(ctx, start_date: str | None, end_date: str | None, verbose: bool, **periods):
    """Show transactions grouped by day, newest first.

    Use --verbose to show note, payment and id of every transaction.
    """
    store = ctx.obj["store"]
    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        period_flags=collect_period_flags(**periods),
    )

    transactions = [
        txn
        for txn in store.transactions
        if (start is None or txn.date.date() >= start) and (end is None or txn.date.date() <= end)
    ]

    if not transactions:
        click.echo("No transactions found.")
        return

    click.echo(f"\nFound {len(transactions)} transaction(s):")
    for day, day_transactions in group_by_day(transactions):
        click.echo(f"\n{day:%a, %d %b %Y}")
        click.echo("-" * 60)
        for txn in day_transactions:
            amount_str = format_amount(txn.amount, signed=True)
            if verbose:
                click.echo(f"  {category_label(txn.category_key):<30} {amount_str:>15}")
                click.echo(f"    Time: {txn.date:%H:%M}")
                if txn.payment:
                    click.echo(f"    Payment: {txn.payment}")
                if txn.note:
                    click.echo(f"    Note: {txn.note}")
                click.echo(f"    ID: {txn.id}")
            else:
                click.echo(f"  {describe_transaction(txn)[:40]:<40} {amount_str:>15}")


def register_commands(cli):
    """Register history command with main CLI."""
    cli.add_command(view_history)
