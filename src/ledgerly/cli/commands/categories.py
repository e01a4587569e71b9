"""Category catalog command."""

import click

from ledgerly.domain.categories import EXPENSE_CATEGORIES, INCOME_CATEGORIES


@click.command("categories")
@click.option("--income", is_flag=True, help="List income categories instead of expense ones")
def list_categories(income: bool):
    """List the category keys accepted by 'add' and 'income'."""
    catalog = INCOME_CATEGORIES if income else EXPENSE_CATEGORIES
    click.echo("\nIncome categories:" if income else "\nExpense categories:")
    for category in catalog:
        click.echo(f"  {category.key:<15} {category.label}")


def register_commands(cli):
    """Register categories command with main CLI."""
    cli.add_command(list_categories)
