"""Reset command."""

import click


@click.command("reset")
@click.confirmation_option(prompt="Delete all transactions?")
@click.pass_context
def reset_transactions(ctx):
    """Delete all recorded transactions."""
    store = ctx.obj["store"]
    count = len(store)
    store.reset()
    click.echo(f"Deleted {count} transaction(s).")


def register_commands(cli):
    """Register reset command with main CLI."""
    cli.add_command(reset_transactions)
