"""Main CLI entry point."""

import click

from ledgerly.database.factories import create_sqlite_database
from ledgerly.domain.first_run import mark_first_run_done, perform_first_run_cleanup
from ledgerly.logging_setup import configure_logging
from ledgerly.store.factories import create_transaction_store

# Import and register all commands at module level
from ledgerly.cli.commands import (
    add,
    history,
    balance,
    categories,
    reset,
    profile,
)


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False),
    help="Directory for application data (overrides LEDGERLY_DATA_DIR environment variable)",
    envvar="LEDGERLY_DATA_DIR",
)
@click.option(
    "--db-path",
    type=click.Path(dir_okay=False),
    help="Path to settings database file (overrides LEDGERLY_DB_PATH environment variable)",
    envvar="LEDGERLY_DB_PATH",
)
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    envvar="LEDGERLY_LOG_LEVEL",
    help="Logging level name or number",
)
@click.option(
    "--seed-demo",
    is_flag=True,
    help="Fill an empty ledger with generated sample transactions",
)
@click.pass_context
def cli(ctx, data_dir: str | None, db_path: str | None, log_level: str, seed_demo: bool):
    """Ledgerly - personal income and expense tracker.

    Log spendings and income, check the balance of a month and browse the
    history of everything you recorded.
    """
    ctx.ensure_object(dict)

    try:
        configure_logging(log_level)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--log-level")

    # Open storage only when actually running a command (not when showing help)
    if ctx.invoked_subcommand is None:
        return

    db = create_sqlite_database(database_path=db_path, data_dir=data_dir)
    db.connect()
    db.initialize_schema()
    ctx.call_on_close(db.disconnect)

    store = create_transaction_store(data_dir=data_dir)
    store.initialize(seed_if_empty=seed_demo)
    # Registered after the database so the store is flushed first
    ctx.call_on_close(store.close)

    if seed_demo:
        mark_first_run_done(db)
    else:
        perform_first_run_cleanup(store, db)

    ctx.obj["db"] = db
    ctx.obj["store"] = store


# Register all commands
add.register_commands(cli)
history.register_commands(cli)
balance.register_commands(cli)
categories.register_commands(cli)
reset.register_commands(cli)
profile.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
