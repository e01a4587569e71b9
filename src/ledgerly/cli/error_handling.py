"""CLI error handling helpers."""

import click

from ledgerly.domain.errors import ConflictError, DomainError

# Exit status for a transaction the store refused as already recorded
CONFLICT_EXIT_CODE = 3


def handle_domain_error(ctx: click.Context, error: DomainError) -> None:
    """Render a domain error and exit with failure.

    Invalid input and unknown categories exit with status 1. A conflict
    raised by the transaction store exits with ``CONFLICT_EXIT_CODE`` and
    leaves the stored list untouched.
    """
    if isinstance(error, ConflictError):
        click.echo(f"Error: {error}; nothing was recorded.", err=True)
        ctx.exit(CONFLICT_EXIT_CODE)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
