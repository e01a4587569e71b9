"""CLI helpers for date range resolution."""

from datetime import date

import click

from ledgerly.utils.date_parser import PERIODS, get_date_range, parse_date


def period_options(command):
    """Attach one ``--<period>`` flag per named period to a command."""
    for period in reversed(PERIODS):
        label = period.replace("-", " ")
        command = click.option(
            f"--{period}", period.replace("-", "_"), is_flag=True, help=f"Only {label}"
        )(command)
    return command


def collect_period_flags(**kwargs: bool) -> dict[str, bool]:
    """Map click keyword arguments back to period names."""
    return {period: bool(kwargs.get(period.replace("-", "_"))) for period in PERIODS}


def _parse_or_exit(ctx, text: str, which: str) -> date:
    try:
        return parse_date(text)
    except ValueError as e:
        click.echo(f"Error: Invalid {which} date: {e}", err=True)
        ctx.exit(1)


def resolve_cli_date_range(
    ctx,
    *,
    start_date: str | None,
    end_date: str | None,
    period_flags: dict[str, bool],
) -> tuple[date | None, date | None]:
    """Resolve an inclusive date range from period flags or explicit dates."""
    selected = [period for period, is_set in period_flags.items() if is_set]
    flags = ", ".join(f"--{period}" for period in PERIODS)

    if len(selected) > 1:
        click.echo(f"Error: Only one period option ({flags}) can be specified at a time.", err=True)
        ctx.exit(1)

    if selected and (start_date or end_date):
        click.echo(
            "Error: Period options cannot be combined with --start-date or --end-date.",
            err=True,
        )
        ctx.exit(1)

    if selected:
        return get_date_range(selected[0])

    start = _parse_or_exit(ctx, start_date, "start") if start_date else None
    end = _parse_or_exit(ctx, end_date, "end") if end_date else None
    return start, end
