"""Profile management commands."""

import click

from ledgerly.cli.error_handling import handle_domain_error
from ledgerly.domain.entities import Profile
from ledgerly.domain.errors import DomainError
from ledgerly.domain.profile import ProfileService


def _print_profile(profile: Profile) -> None:
    if profile.user_id is not None:
        click.echo(f"Signed in as {profile.name or profile.user_id}")
        click.echo(f"  User ID: {profile.user_id}")
        if profile.email:
            click.echo(f"  E-mail: {profile.email}")
    elif profile.is_guest:
        click.echo("Using ledgerly as a guest.")
    else:
        click.echo("Not signed in.")


@click.group()
def profile_group():
    """Manage the local profile."""
    pass


@profile_group.command("show")
@click.pass_context
def show_profile(ctx):
    """Show who is signed in."""
    db = ctx.obj["db"]
    _print_profile(ProfileService(db, db).current())


@profile_group.command("sign-in")
@click.argument("user_id", metavar="USER_ID")
@click.option("--name", help="Display name")
@click.option("--email", help="E-mail address")
@click.pass_context
def sign_in(ctx, user_id: str, name: str | None, email: str | None):
    """Remember USER_ID as the signed-in user."""
    db = ctx.obj["db"]
    service = ProfileService(db, db)

    try:
        profile = service.sign_in(user_id, name=name, email=email)
    except DomainError as e:
        handle_domain_error(ctx, e)
        return

    _print_profile(profile)


@profile_group.command("guest")
@click.pass_context
def continue_as_guest(ctx):
    """Continue without signing in."""
    db = ctx.obj["db"]
    _print_profile(ProfileService(db, db).continue_as_guest())


@profile_group.command("sign-out")
@click.pass_context
def sign_out(ctx):
    """Forget the signed-in user."""
    db = ctx.obj["db"]
    ProfileService(db, db).sign_out()
    click.echo("Signed out.")


def register_commands(cli):
    """Register profile commands with main CLI."""
    cli.add_command(profile_group, name="profile")
