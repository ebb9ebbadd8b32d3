"""Company profile commands."""

import click
from bizdocs.cli.error_handling import handle_domain_error
from bizdocs.domain.profile import ProfileService


@click.group()
def profile_group():
    """Manage the company profile used on documents."""
    pass


@profile_group.command("show")
@click.pass_context
def show_profile(ctx):
    """Show the company profile."""
    service = ProfileService(ctx.obj["db"])
    profile = service.get_profile()

    click.echo("\nCompany Profile:")
    click.echo("-" * 60)
    click.echo(f"Company:          {profile.company_name or '(not set)'}")
    click.echo(f"Address:          {profile.address or '(not set)'}")
    click.echo(f"Contact:          {profile.contact_number or '(not set)'}")
    click.echo(f"GSTIN:            {profile.gst or '(not set)'}")
    click.echo(f"Default GST rate: {profile.default_gst_rate.normalize():f}%")


@profile_group.command("set")
@click.option("--company", help="Company name")
@click.option("--address", help="Company address")
@click.option("--contact", help="Contact number")
@click.option("--gst", help="Company GSTIN")
@click.option("--default-gst-rate", help="GST % given to new line items (e.g. 18)")
@click.pass_context
def set_profile(
    ctx,
    company: str | None,
    address: str | None,
    contact: str | None,
    gst: str | None,
    default_gst_rate: str | None,
):
    """Update the company profile. Options left out keep their value.

    Examples:
        bizdocs profile set --company "Acme Builders" --gst 29ABCDE1234F1Z5
        bizdocs profile set --default-gst-rate 12
    """
    service = ProfileService(ctx.obj["db"])
    try:
        service.update_profile(
            company_name=company,
            address=address,
            contact_number=contact,
            gst=gst,
            default_gst_rate=default_gst_rate,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo("Profile updated")


def register_commands(cli):
    """Register profile commands with main CLI."""
    cli.add_command(profile_group, name="profile")
