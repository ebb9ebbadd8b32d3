"""Client management commands."""

import click
from bizdocs.cli.error_handling import handle_domain_error
from bizdocs.domain.client import ClientService


@click.group()
def client_group():
    """Manage clients."""
    pass


@client_group.command("create")
@click.argument("name", metavar="CLIENT_NAME")
@click.option("--address", help="Postal address")
@click.option("--phone", help="Phone number")
@click.option("--email", help="Email address")
@click.option("--gst", help="Client GSTIN")
@click.pass_context
def create_client(
    ctx, name: str, address: str | None, phone: str | None, email: str | None, gst: str | None
):
    """Create a new client.

    Examples:
        bizdocs client create "Sri Ram Constructions" --phone 9876543210
    """
    service = ClientService(ctx.obj["db"])
    try:
        client_id = service.create_client(
            client_name=name, address=address, phone_number=phone, email=email, gst_number=gst
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created client '{name}' (ID: {client_id})")


@client_group.command("list")
@click.pass_context
def list_clients(ctx):
    """List all clients."""
    service = ClientService(ctx.obj["db"])

    clients = service.list_clients()
    if not clients:
        click.echo("No clients found.")
        return

    click.echo("\nClients:")
    click.echo("-" * 72)
    for client in clients:
        click.echo(
            f"ID: {client.id:3d} | {client.client_name:25s} | "
            f"Phone: {client.phone_number or '-':12s} | GSTIN: {client.gst_number or '-'}"
        )


@client_group.command("update")
@click.argument("client_id", type=int)
@click.option("--name", help="New client name")
@click.option("--address", help="Postal address")
@click.option("--phone", help="Phone number")
@click.option("--email", help="Email address")
@click.option("--gst", help="Client GSTIN")
@click.pass_context
def update_client(
    ctx,
    client_id: int,
    name: str | None,
    address: str | None,
    phone: str | None,
    email: str | None,
    gst: str | None,
):
    """Update client details."""
    service = ClientService(ctx.obj["db"])
    try:
        service.update_client(
            client_id,
            client_name=name,
            address=address,
            phone_number=phone,
            email=email,
            gst_number=gst,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Updated client {client_id}")


@client_group.command("delete")
@click.argument("client_id", type=int)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_client(ctx, client_id: int, yes: bool):
    """Delete a client that has no projects."""
    service = ClientService(ctx.obj["db"])
    try:
        client = service.require_client(client_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not yes and not click.confirm(
        f"Are you sure you want to delete client '{client.client_name}' (ID: {client_id})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_client(client_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted client '{client.client_name}'")


def register_commands(cli):
    """Register client commands with main CLI."""
    cli.add_command(client_group, name="client")
