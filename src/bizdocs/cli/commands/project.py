"""Project management commands."""

import click
from bizdocs.cli.error_handling import handle_domain_error
from bizdocs.domain.client import ClientService
from bizdocs.domain.project import ProjectService


@click.group()
def project_group():
    """Manage projects."""
    pass


@project_group.command("create")
@click.argument("name", metavar="PROJECT_NAME")
@click.option("--client", "client_id", type=int, required=True, help="Client ID")
@click.option("--gst", help="GSTIN billed for this project")
@click.option("--location", help="Site location")
@click.pass_context
def create_project(ctx, name: str, client_id: int, gst: str | None, location: str | None):
    """Create a project for a client.

    Examples:
        bizdocs project create "Villa Renovation" --client 1 --gst 33ABCDE1234F1Z5
    """
    service = ProjectService(ctx.obj["db"])
    try:
        project_id = service.create_project(
            project_name=name, client_id=client_id, gst=gst, location=location
        )
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Created project '{name}' (ID: {project_id})")


@project_group.command("list")
@click.option("--client", "client_id", type=int, help="Only projects of this client")
@click.pass_context
def list_projects(ctx, client_id: int | None):
    """List projects."""
    db = ctx.obj["db"]
    service = ProjectService(db)
    clients = {client.id: client.client_name for client in ClientService(db).list_clients()}

    projects = service.list_projects(client_id=client_id)
    if not projects:
        click.echo("No projects found.")
        return

    click.echo("\nProjects:")
    click.echo("-" * 72)
    for project in projects:
        click.echo(
            f"ID: {project.id:3d} | {project.project_name:25s} | "
            f"Client: {clients.get(project.client_id, '?'):20s} | GSTIN: {project.gst or '-'}"
        )


@project_group.command("delete")
@click.argument("project_id", type=int)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_project(ctx, project_id: int, yes: bool):
    """Delete a project with no documents or salary configurations."""
    service = ProjectService(ctx.obj["db"])
    try:
        project = service.require_project(project_id)
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not yes and not click.confirm(
        f"Are you sure you want to delete project '{project.project_name}' (ID: {project_id})?"
    ):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_project(project_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted project '{project.project_name}'")


def register_commands(cli):
    """Register project commands with main CLI."""
    cli.add_command(project_group, name="project")
