"""Salary configuration commands."""

import click
from bizdocs.cli.error_handling import handle_domain_error
from bizdocs.domain.salary import SalaryConfigService
from bizdocs.utils.date_parser import parse_date
from bizdocs.utils.formatting import format_display_date, format_inr


@click.group()
def salary_group():
    """Manage project salary configurations."""
    pass


@salary_group.command("add")
@click.option("--project", "project_id", type=int, required=True, help="Project ID")
@click.option("--role", required=True, help="Role name (e.g. Mason)")
@click.option("--from", "from_date", required=True, help="First day (YYYY-MM-DD)")
@click.option("--to", "to_date", required=True, help="Last day (YYYY-MM-DD)")
@click.option("--salary", required=True, help="Salary per head")
@click.option("--count", required=True, help="Number of people")
@click.pass_context
def add_config(
    ctx, project_id: int, role: str, from_date: str, to_date: str, salary: str, count: str
):
    """Add a salary configuration to a project.

    Examples:
        bizdocs salary add --project 1 --role Mason --from 2024-01-01 --to 2024-01-31 --salary 18000 --count 4
    """
    service = SalaryConfigService(ctx.obj["db"])
    try:
        start = parse_date(from_date)
        end = parse_date(to_date)
    except ValueError as e:
        click.echo(f"Error: Invalid date format: {e}", err=True)
        ctx.exit(1)

    try:
        config_id = service.create_config(
            project_id=project_id,
            role_name=role,
            from_date=start,
            to_date=end,
            salary_per_head=salary,
            count=count,
        )
    except ValueError as e:
        handle_domain_error(ctx, e)

    config = service.get_config(config_id)
    click.echo(f"Created salary configuration {config_id}")
    click.echo(f"  Total salary: {format_inr(config.total_salary)}")


@salary_group.command("list")
@click.option("--project", "project_id", type=int, required=True, help="Project ID")
@click.pass_context
def list_configs(ctx, project_id: int):
    """List a project's salary configurations."""
    service = SalaryConfigService(ctx.obj["db"])

    configs = service.list_configs(project_id=project_id)
    if not configs:
        click.echo("No salary configurations found.")
        return

    click.echo("\nSalary configurations:")
    click.echo("-" * 86)
    for config in configs:
        click.echo(
            f"ID: {config.id:3d} | {config.role_name:15s} | "
            f"{format_display_date(config.from_date)} - {format_display_date(config.to_date)} | "
            f"{format_inr(config.salary_per_head):>12s} x {config.count:3d} | "
            f"{format_inr(config.total_salary):>14s}"
        )
    click.echo("-" * 86)
    click.echo(f"Project total: {format_inr(service.project_total(project_id))}")


@salary_group.command("delete")
@click.argument("config_id", type=int)
@click.pass_context
def delete_config(ctx, config_id: int):
    """Delete a salary configuration."""
    service = SalaryConfigService(ctx.obj["db"])
    try:
        service.delete_config(config_id)
    except ValueError as e:
        handle_domain_error(ctx, e)
    click.echo(f"Deleted salary configuration {config_id}")


def register_commands(cli):
    """Register salary commands with main CLI."""
    cli.add_command(salary_group, name="salary")
