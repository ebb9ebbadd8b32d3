"""Main CLI entry point."""

import logging

import click
from bizdocs.database.factories import create_sqlite_database
from bizdocs.domain.session import SessionContext

# Import and register all commands at module level
from bizdocs.cli.commands import (
    client,
    document,
    profile,
    project,
    salary,
)


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides BIZDOCS_DB_PATH environment variable)",
    envvar="BIZDOCS_DB_PATH",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def cli(ctx, db_path: str | None, verbose: bool):
    """Bizdocs - invoices, quotations and project costing.

    Keep clients, projects and salary configurations, and issue GST
    invoices and quotations with per-line CGST/SGST.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.obj["session"] = SessionContext.from_database(db)
        ctx.call_on_close(db.disconnect)


# Register all commands
profile.register_commands(cli)
client.register_commands(cli)
project.register_commands(cli)
document.register_commands(cli)
salary.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
