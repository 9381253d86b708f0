"""standgrowth CLI entry point.

Provides the goodness-of-fit plot command.
"""

import logging
import sys

import typer

from .gof import gof_command

# Create the main app
app = typer.Typer(
    name="sg",
    help="Stand growth goodness-of-fit plots",
    invoke_without_command=True,
)

app.command("gof")(gof_command)


@app.command("version")
def version():
    """Show version information."""
    from .. import __version__
    typer.echo(f"standgrowth CLI version {__version__}")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose output")
):
    """Configure logging and require a subcommand."""
    if verbose:
        logging.basicConfig(level=logging.INFO)

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        typer.echo("\nError: Missing command.", err=True)
        raise typer.Exit(1)


def cli_main():
    """Entry point for the CLI."""
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("\nAborted", err=True)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
