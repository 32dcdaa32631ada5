"""
Command-line interface for examgrid.

Renders exported list-screen datasets through the grid engine: one page at a
time (``show``) or interactively (``browse``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from eg_ui.cli.commands.grid import register_browse_command, register_show_command
from eg_ui.wiring.dependencies import UIContext, configure_logging

ctx_store = UIContext()

app = typer.Typer(help="Sort, page and select tabular datasets from the terminal.", no_args_is_help=True)


@app.callback(invoke_without_command=True)
def entry(
    ctx: typer.Context,
    headless: bool = typer.Option(
        False,
        "--headless",
        help="Force headless output (useful in CI).",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Grid settings file (YAML). Defaults to $EG_GRID_CONFIG.",
    ),
    debug: bool = typer.Option(False, "--debug", help="Log grid state transitions."),
) -> None:
    """Global entry point handling interactive vs headless modes."""
    configure_logging(debug=debug, force=True)
    ctx_store.reset()
    ctx_store.headless = headless
    ctx_store.config_path = config

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


register_show_command(app, ctx_store)
register_browse_command(app, ctx_store)


def main() -> None:
    """Console script entrypoint (Typer app)."""
    app()


if __name__ == "__main__":
    main()
