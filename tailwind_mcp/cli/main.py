"""tailwind-mcp CLI: Typer application."""

import typer
from rich.console import Console

from tailwind_mcp.version import __version__

app = typer.Typer(
    name="tailwind-mcp",
    help="tailwind-mcp: Tailwind CSS components and build configs for React, Vue, Svelte and Angular.",
    no_args_is_help=True,
    invoke_without_command=True,
)
console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(False, "--version", "-v", is_eager=True, help="Show version"),
):
    """tailwind-mcp CLI."""
    if version:
        console.print(f"tailwind-mcp v{__version__}")
        raise typer.Exit()
    if ctx.invoked_subcommand is None:
        console.print(ctx.get_help())


# ── Server ─────────────────────────────────────────────────────────────────────
from tailwind_mcp.cli.commands import serve  # noqa: E402

app.command(name="serve", help="Run the MCP server over stdio")(serve.serve)

# ── Local tools ────────────────────────────────────────────────────────────────
from tailwind_mcp.cli.commands import config, convert, frameworks  # noqa: E402

app.command(name="frameworks", help="List supported frameworks and build tools")(frameworks.frameworks_list)
app.command(name="convert", help="Convert an HTML file into a framework component")(convert.convert_file)
app.command(name="config", help="Show resolved configuration")(config.config_show)


if __name__ == "__main__":
    app()
