"""tailwind-mcp convert: Convert an HTML file into a component."""

from pathlib import Path

import typer
from rich.console import Console

console = Console()
err_console = Console(stderr=True)


def convert_file(
    source: Path = typer.Argument(..., exists=True, dir_okay=False, readable=True, help="HTML file to convert"),
    framework: str = typer.Option("react", "--framework", "-f", help="react, vue, svelte or angular"),
    types: bool = typer.Option(False, "--types", help="Emit typed props / lang=\"ts\""),
    a11y: bool = typer.Option(False, "--a11y", help="Add ARIA attributes to interactive elements"),
    optimize: bool = typer.Option(False, "--optimize", help="Smaller imports, OnPush for Angular"),
    name: str = typer.Option("TailwindComponent", "--name", "-n", help="Component name"),
    output: Path = typer.Option(None, "--output", "-o", help="Write to file instead of stdout"),
):
    """Convert Tailwind-styled HTML into component source.

    Runs the deterministic converter only; no AI call is made.

    Example:
        tailwind-mcp convert card.html --framework vue --types --a11y
    """
    from tailwind_mcp.exceptions import TailwindMCPError
    from tailwind_mcp.registry import default_adapter_registry
    from tailwind_mcp.types import ConversionOptions

    options = ConversionOptions(
        include_types=types,
        add_accessibility=a11y,
        optimize_bundle=optimize,
        component_name=name,
        ai_enhance=False,
    )
    try:
        adapter = default_adapter_registry().get_adapter(framework)
        code = adapter.render_component(source.read_text(encoding="utf-8"), options)
    except TailwindMCPError as e:
        err_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if output:
        output.write_text(code, encoding="utf-8")
        err_console.print(f"[green]✓[/green] Wrote {output}")
    else:
        # plain write so Rich markup never touches generated code
        typer.echo(code, nl=False)
