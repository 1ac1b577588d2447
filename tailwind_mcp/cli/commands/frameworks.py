"""tailwind-mcp frameworks: List adapters and build tools."""

from rich import box
from rich.console import Console
from rich.table import Table

console = Console()


def frameworks_list():
    """List supported frameworks and which build tools can build them.

    Example:
        tailwind-mcp frameworks
    """
    from tailwind_mcp.registry import default_adapter_registry, default_build_tool_registry

    adapters = default_adapter_registry()
    build_tools = default_build_tool_registry()
    integrations = [build_tools.get_integration(name) for name in build_tools.names()]

    table = Table(
        box=box.ROUNDED,
        header_style="bold dim",
        show_lines=False,
        title=f"[bold]{len(adapters)} Frameworks[/bold]",
    )
    table.add_column("Name", style="cyan", width=10)
    table.add_column("Framework", width=10)
    table.add_column("Extension", style="dim", width=14)
    table.add_column("Build Tools", width=24)

    for name in adapters.get_supported_frameworks():
        adapter = adapters.get_adapter(name)
        tools = [i.name for i in integrations if name in i.supported_frameworks]
        table.add_row(name, adapter.display_name, adapter.component_extension, ", ".join(tools))

    console.print()
    console.print(table)

    tools_table = Table(
        box=box.ROUNDED,
        header_style="bold dim",
        show_lines=False,
        title=f"[bold]{len(integrations)} Build Tools[/bold]",
    )
    tools_table.add_column("Name", style="cyan", width=10)
    tools_table.add_column("Tool", width=10)
    tools_table.add_column("Features", width=48, style="dim")

    for integration in integrations:
        tools_table.add_row(
            integration.name,
            integration.display_name,
            ", ".join(sorted(integration.supported_features)),
        )

    console.print()
    console.print(tools_table)
    console.print()
