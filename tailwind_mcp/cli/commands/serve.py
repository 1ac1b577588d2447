"""tailwind-mcp serve: Run the MCP server on stdio."""

from rich.console import Console

# stdout belongs to the MCP transport
console = Console(stderr=True)


def serve():
    """Start the MCP server on stdio.

    Reads GEMINI_API_KEY for AI review suggestions; without it components
    are still generated deterministically.

    Example:
        tailwind-mcp serve
    """
    from tailwind_mcp.config import TailwindMCPConfig
    from tailwind_mcp.log import configure_logging
    from tailwind_mcp.mcp.server import create_server
    from tailwind_mcp.tools.handlers import ToolHandlers

    cfg = TailwindMCPConfig()
    configure_logging(cfg.log_level, cfg.debug)

    if not cfg.llm_api_key:
        console.print(
            "[yellow]⚠ GEMINI_API_KEY not set; AI review suggestions are disabled.[/yellow]"
        )

    server = create_server(ToolHandlers.from_settings())
    console.print(f"[dim]{cfg.app_name} MCP server running on stdio[/dim]")
    server.run()
