"""MCP server exposing the tool handlers over stdio.

Built with FastMCP (part of the official modelcontextprotocol Python SDK).
Errors raised by a handler are reported to the caller as tool errors.

Run:
    tailwind-mcp serve
"""

from typing import Any, Optional

from mcp.server.fastmcp import FastMCP

from tailwind_mcp.tools.handlers import ToolHandlers


def create_server(handlers: Optional[ToolHandlers] = None) -> FastMCP:
    """Register every tool handler on a fresh FastMCP instance."""
    handlers = handlers or ToolHandlers.from_settings()
    mcp = FastMCP("tailwind-mcp")

    @mcp.tool()
    async def generate_component(
        markup: str,
        framework: str,
        options: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """Convert Tailwind-styled HTML into a React, Vue, Svelte or Angular component.

        options: includeTypes, addAccessibility, optimizeBundle, componentName, aiEnhance
        """
        return await handlers.generate_component(markup, framework, options)

    @mcp.tool()
    def generate_project(config: dict[str, Any]) -> dict[str, Any]:
        """Scaffold a Tailwind project: name, framework, features, buildTool, cssFramework."""
        return handlers.generate_project(config)

    @mcp.tool()
    def generate_build_config(config: dict[str, Any], build_tool: str = "vite") -> dict[str, Any]:
        """Render a vite, webpack or nextjs config wired for Tailwind.

        config: framework, features, outputDir, publicDir, entryPoint, cssFramework, optimization
        """
        return handlers.generate_build_config(config, build_tool)

    @mcp.tool()
    def optimize_component(source: str, framework: str) -> dict[str, Any]:
        """Tidy imports and whitespace of generated component source."""
        return handlers.optimize_component(source, framework)

    @mcp.tool()
    def list_supported_frameworks() -> list[str]:
        """Return the frameworks components can be generated for."""
        return handlers.list_supported_frameworks()

    @mcp.tool()
    def list_supported_build_tools() -> list[str]:
        """Return the build tools configs can be generated for."""
        return handlers.list_supported_build_tools()

    return mcp
