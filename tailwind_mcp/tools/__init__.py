from tailwind_mcp.tools.handlers import ToolHandlers

__all__ = ["ToolHandlers"]
