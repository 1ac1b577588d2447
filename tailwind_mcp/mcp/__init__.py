from tailwind_mcp.mcp.server import create_server

__all__ = ["create_server"]
