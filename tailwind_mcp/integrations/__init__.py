from tailwind_mcp.integrations.base import BuildToolIntegration
from tailwind_mcp.integrations.nextjs import NextJSIntegration
from tailwind_mcp.integrations.vite import ViteIntegration
from tailwind_mcp.integrations.webpack import WebpackIntegration

__all__ = ["BuildToolIntegration", "ViteIntegration", "WebpackIntegration", "NextJSIntegration"]
