"""tailwind-mcp: Tailwind CSS components and build configs over MCP.

Usage:
    from tailwind_mcp import ToolHandlers

    handlers = ToolHandlers()
    result = await handlers.generate_component('<button class="px-4">Go</button>', "react")
"""

from tailwind_mcp.types import (
    ConversionOptions, ConversionResult, ProjectConfig, ProjectFile, ProjectStructure,
    BuildToolConfig, BuildToolOutput, Framework, Optimization,
)
from tailwind_mcp.exceptions import (
    TailwindMCPError, InvalidInputError, ConfigMismatchError, UnsupportedFeatureError,
    UnknownFrameworkError, UnknownBuildToolError, AIServiceError,
    UpstreamUnavailableError, AuthenticationError,
)
from tailwind_mcp.registry import (
    AdapterRegistry, BuildToolRegistry, default_adapter_registry, default_build_tool_registry,
)
from tailwind_mcp.tools.handlers import ToolHandlers
from tailwind_mcp.version import __version__

__all__ = [
    "ConversionOptions", "ConversionResult", "ProjectConfig", "ProjectFile", "ProjectStructure",
    "BuildToolConfig", "BuildToolOutput", "Framework", "Optimization",
    "TailwindMCPError", "InvalidInputError", "ConfigMismatchError", "UnsupportedFeatureError",
    "UnknownFrameworkError", "UnknownBuildToolError", "AIServiceError",
    "UpstreamUnavailableError", "AuthenticationError",
    "AdapterRegistry", "BuildToolRegistry", "default_adapter_registry", "default_build_tool_registry",
    "ToolHandlers",
    "__version__",
]
