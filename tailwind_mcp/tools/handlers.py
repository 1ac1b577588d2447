"""ToolHandlers: the operations behind every MCP tool.

Each handler validates its payload, resolves an adapter or integration from
the registries, and returns plain JSON-ready dicts. Deterministic-path errors
propagate to the caller; only AI enrichment degrades silently into warnings.
"""

import json
import logging
from typing import Any, Optional, Union

from tailwind_mcp.config import config as settings
from tailwind_mcp.llm.client import AITextService, LLMClient
from tailwind_mcp.registry import (
    AdapterRegistry,
    BuildToolRegistry,
    default_adapter_registry,
    default_build_tool_registry,
)
from tailwind_mcp.types import (
    BuildToolConfig,
    ConversionOptions,
    ProjectConfig,
    coerce_model,
)

logger = logging.getLogger(__name__)


class ToolHandlers:
    """Orchestrates adapters and build tool integrations.

    Args:
        adapters:    AdapterRegistry (defaults to the standard four frameworks, no AI)
        build_tools: BuildToolRegistry (defaults to vite, webpack, nextjs)
    """

    def __init__(
        self,
        adapters: Optional[AdapterRegistry] = None,
        build_tools: Optional[BuildToolRegistry] = None,
    ):
        self.adapters = adapters or default_adapter_registry()
        self.build_tools = build_tools or default_build_tool_registry()

    @classmethod
    def from_settings(cls, ai_client: Optional[AITextService] = None) -> "ToolHandlers":
        """Build handlers from settings, wiring the LLM client when a credential exists."""
        if ai_client is None:
            client = LLMClient()
            if client.has_credentials:
                ai_client = client
                logger.info("AI enrichment enabled (model=%s)", client.model)
            else:
                logger.warning("No AI credential configured; components are generated without AI review")
        return cls(
            adapters=default_adapter_registry(ai_client=ai_client, ai_timeout=settings.ai_timeout_seconds),
            build_tools=default_build_tool_registry(),
        )

    # ── Components ──

    async def generate_component(
        self,
        markup: str,
        framework: str,
        options: Union[ConversionOptions, dict, None] = None,
    ) -> dict[str, Any]:
        adapter = self.adapters.get_adapter(framework)
        result = await adapter.convert_component_detailed(markup, coerce_model(ConversionOptions, options))
        return result.model_dump()

    def optimize_component(self, source: str, framework: str) -> dict[str, Any]:
        adapter = self.adapters.get_adapter(framework)
        return {"framework": adapter.name, "code": adapter.optimize_for_framework(source)}

    # ── Projects ──

    def generate_project(self, config: Union[ProjectConfig, dict]) -> dict[str, Any]:
        """Scaffold a project and add the build tool's config on top.

        Build tool files replace adapter files at the same path, and build tool
        packages are merged into package.json devDependencies.
        """
        config = coerce_model(ProjectConfig, config)
        adapter = self.adapters.get_adapter(config.framework)
        integration = self.build_tools.get_integration(config.build_tool)
        # aliases such as "next" resolve to the canonical tool for the manifest scripts
        config = config.model_copy(update={"build_tool": integration.name})

        structure = adapter.generate_project(config)
        build = integration.generate_config(BuildToolConfig(
            framework=adapter.name,
            features=[*config.features, *sorted(integration.project_features)],
            entry_point=adapter.entry_point,
            css_framework=config.css_framework,
        ))

        files = {f.path: f.content for f in structure.files}
        files[build.filename] = build.content
        for extra in build.files:
            files[extra.path] = extra.content
        files["package.json"] = _merge_dependencies(files["package.json"], build.dependencies)

        logger.info(
            "Generated %s project '%s' with %s (%d files)",
            adapter.name, config.name, integration.name, len(files),
        )
        return {
            "name": config.name,
            "framework": adapter.name,
            "build_tool": integration.name,
            "files": [{"path": path, "content": content} for path, content in files.items()],
        }

    def generate_build_config(
        self,
        config: Union[BuildToolConfig, dict],
        build_tool: str = "vite",
    ) -> dict[str, Any]:
        integration = self.build_tools.get_integration(build_tool)
        return integration.generate_config(config).model_dump()

    # ── Discovery ──

    def list_supported_frameworks(self) -> list[str]:
        return self.adapters.get_supported_frameworks()

    def list_supported_build_tools(self) -> list[str]:
        return self.build_tools.get_supported_build_tools()


def _merge_dependencies(manifest_text: str, dependencies: dict[str, str]) -> str:
    manifest = json.loads(manifest_text)
    runtime = manifest.setdefault("dependencies", {})
    dev = manifest.setdefault("devDependencies", {})
    for package, version in dependencies.items():
        if package not in runtime:
            dev.setdefault(package, version)
    return json.dumps(manifest, indent=2) + "\n"
