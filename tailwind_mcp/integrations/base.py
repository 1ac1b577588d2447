"""BuildToolIntegration: renders one build tool's config file and its dependencies."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Union

from tailwind_mcp.exceptions import UnsupportedFeatureError
from tailwind_mcp.integrations.css import TAILWIND, CSSFramework, resolve_css_framework
from tailwind_mcp.types import BuildToolConfig, BuildToolOutput, Optimization, coerce_model

logger = logging.getLogger(__name__)

# Features every integration accepts. Some need no config of their own.
COMMON_FEATURES = frozenset({"tailwind", "typescript", "components", "routing"})


class BuildToolIntegration(ABC):
    """Base class for one build tool."""

    name: str = ""
    display_name: str = ""
    supported_frameworks: frozenset = frozenset()
    extra_features: frozenset = frozenset()
    # features a scaffolded project needs for its package.json scripts
    project_features: frozenset = frozenset()

    @property
    def supported_features(self) -> frozenset:
        return COMMON_FEATURES | self.extra_features

    def generate_config(self, config: Union[BuildToolConfig, dict]) -> BuildToolOutput:
        """Render the config file for this tool.

        Raises:
            UnsupportedFeatureError: framework, feature, or CSS framework the
                                     tool cannot express
            InvalidInputError: malformed config payload
        """
        config = coerce_model(BuildToolConfig, config)
        self._check_support(config)
        css = self._css_for(config)
        output = self._render(config, css)
        logger.debug(
            "%s: rendered %s for %s (%s, %d deps)",
            self.name, output.filename, config.framework,
            config.optimization.value, len(output.dependencies),
        )
        return output

    def _check_support(self, config: BuildToolConfig) -> None:
        if config.framework not in self.supported_frameworks:
            raise UnsupportedFeatureError(
                f"{self.display_name} cannot build '{config.framework}' projects. "
                f"Supported: {', '.join(sorted(self.supported_frameworks))}",
                feature=f"framework:{config.framework}",
                tool=self.name,
            )
        for feature in config.features:
            if feature not in self.supported_features:
                raise UnsupportedFeatureError(
                    f"{self.display_name} has no support for feature '{feature}'. "
                    f"Supported: {', '.join(sorted(self.supported_features))}",
                    feature=feature,
                    tool=self.name,
                )

    def _css_for(self, config: BuildToolConfig) -> CSSFramework:
        css = resolve_css_framework(config.css_framework, tool=self.name)
        # the "tailwind" feature asks for Tailwind wiring whatever the css_framework says
        if "tailwind" in config.features:
            return TAILWIND
        return css

    @staticmethod
    def is_production(config: BuildToolConfig) -> bool:
        return config.optimization == Optimization.PRODUCTION

    @staticmethod
    def uses_typescript(config: BuildToolConfig) -> bool:
        return "typescript" in config.features or config.entry_point.endswith((".ts", ".tsx"))

    @abstractmethod
    def _render(self, config: BuildToolConfig, css: CSSFramework) -> BuildToolOutput:
        """Produce config file content, dependencies and companion files."""


def js_list(items: list[str], indent: str) -> str:
    """Format JS expressions one per line with trailing commas."""
    return "\n".join(f"{indent}{item}," for item in items)
