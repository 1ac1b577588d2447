"""Name → factory lookup tables for framework adapters and build tool integrations.

Tables are built once and exposed read-only; lookups are case-insensitive and
whitespace-trimmed. Each ``get`` builds a fresh instance from its factory.
"""

from functools import partial
from types import MappingProxyType
from typing import Callable, Generic, Mapping, Optional, TypeVar

from tailwind_mcp.adapters import (
    AngularAdapter,
    FrameworkAdapter,
    ReactAdapter,
    SvelteAdapter,
    VueAdapter,
)
from tailwind_mcp.exceptions import UnknownBuildToolError, UnknownFrameworkError
from tailwind_mcp.integrations import (
    BuildToolIntegration,
    NextJSIntegration,
    ViteIntegration,
    WebpackIntegration,
)
from tailwind_mcp.llm.client import AITextService

T = TypeVar("T")


def _key(name: str) -> str:
    return str(name or "").strip().lower()


class Registry(Generic[T]):
    """Immutable mapping from lowercase name to a zero-argument factory."""

    kind: str = "entry"
    error_cls: type = UnknownFrameworkError

    def __init__(self, factories: Mapping[str, Callable[[], T]], aliases: Optional[Mapping[str, str]] = None):
        self._factories = MappingProxyType({_key(k): v for k, v in factories.items()})
        self._aliases = MappingProxyType({_key(k): _key(v) for k, v in (aliases or {}).items()})

    def get(self, name: str) -> T:
        """Build the entry registered under ``name`` (or one of its aliases).

        Raises:
            UnknownFrameworkError (or the registry's subclass): name not registered
        """
        key = _key(name)
        key = self._aliases.get(key, key)
        if key not in self._factories:
            supported = self.names()
            raise self.error_cls(
                f"Unknown {self.kind} '{name}'. Supported: {', '.join(supported)}",
                name=name,
                supported=supported,
            )
        return self._factories[key]()

    def names(self) -> list[str]:
        """Registered names in registration order (aliases excluded)."""
        return list(self._factories)

    def __contains__(self, name: object) -> bool:
        key = _key(name) if isinstance(name, str) else ""
        return self._aliases.get(key, key) in self._factories

    def __len__(self) -> int:
        return len(self._factories)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(self.names())})"


class AdapterRegistry(Registry[FrameworkAdapter]):
    kind = "framework"
    error_cls = UnknownFrameworkError

    def get_adapter(self, framework: str) -> FrameworkAdapter:
        return self.get(framework)

    def get_supported_frameworks(self) -> list[str]:
        return self.names()


class BuildToolRegistry(Registry[BuildToolIntegration]):
    kind = "build tool"
    error_cls = UnknownBuildToolError

    def get_integration(self, build_tool: str) -> BuildToolIntegration:
        return self.get(build_tool)

    def get_supported_build_tools(self) -> list[str]:
        return self.names()


def default_adapter_registry(
    ai_client: Optional[AITextService] = None,
    ai_timeout: Optional[float] = None,
) -> AdapterRegistry:
    """React, Vue, Svelte and Angular adapters sharing one AI client."""
    return AdapterRegistry({
        cls.name: partial(cls, ai_client=ai_client, ai_timeout=ai_timeout)
        for cls in (ReactAdapter, VueAdapter, SvelteAdapter, AngularAdapter)
    })


def default_build_tool_registry() -> BuildToolRegistry:
    return BuildToolRegistry(
        {cls.name: cls for cls in (ViteIntegration, WebpackIntegration, NextJSIntegration)},
        aliases={"next": "nextjs", "next.js": "nextjs"},
    )
