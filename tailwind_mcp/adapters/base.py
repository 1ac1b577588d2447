"""FrameworkAdapter: converts styled markup into one framework's component source.

Every adapter follows the same pipeline:

    source ─▶ validate ─▶ (ARIA injection) ─▶ root detection ─▶ _emit()   deterministic
                                                                  │
                                                                  ▼
                                         AI review (optional, bounded, non-fatal)

The deterministic path always produces a complete component on its own.
AI output never rewrites the code; it is attached to the ConversionResult as
suggestions, and any AI failure becomes a warning on that result.
"""

from __future__ import annotations

import asyncio
import json
import logging
import re
from abc import ABC, abstractmethod
from typing import Optional, Union

from tailwind_mcp.adapters.markup import (
    KEEP_NEWLINE,
    RootElement,
    inject_accessibility,
    normalize_root,
    protect_preserved_text,
    quote_attribute_values,
    restore_preserved_text,
    validate_source,
)
from tailwind_mcp.config import config as settings
from tailwind_mcp.exceptions import AIServiceError, ConfigMismatchError, InvalidInputError
from tailwind_mcp.integrations.css import CSSFramework, companion_files, resolve_css_framework
from tailwind_mcp.llm.client import AITextService
from tailwind_mcp.llm.prompts import FRAMEWORK_IDIOMS, REVIEW_COMPONENT
from tailwind_mcp.npm import pinned
from tailwind_mcp.types import (
    ConversionOptions,
    ConversionResult,
    ProjectConfig,
    ProjectFile,
    ProjectStructure,
    coerce_model,
)

logger = logging.getLogger(__name__)

BUILD_SCRIPTS: dict[str, dict[str, str]] = {
    "vite": {"dev": "vite", "build": "vite build", "preview": "vite preview"},
    "webpack": {"dev": "webpack serve --mode development", "build": "webpack --mode production"},
    "nextjs": {"dev": "next dev", "build": "next build", "start": "next start"},
}

_IMPORT_LINE_RE = re.compile(r"^\s*import\s.+")
_PRESERVED_BLOCK_RE = re.compile(r"<(pre|textarea)\b[^>]*>.*?</\1\s*>", re.DOTALL | re.IGNORECASE)

SAMPLE_BUTTON = (
    '<button class="inline-flex items-center rounded-md bg-blue-600 px-4 py-2 '
    'text-sm font-semibold text-white shadow-sm hover:bg-blue-500 '
    'focus:outline-none focus:ring-2 focus:ring-blue-500 focus:ring-offset-2">'
    "Button</button>"
)


class FrameworkAdapter(ABC):
    """Base class for one target framework.

    Args:
        ai_client:  Optional AITextService used for review suggestions.
        ai_timeout: Seconds to wait for the AI before falling back
                    (defaults to settings.ai_timeout_seconds).
    """

    name: str = ""
    display_name: str = ""
    component_extension: str = ""
    entry_point: str = "src/main.ts"
    stylesheet_path: str = "src/style.css"

    def __init__(self, ai_client: Optional[AITextService] = None, ai_timeout: Optional[float] = None):
        self._ai = ai_client
        self._ai_timeout = settings.ai_timeout_seconds if ai_timeout is None else ai_timeout

    def __repr__(self) -> str:
        return f"{type(self).__name__}(ai={'on' if self._ai else 'off'})"

    # ------------------------------------------------------------------
    # Conversion
    # ------------------------------------------------------------------

    def render_component(
        self,
        source: str,
        options: Union[ConversionOptions, dict, None] = None,
    ) -> str:
        """Deterministic conversion. Pure; raises InvalidInputError on empty source."""
        options = coerce_model(ConversionOptions, options)
        markup = quote_attribute_values(validate_source(source))
        if options.add_accessibility:
            markup = inject_accessibility(markup)
        markup = protect_preserved_text(markup)
        code = restore_preserved_text(self._emit(normalize_root(markup), options))
        logger.debug("%s: converted %d chars of markup into %d chars", self.name, len(source), len(code))
        return code

    async def convert_component(
        self,
        source: str,
        options: Union[ConversionOptions, dict, None] = None,
    ) -> str:
        """Convert markup into component source for this framework."""
        result = await self.convert_component_detailed(source, options)
        return result.code

    async def convert_component_detailed(
        self,
        source: str,
        options: Union[ConversionOptions, dict, None] = None,
    ) -> ConversionResult:
        """Convert markup and, when possible, attach AI review suggestions."""
        options = coerce_model(ConversionOptions, options)
        result = ConversionResult(framework=self.name, code=self.render_component(source, options))
        if options.ai_enhance and self._ai is not None:
            await self._enrich(result)
        return result

    async def _enrich(self, result: ConversionResult) -> None:
        prompt = REVIEW_COMPONENT.format(
            framework=self.name,
            framework_title=self.display_name,
            idiom=FRAMEWORK_IDIOMS.get(self.name, ""),
            code=result.code,
        )
        try:
            suggestions = await asyncio.wait_for(self._ai.generate_content(prompt), timeout=self._ai_timeout)
        except asyncio.TimeoutError:
            self._degrade(result, f"AI enrichment timed out after {self._ai_timeout:g}s")
        except AIServiceError as exc:
            self._degrade(result, f"AI enrichment unavailable ({type(exc).__name__}): {exc}")
        except Exception as exc:
            self._degrade(result, f"AI enrichment failed unexpectedly: {exc}")
        else:
            if suggestions and suggestions.strip():
                result.ai_enriched = True
                result.ai_suggestions = suggestions.strip()
            else:
                self._degrade(result, "AI enrichment returned no text")

    def _degrade(self, result: ConversionResult, message: str) -> None:
        logger.warning("%s: %s; returning deterministic output", self.name, message)
        result.warnings.append(message)

    @abstractmethod
    def _emit(self, root: RootElement, options: ConversionOptions) -> str:
        """Produce complete component source from the normalized root element."""

    # ------------------------------------------------------------------
    # Optimization
    # ------------------------------------------------------------------

    def optimize_for_framework(self, source: str) -> str:
        """Tidy imports and whitespace without touching markup or class tokens.

        Idempotent: optimize(optimize(x)) == optimize(x).
        """
        if not isinstance(source, str) or not source.strip():
            raise InvalidInputError("Source to optimize must be a non-empty string")
        text = self._optimize(source)
        text = _dedupe_imports(text)
        return _normalize_whitespace(text)

    def _optimize(self, source: str) -> str:
        """Framework-specific import rewriting. Must reach a fixed point in one pass."""
        return source

    # ------------------------------------------------------------------
    # Project scaffolding
    # ------------------------------------------------------------------

    def generate_project(self, config: Union[ProjectConfig, dict]) -> ProjectStructure:
        """Minimal project skeleton: manifest, entry point, root component, styles.

        Raises:
            ConfigMismatchError: config.framework names a different framework
            UnsupportedFeatureError: unknown CSS framework
        """
        config = coerce_model(ProjectConfig, config)
        requested = config.framework.strip().lower()
        if requested != self.name:
            raise ConfigMismatchError(
                f"{type(self).__name__} cannot scaffold a '{config.framework}' project",
                expected=self.name,
                actual=config.framework,
            )
        css = resolve_css_framework(config.css_framework)

        files = [
            ProjectFile(path="package.json", content=self._package_manifest(config, css)),
            ProjectFile(path="tsconfig.json", content=self._tsconfig()),
            *self._project_files(config, css),
            ProjectFile(path=self.stylesheet_path, content=css.stylesheet),
            *companion_files(css, self.name),
        ]
        if "components" in config.features:
            files.append(self._sample_component())

        logger.info("%s: scaffolded '%s' (%d files)", self.name, config.name, len(files))
        return ProjectStructure(files=files)

    def _package_manifest(self, config: ProjectConfig, css: CSSFramework) -> str:
        build_tool = scaffold_build_tool(config)
        manifest = {
            "name": _package_name(config.name),
            "version": "0.1.0",
            "private": True,
        }
        # webpack.config.js, next.config.js and the PostCSS config are CommonJS
        if build_tool == "vite":
            manifest["type"] = "module"
        manifest.update({
            "scripts": dict(BUILD_SCRIPTS[build_tool]),
            "dependencies": self.runtime_dependencies(),
            "devDependencies": {**self.dev_dependencies(), **css.dependencies, **pinned("typescript")},
        })
        return json.dumps(manifest, indent=2) + "\n"

    def _tsconfig(self) -> str:
        tsconfig = {
            "compilerOptions": {
                "target": "ES2020",
                "module": "ESNext",
                "moduleResolution": "bundler",
                "strict": True,
                "skipLibCheck": True,
                **self._tsconfig_options(),
            },
            "include": ["src"],
        }
        return json.dumps(tsconfig, indent=2) + "\n"

    def _tsconfig_options(self) -> dict:
        return {}

    def _sample_component(self) -> ProjectFile:
        code = self.render_component(
            SAMPLE_BUTTON,
            ConversionOptions(include_types=True, add_accessibility=True, component_name="Button"),
        )
        return ProjectFile(path=f"src/components/{self._component_filename('Button')}", content=code)

    def _component_filename(self, name: str) -> str:
        return f"{name}{self.component_extension}"

    def _index_html(self, config: ProjectConfig, mount: str) -> ProjectFile:
        """Host page. Only Vite loads the entry module from it; HtmlWebpackPlugin injects the bundle."""
        script = ""
        if scaffold_build_tool(config) == "vite":
            script = f'    <script type="module" src="/{self.entry_point}"></script>\n'
        return ProjectFile(
            path="index.html",
            content=(
                "<!doctype html>\n"
                '<html lang="en">\n'
                "  <head>\n"
                '    <meta charset="UTF-8" />\n'
                '    <meta name="viewport" content="width=device-width, initial-scale=1.0" />\n'
                f"    <title>{_html_text(config.name)}</title>\n"
                "  </head>\n"
                "  <body>\n"
                f"    {mount}\n"
                f"{script}"
                "  </body>\n"
                "</html>\n"
            ),
        )

    def _app_markup(self, config: ProjectConfig) -> str:
        return (
            '<main class="flex min-h-screen items-center justify-center bg-gray-50">'
            f'<h1 class="text-3xl font-bold text-gray-900">{_html_text(config.name)}</h1>'
            "</main>"
        )

    @abstractmethod
    def runtime_dependencies(self) -> dict[str, str]:
        """package.json dependencies for the framework runtime."""

    @abstractmethod
    def dev_dependencies(self) -> dict[str, str]:
        """package.json devDependencies for framework tooling."""

    @abstractmethod
    def _project_files(self, config: ProjectConfig, css: CSSFramework) -> list[ProjectFile]:
        """Entry point, root component, index.html and framework config files."""


# ── Helpers ───────────────────────────────────────────────────────────────────

def scaffold_build_tool(config: ProjectConfig) -> str:
    """Canonical build tool of a project; unknown names scaffold as Vite."""
    build_tool = config.build_tool.strip().lower()
    return build_tool if build_tool in BUILD_SCRIPTS else "vite"


def _package_name(name: str) -> str:
    slug = re.sub(r"[^a-z0-9._-]+", "-", name.strip().lower()).strip("-.")
    return slug or "tailwind-app"


def _html_text(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def _dedupe_imports(text: str) -> str:
    seen: set[str] = set()
    lines = []
    for line in text.splitlines():
        if _IMPORT_LINE_RE.match(line):
            key = " ".join(line.split())
            if key in seen:
                continue
            seen.add(key)
        lines.append(line)
    return "\n".join(lines)


def _normalize_whitespace(text: str) -> str:
    text = _PRESERVED_BLOCK_RE.sub(lambda m: m.group(0).replace("\n", KEEP_NEWLINE), text)
    lines: list[str] = []
    for line in text.splitlines():
        line = line.rstrip()
        if not line and (not lines or not lines[-1]):
            continue
        lines.append(line)
    while lines and not lines[-1]:
        lines.pop()
    return ("\n".join(lines) + "\n").replace(KEEP_NEWLINE, "\n")


def kebab_case(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "-", name).lower()
