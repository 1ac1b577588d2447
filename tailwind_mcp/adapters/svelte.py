"""Svelte adapter: Svelte 4 components with $$restProps passthrough."""

import re

from tailwind_mcp.adapters.base import FrameworkAdapter, scaffold_build_tool
from tailwind_mcp.adapters.markup import (
    RootElement,
    dom_interface,
    map_opening_tags,
    map_text,
    render_root,
    rewrite_events,
)
from tailwind_mcp.adapters.vue import EMPTY_BLOCK_RE
from tailwind_mcp.integrations.css import CSSFramework
from tailwind_mcp.npm import pinned
from tailwind_mcp.types import ConversionOptions, ProjectConfig, ProjectFile

_BRACE_RE = re.compile(r"[{}]")


def _svelte_event(event: str, code: str) -> str:
    return f"on:{event}={{() => {{ {code} }}}}"


def svelte_text(text: str, preserved: bool) -> str:
    """Braces in text open expressions in Svelte."""
    return _BRACE_RE.sub(lambda m: "{'" + m.group(0) + "'}", text)


class SvelteAdapter(FrameworkAdapter):
    name = "svelte"
    display_name = "Svelte"
    component_extension = ".svelte"
    stylesheet_path = "src/app.css"

    def transform_attrs(self, attrs: str) -> str:
        return rewrite_events(attrs, _svelte_event)

    def transform_markup(self, markup: str) -> str:
        return map_opening_tags(
            map_text(markup, svelte_text),
            lambda tag, attrs, sc: f"<{tag}{self.transform_attrs(attrs)}{' />' if sc else '>'}",
        )

    def _emit(self, root: RootElement, options: ConversionOptions) -> str:
        markup = render_root(
            root.tag,
            self.transform_attrs(root.attrs) + " {...$$restProps}",
            self.transform_markup(root.inner),
            slot=None if root.self_closing else "<slot />",
            self_closing=root.self_closing,
        )

        parts = ["<!--", "@component", options.component_name, "-->"]
        if options.include_types:
            parts += [
                '<script lang="ts">',
                "  import type { HTMLAttributes } from 'svelte/elements';",
                "",
                f"  interface $$Props extends HTMLAttributes<{dom_interface(root.tag)}> {{}}",
                "</script>",
                "",
            ]
        parts.append(markup)
        return "\n".join(parts) + "\n"

    def _optimize(self, source: str) -> str:
        return EMPTY_BLOCK_RE.sub("", source)

    def runtime_dependencies(self) -> dict[str, str]:
        return {}

    def dev_dependencies(self) -> dict[str, str]:
        return pinned("svelte", "svelte-check", "tslib", "@sveltejs/vite-plugin-svelte")

    def _tsconfig_options(self) -> dict:
        return {"verbatimModuleSyntax": True, "isolatedModules": True, "types": ["svelte"]}

    def _project_files(self, config: ProjectConfig, css: CSSFramework) -> list[ProjectFile]:
        app = self.render_component(
            self._app_markup(config),
            ConversionOptions(component_name="App", include_types=True),
        )
        main = (
            "import './app.css';\n"
            "import App from './App.svelte';\n"
            "\n"
            "const app = new App({\n"
            "  target: document.getElementById('app')!,\n"
            "});\n"
            "\n"
            "export default app;\n"
        )
        svelte_config = (
            "import { vitePreprocess } from '@sveltejs/vite-plugin-svelte';\n"
            "\n"
            "export default {\n"
            "  preprocess: vitePreprocess(),\n"
            "};\n"
        )
        files = [
            self._index_html(config, '<div id="app"></div>'),
            ProjectFile(path=self.entry_point, content=main),
            ProjectFile(path="src/App.svelte", content=app),
        ]
        # vitePreprocess is an ES module belonging to the Vite plugin
        if scaffold_build_tool(config) == "vite":
            files.append(ProjectFile(path="svelte.config.js", content=svelte_config))
        return files
