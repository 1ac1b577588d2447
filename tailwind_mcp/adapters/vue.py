"""Vue adapter: single-file components with <script setup>."""

import re

from tailwind_mcp.adapters.base import FrameworkAdapter, scaffold_build_tool
from tailwind_mcp.adapters.markup import (
    RootElement,
    indent_block,
    map_opening_tags,
    map_text,
    render_root,
    rewrite_events,
)
from tailwind_mcp.integrations.css import CSSFramework
from tailwind_mcp.npm import pinned
from tailwind_mcp.types import ConversionOptions, ProjectConfig, ProjectFile

EMPTY_BLOCK_RE = re.compile(r"<(script|style)\b[^>]*>\s*</\1>\n?")
_MUSTACHE_RE = re.compile(r"\{\{")


def _vue_event(event: str, code: str) -> str:
    code = code.replace('"', "'")
    return f'@{event}="{code}"'


def vue_text(text: str, preserved: bool) -> str:
    """Keep literal ``{{`` out of interpolation; entities are decoded after parsing."""
    return _MUSTACHE_RE.sub("&#123;&#123;", text)


class VueAdapter(FrameworkAdapter):
    name = "vue"
    display_name = "Vue"
    component_extension = ".vue"

    def transform_attrs(self, attrs: str) -> str:
        return rewrite_events(attrs, _vue_event)

    def transform_markup(self, markup: str) -> str:
        return map_opening_tags(
            map_text(markup, vue_text),
            lambda tag, attrs, sc: f"<{tag}{self.transform_attrs(attrs)}{' />' if sc else '>'}",
        )

    def _emit(self, root: RootElement, options: ConversionOptions) -> str:
        template = render_root(
            root.tag,
            self.transform_attrs(root.attrs),
            self.transform_markup(root.inner),
            slot=None if root.self_closing else "<slot />",
            self_closing=root.self_closing,
        )

        script_open = '<script setup lang="ts">' if options.include_types else "<script setup>"
        script = [script_open, f"defineOptions({{ name: '{options.component_name}' }});"]
        if options.include_types and not root.self_closing:
            script.append("")
            script.append("defineSlots<{ default?: () => unknown }>();")
        script.append("</script>")

        parts = [
            "<template>",
            indent_block(template, "  "),
            "</template>",
            "",
            "\n".join(script),
        ]
        return "\n".join(parts) + "\n"

    def _optimize(self, source: str) -> str:
        return EMPTY_BLOCK_RE.sub("", source)

    def runtime_dependencies(self) -> dict[str, str]:
        return pinned("vue")

    def dev_dependencies(self) -> dict[str, str]:
        return pinned("vue-tsc")

    def _tsconfig_options(self) -> dict:
        return {"jsx": "preserve", "lib": ["ES2020", "DOM", "DOM.Iterable"]}

    def _project_files(self, config: ProjectConfig, css: CSSFramework) -> list[ProjectFile]:
        app = self.render_component(
            self._app_markup(config),
            ConversionOptions(component_name="App", include_types=True),
        )
        main = (
            "import { createApp } from 'vue';\n"
            "import App from './App.vue';\n"
            "import './style.css';\n"
            "\n"
            "createApp(App).mount('#app');\n"
        )
        env = (
            "declare module '*.vue' {\n"
            "  import type { DefineComponent } from 'vue';\n"
            "  const component: DefineComponent<object, object, unknown>;\n"
            "  export default component;\n"
            "}\n"
        )
        if scaffold_build_tool(config) == "vite":
            env = '/// <reference types="vite/client" />\n\n' + env
        return [
            self._index_html(config, '<div id="app"></div>'),
            ProjectFile(path=self.entry_point, content=main),
            ProjectFile(path="src/App.vue", content=app),
            ProjectFile(path="src/env.d.ts", content=env),
        ]
