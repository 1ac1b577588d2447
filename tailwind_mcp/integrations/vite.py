"""Vite integration: vite.config.ts with the framework plugin and PostCSS wiring."""

from tailwind_mcp.integrations.base import BuildToolIntegration, js_list
from tailwind_mcp.integrations.css import CSSFramework, companion_files
from tailwind_mcp.npm import pinned
from tailwind_mcp.types import BuildToolConfig, BuildToolOutput

# framework → (import clause, package, plugin call)
_FRAMEWORK_PLUGINS = {
    "react": ("react", "@vitejs/plugin-react", "react()"),
    "vue": ("vue", "@vitejs/plugin-vue", "vue()"),
    "svelte": ("{ svelte }", "@sveltejs/vite-plugin-svelte", "svelte()"),
    "angular": ("angular", "@analogjs/vite-plugin-angular", "angular()"),
}


class ViteIntegration(BuildToolIntegration):
    name = "vite"
    display_name = "Vite"
    supported_frameworks = frozenset(_FRAMEWORK_PLUGINS)
    extra_features = frozenset({"testing", "pwa"})

    def _render(self, config: BuildToolConfig, css: CSSFramework) -> BuildToolOutput:
        production = self.is_production(config)
        testing = "testing" in config.features
        clause, plugin_pkg, plugin_call = _FRAMEWORK_PLUGINS[config.framework]

        imports = [("{ defineConfig }", "vitest/config" if testing else "vite"), (clause, plugin_pkg)]
        plugins = [plugin_call]
        packages = ["vite", plugin_pkg]
        if "pwa" in config.features:
            imports.append(("{ VitePWA }", "vite-plugin-pwa"))
            plugins.append("VitePWA({ registerType: 'autoUpdate' })")
            packages.append("vite-plugin-pwa")
        if css.needs_wiring:
            imports += [(plugin, plugin) for plugin in css.postcss_plugins]
            packages += list(css.packages)
        if testing:
            packages += ["vitest", "jsdom"]

        lines = [f"import {name} from '{pkg}';" for name, pkg in imports]
        lines += [
            "",
            "// https://vitejs.dev/config/",
            "export default defineConfig({",
            f"  mode: '{config.optimization.value}',",
            "  plugins: [",
            js_list(plugins, "    "),
            "  ],",
            f"  publicDir: '{config.public_dir}',",
            "  resolve: {",
            "    alias: {",
            "      '@': '/src',",
            "    },",
            "  },",
        ]
        if css.needs_wiring:
            lines += [
                "  css: {",
                "    postcss: {",
                "      plugins: [",
                js_list([f"{p}()" for p in css.postcss_plugins], "        "),
                "      ],",
                "    },",
                "  },",
            ]
        lines += [
            "  optimizeDeps: {",
            f"    entries: ['{config.entry_point}'],",
            "  },",
            "  build: {",
            f"    outDir: '{config.output_dir}',",
            "    emptyOutDir: true,",
            f"    sourcemap: {'false' if production else 'true'},",
            f"    minify: {repr('esbuild') if production else 'false'},",
            f"    cssMinify: {'true' if production else 'false'},",
            "  },",
        ]
        if testing:
            lines += [
                "  test: {",
                "    environment: 'jsdom',",
                "    globals: true,",
                "  },",
            ]
        lines.append("});")

        return BuildToolOutput(
            filename="vite.config.ts" if self.uses_typescript(config) else "vite.config.js",
            content="\n".join(lines) + "\n",
            dependencies=pinned(*dict.fromkeys(packages)),
            # PostCSS plugins are inlined above, so only the Tailwind config is needed
            files=companion_files(css, config.framework, with_postcss=False),
        )
