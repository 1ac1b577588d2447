"""Next.js integration: next.config.js for React apps.

Next.js owns the bundler, so Tailwind is wired through postcss.config.js
rather than inside the config file itself.
"""

from tailwind_mcp.exceptions import UnsupportedFeatureError
from tailwind_mcp.integrations.base import BuildToolIntegration
from tailwind_mcp.integrations.css import CSSFramework, companion_files
from tailwind_mcp.npm import pinned
from tailwind_mcp.types import BuildToolConfig, BuildToolOutput


class NextJSIntegration(BuildToolIntegration):
    name = "nextjs"
    display_name = "Next.js"
    supported_frameworks = frozenset({"react"})
    extra_features = frozenset({"ssr", "api-routes", "image-optimization", "static-export"})

    def _check_support(self, config: BuildToolConfig) -> None:
        super()._check_support(config)
        if "ssr" in config.features and "static-export" in config.features:
            raise UnsupportedFeatureError(
                "Next.js static export cannot be combined with server-side rendering",
                feature="static-export",
                tool=self.name,
            )
        if config.public_dir != "public":
            raise UnsupportedFeatureError(
                f"Next.js always serves static assets from 'public', not '{config.public_dir}'",
                feature="public-dir",
                tool=self.name,
            )

    def _render(self, config: BuildToolConfig, css: CSSFramework) -> BuildToolOutput:
        production = self.is_production(config)
        static_export = "static-export" in config.features

        if css.needs_wiring:
            styling = f"{' + '.join(css.postcss_plugins)} via postcss.config.js"
        else:
            styling = f"plain {css.name}, no PostCSS plugins"
        lines = [
            f"// Styling: {styling}",
            "",
            "/** @type {import('next').NextConfig} */",
            "const nextConfig = {",
            "  reactStrictMode: true,",
            f"  distDir: '{config.output_dir}',",
        ]
        if static_export:
            lines += ["  output: 'export',", "  trailingSlash: true,"]
        lines += [
            f"  swcMinify: {'true' if production else 'false'},",
            f"  productionBrowserSourceMaps: {'false' if production else 'true'},",
        ]
        if "image-optimization" in config.features and not static_export:
            lines += [
                "  images: {",
                "    formats: ['image/avif', 'image/webp'],",
                "  },",
            ]
        elif static_export:
            # the image optimizer needs a server
            lines += [
                "  images: {",
                "    unoptimized: true,",
                "  },",
            ]
        lines += ["};", "", "module.exports = nextConfig;"]

        return BuildToolOutput(
            filename="next.config.js",
            content="\n".join(lines) + "\n",
            dependencies={**pinned("next", "react", "react-dom"), **css.dependencies},
            files=companion_files(css, "nextjs"),
        )
