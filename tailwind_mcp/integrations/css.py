"""CSS framework wiring shared by adapters and build tool integrations."""

from dataclasses import dataclass, field

from tailwind_mcp.exceptions import UnsupportedFeatureError
from tailwind_mcp.npm import pinned
from tailwind_mcp.types import ProjectFile


@dataclass(frozen=True)
class CSSFramework:
    name: str
    postcss_plugins: tuple = ()
    packages: tuple = ()
    stylesheet: str = ""
    needs_wiring: bool = False
    aliases: tuple = field(default=())

    @property
    def dependencies(self) -> dict[str, str]:
        return pinned(*self.packages)


TAILWIND = CSSFramework(
    name="tailwind",
    postcss_plugins=("tailwindcss", "autoprefixer"),
    packages=("tailwindcss", "postcss", "autoprefixer"),
    stylesheet="@tailwind base;\n@tailwind components;\n@tailwind utilities;\n",
    needs_wiring=True,
    aliases=("tailwindcss",),
)

PLAIN_CSS = CSSFramework(
    name="css",
    stylesheet=":root {\n  font-family: system-ui, sans-serif;\n}\n",
    aliases=("none", "vanilla"),
)

CSS_FRAMEWORKS: dict[str, CSSFramework] = {}
for _fw in (TAILWIND, PLAIN_CSS):
    CSS_FRAMEWORKS[_fw.name] = _fw
    for _alias in _fw.aliases:
        CSS_FRAMEWORKS[_alias] = _fw


def resolve_css_framework(name: str, tool: str = "") -> CSSFramework:
    """Look up a CSS framework by name or alias.

    Raises:
        UnsupportedFeatureError: unknown CSS framework
    """
    key = (name or "").strip().lower()
    if key not in CSS_FRAMEWORKS:
        raise UnsupportedFeatureError(
            f"CSS framework '{name}' is not supported. Supported: tailwind, css",
            feature=f"css:{name}",
            tool=tool,
        )
    return CSS_FRAMEWORKS[key]


# ── Companion files ───────────────────────────────────────────────────────────

_CONTENT_GLOBS = {
    "react": ["./index.html", "./src/**/*.{js,jsx,ts,tsx}"],
    "vue": ["./index.html", "./src/**/*.{vue,js,ts,jsx,tsx}"],
    "svelte": ["./index.html", "./src/**/*.{svelte,js,ts}"],
    "angular": ["./index.html", "./src/**/*.{html,ts}"],
    "nextjs": [
        "./src/**/*.{js,ts,jsx,tsx,mdx}",
        "./app/**/*.{js,ts,jsx,tsx,mdx}",
        "./pages/**/*.{js,ts,jsx,tsx,mdx}",
        "./components/**/*.{js,ts,jsx,tsx,mdx}",
    ],
}


def tailwind_config(target: str) -> ProjectFile:
    """tailwind.config.js scanning the source globs of a framework (or nextjs)."""
    globs = _CONTENT_GLOBS.get(target, _CONTENT_GLOBS["react"])
    content = ",\n".join(f"    '{g}'" for g in globs)
    return ProjectFile(
        path="tailwind.config.js",
        content=(
            "/** @type {import('tailwindcss').Config} */\n"
            "module.exports = {\n"
            "  content: [\n"
            f"{content},\n"
            "  ],\n"
            "  theme: {\n"
            "    extend: {},\n"
            "  },\n"
            "  plugins: [],\n"
            "};\n"
        ),
    )


def postcss_config(css: CSSFramework) -> ProjectFile:
    plugins = "\n".join(f"    {p}: {{}}," for p in css.postcss_plugins)
    return ProjectFile(
        path="postcss.config.js",
        content=f"module.exports = {{\n  plugins: {{\n{plugins}\n  }},\n}};\n",
    )


def companion_files(css: CSSFramework, target: str, with_postcss: bool = True) -> list[ProjectFile]:
    """Config files a CSS framework needs next to the build config."""
    if not css.needs_wiring:
        return []
    files = [tailwind_config(target)]
    if with_postcss:
        files.append(postcss_config(css))
    return files
