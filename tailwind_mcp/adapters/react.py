"""React adapter: function components returning JSX."""

import html
import json
import re

from tailwind_mcp.adapters.base import FrameworkAdapter, scaffold_build_tool
from tailwind_mcp.adapters.markup import (
    KEEP_NEWLINE,
    PRESERVED_TAGS,
    RootElement,
    dom_interface,
    indent_block,
    is_void,
    map_opening_tags,
    map_text,
    render_root,
    rewrite_events,
)
from tailwind_mcp.integrations.css import CSSFramework
from tailwind_mcp.npm import pinned
from tailwind_mcp.types import ConversionOptions, ProjectConfig, ProjectFile

# HTML attribute → JSX prop
_JSX_ATTRS = {
    "class": "className",
    "for": "htmlFor",
    "tabindex": "tabIndex",
    "readonly": "readOnly",
    "maxlength": "maxLength",
    "minlength": "minLength",
    "colspan": "colSpan",
    "rowspan": "rowSpan",
    "autocomplete": "autoComplete",
    "autofocus": "autoFocus",
    "contenteditable": "contentEditable",
    "crossorigin": "crossOrigin",
    "srcset": "srcSet",
    "enctype": "encType",
    "novalidate": "noValidate",
    "spellcheck": "spellCheck",
    "accesskey": "accessKey",
    "datetime": "dateTime",
    "frameborder": "frameBorder",
    "usemap": "useMap",
    # SVG presentation attributes
    "stroke-width": "strokeWidth",
    "stroke-linecap": "strokeLinecap",
    "stroke-linejoin": "strokeLinejoin",
    "stroke-miterlimit": "strokeMiterlimit",
    "stroke-dasharray": "strokeDasharray",
    "stroke-dashoffset": "strokeDashoffset",
    "stroke-opacity": "strokeOpacity",
    "fill-rule": "fillRule",
    "fill-opacity": "fillOpacity",
    "clip-rule": "clipRule",
    "clip-path": "clipPath",
    "stop-color": "stopColor",
    "stop-opacity": "stopOpacity",
    "xlink:href": "xlinkHref",
    "xmlns:xlink": "xmlnsXlink",
}
# quoted values are matched first so their contents are never renamed
_ATTR_RENAME_RE = re.compile(
    r""""[^"]*"|'[^']*'|(?<![\w:.-])(""" + "|".join(_JSX_ATTRS) + r")(?=\s*=|\s|$)"
)
_STYLE_RE = re.compile(r"""(?<![\w:.-])style\s*=\s*(?:"([^"]*)"|'([^']*)')""")
_JSX_TEXT_ESCAPE_RE = re.compile(r"[{}>]")
_COMMENT_RE = re.compile(r"<!--(.*?)-->", re.DOTALL)
_REACT_IDENT_RE = re.compile(r"\bReact\b")
_DEFAULT_IMPORT_RE = re.compile(r"^\s*import\s+React\s+from\s+['\"]react['\"];?\s*$")

_EVENT_NAMES = {
    "dblclick": "DoubleClick",
    "keydown": "KeyDown",
    "keyup": "KeyUp",
    "keypress": "KeyPress",
    "mouseenter": "MouseEnter",
    "mouseleave": "MouseLeave",
    "mousedown": "MouseDown",
    "mouseup": "MouseUp",
    "mouseover": "MouseOver",
    "mouseout": "MouseOut",
    "contextmenu": "ContextMenu",
}


def _camel_css(prop: str) -> str:
    if prop.startswith("--"):
        return f"'{prop}'"
    head, *rest = prop.split("-")
    return head + "".join(p.capitalize() for p in rest)


def style_object(css: str) -> str:
    """``color: red; font-size: 2px`` → ``{{ color: 'red', fontSize: '2px' }}``."""
    pairs = []
    for decl in css.split(";"):
        if ":" not in decl:
            continue
        prop, value = decl.split(":", 1)
        prop, value = prop.strip(), value.strip().replace("'", "\\'")
        if prop:
            pairs.append(f"{_camel_css(prop)}: '{value}'")
    return "{{ " + ", ".join(pairs) + " }}" if pairs else "{{}}"


def _jsx_event(event: str, code: str) -> str:
    name = _EVENT_NAMES.get(event, event.capitalize())
    return f"on{name}={{() => {{ {code} }}}}"


def jsx_text(text: str, preserved: bool) -> str:
    """Escape text so JSX reads it literally; multi-line <pre> text becomes a string expression."""
    if preserved and KEEP_NEWLINE in text:
        value = html.unescape(text.replace(KEEP_NEWLINE, "\n"))
        return "{" + json.dumps(value, ensure_ascii=False) + "}"
    return _JSX_TEXT_ESCAPE_RE.sub(lambda m: "{'" + m.group(0) + "'}", text)


class ReactAdapter(FrameworkAdapter):
    name = "react"
    display_name = "React"
    component_extension = ".tsx"
    entry_point = "src/main.tsx"
    stylesheet_path = "src/index.css"

    # ── Markup ────────────────────────────────────────────────────────────

    def transform_attrs(self, attrs: str) -> str:
        attrs = _ATTR_RENAME_RE.sub(
            lambda m: _JSX_ATTRS[m.group(1)] if m.group(1) else m.group(0),
            attrs,
        )
        attrs = _STYLE_RE.sub(
            lambda m: f"style={style_object(m.group(1) if m.group(1) is not None else m.group(2))}",
            attrs,
        )
        return rewrite_events(attrs, _jsx_event)

    def transform_markup(self, markup: str, preserved: bool = False) -> str:
        markup = map_text(markup, jsx_text, preserved=preserved)
        markup = _COMMENT_RE.sub(lambda m: "{/*" + m.group(1) + "*/}", markup)

        def _tag(tag: str, attrs: str, self_closing: bool) -> str:
            close = " />" if self_closing or is_void(tag) else ">"
            return f"<{tag}{self.transform_attrs(attrs)}{close}"

        return map_opening_tags(markup, _tag)

    # ── Emit ──────────────────────────────────────────────────────────────

    def _emit(self, root: RootElement, options: ConversionOptions) -> str:
        name = options.component_name
        has_children = not root.self_closing
        jsx = render_root(
            root.tag,
            self.transform_attrs(root.attrs) + " {...props}",
            self.transform_markup(root.inner, preserved=root.tag.lower() in PRESERVED_TAGS),
            slot="{children}" if has_children else None,
            self_closing=root.self_closing,
        )
        params = "{ children, ...props }" if has_children else "{ ...props }"

        lines: list[str] = []
        if options.include_types:
            if options.optimize_bundle:
                type_names = "HTMLAttributes, ReactNode" if has_children else "HTMLAttributes"
                lines.append(f"import type {{ {type_names} }} from 'react';")
                attrs_type, node_type = "HTMLAttributes", "ReactNode"
            else:
                lines.append("import React from 'react';")
                attrs_type, node_type = "React.HTMLAttributes", "React.ReactNode"
            lines.append("")
            lines.append(f"export interface {name}Props extends {attrs_type}<{dom_interface(root.tag)}> {{")
            if has_children:
                lines.append(f"  children?: {node_type};")
            lines.append("}")
            lines.append("")
            signature = f"export default function {name}({params}: {name}Props) {{"
        else:
            if not options.optimize_bundle:
                lines.append("import React from 'react';")
                lines.append("")
            signature = f"export default function {name}({params}) {{"

        lines.append(signature)
        lines.append("  return (")
        lines.append(indent_block(jsx, "    "))
        lines.append("  );")
        lines.append("}")
        return "\n".join(lines) + "\n"

    # ── Optimization ──────────────────────────────────────────────────────

    def _optimize(self, source: str) -> str:
        lines = source.splitlines()
        body = "\n".join(line for line in lines if not _DEFAULT_IMPORT_RE.match(line))
        if _REACT_IDENT_RE.search(body):
            return source
        return body

    # ── Project ───────────────────────────────────────────────────────────

    def runtime_dependencies(self) -> dict[str, str]:
        return pinned("react", "react-dom")

    def dev_dependencies(self) -> dict[str, str]:
        return pinned("@types/react", "@types/react-dom")

    def _tsconfig_options(self) -> dict:
        return {"jsx": "react-jsx", "lib": ["ES2020", "DOM", "DOM.Iterable"]}

    def _project_files(self, config: ProjectConfig, css: CSSFramework) -> list[ProjectFile]:
        app = self.render_component(
            self._app_markup(config),
            ConversionOptions(component_name="App", optimize_bundle=True),
        )
        if scaffold_build_tool(config) == "nextjs":
            return [ProjectFile(path="src/App.tsx", content=app), *self._next_app_router(config)]
        main = (
            "import React from 'react';\n"
            "import ReactDOM from 'react-dom/client';\n"
            "import App from './App';\n"
            "import './index.css';\n"
            "\n"
            "ReactDOM.createRoot(document.getElementById('root')!).render(\n"
            "  <React.StrictMode>\n"
            "    <App />\n"
            "  </React.StrictMode>,\n"
            ");\n"
        )
        return [
            self._index_html(config, '<div id="root"></div>'),
            ProjectFile(path=self.entry_point, content=main),
            ProjectFile(path="src/App.tsx", content=app),
        ]

    def _next_app_router(self, config: ProjectConfig) -> list[ProjectFile]:
        """Next.js owns the HTML shell and entry, so the app mounts through src/app."""
        layout = (
            "import type { Metadata } from 'next';\n"
            "import type { ReactNode } from 'react';\n"
            "import '../index.css';\n"
            "\n"
            "export const metadata: Metadata = {\n"
            f"  title: {json.dumps(config.name, ensure_ascii=False)},\n"
            "};\n"
            "\n"
            "export default function RootLayout({ children }: { children: ReactNode }) {\n"
            "  return (\n"
            '    <html lang="en">\n'
            "      <body>{children}</body>\n"
            "    </html>\n"
            "  );\n"
            "}\n"
        )
        page = (
            "import App from '../App';\n"
            "\n"
            "export default function Page() {\n"
            "  return <App />;\n"
            "}\n"
        )
        return [
            ProjectFile(path="src/app/layout.tsx", content=layout),
            ProjectFile(path="src/app/page.tsx", content=page),
        ]
