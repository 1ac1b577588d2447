"""Angular adapter: standalone components with inline templates."""

import re

from tailwind_mcp.adapters.base import FrameworkAdapter, kebab_case
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

_CORE_IMPORT_RE = re.compile(r"^\s*import\s*\{([^}]*)\}\s*from\s*['\"]@angular/core['\"];?\s*$")
# "{" and "}" open ICU expressions, "@" opens control flow blocks
_TEXT_ESCAPES = {"{": "{{ '{' }}", "}": "{{ '}' }}", "@": "&#64;"}
_TEXT_ESCAPE_RE = re.compile(r"[{}@]")


def _angular_event(event: str, code: str) -> str:
    code = code.replace('"', "'")
    return f'({event})="{code}"'


def angular_text(text: str, preserved: bool) -> str:
    return _TEXT_ESCAPE_RE.sub(lambda m: _TEXT_ESCAPES[m.group(0)], text)


def _template_literal(markup: str) -> str:
    return markup.replace("\\", "\\\\").replace("`", "\\`").replace("${", "\\${")


def class_name(component_name: str) -> str:
    return component_name if component_name.endswith("Component") else f"{component_name}Component"


def selector(component_name: str) -> str:
    if component_name == "App":
        return "app-root"
    base = component_name[: -len("Component")] if component_name.endswith("Component") else component_name
    return f"app-{kebab_case(base or component_name)}"


class AngularAdapter(FrameworkAdapter):
    name = "angular"
    display_name = "Angular"
    component_extension = ".component.ts"
    stylesheet_path = "src/styles.css"

    def transform_attrs(self, attrs: str) -> str:
        return rewrite_events(attrs, _angular_event)

    def transform_markup(self, markup: str) -> str:
        return map_opening_tags(
            map_text(markup, angular_text),
            lambda tag, attrs, sc: f"<{tag}{self.transform_attrs(attrs)}{' />' if sc else '>'}",
        )

    def _emit(self, root: RootElement, options: ConversionOptions) -> str:
        root_attrs = self.transform_attrs(root.attrs)
        if options.include_types:
            root_attrs += ' [ngClass]="extraClasses"'
        template = render_root(
            root.tag,
            root_attrs,
            self.transform_markup(root.inner),
            slot=None if root.self_closing else "<ng-content></ng-content>",
            self_closing=root.self_closing,
        )

        core = ["Component"]
        if options.include_types:
            core.append("Input")
        if options.optimize_bundle:
            core.append("ChangeDetectionStrategy")

        lines = [f"import {{ {', '.join(sorted(core))} }} from '@angular/core';"]
        if options.include_types:
            lines.append("import { NgClass } from '@angular/common';")
        lines += [
            "",
            "@Component({",
            f"  selector: '{selector(options.component_name)}',",
            "  standalone: true,",
            f"  imports: [{'NgClass' if options.include_types else ''}],",
        ]
        if options.optimize_bundle:
            lines.append("  changeDetection: ChangeDetectionStrategy.OnPush,")
        lines += [
            "  template: `",
            indent_block(_template_literal(template), "    "),
            "  `,",
            "})",
        ]
        cls = class_name(options.component_name)
        if options.include_types:
            lines += [
                f"export class {cls} {{",
                "  @Input() extraClasses: string | string[] = '';",
                "}",
            ]
        else:
            lines.append(f"export class {cls} {{}}")
        return "\n".join(lines) + "\n"

    def _optimize(self, source: str) -> str:
        lines = source.splitlines()
        names: list[str] = []
        first = None
        kept = []
        for line in lines:
            m = _CORE_IMPORT_RE.match(line)
            if not m:
                kept.append(line)
                continue
            names.extend(n.strip() for n in m.group(1).split(",") if n.strip())
            if first is None:
                first = len(kept)
                kept.append("")
        if first is None:
            return source
        kept[first] = f"import {{ {', '.join(sorted(set(names)))} }} from '@angular/core';"
        return "\n".join(kept)

    def runtime_dependencies(self) -> dict[str, str]:
        return pinned(
            "@angular/core", "@angular/common", "@angular/compiler",
            "@angular/platform-browser", "rxjs", "zone.js",
        )

    def dev_dependencies(self) -> dict[str, str]:
        return pinned("@angular/compiler-cli")

    def _tsconfig_options(self) -> dict:
        return {"experimentalDecorators": True, "useDefineForClassFields": False, "lib": ["ES2022", "DOM"]}

    def _component_filename(self, name: str) -> str:
        return f"{kebab_case(name)}{self.component_extension}"

    def _project_files(self, config: ProjectConfig, css: CSSFramework) -> list[ProjectFile]:
        app = self.render_component(
            self._app_markup(config),
            ConversionOptions(component_name="App", optimize_bundle=True),
        )
        main = (
            "import 'zone.js';\n"
            "import './styles.css';\n"
            "import { bootstrapApplication } from '@angular/platform-browser';\n"
            "import { AppComponent } from './app/app.component';\n"
            "\n"
            "bootstrapApplication(AppComponent).catch((err) => console.error(err));\n"
        )
        return [
            self._index_html(config, "<app-root></app-root>"),
            ProjectFile(path=self.entry_point, content=main),
            ProjectFile(path="src/app/app.component.ts", content=app),
        ]
