"""Tests for the framework adapters: conversion, optimization, scaffolding, AI degradation."""

import json
import logging

import pytest

from conftest import ADAPTER_CLASSES, CARD, CARD_TOKENS, FORM, FailingAIClient, StubAIClient
from tailwind_mcp.adapters import AngularAdapter, ReactAdapter, SvelteAdapter, VueAdapter
from tailwind_mcp.adapters.markup import extract_classes
from tailwind_mcp.exceptions import (
    ConfigMismatchError,
    InvalidInputError,
    UnsupportedFeatureError,
)
from tailwind_mcp.types import ConversionOptions, ConversionResult, ProjectConfig

ALL_OPTIONS = [
    ConversionOptions(),
    ConversionOptions(include_types=True),
    ConversionOptions(add_accessibility=True),
    ConversionOptions(optimize_bundle=True),
    ConversionOptions(include_types=True, add_accessibility=True, optimize_bundle=True),
]


# ── Shared conversion properties ──────────────────────────────────────────────

@pytest.mark.asyncio
class TestConvertComponentAllFrameworks:

    @pytest.mark.parametrize("adapter_cls", ADAPTER_CLASSES)
    @pytest.mark.parametrize("options", ALL_OPTIONS)
    async def test_every_class_token_survives(self, adapter_cls, options):
        code = await adapter_cls().convert_component(FORM, options)
        assert code.strip()
        for token in extract_classes(FORM):
            assert token in code

    @pytest.mark.parametrize("adapter_cls", ADAPTER_CLASSES)
    @pytest.mark.parametrize("source", ["", "   ", "\n\t "])
    async def test_empty_source_rejected(self, adapter_cls, source):
        with pytest.raises(InvalidInputError):
            await adapter_cls().convert_component(source)

    @pytest.mark.parametrize("adapter_cls", ADAPTER_CLASSES)
    async def test_accepts_camel_case_option_dict(self, adapter_cls):
        code = await adapter_cls().convert_component(
            '<button class="px-4">Go</button>',
            {"addAccessibility": True, "componentName": "go button"},
        )
        assert 'aria-label="Go"' in code

    @pytest.mark.parametrize("adapter_cls", [VueAdapter, SvelteAdapter, AngularAdapter])
    async def test_pre_text_not_reindented(self, adapter_cls):
        code = await adapter_cls().convert_component('<div class="p-4">\n  <pre>a\n\n    b</pre>\n</div>')
        assert "<pre>a\n\n    b</pre>" in code

    @pytest.mark.parametrize("adapter_cls", ADAPTER_CLASSES)
    async def test_bad_option_type_rejected(self, adapter_cls):
        with pytest.raises(InvalidInputError):
            await adapter_cls().convert_component(CARD, {"includeTypes": "not-a-bool"})

    @pytest.mark.parametrize("adapter_cls", ADAPTER_CLASSES)
    async def test_fragment_is_wrapped(self, adapter_cls):
        code = await adapter_cls().convert_component('<p class="a">1</p><p class="b">2</p>')
        assert "<div" in code
        assert 'class="a"' in code or 'className="a"' in code

    @pytest.mark.parametrize("adapter_cls", ADAPTER_CLASSES)
    async def test_source_is_not_mutated(self, adapter_cls):
        source = FORM
        await adapter_cls().convert_component(source, ConversionOptions(add_accessibility=True))
        assert source == FORM


class TestConversionOptions:

    def test_render_is_deterministic(self):
        adapter = ReactAdapter()
        assert adapter.render_component(FORM) == adapter.render_component(FORM)

    @pytest.mark.parametrize("raw, expected", [
        ("card", "Card"),
        ("user profile", "UserProfile"),
        ("nav-bar", "NavBar"),
        ("PricingTable", "PricingTable"),
        ("123", "TailwindComponent"),
        ("", "TailwindComponent"),
    ])
    def test_pascal_case(self, raw, expected):
        assert ConversionOptions(component_name=raw).component_name == expected


# ── React ─────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
class TestReactAdapter:

    async def test_end_to_end_card(self):
        code = await ReactAdapter().convert_component(CARD)
        for token in CARD_TOKENS:
            assert token in code
        assert "export default function TailwindComponent({ children, ...props }) {" in code
        assert "return (" in code
        assert '<div className="bg-blue-500 text-white p-4 rounded" {...props}>' in code
        assert "{children}" in code
        assert 'class="' not in code

    async def test_jsx_attribute_renames(self):
        code = await ReactAdapter().convert_component(
            '<div><label for="e" class="block">E</label><input id="e" readonly tabindex="1"></div>'
        )
        assert 'htmlFor="e"' in code
        assert "readOnly" in code
        assert 'tabIndex="1"' in code
        assert 'className="block"' in code

    async def test_quoted_values_not_renamed(self):
        code = await ReactAdapter().convert_component('<p class="for class">x</p>')
        assert 'className="for class"' in code

    async def test_void_elements_self_close(self):
        code = await ReactAdapter().convert_component('<div><img src="a.png" class="h-8"><br></div>')
        assert '<img src="a.png" className="h-8" />' in code
        assert "<br />" in code

    async def test_style_string_to_object(self):
        code = await ReactAdapter().convert_component('<div style="color: red; font-size: 2px">x</div>')
        assert "style={{ color: 'red', fontSize: '2px' }}" in code

    async def test_comments_become_jsx_comments(self):
        code = await ReactAdapter().convert_component("<div><!-- note --><p>x</p></div>")
        assert "{/* note */}" in code
        assert "<!--" not in code

    async def test_inline_handler(self):
        code = await ReactAdapter().convert_component('<button onclick="save();">Save</button>')
        assert "onClick={() => { save() }}" in code

    async def test_typed_props(self):
        code = await ReactAdapter().convert_component(CARD, {"includeTypes": True})
        assert "import React from 'react';" in code
        assert "export interface TailwindComponentProps extends React.HTMLAttributes<HTMLDivElement> {" in code
        assert "children?: React.ReactNode;" in code
        assert "({ children, ...props }: TailwindComponentProps)" in code

    async def test_typed_optimized_uses_type_only_import(self):
        code = await ReactAdapter().convert_component(CARD, {"includeTypes": True, "optimizeBundle": True})
        assert "import type { HTMLAttributes, ReactNode } from 'react';" in code
        assert "import React" not in code

    async def test_optimized_untyped_has_no_import(self):
        code = await ReactAdapter().convert_component(CARD, {"optimizeBundle": True})
        assert "import" not in code

    async def test_void_root_has_no_children(self):
        code = await ReactAdapter().convert_component('<img src="a.png" class="h-8">', {"includeTypes": True})
        assert "<img" in code and "{...props} />" in code
        assert "children" not in code

    async def test_accessibility_on_root_button(self):
        code = await ReactAdapter().convert_component(
            '<button class="px-4">Save</button>', {"addAccessibility": True}
        )
        assert 'aria-label="Save"' in code

    async def test_unquoted_attribute_values_are_quoted(self):
        code = await ReactAdapter().convert_component("<div class=card id=main><input type=text disabled></div>")
        assert '<div className="card" id="main" {...props}>' in code
        assert '<input type="text" disabled />' in code
        assert "className=card" not in code

    async def test_braces_in_text_are_literal(self):
        code = await ReactAdapter().convert_component('<code class="font-mono">{ a: 1 } -> b</code>')
        assert "{'{'} a: 1 {'}'} -{'>'} b" in code
        assert "{ a: 1 }" not in code

    async def test_braces_in_attributes_untouched(self):
        code = await ReactAdapter().convert_component('<div data-json="{a}">x</div>')
        assert 'data-json="{a}"' in code

    async def test_multiline_pre_keeps_its_text(self):
        code = await ReactAdapter().convert_component(
            '<div class="p-4">\n  <pre class="text-xs">line 1\n\n    line 2 &lt;b&gt;</pre>\n</div>'
        )
        assert '<pre className="text-xs">{"line 1\\n\\n    line 2 <b>"}</pre>' in code

    async def test_svg_presentation_attributes(self):
        code = await ReactAdapter().convert_component(
            '<svg class="h-6 w-6" fill="none" stroke="currentColor" stroke-width="1.5">'
            '<path stroke-linecap="round" stroke-linejoin="round" fill-rule="evenodd" clip-rule="evenodd" d="M6 18L18 6"/>'
            "</svg>"
        )
        for prop in ('strokeWidth="1.5"', 'strokeLinecap="round"', 'strokeLinejoin="round"',
                     'fillRule="evenodd"', 'clipRule="evenodd"'):
            assert prop in code
        assert "stroke-width" not in code


# ── Vue ───────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
class TestVueAdapter:

    async def test_end_to_end_card(self):
        code = await VueAdapter().convert_component(CARD)
        for token in CARD_TOKENS:
            assert token in code
        assert code.startswith("<template>")
        assert "</template>" in code
        assert "<script setup>" in code
        assert "</script>" in code
        assert "<slot />" in code
        assert "defineOptions({ name: 'TailwindComponent' });" in code

    async def test_typed_script(self):
        code = await VueAdapter().convert_component(CARD, {"includeTypes": True})
        assert '<script setup lang="ts">' in code
        assert "defineSlots<{ default?: () => unknown }>();" in code

    async def test_event_directive(self):
        code = await VueAdapter().convert_component('<button onclick="count++">+</button>')
        assert '@click="count++"' in code

    async def test_mustache_text_is_not_interpolated(self):
        code = await VueAdapter().convert_component('<p class="font-mono">{{ user }} and { a: 1 }</p>')
        assert "&#123;&#123; user }} and { a: 1 }" in code


# ── Svelte ────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
class TestSvelteAdapter:

    async def test_passthrough_and_slot(self):
        code = await SvelteAdapter().convert_component(CARD)
        assert '<div class="bg-blue-500 text-white p-4 rounded" {...$$restProps}>' in code
        assert "<slot />" in code
        assert "@component" in code

    async def test_typed_props_interface(self):
        code = await SvelteAdapter().convert_component(CARD, {"includeTypes": True})
        assert '<script lang="ts">' in code
        assert "import type { HTMLAttributes } from 'svelte/elements';" in code
        assert "interface $$Props extends HTMLAttributes<HTMLDivElement> {}" in code

    async def test_event_directive(self):
        code = await SvelteAdapter().convert_component('<button onclick="save()">Save</button>')
        assert "on:click={() => { save() }}" in code

    async def test_braces_in_text_are_literal(self):
        code = await SvelteAdapter().convert_component('<code class="font-mono">{ a: 1 }</code>')
        assert "{'{'} a: 1 {'}'}" in code
        assert "{ a: 1 }" not in code


# ── Angular ───────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
class TestAngularAdapter:

    async def test_standalone_component(self):
        code = await AngularAdapter().convert_component(CARD, {"componentName": "Card"})
        assert "import { Component } from '@angular/core';" in code
        assert "selector: 'app-card'," in code
        assert "standalone: true," in code
        assert "<ng-content></ng-content>" in code
        assert "export class CardComponent {}" in code

    async def test_typed_input_and_ngclass(self):
        code = await AngularAdapter().convert_component(CARD, {"includeTypes": True})
        assert "import { Component, Input } from '@angular/core';" in code
        assert "import { NgClass } from '@angular/common';" in code
        assert "imports: [NgClass]," in code
        assert '[ngClass]="extraClasses"' in code
        assert "@Input() extraClasses: string | string[] = '';" in code

    async def test_optimized_uses_on_push(self):
        code = await AngularAdapter().convert_component(CARD, {"optimizeBundle": True})
        assert "import { ChangeDetectionStrategy, Component } from '@angular/core';" in code
        assert "changeDetection: ChangeDetectionStrategy.OnPush," in code

    async def test_event_binding(self):
        code = await AngularAdapter().convert_component('<button onclick="save()">Save</button>')
        assert '(click)="save()"' in code

    async def test_template_literal_escaped(self):
        code = await AngularAdapter().convert_component("<p>cost: ${price} `x`</p>")
        assert "\\${{ '{' }}price{{ '}' }}" in code
        assert "\\`x\\`" in code

    async def test_braces_and_at_sign_in_text_are_literal(self):
        code = await AngularAdapter().convert_component('<code class="font-mono">{ a: 1 } @ home</code>')
        assert "{{ '{' }} a: 1 {{ '}' }} &#64; home" in code
        assert "{ a: 1 }" not in code


# ── optimize_for_framework ────────────────────────────────────────────────────

class TestOptimizeForFramework:

    @pytest.mark.parametrize("adapter_cls", ADAPTER_CLASSES)
    @pytest.mark.parametrize("options", ALL_OPTIONS)
    def test_idempotent_on_generated_code(self, adapter_cls, options):
        adapter = adapter_cls()
        once = adapter.optimize_for_framework(adapter.render_component(FORM, options))
        assert adapter.optimize_for_framework(once) == once

    @pytest.mark.parametrize("adapter_cls", ADAPTER_CLASSES)
    def test_class_tokens_unchanged(self, adapter_cls):
        adapter = adapter_cls()
        code = adapter.render_component(FORM)
        assert extract_classes(adapter.optimize_for_framework(code)) == extract_classes(code)

    @pytest.mark.parametrize("adapter_cls", ADAPTER_CLASSES)
    def test_dedupes_imports_and_whitespace(self, adapter_cls):
        source = "import a from 'a';\nimport a from 'a';\n\n\n\nconst x = 1;   \n\n"
        assert adapter_cls().optimize_for_framework(source) == "import a from 'a';\n\nconst x = 1;\n"

    @pytest.mark.parametrize("adapter_cls", [VueAdapter, SvelteAdapter])
    def test_pre_and_textarea_blocks_kept_verbatim(self, adapter_cls):
        source = "<div>\n<pre>a\n\n\n   b   \n</pre>\n<textarea>x  \n\n\ny</textarea>\n</div>\n\n\n"
        assert adapter_cls().optimize_for_framework(source) == (
            "<div>\n<pre>a\n\n\n   b   \n</pre>\n<textarea>x  \n\n\ny</textarea>\n</div>\n"
        )

    @pytest.mark.parametrize("adapter_cls", ADAPTER_CLASSES)
    def test_empty_rejected(self, adapter_cls):
        with pytest.raises(InvalidInputError):
            adapter_cls().optimize_for_framework("  ")

    def test_react_drops_unused_default_import(self):
        adapter = ReactAdapter()
        code = adapter.render_component(CARD)
        assert "import React from 'react';" in code
        optimized = adapter.optimize_for_framework(code)
        assert "import React" not in optimized
        assert optimized.startswith("export default function")

    def test_react_keeps_used_default_import(self):
        adapter = ReactAdapter()
        code = adapter.render_component(CARD, ConversionOptions(include_types=True))
        assert "import React from 'react';" in adapter.optimize_for_framework(code)

    def test_angular_merges_core_imports(self):
        source = (
            "import { Input } from '@angular/core';\n"
            "import { Component } from '@angular/core';\n"
            "\n"
            "export class A {}\n"
        )
        assert AngularAdapter().optimize_for_framework(source) == (
            "import { Component, Input } from '@angular/core';\n"
            "\n"
            "export class A {}\n"
        )

    @pytest.mark.parametrize("adapter_cls", [VueAdapter, SvelteAdapter])
    def test_drops_empty_blocks(self, adapter_cls):
        source = '<template><div class="p-4"></div></template>\n<script setup></script>\n<style scoped>\n</style>\n'
        assert adapter_cls().optimize_for_framework(source) == '<template><div class="p-4"></div></template>\n'


# ── generate_project ──────────────────────────────────────────────────────────

class TestGenerateProject:

    @pytest.mark.parametrize("adapter_cls", ADAPTER_CLASSES)
    def test_minimal_project(self, adapter_cls):
        adapter = adapter_cls()
        project = adapter.generate_project(ProjectConfig(name="My App", framework=adapter.name))
        paths = project.paths()
        assert paths
        for expected in ("package.json", "tsconfig.json", "index.html", adapter.entry_point,
                         adapter.stylesheet_path, "tailwind.config.js", "postcss.config.js"):
            assert expected in paths
        assert "@tailwind base;" in project.get(adapter.stylesheet_path).content

    @pytest.mark.parametrize("adapter_cls", ADAPTER_CLASSES)
    def test_manifest(self, adapter_cls):
        adapter = adapter_cls()
        project = adapter.generate_project({"name": "My App", "framework": adapter.name})
        manifest = json.loads(project.get("package.json").content)
        assert manifest["name"] == "my-app"
        assert manifest["scripts"]["build"] == "vite build"
        assert "tailwindcss" in manifest["devDependencies"]
        assert "typescript" in manifest["devDependencies"]

    @pytest.mark.parametrize("adapter_cls", ADAPTER_CLASSES)
    def test_framework_mismatch(self, adapter_cls):
        adapter = adapter_cls()
        other = "svelte" if adapter.name != "svelte" else "react"
        with pytest.raises(ConfigMismatchError) as exc_info:
            adapter.generate_project(ProjectConfig(name="x", framework=other))
        assert exc_info.value.expected == adapter.name
        assert exc_info.value.actual == other

    def test_framework_match_is_case_insensitive(self):
        project = ReactAdapter().generate_project(ProjectConfig(name="x", framework="React"))
        assert "src/App.tsx" in project.paths()

    @pytest.mark.parametrize("adapter_cls, path", [
        (ReactAdapter, "src/components/Button.tsx"),
        (VueAdapter, "src/components/Button.vue"),
        (SvelteAdapter, "src/components/Button.svelte"),
        (AngularAdapter, "src/components/button.component.ts"),
    ])
    def test_components_feature_adds_sample(self, adapter_cls, path):
        adapter = adapter_cls()
        project = adapter.generate_project(
            ProjectConfig(name="x", framework=adapter.name, features=["components"])
        )
        sample = project.get(path)
        assert sample is not None
        assert "bg-blue-600" in sample.content
        assert 'aria-label="Button"' in sample.content

    def test_plain_css_has_no_tailwind_files(self):
        project = VueAdapter().generate_project({"name": "x", "framework": "vue", "cssFramework": "css"})
        assert "tailwind.config.js" not in project.paths()
        assert "@tailwind" not in project.get("src/style.css").content

    def test_unknown_css_framework(self):
        with pytest.raises(UnsupportedFeatureError) as exc_info:
            ReactAdapter().generate_project({"name": "x", "framework": "react", "cssFramework": "bootstrap"})
        assert exc_info.value.feature == "css:bootstrap"

    def test_blank_name_rejected(self):
        with pytest.raises(InvalidInputError):
            ReactAdapter().generate_project({"name": "   ", "framework": "react"})

    def test_angular_bootstraps_app_root(self):
        project = AngularAdapter().generate_project(ProjectConfig(name="x", framework="angular"))
        app = project.get("src/app/app.component.ts").content
        assert "selector: 'app-root'," in app
        assert "export class AppComponent {}" in app
        assert "<app-root></app-root>" in project.get("index.html").content

    def test_title_is_escaped(self):
        project = ReactAdapter().generate_project(ProjectConfig(name="A <b> & C", framework="react"))
        assert "<title>A &lt;b&gt; &amp; C</title>" in project.get("index.html").content


# ── AI enrichment ─────────────────────────────────────────────────────────────

@pytest.mark.asyncio
class TestEnrichment:

    @pytest.mark.parametrize("adapter_cls", ADAPTER_CLASSES)
    async def test_success_attaches_suggestions(self, adapter_cls, stub_ai):
        adapter = adapter_cls(ai_client=stub_ai, ai_timeout=1.0)
        result = await adapter.convert_component_detailed(CARD)
        assert isinstance(result, ConversionResult)
        assert result.ai_enriched is True
        assert result.ai_suggestions == stub_ai.reply
        assert result.warnings == []
        assert result.code == adapter.render_component(CARD)
        assert len(stub_ai.prompts) == 1
        assert result.code in stub_ai.prompts[0]

    @pytest.mark.parametrize("adapter_cls", ADAPTER_CLASSES)
    async def test_failure_degrades_to_deterministic(self, adapter_cls, failing_ai, caplog):
        adapter = adapter_cls(ai_client=failing_ai, ai_timeout=1.0)
        with caplog.at_level(logging.WARNING):
            result = await adapter.convert_component_detailed(CARD)
        assert failing_ai.calls == 1
        assert result.ai_enriched is False
        assert result.ai_suggestions is None
        assert result.code == adapter.render_component(CARD)
        for token in CARD_TOKENS:
            assert token in result.code
        assert len(result.warnings) == 1
        assert type(failing_ai.exc).__name__ in result.warnings[0]
        assert any("returning deterministic output" in r.getMessage() for r in caplog.records)

    @pytest.mark.parametrize("adapter_cls", ADAPTER_CLASSES)
    async def test_failure_still_returns_code(self, adapter_cls, failing_ai):
        code = await adapter_cls(ai_client=failing_ai).convert_component(CARD)
        assert code == adapter_cls().render_component(CARD)

    async def test_timeout(self, slow_ai):
        adapter = ReactAdapter(ai_client=slow_ai, ai_timeout=0.05)
        result = await adapter.convert_component_detailed(CARD)
        assert result.ai_enriched is False
        assert "timed out" in result.warnings[0]

    async def test_unexpected_error(self):
        adapter = VueAdapter(ai_client=FailingAIClient(RuntimeError("boom")))
        result = await adapter.convert_component_detailed(CARD)
        assert result.ai_enriched is False
        assert "boom" in result.warnings[0]

    async def test_blank_reply(self):
        adapter = SvelteAdapter(ai_client=StubAIClient(reply="   "))
        result = await adapter.convert_component_detailed(CARD)
        assert result.ai_enriched is False
        assert result.warnings == ["AI enrichment returned no text"]

    async def test_disabled_by_option(self, stub_ai):
        adapter = AngularAdapter(ai_client=stub_ai)
        result = await adapter.convert_component_detailed(CARD, {"aiEnhance": False})
        assert stub_ai.prompts == []
        assert result.ai_enriched is False
        assert result.warnings == []

    async def test_no_client_skips_enrichment(self):
        result = await ReactAdapter().convert_component_detailed(CARD)
        assert result.ai_enriched is False
        assert result.warnings == []

    async def test_input_errors_propagate_before_ai(self, stub_ai):
        with pytest.raises(InvalidInputError):
            await ReactAdapter(ai_client=stub_ai).convert_component_detailed("")
        assert stub_ai.prompts == []
