"""Markup helpers shared by every framework adapter.

Component sources are snippets of styled HTML that need not be well-formed,
so everything here works on tags matched by regex rather than on a DOM.
Quoted attribute values may contain ``>``; comments pass through unchanged.
"""

from __future__ import annotations

import html
import re
import textwrap
from dataclasses import dataclass
from typing import Callable, Optional

from tailwind_mcp.exceptions import InvalidInputError

VOID_ELEMENTS = frozenset({
    "area", "base", "br", "col", "embed", "hr", "img", "input",
    "link", "meta", "param", "source", "track", "wbr",
})

INTERACTIVE_TAGS = frozenset({"button", "a", "input", "select", "textarea"})

# whitespace inside these renders as written
PRESERVED_TAGS = frozenset({"pre", "textarea"})
KEEP_NEWLINE = "\x00"

_ATTR = r"""[^\s=>/"']+(?:\s*=\s*(?:"[^"]*"|'[^']*'|[^\s>"']+))?"""
TAG_RE = re.compile(rf"<(/?)([a-zA-Z][\w:.-]*)((?:\s+{_ATTR})*)\s*(/?)>")
_ATTR_ITEM_RE = re.compile(r"""([^\s=>/"']+)(?:(\s*=\s*)("[^"]*"|'[^']*'|[^\s>"']+))?""")
_TEXT_BOUNDARY_RE = re.compile(rf"<!--.*?-->|{TAG_RE.pattern}", re.DOTALL)

_CLASS_ATTR_RE = re.compile(r"""(?<![\w:.-])(?:class|className)\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s>"']+))""")
_A11Y_ATTR_RE = re.compile(r"(?<![\w:.-])(?:aria-label|aria-labelledby|role)(?=[\s=/>]|$)")
_CLICK_RE = re.compile(r"(?<![\w:.-])onclick\s*=", re.IGNORECASE)
EVENT_ATTR_RE = re.compile(r"""(?<![\w:.-])on([a-z]+)\s*=\s*(?:"([^"]*)"|'([^']*)')""")

_DEFAULT_LABELS = {
    "button": "Button",
    "a": "Link",
    "input": "Input",
    "select": "Select",
    "textarea": "Text area",
}

_DOM_INTERFACES = {
    "a": "HTMLAnchorElement", "button": "HTMLButtonElement", "div": "HTMLDivElement",
    "form": "HTMLFormElement", "img": "HTMLImageElement", "input": "HTMLInputElement",
    "label": "HTMLLabelElement", "li": "HTMLLIElement", "ol": "HTMLOListElement",
    "p": "HTMLParagraphElement", "select": "HTMLSelectElement", "span": "HTMLSpanElement",
    "table": "HTMLTableElement", "textarea": "HTMLTextAreaElement", "ul": "HTMLUListElement",
    "h1": "HTMLHeadingElement", "h2": "HTMLHeadingElement", "h3": "HTMLHeadingElement",
    "h4": "HTMLHeadingElement", "h5": "HTMLHeadingElement", "h6": "HTMLHeadingElement",
}


@dataclass(frozen=True)
class RootElement:
    """The single top-level element of a component source."""
    tag: str
    attrs: str          # raw attribute text, leading whitespace included
    inner: str
    self_closing: bool = False


def validate_source(source: str) -> str:
    """Return the stripped source or raise InvalidInputError."""
    if not isinstance(source, str) or not source.strip():
        raise InvalidInputError("Component source must be a non-empty markup string")
    return source.strip()


def extract_classes(source: str) -> list[str]:
    """Every utility-class token in the source, in first-seen order."""
    tokens: list[str] = []
    for m in _CLASS_ATTR_RE.finditer(source):
        value = next(g for g in m.groups() if g is not None)
        for token in value.split():
            if token not in tokens:
                tokens.append(token)
    return tokens


def get_attr(attrs: str, name: str) -> Optional[str]:
    m = re.search(
        rf"""(?<![\w:.-]){re.escape(name)}\s*=\s*(?:"([^"]*)"|'([^']*)'|([^\s>"']+))""",
        attrs,
    )
    if not m:
        return None
    return next(g for g in m.groups() if g is not None)


def dom_interface(tag: str) -> str:
    """TypeScript DOM interface name for a tag (HTMLElement when unknown)."""
    return _DOM_INTERFACES.get(tag.lower(), "HTMLElement")


def is_void(tag: str) -> bool:
    return tag.lower() in VOID_ELEMENTS


# ── Root detection ────────────────────────────────────────────────────────────

def find_root(markup: str) -> Optional[RootElement]:
    """Return the root element when the markup is exactly one element, else None."""
    text = markup.strip()
    first = TAG_RE.match(text)
    if not first or first.group(1):
        return None
    tag, attrs, slash = first.group(2), first.group(3), first.group(4)
    if slash or is_void(tag):
        if first.end() == len(text):
            return RootElement(tag=tag, attrs=attrs, inner="", self_closing=True)
        return None

    depth = 0
    for m in TAG_RE.finditer(text):
        closing, name, _, self_closing = m.groups()
        if self_closing or is_void(name):
            continue
        depth += -1 if closing else 1
        if depth == 0:
            if m.end() == len(text) and name.lower() == tag.lower():
                return RootElement(tag=tag, attrs=attrs, inner=text[first.end():m.start()])
            return None
    return None


def normalize_root(markup: str) -> RootElement:
    """Root element of the markup; fragments and bare text get a wrapping <div>."""
    root = find_root(markup)
    if root is None:
        return RootElement(tag="div", attrs="", inner=markup.strip())
    return root


def dedent_block(text: str) -> list[str]:
    """Split inner markup into dedented lines without leading/trailing blanks."""
    lines = [line.rstrip() for line in textwrap.dedent(text.strip("\n")).splitlines()]
    while lines and not lines[0].strip():
        lines.pop(0)
    while lines and not lines[-1].strip():
        lines.pop()
    if lines:
        # an inline body starts right after the opening tag
        lines[0] = lines[0].lstrip()
    return lines


def render_root(
    tag: str,
    attrs: str,
    inner: str,
    slot: Optional[str] = None,
    self_closing: bool = False,
    indent: str = "  ",
) -> str:
    """Rebuild the root element with its inner markup on indented lines."""
    if self_closing:
        return f"<{tag}{attrs} />"
    if tag.lower() in PRESERVED_TAGS:
        return f"<{tag}{attrs}>{inner}{slot or ''}</{tag}>"
    lines = [f"<{tag}{attrs}>"]
    lines.extend(indent + line if line else "" for line in dedent_block(inner))
    if slot:
        lines.append(indent + slot)
    lines.append(f"</{tag}>")
    return "\n".join(lines)


def indent_block(text: str, indent: str) -> str:
    return "\n".join(indent + line if line else "" for line in text.splitlines())


def map_opening_tags(markup: str, fn: Callable[[str, str, bool], str]) -> str:
    """Rewrite every opening tag via ``fn(tag, attrs, self_closing) -> tag text``."""
    def _sub(m: re.Match) -> str:
        if m.group(1):
            return m.group(0)
        return fn(m.group(2), m.group(3), bool(m.group(4)))
    return TAG_RE.sub(_sub, markup)


def quote_attrs(attrs: str) -> str:
    """``id=main`` → ``id="main"``; quoted and bare boolean attributes are kept."""
    def _sub(m: re.Match) -> str:
        value = m.group(3)
        if value is None or value[0] in "\"'":
            return m.group(0)
        return f'{m.group(1)}{m.group(2)}"{value}"'
    return _ATTR_ITEM_RE.sub(_sub, attrs)


def quote_attribute_values(markup: str) -> str:
    """Quote every unquoted attribute value in the markup's tags."""
    def _sub(m: re.Match) -> str:
        start = m.start(3) - m.start()
        end = m.end(3) - m.start()
        text = m.group(0)
        return text[:start] + quote_attrs(m.group(3)) + text[end:]
    return TAG_RE.sub(_sub, markup)


def map_text(markup: str, fn: Callable[[str, bool], str], preserved: bool = False) -> str:
    """Rewrite the text between tags via ``fn(text, preserved) -> text``.

    Tags and comments pass through unchanged. ``preserved`` is true for text
    inside ``<pre>`` or ``<textarea>``, or everywhere when the markup is
    itself the body of one.
    """
    out: list[str] = []
    pos = 0
    depth = 1 if preserved else 0
    for m in _TEXT_BOUNDARY_RE.finditer(markup):
        out.append(fn(markup[pos:m.start()], depth > 0))
        out.append(m.group(0))
        pos = m.end()
        name = m.group(2)
        if name and name.lower() in PRESERVED_TAGS and not m.group(4):
            depth = max(depth + (-1 if m.group(1) else 1), 0)
    out.append(fn(markup[pos:], depth > 0))
    return "".join(out)


def protect_preserved_text(markup: str) -> str:
    """Hide newlines of ``<pre>``/``<textarea>`` text from re-indentation."""
    return map_text(markup, lambda text, preserved: text.replace("\n", KEEP_NEWLINE) if preserved else text)


def restore_preserved_text(code: str) -> str:
    return code.replace(KEEP_NEWLINE, "\n")


def rewrite_events(attrs: str, fn: Callable[[str, str], str]) -> str:
    """Replace inline ``onX="code"`` handlers via ``fn(event, code) -> attribute``."""
    def _sub(m: re.Match) -> str:
        code = m.group(2) if m.group(2) is not None else m.group(3)
        return fn(m.group(1), html.unescape(code).strip().rstrip(";"))
    return EVENT_ATTR_RE.sub(_sub, attrs)


# ── Accessibility ─────────────────────────────────────────────────────────────

def _text_content(fragment: str) -> str:
    text = re.sub(r"<[^>]*>", " ", fragment)
    return " ".join(html.unescape(text).split())


def _accessible_name(tag: str, attrs: str, markup: str, start: int) -> str:
    lname = tag.lower()
    if lname in ("button", "a"):
        close = re.compile(rf"</{re.escape(tag)}\s*>", re.IGNORECASE).search(markup, start)
        if close:
            text = _text_content(markup[start:close.start()])
            if text:
                return text[:80]
    for attr in ("title", "placeholder", "name", "alt"):
        value = get_attr(attrs, attr)
        if value and value.strip():
            return value.strip()[:80]
    return _DEFAULT_LABELS.get(lname, "Interactive element")


def inject_accessibility(markup: str) -> str:
    """Add one ARIA attribute to interactive elements that have none.

    Native controls get an ``aria-label`` from their text or hints; other
    elements carrying an inline click handler get ``role="button"`` plus
    ``tabindex`` when missing. Elements that already declare ``aria-label``,
    ``aria-labelledby`` or ``role`` are left untouched.
    """
    out: list[str] = []
    pos = 0
    for m in TAG_RE.finditer(markup):
        closing, tag, attrs, _ = m.groups()
        if closing:
            continue
        lname = tag.lower()
        clickable = bool(_CLICK_RE.search(attrs))
        if lname not in INTERACTIVE_TAGS and not clickable:
            continue
        if _A11Y_ATTR_RE.search(attrs):
            continue
        if lname == "input" and (get_attr(attrs, "type") or "").lower() == "hidden":
            continue

        if lname in INTERACTIVE_TAGS:
            label = _accessible_name(tag, attrs, markup, m.end())
            addition = f' aria-label="{html.escape(label, quote=True)}"'
        else:
            addition = ' role="button"'
            if get_attr(attrs, "tabindex") is None:
                addition += ' tabindex="0"'

        out.append(markup[pos:m.end(3)])
        out.append(addition)
        pos = m.end(3)
    out.append(markup[pos:])
    return "".join(out)
