"""Post body rendering: markdown/MDX to HTML with per-element overrides.

Rendering is delegated to Python-Markdown. Callers pass a mapping of element
name (``"h2"``, ``"a"``, ...) to a function that receives each rendered element
of that name and may adjust it in place::

    html = render_markdown(post.content, {"img": lambda el: el.set("loading", "lazy")})
"""

import html
import re
import xml.etree.ElementTree as etree
from collections.abc import Callable, Mapping

import markdown
from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor
from markdown.treeprocessors import Treeprocessor

ElementOverride = Callable[[etree.Element], None]

CALLOUT_TYPES = ("info", "warning", "error", "success")

_CALLOUT_RE = re.compile(
    r"<Callout(?P<attrs>[^>]*)>(?P<body>.*?)</Callout>", re.DOTALL
)
_ATTR_RE = re.compile(r'(\w+)\s*=\s*(?:"([^"]*)"|\'([^\']*)\')')
_MERMAID_RE = re.compile(
    r"^(?P<fence>`{3,})mermaid[ \t]*\n(?P<body>.*?)\n(?P=fence)[ \t]*$",
    re.DOTALL | re.MULTILINE,
)


def _add_class(el: etree.Element, css_class: str) -> None:
    existing = el.get("class", "")
    el.set("class", f"{existing} {css_class}".strip())


def _heading(css_class: str) -> ElementOverride:
    return lambda el: _add_class(el, css_class)


def _external_link(el: etree.Element) -> None:
    href = el.get("href", "")
    if href.startswith(("http://", "https://")):
        el.set("target", "_blank")
        el.set("rel", "noopener noreferrer")


DEFAULT_OVERRIDES: dict[str, ElementOverride] = {
    "h1": _heading("post-h1"),
    "h2": _heading("post-h2"),
    "h3": _heading("post-h3"),
    "h4": _heading("post-h4"),
    "a": _external_link,
    "pre": lambda el: _add_class(el, "code-block"),
    "blockquote": lambda el: _add_class(el, "post-quote"),
    "img": lambda el: el.set("loading", "lazy"),
}


class _CalloutPreprocessor(Preprocessor):
    """Turn ``<Callout type=".." title="..">..</Callout>`` into markdown-in-HTML divs."""

    def run(self, lines: list[str]) -> list[str]:
        text = "\n".join(lines)
        return _CALLOUT_RE.sub(self._replace, text).split("\n")

    @staticmethod
    def _replace(match: re.Match[str]) -> str:
        attrs = {
            name: double if double else single
            for name, double, single in _ATTR_RE.findall(match.group("attrs"))
        }
        kind = attrs.get("type", "info")
        if kind not in CALLOUT_TYPES:
            kind = "info"

        parts = [f'\n<div class="callout callout-{kind}" markdown="1">\n']
        title = attrs.get("title")
        if title:
            parts.append(f'<p class="callout-title">{html.escape(title)}</p>\n')
        parts.append(f"\n{match.group('body').strip()}\n\n</div>\n")
        return "".join(parts)


class _MermaidPreprocessor(Preprocessor):
    """Stash ```mermaid fences as ``<pre class="mermaid">`` for client-side rendering."""

    def run(self, lines: list[str]) -> list[str]:
        text = "\n".join(lines)

        def replace(match: re.Match[str]) -> str:
            block = f'<pre class="mermaid">{html.escape(match.group("body"))}</pre>'
            placeholder = self.md.htmlStash.store(block)
            return f"\n\n{placeholder}\n\n"

        return _MERMAID_RE.sub(replace, text).split("\n")


class _OverrideTreeprocessor(Treeprocessor):
    def __init__(self, md: markdown.Markdown, overrides: Mapping[str, ElementOverride]):
        super().__init__(md)
        self.overrides = overrides

    def run(self, root: etree.Element) -> None:
        for el in list(root.iter()):
            override = self.overrides.get(el.tag)
            if override is not None:
                override(el)


class _TableWrapTreeprocessor(Treeprocessor):
    """Wrap tables in a horizontally scrollable container."""

    def run(self, root: etree.Element) -> None:
        for parent in list(root.iter()):
            for index, child in enumerate(list(parent)):
                if child.tag != "table":
                    continue
                wrapper = etree.Element("div", {"class": "table-wrapper"})
                wrapper.tail = child.tail
                child.tail = None
                parent.remove(child)
                wrapper.append(child)
                parent.insert(index, wrapper)


class PostExtension(Extension):
    """Blog-specific syntax (callouts, mermaid) plus element overrides."""

    def __init__(self, overrides: Mapping[str, ElementOverride], **kwargs):
        self.overrides = overrides
        super().__init__(**kwargs)

    def extendMarkdown(self, md: markdown.Markdown) -> None:
        # Between normalize_whitespace (30) and fenced_code (25)
        md.preprocessors.register(_MermaidPreprocessor(md), "mermaid", 28)
        # After fenced_code stashes code blocks, before html_block (20)
        md.preprocessors.register(_CalloutPreprocessor(md), "callout", 22)
        # After inline (20) so links and code spans exist
        md.treeprocessors.register(_TableWrapTreeprocessor(md), "table_wrap", 4)
        md.treeprocessors.register(
            _OverrideTreeprocessor(md, self.overrides), "element_overrides", 3
        )


def render_markdown(
    content: str, overrides: Mapping[str, ElementOverride] | None = None
) -> str:
    """Render a post body to HTML.

    ``overrides`` replaces :data:`DEFAULT_OVERRIDES` entirely when given; merge
    with the defaults explicitly to extend them.
    """
    md = markdown.Markdown(
        extensions=[
            "fenced_code",
            "tables",
            "md_in_html",
            "toc",
            PostExtension(DEFAULT_OVERRIDES if overrides is None else overrides),
        ],
        output_format="html",
    )
    return md.convert(content or "")
