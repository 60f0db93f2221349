# backend/patternbook/compiler/render_html.py
"""
HTML Renderer

Produces one standalone page: a navigation list linking to an
<h2 id="..."> per pattern. All catalog text is escaped.
"""

from html import escape
from typing import List

from patternbook.compiler.render_markdown import GUIDANCE_HEADINGS
from patternbook.compiler.types import Document, Section


PAGE_STYLE = (
    "body { font-family: sans-serif; max-width: 52rem; margin: 2rem auto; line-height: 1.5; } "
    "pre { background: #F5F5F5; padding: 1rem; overflow-x: auto; } "
    ".category { color: #546E7A; font-style: italic; }"
)


def _render_section(section: Section) -> List[str]:
    entry = section.entry
    lines = [
        '<section class="pattern">',
        f'<h2 id="{escape(section.anchor)}">{escape(entry.name)}</h2>',
    ]

    if entry.category is not None:
        lines.append(f'<p class="category">Category: {escape(entry.category.value.capitalize())}</p>')

    lines.append(f"<p>{escape(entry.description)}</p>")

    for attr, heading in GUIDANCE_HEADINGS:
        items = getattr(entry, attr)
        if not items:
            continue
        lines.append(f"<h3>{heading}</h3>")
        lines.append("<ul>")
        lines.extend(f"<li>{escape(item)}</li>" for item in items)
        lines.append("</ul>")

    language = escape(entry.example.language)
    lines.append("<h3>Example</h3>")
    lines.append(f'<pre><code class="language-{language}">{escape(entry.example.code)}</code></pre>')
    lines.append("</section>")
    return lines


def render_html(document: Document) -> str:
    title = escape(document.title)
    lines = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '<meta charset="utf-8">',
        f"<title>{title}</title>",
        f"<style>{PAGE_STYLE}</style>",
        "</head>",
        "<body>",
        f"<h1>{title}</h1>",
        '<nav id="_toc">',
        "<h2>Table of Contents</h2>",
        '<ul class="toc">',
    ]

    for item in document.toc:
        lines.append(f'<li><a href="#{escape(item.anchor)}">{escape(item.name)}</a></li>')

    lines.append("</ul>")
    lines.append("</nav>")

    for section in document.sections:
        lines.extend(_render_section(section))

    lines.append("</body>")
    lines.append("</html>")
    return "\n".join(lines) + "\n"
