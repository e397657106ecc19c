import asyncio
import logging
from typing import Tuple

import markdown
from bs4 import BeautifulSoup
from latex2mathml.converter import convert as latex_to_mathml
from markdown.extensions import Extension
from markdown.inlinepatterns import SimpleTagInlineProcessor
from pygments.formatters import HtmlFormatter
from pymdownx.slugs import slugify

logger = logging.getLogger(__name__)

HIGHLIGHT_CLASS = "highlight"
MATH_CLASS = "arithmatex"

# GFM also accepts ~single~ tildes for strikethrough; pymdownx.tilde only
# handles ~~double~~ once subscript is off.
SINGLE_TILDE_RE = r"(?<!~)(~)(?![~\s])(.+?)(?<![~\s])~(?!~)"


class SingleTildeExtension(Extension):
    def extendMarkdown(self, md):
        # Below pymdownx.tilde so ~~double~~ is claimed first
        md.inlinePatterns.register(
            SimpleTagInlineProcessor(SINGLE_TILDE_RE, "del"), "single_tilde", 60
        )


MARKDOWN_EXTENSIONS = [
    "tables",
    "pymdownx.tilde",
    SingleTildeExtension(),
    "pymdownx.magiclink",
    "pymdownx.tasklist",
    "pymdownx.arithmatex",
    "toc",
    "pymdownx.highlight",
    "pymdownx.superfences",
]

EXTENSION_CONFIGS = {
    "pymdownx.tilde": {"subscript": False},
    "pymdownx.arithmatex": {"generic": True},
    "toc": {"slugify": slugify(case="lower")},
    "pymdownx.highlight": {
        "use_pygments": True,
        "guess_lang": False,
        "css_class": HIGHLIGHT_CLASS,
        "pygments_lang_class": True,
    },
}

_MATH_DELIMITERS: Tuple[Tuple[str, str], ...] = ((r"\(", r"\)"), (r"\[", r"\]"))


def markdown_to_html(text: str) -> str:
    """Render a markdown body to HTML (blocking)."""
    # Markdown instances keep per-document state, so build one per call
    md = markdown.Markdown(
        extensions=MARKDOWN_EXTENSIONS,
        extension_configs=EXTENSION_CONFIGS,
        output_format="html",
    )
    html = md.convert(text)
    return render_math(html)


async def render_markdown(text: str) -> str:
    """
    Render a markdown body to HTML without blocking the event loop.

    Raw HTML passes through untouched. Tables, strikethrough, autolinks and
    task lists follow GitHub conventions. Headings get stable ``id``
    attributes, ``$...$`` / ``$$...$$`` become MathML and fenced code is
    tokenised by Pygments into classed spans; colours come from
    :func:`highlight_stylesheet`, not from inline styles.
    """
    return await asyncio.to_thread(markdown_to_html, text)


def render_math(html: str) -> str:
    """Replace arithmatex placeholders with MathML, leaving TeX on failure."""
    if MATH_CLASS not in html:
        return html

    soup = BeautifulSoup(html, "html.parser")
    for node in soup.select(f".{MATH_CLASS}"):
        display = "block" if node.name == "div" else "inline"
        tex = _strip_math_delimiters(node.get_text())
        try:
            mathml = latex_to_mathml(tex, display=display)
        except Exception as e:
            logger.warning(f"Failed to render math {tex!r}: {e}")
            continue
        node.clear()
        node.append(BeautifulSoup(mathml, "html.parser"))
    return str(soup)


def _strip_math_delimiters(text: str) -> str:
    text = text.strip()
    for opening, closing in _MATH_DELIMITERS:
        if text.startswith(opening) and text.endswith(closing):
            return text[len(opening) : -len(closing)].strip()
    return text


def highlight_stylesheet(light_style: str, dark_style: str) -> str:
    """
    Build Pygments CSS for both colour schemes.

    Rules are scoped under ``[data-theme="<name>"]`` so the page decides which
    one applies. Backgrounds are omitted so the page theme controls them.
    """
    rules = []
    for theme, style in (("light", light_style), ("dark", dark_style)):
        formatter = HtmlFormatter(style=style, nobackground=True)
        rules.append(
            formatter.get_style_defs(f'[data-theme="{theme}"] .{HIGHLIGHT_CLASS}')
        )
    return "\n".join(rules)
