"""Individual text transforms used by the render pipeline.

Input/output contracts:
- clamp_text: any text -> the same text cut to max_chars characters
- ansi_to_markup: raw terminal text -> HTML-escaped text with SGR styles as
  `<span style="...">`; other control sequences are dropped
- link_urls, highlight_flags, highlight_caps: markup -> markup. They only
  rewrite text nodes, never tag attributes, and skip text inside anchors
  or spans inserted by an earlier enrichment pass
"""

import re
from collections.abc import Callable
from html import escape

from rich.console import Console
from rich.segment import Segment
from rich.terminal_theme import DEFAULT_TERMINAL_THEME
from rich.text import Text

# Used only to resolve styles while rendering segments; never printed to.
_STYLE_CONSOLE = Console(color_system="truecolor", force_terminal=False, width=10_000)

_OVERSTRIKE = re.compile(r".\x08")
_CONTROL = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1a\x1c-\x1f\x7f]")

_TAG = re.compile(r"(<[^>]*>)")
_ENRICHMENT_CLASSES = ('class="link"', 'class="flag"', 'class="caps"')

_URL_BODY = r"https?://(?:&amp;|[^\s<>\"'\[\]()&])+"
_BRACKETED_URL = re.compile(
    rf"(?P<open>&lt;|\[|\()(?P<url>{_URL_BODY})(?P<close>&gt;|\]|\))"
)
_MATCHING_CLOSE = {"&lt;": "&gt;", "[": "]", "(": ")"}
_FLAG = re.compile(r"(?<![^\s\[(|,])(--?[A-Za-z0-9?][\w-]*)")
_CAPS = re.compile(r"\b([A-Z][A-Z0-9_]+)\b")


def clamp_text(text: str, max_chars: int) -> str:
    """Cut text to at most max_chars characters."""
    if len(text) <= max_chars:
        return text
    return text[:max_chars]


def ansi_to_markup(text: str) -> str:
    """Convert terminal escape sequences into equivalent HTML markup.

    Example:
        >>> ansi_to_markup("\\x1b[1mbold\\x1b[0m <tag>")
        '<span style="font-weight: bold">bold</span> &lt;tag&gt;'
    """
    rich_text = Text.from_ansi(_strip_controls(text))
    parts: list[str] = []
    for segment in Segment.simplify(rich_text.render(_STYLE_CONSOLE)):
        chunk = escape(segment.text)
        style = segment.style
        if style:
            rule = style.get_html_style(DEFAULT_TERMINAL_THEME)
            if style.link:
                chunk = f'<a href="{escape(style.link)}">{chunk}</a>'
            if rule:
                chunk = f'<span style="{rule}">{chunk}</span>'
        parts.append(chunk)
    return "".join(parts)


def map_text_nodes(markup: str, fn: Callable[[str], str]) -> str:
    """Apply fn to every text node of markup that is not already enriched.

    Tags pass through untouched. Text inside `<a>` elements or inside spans
    carrying an enrichment class is left alone so later passes cannot
    re-match what earlier passes produced.
    """
    out: list[str] = []
    stack: list[bool] = []  # True = element whose text must not be rewritten
    for piece in _TAG.split(markup):
        if not piece:
            continue
        if piece.startswith("<") and piece.endswith(">"):
            if piece.startswith("</"):
                if stack:
                    stack.pop()
            elif not piece.endswith("/>"):
                stack.append(
                    piece.startswith("<a ")
                    or piece == "<a>"
                    or any(cls in piece for cls in _ENRICHMENT_CLASSES)
                )
            out.append(piece)
        elif any(stack):
            out.append(piece)
        else:
            out.append(fn(piece))
    return "".join(out)


def link_urls(markup: str) -> str:
    """Turn `<url>`, `[url]` and `(url)` into hyperlinks, keeping the brackets."""

    def replace(match: re.Match[str]) -> str:
        opening, url, closing = match.group("open"), match.group("url"), match.group("close")
        if _MATCHING_CLOSE[opening] != closing:
            return match.group(0)
        return f'{opening}<a href="{url}" class="link">{url}</a>{closing}'

    return map_text_nodes(markup, lambda text: _BRACKETED_URL.sub(replace, text))


def highlight_flags(markup: str) -> str:
    """Wrap option-like tokens (`-v`, `--help`, `-?`) in a flag span."""
    return map_text_nodes(
        markup, lambda text: _FLAG.sub(r'<span class="flag">\1</span>', text)
    )


def highlight_caps(markup: str) -> str:
    """Wrap all-uppercase words (`NAME`, `SYNOPSIS`) in a caps span."""
    return map_text_nodes(
        markup, lambda text: _CAPS.sub(r'<span class="caps">\1</span>', text)
    )


def strip_ansi(text: str) -> str:
    """Plain text with terminal escape sequences and control bytes removed."""
    return Text.from_ansi(_strip_controls(text)).plain


def _strip_controls(text: str) -> str:
    # Backspace overstrikes (man page bold/underline) and stray C0 bytes; ESC is kept
    text = _OVERSTRIKE.sub("", text).replace("\r\n", "\n").replace("\r", "")
    return _CONTROL.sub("", text)
