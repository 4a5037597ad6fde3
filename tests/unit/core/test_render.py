"""Tests for output transforms and the render pipelines."""

from gucli.core.render import help_pipeline, output_pipeline, render_help, render_output, strip_ansi
from gucli.core.render.transforms import (
    ansi_to_markup,
    clamp_text,
    highlight_caps,
    highlight_flags,
    link_urls,
)


def test_clamp_text() -> None:
    assert clamp_text("abcdef", 3) == "abc"
    assert clamp_text("ab", 3) == "ab"


def test_markup_escapes_html() -> None:
    assert ansi_to_markup("<b>a & b</b>") == "&lt;b&gt;a &amp; b&lt;/b&gt;"


def test_markup_converts_sgr_colour() -> None:
    markup = ansi_to_markup("\x1b[31merror\x1b[0m done")

    assert "color: #800000" in markup
    assert "error</span>" in markup
    assert markup.endswith(" done")
    assert "\x1b" not in markup


def test_markup_converts_bold() -> None:
    assert "font-weight: bold" in ansi_to_markup("\x1b[1mbold\x1b[0m")


def test_markup_drops_backspace_overstrike() -> None:
    assert ansi_to_markup("N\x08NA\x08AM\x08ME\x08E") == "NAME"


def test_strip_ansi_returns_plain_text() -> None:
    assert strip_ansi("\x1b[1;32mok\x1b[0m <done>") == "ok <done>"


def test_link_urls_in_matching_brackets() -> None:
    markup = link_urls("see &lt;https://example.com/a?b=1&amp;c=2&gt; and (http://x.org)")

    assert '&lt;<a href="https://example.com/a?b=1&amp;c=2" class="link">' in markup
    assert '(<a href="http://x.org" class="link">http://x.org</a>)' in markup


def test_link_urls_ignores_mismatched_or_bare_urls() -> None:
    assert link_urls("(https://x.org]") == "(https://x.org]"
    assert link_urls("visit https://x.org now") == "visit https://x.org now"


def test_highlight_flags() -> None:
    markup = highlight_flags("use -v or --help, not well-known")

    assert '<span class="flag">-v</span>' in markup
    assert '<span class="flag">--help</span>' in markup
    assert "well-known" in markup


def test_highlight_caps() -> None:
    markup = highlight_caps("NAME ls A")

    assert markup == '<span class="caps">NAME</span> ls A'


def test_enrichment_never_touches_tag_attributes() -> None:
    markup = highlight_caps('<span style="color: #FF0000">RED</span>')

    assert markup == '<span style="color: #FF0000"><span class="caps">RED</span></span>'


def test_pipelines_run_in_documented_order() -> None:
    assert output_pipeline(10).names == ["clamp", "ansi_to_markup"]
    assert help_pipeline(10).names == [
        "clamp",
        "ansi_to_markup",
        "link_urls",
        "highlight_flags",
        "highlight_caps",
    ]


def test_render_output_clamps_before_escaping() -> None:
    assert render_output("<" * 10, 3) == "&lt;" * 3


def test_render_help_does_not_reenrich_links() -> None:
    markup = render_help("SEE <https://EXAMPLE.com/--x> --help", 1000)

    assert '<a href="https://EXAMPLE.com/--x" class="link">https://EXAMPLE.com/--x</a>' in markup
    assert '<span class="caps">SEE</span>' in markup
    assert '<span class="flag">--help</span>' in markup
    assert 'class="caps">EXAMPLE' not in markup
