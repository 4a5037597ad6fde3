"""Ordered text pipeline turning raw command output into display markup.

Composition order is part of the contract:

1. clamp          bound the rendering cost before anything else runs
2. ansi_to_markup escape HTML and convert terminal styles
3. link_urls      (help only)
4. highlight_flags (help only)
5. highlight_caps  (help only)

Each enrichment pass sees the markup produced by the previous one.
"""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from functools import partial

from gucli.core.render.transforms import (
    ansi_to_markup,
    clamp_text,
    highlight_caps,
    highlight_flags,
    link_urls,
)


@dataclass(frozen=True)
class TextTransform:
    """A named, independently testable str -> str step."""

    name: str
    apply: Callable[[str], str]


class TextPipeline:
    """Applies transforms strictly in sequence."""

    def __init__(self, transforms: Sequence[TextTransform]) -> None:
        self._transforms = tuple(transforms)

    @property
    def names(self) -> list[str]:
        return [t.name for t in self._transforms]

    def run(self, text: str) -> str:
        for transform in self._transforms:
            text = transform.apply(text)
        return text


def output_pipeline(max_chars: int) -> TextPipeline:
    """Pipeline for ordinary command output."""
    return TextPipeline(
        [
            TextTransform("clamp", partial(clamp_text, max_chars=max_chars)),
            TextTransform("ansi_to_markup", ansi_to_markup),
        ]
    )


def help_pipeline(max_chars: int) -> TextPipeline:
    """Pipeline for man pages and --help output."""
    return TextPipeline(
        [
            TextTransform("clamp", partial(clamp_text, max_chars=max_chars)),
            TextTransform("ansi_to_markup", ansi_to_markup),
            TextTransform("link_urls", link_urls),
            TextTransform("highlight_flags", highlight_flags),
            TextTransform("highlight_caps", highlight_caps),
        ]
    )


def render_output(text: str, max_chars: int) -> str:
    return output_pipeline(max_chars).run(text)


def render_help(text: str, max_chars: int) -> str:
    return help_pipeline(max_chars).run(text)
