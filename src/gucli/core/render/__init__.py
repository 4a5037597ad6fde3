"""Output post-processing: clamping, ANSI conversion and help enrichment."""

from gucli.core.render.pipeline import (
    TextPipeline,
    TextTransform,
    help_pipeline,
    output_pipeline,
    render_help,
    render_output,
)
from gucli.core.render.transforms import strip_ansi

__all__ = [
    "TextPipeline",
    "TextTransform",
    "help_pipeline",
    "output_pipeline",
    "render_help",
    "render_output",
    "strip_ansi",
]
