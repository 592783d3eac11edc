"""Utilities for rendering Markdown posts into WordPress-ready HTML."""

from .assembler import DocumentAssembler, convert, insert_toc
from .extension import WordPressExtension
from .hooks import DefaultRenderer, MediaAwareRenderer, RenderContext
from .renderer import HtmlContentRenderer

__all__ = [
    "DefaultRenderer",
    "DocumentAssembler",
    "HtmlContentRenderer",
    "MediaAwareRenderer",
    "RenderContext",
    "WordPressExtension",
    "convert",
    "insert_toc",
]
