"""Convert GitHub-flavored Markdown posts into paste-ready WordPress HTML.

This package exposes the :func:`convert` library entry point together with
its request and settings types, and the ``gfm-wordpress`` console command.

Exports
-------
- ``convert``: Convert a :class:`ConversionRequest` into HTML.
- ``ConversionRequest`` / ``SiteSettings``: Conversion inputs.
- ``ConversionError``: Base class of every fatal conversion failure.
- ``app`` / ``main``: Cyclopts application and its entry point.

Examples
--------
>>> from gfm_wordpress import ConversionRequest, convert
>>> html = convert(ConversionRequest("## Hello\\n", "47/2016/01"))
>>> html.startswith("<style>")
True
"""

from __future__ import annotations

from .cli import app, main
from .config import ConversionRequest, SiteSettings, UrlMode
from .errors import ConversionError
from .generator import convert

__all__ = [
    "ConversionError",
    "ConversionRequest",
    "SiteSettings",
    "UrlMode",
    "app",
    "convert",
    "main",
]
