"""High-level orchestration for converting one Markdown post.

This module exposes :class:`DocumentAssembler` and the :func:`convert`
shortcut. A conversion renders the Markdown through the WordPress hooks,
loads the highlighting theme, splices the table of contents in front of the
first section, prepends the inline styles, and optionally minifies the
result.

Example
-------
>>> from gfm_wordpress import ConversionRequest, convert
>>> html = convert(
...     ConversionRequest(
...         source_text="# Title\\n\\n## Intro\\n\\nHello\\n",
...         media_location="47/2016/01",
...     )
... )
>>> "Table of Contents" in html
True
"""

from __future__ import annotations

import logging
import re

from gfm_wordpress._constants import FIRST_SECTION_CLASS
from gfm_wordpress.config import (
    ConversionRequest,
    SiteSettings,
    normalize_media_location,
)
from gfm_wordpress.errors import ConfigError, ParseError

from .extension import WordPressExtension
from .hooks import RenderContext
from .minify import minify
from .renderer import HtmlContentRenderer
from .styles import build_style_element

logger = logging.getLogger(__name__)

FIRST_SECTION_PATTERN = re.compile(rf'<h2 class="{FIRST_SECTION_CLASS}">')


def insert_toc(html: str, toc: str) -> str:
    """Insert ``toc`` before the first section heading of ``html``.

    Documents without a section heading are returned unchanged; the TOC is
    dropped rather than placed somewhere arbitrary.
    """
    match = FIRST_SECTION_PATTERN.search(html)
    if match is None:
        logger.debug("No first section heading; dropping the table of contents")
        return html
    return html[: match.start()] + toc + html[match.start() :]


class DocumentAssembler:
    """Convert a :class:`ConversionRequest` into paste-ready HTML."""

    def __init__(
        self, request: ConversionRequest, settings: SiteSettings | None = None
    ) -> None:
        """Validate the request and resolve its settings.

        Raises
        ------
        ConfigError
            If the source text is missing or the media location is missing
            or cannot be parsed.
        """
        if not request.source_text:
            msg = "A conversion needs Markdown source text."
            raise ConfigError(msg)
        media_location = normalize_media_location(request.media_location)
        if not media_location:
            msg = f"Invalid or missing media location: {request.media_location!r}."
            raise ConfigError(msg)

        self.request = request
        self.settings = settings or SiteSettings()
        self.media_location = media_location
        self.theme = request.theme or self.settings.theme

    def run(self) -> str:
        """Run the conversion pipeline and return the final HTML.

        Returns
        -------
        str
            ``<style>`` element followed by the post body, with the table of
            contents inserted before the first section.

        Raises
        ------
        ParseError
            If Python-Markdown fails on the source.
        ThemeLoadError
            If the requested theme does not exist.
        MinifyError
            If minification was requested and failed.
        """
        logger.debug(
            "Build HTML (%s) from %s source bytes; media=%r",
            self.theme,
            len(self.request.source_text),
            self.media_location,
        )
        context = RenderContext.create(
            self.settings, self.media_location, self.request.base_directory
        )
        styles = build_style_element(self.theme, self.settings)
        body = self._render_body(context)

        logger.debug("Build TOC and insert into the document")
        html = styles + insert_toc(body, context.toc.render_toc())
        if self.request.minify:
            html = minify(html)
        return html

    def _render_body(self, context: RenderContext) -> str:
        # Stylesheet themes are not Pygments styles; highlight with the default.
        pygments_style = self.theme if self.settings.theme_dir is None else "default"
        renderer = HtmlContentRenderer(
            pygments_style, wordpress_extension=WordPressExtension(context)
        )
        try:
            return renderer.markdown(self.request.source_text)
        except Exception as exc:  # noqa: BLE001 - surfaced as ParseError
            msg = f"Cannot parse Markdown source: {exc}"
            raise ParseError(msg) from exc


def convert(request: ConversionRequest, settings: SiteSettings | None = None) -> str:
    """Convert a Markdown post into self-contained WordPress HTML.

    Parameters
    ----------
    request : ConversionRequest
        Source text, media location, and per-document options.
    settings : SiteSettings, optional
        Target site settings; defaults to :class:`SiteSettings` defaults.

    Returns
    -------
    str
        The HTML to paste into the WordPress editor.

    Raises
    ------
    ConversionError
        Any fatal failure: :class:`~gfm_wordpress.errors.ConfigError`,
        :class:`~gfm_wordpress.errors.ParseError`,
        :class:`~gfm_wordpress.errors.ThemeLoadError`, or
        :class:`~gfm_wordpress.errors.MinifyError`.
    """
    return DocumentAssembler(request, settings).run()


__all__ = ["DocumentAssembler", "convert", "insert_toc"]
