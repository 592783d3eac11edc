"""Typed dataclasses describing conversion requests and site settings."""

from __future__ import annotations

import dataclasses as dc
import enum
from pathlib import Path

from gfm_wordpress._constants import (
    DEFAULT_BORDER_COLOR,
    DEFAULT_CSS_SCOPE,
    DEFAULT_SITE_NUMBER,
    DEFAULT_SITE_ORIGIN,
    DEFAULT_THEME,
    DEFAULT_UPLOADS_PATH,
)


class UrlMode(enum.Enum):
    """How rewritten media URLs are built.

    ``RELATIVE`` produces a site-relative upload path so WordPress (and its
    Photon image resizer) can rewrite it on insert. ``ABSOLUTE`` prefixes the
    path with the configured site origin.
    """

    RELATIVE = "relative"
    ABSOLUTE = "absolute"


@dc.dataclass(slots=True)
class SiteSettings:
    """Deployment settings for the target WordPress site."""

    site_origin: str = DEFAULT_SITE_ORIGIN
    site_number: str = DEFAULT_SITE_NUMBER
    uploads_path: str = DEFAULT_UPLOADS_PATH
    image_url_mode: UrlMode = UrlMode.RELATIVE
    link_url_mode: UrlMode = UrlMode.ABSOLUTE
    theme: str = DEFAULT_THEME
    theme_dir: Path | None = None
    css_scope: str = DEFAULT_CSS_SCOPE
    border_color: str = DEFAULT_BORDER_COLOR


@dc.dataclass(slots=True, frozen=True)
class ConversionRequest:
    """Inputs for converting a single Markdown document.

    Attributes
    ----------
    source_text : str
        Markdown source of the post.
    media_location : str
        WordPress media id such as ``"47/2016/01"`` or an example upload URL
        containing one.
    base_directory : Path
        Directory that ``media/`` references are relative to.
    theme : str or None
        Highlighting theme; ``None`` uses the site settings default.
    minify : bool
        Whether to minify the assembled HTML.
    """

    source_text: str
    media_location: str
    base_directory: Path = Path(".")
    theme: str | None = None
    minify: bool = False


__all__ = ["ConversionRequest", "SiteSettings", "UrlMode"]
