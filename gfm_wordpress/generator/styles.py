"""Inline CSS for the converted post.

The WordPress editor strips linked stylesheets, so the highlighting theme and
a handful of layout fixes travel with the post in a ``<style>`` element.
"""

from __future__ import annotations

import logging
import typing as typ

from pygments.formatters.html import HtmlFormatter
from pygments.util import ClassNotFound

from gfm_wordpress._constants import TOC_LIST_CLASS, TOC_SUBLIST_CLASS
from gfm_wordpress.errors import ThemeLoadError

from .renderer import CODEHILITE_CLASS

if typ.TYPE_CHECKING:
    from gfm_wordpress.config import SiteSettings

logger = logging.getLogger(__name__)


def _scope_rules(css: str, scope: str) -> str:
    """Prefix every rule not already under the code block class with ``scope``.

    Pygments emits a few bare rules (``pre { line-height: 125%; }`` and the
    line-number styles) that would otherwise restyle the whole site.
    """
    prefix = f".{CODEHILITE_CLASS}"
    return "\n".join(
        line if not line or line.startswith(prefix) else f"{scope} {line}"
        for line in css.splitlines()
    )


def load_theme_css(theme: str, settings: SiteSettings) -> str:
    """Return the CSS for the named highlighting theme.

    When ``settings.theme_dir`` is set the theme is read from
    ``<theme_dir>/<theme>.css``; otherwise it is the Pygments style of that
    name, scoped to highlighted code blocks.

    Raises
    ------
    ThemeLoadError
        If the CSS file cannot be read or Pygments has no such style.
    """
    logger.debug("Load CSS theme: %s", theme)
    if settings.theme_dir is not None:
        path = settings.theme_dir / f"{theme}.css"
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            msg = f"Cannot load theme {theme!r} from {path}: {exc}"
            raise ThemeLoadError(msg) from exc

    try:
        formatter = HtmlFormatter(style=theme, cssclass=CODEHILITE_CLASS)
    except ClassNotFound as exc:
        msg = f"Unknown theme {theme!r}: {exc}"
        raise ThemeLoadError(msg) from exc
    css = formatter.get_style_defs(f".{CODEHILITE_CLASS}")
    return _scope_rules(css, settings.css_scope)


def css_bugfixes(settings: SiteSettings) -> str:
    """Return rules fixing how the post displays inside the site theme."""
    scope = settings.css_scope
    toc = f"{scope} ol.{TOC_LIST_CLASS}"
    rules = [
        # Code embedded in ordered lists is too spaced out.
        f"{scope} ol > li > p {{ margin-top: 0; }}",
        # Make subheadings stand out a bit more.
        f"{scope} h3 {{ font-size: 2.00rem; }}",
        f"{toc} > li {{ margin-top: 0; margin-bottom: 0; }}",
        f"{toc} ol.{TOC_SUBLIST_CLASS} {{ margin-top: 0; margin-bottom: 0; }}",
        f"{toc} ol.{TOC_SUBLIST_CLASS} > li {{ margin-bottom: 0; }}",
        # Keep images from floating beside headings.
        f"{scope} h2 {{ padding-top: 1em; }}",
        f"{scope} h1, {scope} h2, {scope} h3 {{ clear: both; }}",
        f"{scope} .border {{ border: 1px solid {settings.border_color}; }}",
        f"{scope} .figure {{ max-width: 66%; }}",
        f"{scope} .figure .caption {{ }}",
        # Number subsections alphabetically, e.g. "3A".
        f"{toc} ol.{TOC_SUBLIST_CLASS} {{ list-style: upper-alpha; }}",
    ]
    return "\n".join(rules)


def build_style_element(theme: str, settings: SiteSettings) -> str:
    """Return a ``<style>`` element with the theme and bugfix rules."""
    css = load_theme_css(theme, settings).rstrip("\n") + "\n" + css_bugfixes(settings)
    return f"<style>{css}</style>"


__all__ = ["build_style_element", "css_bugfixes", "load_theme_css"]
