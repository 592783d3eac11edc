"""Minify the assembled post with ``minify-html``."""

from __future__ import annotations

import logging

import minify_html

from gfm_wordpress.errors import MinifyError

logger = logging.getLogger(__name__)

MINIFY_OPTIONS: dict[str, bool] = {
    "minify_css": True,
    "minify_js": True,
    "keep_closing_tags": True,
    "keep_comments": False,
}


def minify(html: str) -> str:
    """Return ``html`` minified with the fixed option set.

    Raises
    ------
    MinifyError
        If the minifier fails. There is no fallback to the unminified HTML.
    """
    before = len(html)
    try:
        result = minify_html.minify(html, **MINIFY_OPTIONS)
    except Exception as exc:  # noqa: BLE001 - minify_html raises untyped errors
        msg = f"Cannot minify HTML: {exc}"
        raise MinifyError(msg) from exc
    if before:
        logger.debug(
            "Minify HTML %s -> %s bytes: %.2f%%",
            before,
            len(result),
            100 * (before - len(result)) / before,
        )
    return result


__all__ = ["MINIFY_OPTIONS", "minify"]
