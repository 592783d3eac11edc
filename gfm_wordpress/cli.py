"""Cyclopts CLI entrypoint for converting Markdown posts to WordPress HTML.

The ``gfm-wordpress`` console script reads a Markdown file, converts it with
:func:`gfm_wordpress.convert`, and prints the HTML on stdout so it can be
piped to the clipboard and pasted into the WordPress editor.

The ``--media`` option tells the converter where the post's uploads live.
Pass either the media id (``47/2016/01``) or paste an example upload URL such
as ``http://developer.ibm.com/clouddataservices/wp-content/uploads/sites/47/2016/01/FoodTracker.png``.
Without it the location is guessed from the current UTC month and a warning
is printed on stderr.

Examples
--------
>>> from gfm_wordpress.cli import app
>>> app(["README.md", "--media", "47/2016/01"])  # doctest: +SKIP
"""

from __future__ import annotations

import dataclasses as dc
import logging
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import (
    ConversionRequest,
    SiteSettings,
    guess_media_location,
    load_site_settings,
    normalize_media_location,
)
from .errors import ConversionError
from .generator import convert

app = App(
    name="gfm-wordpress",
    help="Convert a GitHub-flavored Markdown post into WordPress-ready HTML.",
    config=cyclopts.config.Env("GFM_WORDPRESS_", command=False),  # type: ignore[unknown-argument]
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _fail(error: Exception) -> typ.NoReturn:
    """Report ``error`` with the usage text and exit non-zero."""
    print(error, file=sys.stderr)
    app.help_print()
    raise SystemExit(1)


def _load_settings(config: Path | None, theme_dir: Path | None) -> SiteSettings:
    settings = load_site_settings(config) if config else SiteSettings()
    if theme_dir is not None:
        settings = dc.replace(settings, theme_dir=theme_dir)
    return settings


@app.default
def convert_file(
    markdown_file: typ.Annotated[
        Path, Parameter(help="Path to the Markdown post, e.g. README.md")
    ],
    *,
    media: typ.Annotated[
        str | None,
        Parameter(help="Blog media location: a media id or an example upload URL"),
    ] = None,
    theme: typ.Annotated[
        str | None,
        Parameter(help="Highlighting theme, e.g. xcode, monokai, zenburn"),
    ] = None,
    theme_dir: typ.Annotated[
        Path | None, Parameter(help="Directory of <theme>.css stylesheets")
    ] = None,
    config: typ.Annotated[
        Path | None, Parameter(help="Path to a YAML site settings file")
    ] = None,
    minify: typ.Annotated[bool, Parameter(help="Minify the generated HTML")] = True,
    verbose: typ.Annotated[bool, Parameter(help="Log debug output to stderr")] = False,
) -> None:
    """Convert ``markdown_file`` and print the HTML on stdout.

    Parameters
    ----------
    markdown_file : Path
        Markdown source; ``media/`` references are resolved next to it.
    media : str or None, optional
        Media id or example upload URL. When omitted the location is guessed
        from the current UTC month and a warning goes to stderr.
    theme : str or None, optional
        Highlighting theme; defaults to the site settings theme.
    theme_dir : Path or None, optional
        Read themes from ``<theme_dir>/<theme>.css`` instead of Pygments.
    config : Path or None, optional
        YAML site settings file.
    minify : bool, optional
        Minify the output (default ``True``).
    verbose : bool, optional
        Enable debug logging.

    Returns
    -------
    None
        Writes the HTML to stdout. Failures print the error and the usage
        text and exit with status 1.
    """
    _configure_logging(verbose)
    try:
        settings = _load_settings(config, theme_dir)
        source = markdown_file.read_text(encoding="utf-8")
    except (OSError, ConversionError) as exc:
        _fail(exc)

    warning = None
    media_location = normalize_media_location(media)
    if not media_location:
        media_location = guess_media_location(settings)
        warning = (
            "WARNING: You probably want to provide a media location. "
            "Run with --help for details.\n"
            f"WARNING: Guessed media location: {media_location}"
        )

    request = ConversionRequest(
        source_text=source,
        media_location=media_location,
        base_directory=markdown_file.parent,
        theme=theme,
        minify=minify,
    )
    try:
        html = convert(request, settings)
    except ConversionError as exc:
        _fail(exc)

    print(html)
    if warning:
        print(f"\n{warning}", file=sys.stderr)


def main() -> None:
    """Invoke the Cyclopts application behind the ``gfm-wordpress`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
