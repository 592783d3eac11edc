r"""Parse the directive side channel carried in Markdown image titles.

An image title such as ``"Build output; border=#ccc; figure=left"`` holds a
caption followed by ``;``-separated directives. The first segment is always
the caption (it may be empty); every later segment is either a bare flag
(``border``) or a ``key = value`` pair.

Example
-------
>>> from gfm_wordpress.directives import parse_directives
>>> directives = parse_directives("Caption; border; figure=left")
>>> directives.caption, directives.border, directives.figure
('Caption', True, 'left')
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

FigureSide = typ.Literal["left", "right"]

DIRECTIVE_SEPARATOR = ";"
ASSIGNMENT_PATTERN = re.compile(r"\s*=\s*")


@dc.dataclass(slots=True, frozen=True)
class ImageDirectives:
    """Options parsed from an image title.

    Attributes
    ----------
    caption : str
        Title text with the directives removed.
    border : bool
        Whether the image carries the ``border`` class.
    border_color : str or None
        Colour override supplied as ``border=<colour>``.
    figure : {"left", "right"} or None
        Float side when the image should be wrapped in a captioned figure.
    """

    caption: str = ""
    border: bool = False
    border_color: str | None = None
    figure: FigureSide | None = None


def _split_directive(segment: str) -> tuple[str, str | bool]:
    """Split ``key = value`` into its parts; a bare key maps to ``True``."""
    parts = ASSIGNMENT_PATTERN.split(segment, maxsplit=1)
    if len(parts) == 1:
        return parts[0], True
    return parts[0], parts[1]


def parse_directives(title: str | None) -> ImageDirectives:
    """Parse a raw image title into an :class:`ImageDirectives`.

    Parameters
    ----------
    title : str or None
        The title attribute of a Markdown image, or ``None`` when absent.

    Returns
    -------
    ImageDirectives
        Parsed caption and directives. Unknown keys are ignored and malformed
        segments never raise.
    """
    segments = [segment.strip() for segment in (title or "").split(DIRECTIVE_SEPARATOR)]
    caption = segments.pop(0)

    border = False
    border_color: str | None = None
    figure: FigureSide | None = None
    for segment in segments:
        key, value = _split_directive(segment)
        match key:
            case "border":
                border = True
                if isinstance(value, str) and value:
                    border_color = value
            case "figure":
                figure = "left" if value == "left" else "right"
            case _:
                continue

    return ImageDirectives(
        caption=caption, border=border, border_color=border_color, figure=figure
    )


__all__ = ["FigureSide", "ImageDirectives", "parse_directives"]
