"""Unit tests for the image title directive parser."""

from __future__ import annotations

import pytest

from gfm_wordpress.directives import ImageDirectives, parse_directives


def test_caption_border_and_left_figure() -> None:
    directives = parse_directives("Caption; border; figure=left")
    assert directives == ImageDirectives(
        caption="Caption", border=True, border_color=None, figure="left"
    )


def test_border_colour_override() -> None:
    directives = parse_directives("Diagram; border = #ff0000")
    assert directives.border is True
    assert directives.border_color == "#ff0000"


@pytest.mark.parametrize("value", ["figure", "figure=right", "figure=center"])
def test_figure_defaults_to_right(value: str) -> None:
    assert parse_directives(f"; {value}").figure == "right"


def test_empty_caption_segment_is_kept() -> None:
    directives = parse_directives(" ; border")
    assert directives.caption == ""
    assert directives.border is True


def test_missing_title_yields_defaults() -> None:
    assert parse_directives(None) == ImageDirectives()
    assert parse_directives("") == ImageDirectives()


def test_plain_title_has_no_directives() -> None:
    assert parse_directives("Just a title") == ImageDirectives(caption="Just a title")


def test_malformed_and_unknown_segments_are_ignored() -> None:
    directives = parse_directives("Shot;;width=20; = ;border=;figure=left=x")
    assert directives.caption == "Shot"
    assert directives.border is True
    assert directives.border_color is None
    assert directives.figure == "right"
