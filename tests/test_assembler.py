"""End-to-end tests for :func:`gfm_wordpress.convert`.

These tests run the whole pipeline: Python-Markdown with the WordPress hooks,
theme loading, TOC insertion, and minification. Assertions parse the output
with BeautifulSoup so they do not depend on attribute order or whitespace.
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path
from types import SimpleNamespace

import pytest
from bs4 import BeautifulSoup

from gfm_wordpress import ConversionRequest, SiteSettings, convert
from gfm_wordpress.errors import ConfigError, MinifyError, ParseError, ThemeLoadError
from gfm_wordpress.generator import HtmlContentRenderer, insert_toc
from gfm_wordpress.generator import minify as minify_module

MEDIA_ID = "47/2016/01"
SAMPLE = "# Title\n\n## Section A\n\nHello\n\n### Sub A1\n"

WriteImage = typ.Callable[[str, int, int], Path]


def _convert(source: str, **kwargs: typ.Any) -> str:
    settings = kwargs.pop("settings", None)
    kwargs.setdefault("media_location", MEDIA_ID)
    return convert(ConversionRequest(source_text=source, **kwargs), settings)


def _soup(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def test_sample_document_structure() -> None:
    html = _convert(SAMPLE)
    soup = _soup(html)

    assert all("Title" not in h1.get_text() for h1 in soup.find_all("h1"))
    entries = soup.select("ol.table-of-contents > li")
    assert len(entries) == 1
    assert entries[0].find("a").get_text() == "Section A"
    nested = entries[0].select("ol.subheading > li")
    assert [item.get_text() for item in nested] == ["Sub A1"]
    anchors = soup.find_all("a", attrs={"name": True})
    assert [anchor["name"] for anchor in anchors] == ["section-a", "sub-a1"]


def test_output_starts_with_style_and_places_toc_before_first_section() -> None:
    html = _convert(SAMPLE)
    assert html.startswith("<style>")
    assert ".pn-copy ol.table-of-contents ol.subheading" in html
    assert ".codehilite" in html
    toc_at = html.index('<ol class="table-of-contents">')
    assert toc_at < html.index('<h2 class="first-section">')
    assert html.count("Table of Contents") == 1


def test_second_h1_is_rendered_but_not_listed() -> None:
    soup = _soup(_convert("# Title\n\n## Intro\n\n# Appendix\n"))
    assert [h1.get_text() for h1 in soup.find_all("h1")] == ["Appendix"]
    toc_links = soup.select("ol.table-of-contents a")
    assert [link.get_text() for link in toc_links] == ["Intro"]


def test_document_without_sections_drops_toc() -> None:
    soup = _soup(_convert("# Title\n\nJust a paragraph.\n"))
    assert soup.select("ol.table-of-contents") == []
    assert soup.find("h2", string="Table of Contents") is None
    assert soup.find("p").get_text() == "Just a paragraph."


def test_duplicate_sections_link_to_unique_anchors() -> None:
    soup = _soup(_convert("## Setup\n\none\n\n## Setup\n\ntwo\n\n## Setup\n"))
    hrefs = [link["href"] for link in soup.select("ol.table-of-contents a")]
    assert hrefs == ["#setup", "#setup-1", "#setup-2"]
    names = [anchor["name"] for anchor in soup.find_all("a", attrs={"name": True})]
    assert names == ["setup", "setup-1", "setup-2"]


def test_orphan_subheading_is_not_fatal(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level(logging.WARNING, logger="gfm_wordpress"):
        soup = _soup(_convert("### Early\n\n## Later\n\n### Child\n"))
    entries = soup.select("ol.table-of-contents > li")
    assert [entry.find("a").get_text() for entry in entries] == ["Later"]
    assert [a.get_text() for a in entries[0].select("ol.subheading a")] == ["Child"]
    assert soup.find("h3", string="Early") is not None
    assert "Early" in caplog.text


def test_toc_text_is_escaped() -> None:
    soup = _soup(_convert("## Q & A\n"))
    link = soup.select_one("ol.table-of-contents a")
    assert link["href"] == "#q-a"
    assert link.get_text() == "Q & A"


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        ("## Use `<br>` tags\n", "Use <br> tags"),
        ("## Fish &amp; Chips &copy;\n", "Fish & Chips ©"),
        ('## Don\'t "panic"\n', "Don’t “panic”"),
    ],
)
def test_toc_text_matches_rendered_heading(source: str, expected: str) -> None:
    soup = _soup(_convert(source))
    link = soup.select_one("ol.table-of-contents a")
    assert link.get_text() == expected
    assert soup.find("h2", class_="first-section").get_text() == expected


def test_heading_text_conversion_is_warning_free(recwarn: pytest.WarningsRecorder) -> None:
    _convert("## Use `code` &amp; more\n")
    ours = [w for w in recwarn if "gfm_wordpress" in w.filename]
    assert not [w for w in ours if issubclass(w.category, DeprecationWarning)]


def test_pygments_rules_stay_inside_post_scope() -> None:
    html = _convert(SAMPLE)
    css = html[len("<style>") : html.index("</style>")]
    rules = [line for line in css.splitlines() if line]
    assert any(rule.startswith(".pn-copy pre") for rule in rules)
    assert all(rule.startswith((".pn-copy", ".codehilite")) for rule in rules)


def test_media_image_with_retina_figure(write_image: WriteImage, tmp_path: Path) -> None:
    write_image("media/photo@2x.png", 800, 600)
    source = '## Shots\n\n![A photo](media/photo@2x.png "Photo; border; figure=left")\n'
    soup = _soup(_convert(source, base_directory=tmp_path))

    figure = soup.select_one("div.figure")
    assert "alignleft" in figure["class"]
    img = figure.find("img")
    assert img["src"] == "/wp-content/uploads/sites/47/2016/01/photo@2x.png"
    assert img["width"] == "400"
    assert img["height"] == "300"
    assert img["title"] == "Photo"
    assert set(img["class"]) == {"alignnone", "size-full", "retina-2x", "border"}
    assert figure.select_one("span.caption").get_text() == "A photo"


def test_media_location_from_example_url(tmp_path: Path) -> None:
    example = (
        "http://developer.ibm.com/clouddataservices/wp-content/uploads/"
        "sites/47/2016/01/FoodTracker.png"
    )
    soup = _soup(
        _convert("![Shot](media/shot.png)\n", media_location=example, base_directory=tmp_path)
    )
    img = soup.find("img")
    assert "/sites/47/2016/01/shot.png" in img["src"]
    assert not img.has_attr("width")


def test_absolute_image_urls_from_settings(tmp_path: Path) -> None:
    settings = SiteSettings(site_origin="https://blog.example.com")
    settings.image_url_mode = settings.link_url_mode
    soup = _soup(
        _convert("![Shot](media/shot.png)\n", base_directory=tmp_path, settings=settings)
    )
    assert soup.find("img")["src"] == (
        "https://blog.example.com/wp-content/uploads/sites/47/2016/01/shot.png"
    )


def test_fenced_code_is_highlighted() -> None:
    html = _convert("## Code\n\n```python\nprint('hi')\n```\n", theme="monokai")
    soup = _soup(html)
    assert soup.select_one("div.codehilite") is not None
    assert "print" in soup.select_one("div.codehilite").get_text()


def test_unknown_theme_fails() -> None:
    with pytest.raises(ThemeLoadError):
        _convert(SAMPLE, theme="no-such-theme")


def test_theme_directory_is_read(tmp_path: Path) -> None:
    (tmp_path / "paper.css").write_text(".hljs { color: #123456; }\n", encoding="utf-8")
    settings = SiteSettings(theme_dir=tmp_path)
    html = _convert(SAMPLE, theme="paper", settings=settings)
    assert html.startswith("<style>.hljs { color: #123456; }\n")


def test_missing_theme_file_fails(tmp_path: Path) -> None:
    settings = SiteSettings(theme_dir=tmp_path)
    with pytest.raises(ThemeLoadError):
        _convert(SAMPLE, theme="missing", settings=settings)


@pytest.mark.parametrize(
    ("source", "media"),
    [("", MEDIA_ID), (SAMPLE, ""), (SAMPLE, "https://example.com/no/media/here.png")],
)
def test_invalid_requests_are_rejected(source: str, media: str) -> None:
    with pytest.raises(ConfigError):
        _convert(source, media_location=media)


def test_parser_failure_is_reported(monkeypatch: pytest.MonkeyPatch) -> None:
    def _boom(self: HtmlContentRenderer, text: str) -> str:
        raise ValueError("bad input")

    monkeypatch.setattr(HtmlContentRenderer, "markdown", _boom)
    with pytest.raises(ParseError, match="bad input"):
        _convert(SAMPLE)


def test_minified_output_is_smaller() -> None:
    plain = _convert(SAMPLE)
    minified = _convert(SAMPLE, minify=True)
    assert len(minified) < len(plain)
    assert "Sub A1" in minified


def test_minifier_failure_is_fatal(monkeypatch: pytest.MonkeyPatch) -> None:
    def _boom(html: str, **_options: bool) -> str:
        raise RuntimeError("minifier exploded")

    monkeypatch.setattr(minify_module, "minify_html", SimpleNamespace(minify=_boom))
    with pytest.raises(MinifyError, match="minifier exploded"):
        _convert(SAMPLE, minify=True)


def test_insert_toc_only_before_first_marker() -> None:
    body = '<p>intro</p><h2 class="first-section">A</h2><h2 class="first-section">B</h2>'
    assert insert_toc(body, "<TOC>") == (
        '<p>intro</p><TOC><h2 class="first-section">A</h2>'
        '<h2 class="first-section">B</h2>'
    )
    assert insert_toc("<p>none</p>", "<TOC>") == "<p>none</p>"
