r"""Heading hook that builds the post's table of contents.

WordPress manages the post title separately, so the first ``<h1>`` of the
Markdown document is dropped. Second- and third-level headings receive named
anchors and are collected into a two-level tree that :meth:`render_toc`
turns into nested ordered lists. The first ``<h2>`` is tagged with the
``first-section`` class so the assembler knows where the TOC belongs.

Example
-------
>>> import xml.etree.ElementTree as etree
>>> from gfm_wordpress.toc import HeadingTocBuilder
>>> builder = HeadingTocBuilder()
>>> heading = etree.Element("h2")
>>> heading.text = "Install"
>>> [el.tag for el in builder.render_heading(heading, "Install")]
['a', 'h2']
>>> builder.headings[0].anchor_slug
'install'
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
import xml.etree.ElementTree as etree
from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from gfm_wordpress._constants import (
    FIRST_SECTION_CLASS,
    HEADER_LINK_CLASS,
    TOC_LIST_CLASS,
    TOC_SUBLIST_CLASS,
    TOC_TITLE,
)
from gfm_wordpress.slugs import SlugRegistry, slugify

if typ.TYPE_CHECKING:
    from jinja2 import Template

logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


@dc.dataclass(slots=True)
class HeadingNode:
    """A heading tracked for the table of contents.

    Attributes
    ----------
    text : str
        Display text of the heading.
    anchor_slug : str
        Name of the anchor emitted before the heading.
    children : list[HeadingNode]
        Third-level headings under a second-level one; always empty for the
        children themselves.
    """

    text: str
    anchor_slug: str
    children: list[HeadingNode] = dc.field(default_factory=list)


@lru_cache(maxsize=1)
def _toc_template() -> Template:
    env = Environment(
        loader=FileSystemLoader(str(TEMPLATES_DIR)),
        autoescape=select_autoescape(["html"]),
    )
    return env.get_template("toc.html")


def _heading_level(element: etree.Element) -> int:
    return int(element.tag[1:])


class HeadingTocBuilder:
    """Render headings one at a time and remember them for the TOC.

    A builder belongs to exactly one document conversion: it owns the slug
    registry and the heading tree, both of which depend on seeing headings in
    document order.
    """

    def __init__(self, slugs: SlugRegistry | None = None) -> None:
        self.slugs = slugs or SlugRegistry()
        self.headings: list[HeadingNode] = []
        self._h1_count = 0

    def render_heading(self, element: etree.Element, text: str) -> list[etree.Element]:
        """Return the elements that replace ``element`` in the document.

        Parameters
        ----------
        element : xml.etree.ElementTree.Element
            A parsed ``h1``-``h6`` element.
        text : str
            Plain display text of the heading.

        Returns
        -------
        list[xml.etree.ElementTree.Element]
            ``[]`` for the title heading, ``[element]`` for untracked
            headings, and ``[anchor, element]`` for tracked ones.
        """
        level = _heading_level(element)
        if level == 1:
            self._h1_count += 1
            if self._h1_count == 1:
                logger.debug("Remove first H1, the article title: %s", text)
                return []
            logger.debug("Skip TOC tracking for H1 header: %s", text)
            return [element]
        if level > 3:
            logger.debug("Skip TOC tracking for minor header: H%s", level)
            return [element]

        slug = self.slugs.register(slugify(text))
        node = HeadingNode(text=text, anchor_slug=slug)
        if level == 2:
            self.headings.append(node)
            if len(self.headings) == 1:
                element.set("class", FIRST_SECTION_CLASS)
        elif self.headings:
            self.headings[-1].children.append(node)
        else:
            logger.warning(
                "Subheading %r appears before any section heading; "
                "leaving it out of the table of contents",
                text,
            )

        anchor = etree.Element("a", {"name": slug})
        etree.SubElement(anchor, "span", {"class": HEADER_LINK_CLASS})
        logger.debug("Render heading %s %r with anchor %s", level, text, slug)
        return [anchor, element]

    def render_toc(self) -> str:
        """Render the collected heading tree as nested ordered lists."""
        return _toc_template().render(
            title=TOC_TITLE,
            list_class=TOC_LIST_CLASS,
            sublist_class=TOC_SUBLIST_CLASS,
            entries=self.headings,
        )


__all__ = ["HeadingNode", "HeadingTocBuilder"]
