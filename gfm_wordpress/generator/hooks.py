"""Element renderers invoked for every heading, image, and link.

Python-Markdown builds an element tree; the WordPress treeprocessor walks it
in document order and hands each interesting element to the objects defined
here. Each renderer method returns the elements that should take the place of
the one it was given, which keeps the tree surgery in one spot.

``MediaAwareRenderer`` wraps a ``DefaultRenderer`` and only takes over for
``media/`` references, so everything else comes out exactly as
Python-Markdown produced it.
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ
import xml.etree.ElementTree as etree
from pathlib import Path

from gfm_wordpress._constants import BORDER_CLASS, CAPTION_CLASS, FIGURE_CLASS
from gfm_wordpress.directives import parse_directives
from gfm_wordpress.media import MediaResolver
from gfm_wordpress.toc import HeadingTocBuilder

if typ.TYPE_CHECKING:
    from gfm_wordpress.config import SiteSettings

logger = logging.getLogger(__name__)


class DefaultRenderer:
    """Leave elements exactly as the Markdown parser emitted them."""

    def image(self, element: etree.Element) -> list[etree.Element]:
        return [element]

    def link(self, element: etree.Element) -> list[etree.Element]:
        return [element]


class MediaAwareRenderer:
    """Rewrite ``media/`` images and links; delegate everything else."""

    def __init__(
        self, resolver: MediaResolver, default: DefaultRenderer | None = None
    ) -> None:
        self.resolver = resolver
        self.default = default or DefaultRenderer()

    def link(self, element: etree.Element) -> list[etree.Element]:
        """Point a ``media/`` link at its uploaded file."""
        href = element.get("href")
        descriptor = self.resolver.resolve_link(href)
        if descriptor is None:
            logger.debug("Normal link processing for non-media link: %s", href)
            return self.default.link(element)

        element.attrib.clear()
        element.set("href", descriptor.target_url)
        return [element]

    def image(self, element: etree.Element) -> list[etree.Element]:
        """Render a ``media/`` image linked to its full-size upload.

        The image title doubles as a directive channel (see
        :func:`~gfm_wordpress.directives.parse_directives`): ``border`` adds a
        border class and optional background colour, ``figure`` wraps the
        image and its alt-text caption in a floating container.
        """
        src = element.get("src")
        descriptor = self.resolver.resolve_image(src)
        if descriptor is None:
            logger.debug("Normal image processing for non-media image: %s", src)
            return self.default.image(element)

        logger.debug("Convert media/ image to WordPress: %s", src)
        alt = element.get("alt") or ""
        directives = parse_directives(element.get("title"))
        if directives.border:
            descriptor.add_class(BORDER_CLASS)

        attrs = {
            "src": descriptor.target_url,
            "alt": alt,
            "title": directives.caption,
            "class": descriptor.css_class,
        }
        if directives.border_color:
            attrs["style"] = f"background-color: {directives.border_color};"
        if descriptor.width is not None and descriptor.height is not None:
            attrs["height"] = str(descriptor.height)
            attrs["width"] = str(descriptor.width)

        link = etree.Element("a", {"href": descriptor.target_url})
        etree.SubElement(link, "img", attrs)
        if directives.figure is None:
            return [link]

        figure = etree.Element(
            "div", {"class": f"{FIGURE_CLASS} align{directives.figure}"}
        )
        figure.append(link)
        if alt:
            caption = etree.SubElement(figure, "span", {"class": CAPTION_CLASS})
            caption.text = alt
        return [figure]


@dc.dataclass(slots=True)
class RenderContext:
    """Mutable state threaded through a single document conversion.

    Attributes
    ----------
    toc : HeadingTocBuilder
        Heading hook owning the slug registry and heading tree.
    renderer : MediaAwareRenderer
        Image and link hook.
    """

    toc: HeadingTocBuilder
    renderer: MediaAwareRenderer

    @classmethod
    def create(
        cls, settings: SiteSettings, media_location: str, base_directory: Path
    ) -> RenderContext:
        """Build a fresh context for one conversion."""
        resolver = MediaResolver(settings, media_location, base_directory)
        return cls(toc=HeadingTocBuilder(), renderer=MediaAwareRenderer(resolver))


__all__ = ["DefaultRenderer", "MediaAwareRenderer", "RenderContext"]
