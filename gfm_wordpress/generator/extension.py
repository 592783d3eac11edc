"""Markdown extension that applies the WordPress rendering hooks."""

from __future__ import annotations

import html
import typing as typ
import xml.etree.ElementTree as etree

from markdown.extensions import Extension
from markdown.extensions.toc import render_inner_html, strip_tags
from markdown.treeprocessors import Treeprocessor

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from markdown import Markdown

    from .hooks import RenderContext
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any

HEADING_TAGS = frozenset(f"h{level}" for level in range(1, 7))


class WordPressExtension(Extension):
    """Route headings, images, and links through a :class:`RenderContext`.

    The treeprocessor runs in the slot Python-Markdown's own ``toc``
    extension uses: after ``smarty`` has rewritten punctuation, so the table
    of contents shows the same curly quotes and dashes as the headings.
    """

    def __init__(self, context: RenderContext) -> None:
        super().__init__()
        self.context = context

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the WordPress treeprocessor on the Markdown instance."""
        processor = WordPressTreeprocessor(md, self.context)
        md.treeprocessors.register(processor, "gfm_wordpress", 5)


def _walk(parent: etree.Element) -> cabc.Iterator[tuple[etree.Element, etree.Element]]:
    """Yield ``(parent, child)`` pairs in document order."""
    for child in parent:
        yield parent, child
        yield from _walk(child)


def _replace(
    parent: etree.Element, child: etree.Element, replacements: list[etree.Element]
) -> None:
    """Swap ``child`` for ``replacements`` while keeping its tail text."""
    if len(replacements) == 1 and replacements[0] is child:
        return
    index = list(parent).index(child)
    tail = child.tail
    parent.remove(child)
    for offset, element in enumerate(replacements):
        if element is not child:
            element.tail = None
        parent.insert(index + offset, element)
    if replacements:
        replacements[-1].tail = tail
    elif tail:
        if index > 0:
            previous = parent[index - 1]
            previous.tail = (previous.tail or "") + tail
        else:
            parent.text = (parent.text or "") + tail


class WordPressTreeprocessor(Treeprocessor):
    """Dispatch each heading, image, and link to the render context."""

    def __init__(self, md: Markdown, context: RenderContext) -> None:
        super().__init__(md)
        self.context = context

    def run(self, root: etree.Element) -> etree.Element:
        """Rewrite the parsed tree in place, in document order."""
        for parent, child in list(_walk(root)):
            if child.tag in HEADING_TAGS:
                replacements = self.context.toc.render_heading(
                    child, self._heading_text(child)
                )
            elif child.tag == "img":
                replacements = self.context.renderer.image(child)
            elif child.tag == "a":
                replacements = self.context.renderer.link(child)
            else:
                continue
            _replace(parent, child, replacements)
        return root

    def _heading_text(self, element: etree.Element) -> str:
        """Return the plain text of a heading as a reader sees it.

        Inline markup is rendered through the serializer and postprocessors,
        then tags are stripped and entities decoded, so code spans and
        character references come out as literal characters.
        """
        return html.unescape(strip_tags(render_inner_html(element, self.md)))


__all__ = ["WordPressExtension", "WordPressTreeprocessor"]
