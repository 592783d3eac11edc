"""Render GitHub-flavored Markdown with Pygments-highlighted code blocks."""

from __future__ import annotations

import re
import typing as typ

from markdown import Markdown

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any

CODEHILITE_CLASS = "codehilite"
FENCED_INDENT_PATTERN = re.compile(r"^[ ]{1,3}([`~]{3,})", re.MULTILINE)
FENCE_LABEL_PATTERN = re.compile(
    r"^([`~]{3,})([A-Za-z0-9_+#.-]+)?(,[^\r\n]+)$", re.MULTILINE
)


class HtmlContentRenderer:
    """Convert Markdown to HTML with the extensions a WordPress post needs."""

    def __init__(
        self, pygments_style: str, wordpress_extension: Extension | None = None
    ) -> None:
        """Initialize a renderer with a pygments style and optional hooks.

        Parameters
        ----------
        pygments_style : str
            Name of the Pygments style used for syntax highlighting.
        wordpress_extension : Extension, optional
            Extension applying the heading, image, and link hooks; pass
            ``None`` for plain Python-Markdown output.
        """
        self.pygments_style = pygments_style
        self._wordpress_extension = wordpress_extension

    def markdown(self, text: str) -> str:
        """Render markdown into HTML using the configured extensions."""
        normalized = self._normalize_fenced_blocks(text)
        if not normalized.strip():
            return ""
        extensions: list[Extension | str] = [
            "fenced_code",
            "codehilite",
            "tables",
            "sane_lists",
            "smarty",
        ]
        if self._wordpress_extension:
            extensions.append(self._wordpress_extension)
        md = Markdown(
            extensions=extensions,
            extension_configs={
                "codehilite": {
                    "linenums": False,
                    "guess_lang": False,
                    "css_class": CODEHILITE_CLASS,
                    "pygments_style": self.pygments_style,
                }
            },
        )
        return md.convert(normalized)

    @staticmethod
    def _normalize_fenced_blocks(text: str) -> str:
        """Unindent fences and drop ``lang,attr`` fence labels Pygments rejects."""
        without_indent = FENCED_INDENT_PATTERN.sub(r"\1", text)

        def _strip_labels(match: re.Match[str]) -> str:
            fence, language, _extras = match.groups()
            label = language or ""
            return f"{fence}{label}"

        return FENCE_LABEL_PATTERN.sub(_strip_labels, without_indent)


__all__ = ["CODEHILITE_CLASS", "HtmlContentRenderer"]
