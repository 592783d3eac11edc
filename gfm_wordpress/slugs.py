r"""Anchor slugs for headings, unique within one document.

Example
-------
>>> from gfm_wordpress.slugs import SlugRegistry, slugify
>>> registry = SlugRegistry()
>>> [registry.register(slugify(text)) for text in ("Setup", "Setup", "Setup")]
['setup', 'setup-1', 'setup-2']
"""

from __future__ import annotations

import re

NON_WORD_PATTERN = re.compile(r"[^\w]+")


def slugify(text: str) -> str:
    """Lowercase ``text`` and collapse each run of non-word characters to ``-``."""
    return NON_WORD_PATTERN.sub("-", text.lower())


class SlugRegistry:
    """Hand out unique slugs, appending ``-<n>`` on collision.

    The first occurrence of a slug is returned unchanged. Each repeat receives
    the next numeric suffix for its base name, and the suffixed slug is
    recorded too, so a later heading that independently normalizes to the
    same text is suffixed in turn instead of colliding.
    """

    def __init__(self) -> None:
        self._counts: dict[str, int] = {}

    def __contains__(self, slug: object) -> bool:
        return slug in self._counts

    def register(self, candidate: str) -> str:
        """Return a slug for ``candidate`` that has not been handed out yet."""
        count = self._counts.get(candidate)
        if count is None:
            self._counts[candidate] = 1
            return candidate

        slug = f"{candidate}-{count}"
        while slug in self._counts:
            count += 1
            slug = f"{candidate}-{count}"
        self._counts[candidate] = count + 1
        self._counts[slug] = 1
        return slug


__all__ = ["SlugRegistry", "slugify"]
