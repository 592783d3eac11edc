"""Resolve ``media/`` references to WordPress upload URLs.

Markdown drafts keep their screenshots next to the document under
``media/``. When the post is published those files live in the WordPress
uploads area for the post's site and month, so every ``media/<file>``
reference is rewritten to that location. Images are also probed with Pillow
so the emitted ``<img>`` carries its display size; retina assets named
``<stem>@<N>x.<ext>`` are scaled down by ``N``.

Example
-------
>>> from pathlib import Path
>>> from gfm_wordpress.config import SiteSettings, UrlMode
>>> from gfm_wordpress.media import MediaResolver
>>> resolver = MediaResolver(SiteSettings(), "47/2016/01", Path("."))
>>> resolver.resolve("media/shot.png", UrlMode.RELATIVE, probe=False).target_url
'/wp-content/uploads/sites/47/2016/01/shot.png'
>>> resolver.resolve("https://example.com/a.png", UrlMode.RELATIVE) is None
True
"""

from __future__ import annotations

import dataclasses as dc
import logging
import math
import re
import typing as typ
from pathlib import Path, PurePosixPath

from PIL import Image

from gfm_wordpress._constants import BASE_IMAGE_CLASSES
from gfm_wordpress.config.models import UrlMode

if typ.TYPE_CHECKING:
    from gfm_wordpress.config.models import SiteSettings

logger = logging.getLogger(__name__)

MEDIA_HREF_PATTERN = re.compile(r"^media/([^/].*)$")
RETINA_STEM_PATTERN = re.compile(r"@([1-9]\d*)x$")


@dc.dataclass(slots=True)
class MediaDescriptor:
    """Rewritten target and presentation details for a media reference.

    Attributes
    ----------
    target_url : str
        URL of the uploaded asset.
    css_classes : list[str]
        Ordered CSS classes for the ``<img>`` element.
    width, height : int or None
        Display size in pixels; ``None`` when the file could not be probed.
    """

    target_url: str
    css_classes: list[str] = dc.field(default_factory=lambda: list(BASE_IMAGE_CLASSES))
    width: int | None = None
    height: int | None = None

    def add_class(self, name: str) -> None:
        """Append ``name`` unless it is already present."""
        if name not in self.css_classes:
            self.css_classes.append(name)

    @property
    def css_class(self) -> str:
        """Space-separated class attribute value."""
        return " ".join(self.css_classes)


def match_media(href: str | None) -> str | None:
    """Return the filename of a ``media/<file>`` reference, else ``None``."""
    if not href:
        return None
    match = MEDIA_HREF_PATTERN.match(href)
    return match.group(1) if match else None


def retina_multiplier(filename: str) -> int | None:
    """Return ``N`` for filenames whose stem ends in ``@<N>x``."""
    match = RETINA_STEM_PATTERN.search(PurePosixPath(filename).stem)
    return int(match.group(1)) if match else None


def probe_dimensions(path: Path) -> tuple[int, int] | None:
    """Return the pixel ``(width, height)`` of the image at ``path``.

    Missing files and formats Pillow cannot identify are not fatal: they are
    logged and ``None`` is returned.
    """
    try:
        with Image.open(path) as image:
            width, height = image.size
    except OSError as exc:
        logger.debug("Error finding image dimensions of %s: %s", path, exc)
        return None
    return width, height


def _scale(value: int, multiplier: int) -> int:
    """Divide ``value`` by ``multiplier``, rounding halves up."""
    return math.floor(value / multiplier + 0.5)


class MediaResolver:
    """Turn ``media/`` references into :class:`MediaDescriptor` objects."""

    def __init__(
        self, settings: SiteSettings, media_location: str, base_directory: Path
    ) -> None:
        self.settings = settings
        self.media_location = media_location.strip("/")
        self.base_directory = base_directory

    def build_url(self, filename: str, mode: UrlMode) -> str:
        """Return the upload URL of ``filename`` for the given mode."""
        uploads = self.settings.uploads_path.rstrip("/")
        path = f"{uploads}/{self.media_location}/{filename}"
        if mode is UrlMode.ABSOLUTE:
            return f"{self.settings.site_origin.rstrip('/')}{path}"
        return path

    def resolve(
        self, href: str | None, mode: UrlMode, *, probe: bool = True
    ) -> MediaDescriptor | None:
        """Describe ``href`` or return ``None`` when it is not a media reference.

        Parameters
        ----------
        href : str or None
            Reference taken from the Markdown source.
        mode : UrlMode
            URL construction strategy for the target.
        probe : bool, optional
            Read the file to determine its display size. Defaults to ``True``.

        Returns
        -------
        MediaDescriptor or None
            Descriptor of the rewritten reference; ``None`` tells the caller to
            fall back to default rendering.
        """
        filename = match_media(href)
        if filename is None:
            return None

        descriptor = MediaDescriptor(target_url=self.build_url(filename, mode))
        multiplier = retina_multiplier(filename)
        if multiplier is not None:
            descriptor.add_class(f"retina-{multiplier}x")

        if probe:
            size = probe_dimensions(self.base_directory / typ.cast("str", href))
            if size is not None:
                width, height = size
                if multiplier is not None:
                    width, height = _scale(width, multiplier), _scale(height, multiplier)
                descriptor.width, descriptor.height = width, height

        logger.debug("Resolved media reference %s: %s", href, descriptor)
        return descriptor

    def resolve_image(self, href: str | None) -> MediaDescriptor | None:
        """Resolve an image reference using the image URL mode."""
        return self.resolve(href, self.settings.image_url_mode)

    def resolve_link(self, href: str | None) -> MediaDescriptor | None:
        """Resolve a link reference using the link URL mode, without probing."""
        return self.resolve(href, self.settings.link_url_mode, probe=False)


__all__ = [
    "MediaDescriptor",
    "MediaResolver",
    "match_media",
    "probe_dimensions",
    "retina_multiplier",
]
