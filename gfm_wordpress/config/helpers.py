"""Utility helpers for media locations and settings values."""

from __future__ import annotations

import datetime as dt
import re
import typing as typ
from urllib.parse import urlsplit

from gfm_wordpress.errors import ConfigError

from .models import UrlMode

if typ.TYPE_CHECKING:
    from .models import SiteSettings

MEDIA_ID_PATTERN = re.compile(r"/sites/(\d+/\d+/\d+)/")


def normalize_media_location(value: str | None) -> str | None:
    """Return the bare media id for ``value``.

    Plain ids (``"47/2016/01"``) pass through untouched. Example upload URLs
    are reduced to the ``site/year/month`` segment of their path; URLs that do
    not contain one yield ``None``.

    Examples
    --------
    >>> normalize_media_location(
    ...     "http://example.com/wp-content/uploads/sites/47/2016/01/Food.png"
    ... )
    '47/2016/01'
    >>> normalize_media_location("47/2016/01")
    '47/2016/01'
    """
    if not value:
        return None
    text = value.strip()
    if not text.startswith("http"):
        return text
    match = MEDIA_ID_PATTERN.search(urlsplit(text).path)
    return match.group(1) if match else None


def guess_media_location(
    settings: SiteSettings, now: dt.datetime | None = None
) -> str:
    """Guess the media id for a post uploaded this month (UTC)."""
    moment = now or dt.datetime.now(dt.timezone.utc)
    return f"{settings.site_number}/{moment.year}/{moment.month:02d}"


def _parse_url_mode(value: object, field: str) -> UrlMode:
    """Convert a settings value into a :class:`UrlMode`."""
    if isinstance(value, UrlMode):
        return value
    try:
        return UrlMode(str(value).strip().lower())
    except ValueError as exc:
        choices = ", ".join(mode.value for mode in UrlMode)
        msg = f"Setting '{field}' must be one of: {choices} (got {value!r})."
        raise ConfigError(msg) from exc


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


__all__ = ["guess_media_location", "normalize_media_location"]
