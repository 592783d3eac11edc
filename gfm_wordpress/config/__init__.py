"""Conversion requests and WordPress site settings.

This subpackage defines the typed inputs of a conversion: the per-document
:class:`ConversionRequest` and the per-site :class:`SiteSettings` that hold
the deployment details (site origin, upload path, URL modes, theme), plus
:func:`load_site_settings` for reading those settings from YAML.

Examples
--------
>>> from gfm_wordpress.config import normalize_media_location
>>> normalize_media_location("47/2016/01")
'47/2016/01'
"""

from .helpers import guess_media_location, normalize_media_location
from .loader import build_site_settings, load_site_settings
from .models import ConversionRequest, SiteSettings, UrlMode

__all__ = [
    "ConversionRequest",
    "SiteSettings",
    "UrlMode",
    "build_site_settings",
    "guess_media_location",
    "load_site_settings",
    "normalize_media_location",
]
