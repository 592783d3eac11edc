"""Load site settings YAML into a :class:`SiteSettings` dataclass."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from gfm_wordpress.errors import ConfigError

from .helpers import _optional_str, _parse_url_mode
from .models import SiteSettings

_URL_MODE_FIELDS = frozenset({"image_url_mode", "link_url_mode"})


def load_site_settings(path: Path) -> SiteSettings:
    """Load the YAML file describing the target WordPress site.

    Parameters
    ----------
    path : Path
        Filesystem path to the settings file. Its top level is a mapping whose
        keys are :class:`SiteSettings` field names.

    Returns
    -------
    SiteSettings
        Settings with every key not present in the file left at its default.

    Raises
    ------
    FileNotFoundError
        If the settings file does not exist at ``path``.
    ConfigError
        If the file is not valid YAML, its top-level structure is not a
        mapping, or it names an unknown setting or an invalid URL mode.

    Examples
    --------
    >>> from pathlib import Path
    >>> settings = load_site_settings(Path("wordpress.yaml"))  # doctest: +SKIP
    >>> settings.image_url_mode  # doctest: +SKIP
    <UrlMode.RELATIVE: 'relative'>
    """
    if not path.exists():
        msg = f"Settings file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        with path.open("r", encoding="utf-8") as handle:
            loaded = loader.load(handle) or {}
    except YAMLError as exc:
        msg = f"Cannot parse settings file '{path}': {exc}"
        raise ConfigError(msg) from exc
    if not isinstance(loaded, dict):
        msg = f"Top-level YAML structure of '{path}' must be a mapping."
        raise ConfigError(msg)
    return build_site_settings(loaded)


def build_site_settings(
    raw: typ.Mapping[str, typ.Any], base: SiteSettings | None = None
) -> SiteSettings:
    """Overlay ``raw`` values on ``base`` (or the defaults)."""
    known = {field.name for field in dc.fields(SiteSettings)}
    unknown = sorted(set(raw) - known)
    if unknown:
        msg = f"Unknown site settings: {', '.join(unknown)}."
        raise ConfigError(msg)

    overrides: dict[str, typ.Any] = {}
    for key, value in raw.items():
        if value is None:
            continue
        if key in _URL_MODE_FIELDS:
            overrides[key] = _parse_url_mode(value, key)
        elif key == "theme_dir":
            overrides[key] = Path(str(value))
        else:
            text = _optional_str(value)
            if text is not None:
                overrides[key] = text
    return dc.replace(base or SiteSettings(), **overrides)


__all__ = ["build_site_settings", "load_site_settings"]
