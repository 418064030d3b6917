"""Configuration for the native locale bridge."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, dataclass, field
import logging
from typing import Any

import voluptuous as vol

from .const import (
    CONF_ASCII_CASING_FAST_PATH,
    CONF_CHECK_BLANK_ERRORS,
    CONF_CODEC_LOCALES,
    CONF_LIBRARY,
    DEFAULT_ASCII_CASING_FAST_PATH,
    DEFAULT_CHECK_BLANK_ERRORS,
    DEFAULT_CODEC_LOCALES,
    ENV_ASCII_CASING_FAST_PATH,
    ENV_CHECK_BLANK_ERRORS,
    ENV_CODEC_LOCALES,
    ENV_LIBRARY,
)
from .exceptions import ConfigurationError

_LOGGER = logging.getLogger(__name__)


def _parse_locale_list(value: Any) -> list[str]:
    """Parse a list of locale names.

    Accepts a sequence of names or a single comma separated string
    (``"C.UTF-8, en_US.UTF-8"``). Blank entries are dropped.

    Raises:
        vol.Invalid: If the value is neither a string nor a sequence of strings.
    """
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, (list, tuple)):
        items = list(value)
    else:
        raise vol.Invalid(f"Expected str or list, got {type(value).__name__}")

    names: list[str] = []
    for item in items:
        if not isinstance(item, str):
            raise vol.Invalid(f"Locale name must be a string, got {type(item).__name__}")
        item = item.strip()
        if item:
            names.append(item)
    return names


CONFIG_SCHEMA = vol.Schema(
    {
        vol.Optional(CONF_LIBRARY, default=None): vol.Any(None, vol.All(str, vol.Strip, vol.Length(min=1))),
        vol.Optional(CONF_CODEC_LOCALES, default=list(DEFAULT_CODEC_LOCALES)): vol.All(
            _parse_locale_list, vol.Length(min=1, msg="At least one codec locale is required")
        ),
        vol.Optional(CONF_CHECK_BLANK_ERRORS, default=DEFAULT_CHECK_BLANK_ERRORS): vol.Boolean(),
        vol.Optional(CONF_ASCII_CASING_FAST_PATH, default=DEFAULT_ASCII_CASING_FAST_PATH): vol.Boolean(),
    }
)


@dataclass(frozen=True)
class BridgeConfig:
    """Settings for the native locale bridge and the classification service."""

    library: str | None = None
    codec_locales: tuple[str, ...] = field(default=DEFAULT_CODEC_LOCALES)
    check_blank_errors: bool = DEFAULT_CHECK_BLANK_ERRORS
    ascii_casing_fast_path: bool = DEFAULT_ASCII_CASING_FAST_PATH

    def as_dict(self) -> dict[str, Any]:
        """Return the configuration as a plain dict."""
        data = asdict(self)
        data[CONF_CODEC_LOCALES] = list(self.codec_locales)
        return data


def config_from_dict(data: Mapping[str, Any]) -> BridgeConfig:
    """Validate a mapping and build a BridgeConfig from it.

    Raises:
        ConfigurationError: If the mapping does not satisfy CONFIG_SCHEMA.
    """
    try:
        validated = CONFIG_SCHEMA(dict(data))
    except vol.Invalid as err:
        raise ConfigurationError(str(err)) from err

    return BridgeConfig(
        library=validated[CONF_LIBRARY],
        codec_locales=tuple(validated[CONF_CODEC_LOCALES]),
        check_blank_errors=validated[CONF_CHECK_BLANK_ERRORS],
        ascii_casing_fast_path=validated[CONF_ASCII_CASING_FAST_PATH],
    )


def config_from_env(environ: Mapping[str, str]) -> BridgeConfig:
    """Build a BridgeConfig from LOCALE_CTYPE_* environment variables."""
    env_keys = {
        ENV_LIBRARY: CONF_LIBRARY,
        ENV_CODEC_LOCALES: CONF_CODEC_LOCALES,
        ENV_CHECK_BLANK_ERRORS: CONF_CHECK_BLANK_ERRORS,
        ENV_ASCII_CASING_FAST_PATH: CONF_ASCII_CASING_FAST_PATH,
    }
    data: dict[str, Any] = {}
    for env_key, conf_key in env_keys.items():
        value = environ.get(env_key)
        # Unset and empty variables both mean "use the default"
        if value:
            data[conf_key] = value
    if data:
        _LOGGER.debug("Configuration overrides from environment: %s", sorted(data))
    return config_from_dict(data)
