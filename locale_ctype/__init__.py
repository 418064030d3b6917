"""Locale-aware classification and case conversion of single characters.

The four public functions answer "is this character whitespace/blank in the
active locale?" and "what is its uppercase/lowercase form in the active
locale?" by calling the host C library's wide-character functions.

ASCII characters are classified without a native call; everything else is
converted to the host's wide-character code, classified or mapped under the
locale selected by ``LC_ALL``/``LC_CTYPE``/``LANG``, and converted back.

Example:
    >>> import os, locale_ctype
    >>> os.environ["LC_ALL"] = "en_US.UTF-8"
    >>> locale_ctype.is_space("\\u3000")
    True
    >>> locale_ctype.to_uppercase("\\u017f")
    'S'
"""

from __future__ import annotations

from functools import lru_cache
import logging
import os

from .classification import ClassificationService
from .config import BridgeConfig, config_from_dict, config_from_env
from .diagnostics import get_diagnostics
from .exceptions import (
    ClassificationError,
    ConfigurationError,
    LocaleCTypeError,
    NativeLibraryError,
    ScalarDecodeError,
    ScalarEncodeError,
)
from .native import LibcLocaleBridge, NativeLocaleBridgeBase, create_locale_bridge

_LOGGER = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_default_service() -> ClassificationService:
    """Return the process-wide service built from LOCALE_CTYPE_* variables (cached).

    Only the service object is cached; every call still consults the
    active locale.
    """
    config = config_from_env(os.environ)
    _LOGGER.debug("Creating default classification service: %s", config)
    return ClassificationService(create_locale_bridge(config), config)


def reset_default_service() -> None:
    """Drop the cached default service so the next call rebuilds it."""
    get_default_service.cache_clear()


def is_space(scalar: str) -> bool:
    """Return whether ``scalar`` is whitespace in the active locale."""
    return get_default_service().is_space(scalar)


def is_blank(scalar: str) -> bool:
    """Return whether ``scalar`` is blank in the active locale."""
    return get_default_service().is_blank(scalar)


def to_uppercase(scalar: str) -> str:
    """Return the uppercase form of ``scalar`` in the active locale."""
    return get_default_service().to_uppercase(scalar)


def to_lowercase(scalar: str) -> str:
    """Return the lowercase form of ``scalar`` in the active locale."""
    return get_default_service().to_lowercase(scalar)


__all__ = [
    "BridgeConfig",
    "ClassificationError",
    "ClassificationService",
    "ConfigurationError",
    "LibcLocaleBridge",
    "LocaleCTypeError",
    "NativeLibraryError",
    "NativeLocaleBridgeBase",
    "ScalarDecodeError",
    "ScalarEncodeError",
    "config_from_dict",
    "config_from_env",
    "create_locale_bridge",
    "get_default_service",
    "get_diagnostics",
    "is_blank",
    "is_space",
    "reset_default_service",
    "to_lowercase",
    "to_uppercase",
]
