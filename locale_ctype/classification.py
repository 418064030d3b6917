"""Locale-aware classification and case conversion of single characters.

Every operation is parameterized by the locale active in the process
environment (``LC_ALL``, ``LC_CTYPE``, ``LANG``) at the moment the native
primitive runs. Results are never cached, so a locale change made between
two calls is observed by the second one. Callers that need a stable answer
across several calls must serialize locale changes themselves.

Only 1:1 mappings are available: the uppercase form of U+00DF is the
two-character string "SS", which cannot be obtained here, and context
dependent forms such as the final Greek sigma are not produced.
"""

from __future__ import annotations

from .ascii_ops import ascii_isblank, ascii_isspace, ascii_tolower, ascii_toupper
from .codec import decode_from_wide, encode_to_wide, is_fast_path, require_scalar
from .config import BridgeConfig
from .native import NativeLocaleBridgeBase


class ClassificationService:
    """Dispatch between the ASCII fast path and the native locale bridge."""

    def __init__(self, bridge: NativeLocaleBridgeBase, config: BridgeConfig | None = None) -> None:
        self._bridge = bridge
        self._config = config or bridge.config

    @property
    def bridge(self) -> NativeLocaleBridgeBase:
        """Return the native locale bridge."""
        return self._bridge

    @property
    def config(self) -> BridgeConfig:
        """Return the service configuration."""
        return self._config

    def is_space(self, scalar: str) -> bool:
        """Return whether ``scalar`` is a whitespace character.

        Whitespace characters are space (0x20), form feed (0x0c), line feed
        (0x0a), carriage return (0x0d), horizontal tab (0x09) and vertical tab
        (0x0b) in every locale, plus whatever whitespace the current locale
        defines outside ASCII. U+2003 (EM SPACE) is whitespace under
        en_US.UTF-8 but not under POSIX.

        Raises:
            ScalarEncodeError: If ``scalar`` cannot be converted to a wide character.
            ClassificationError: If the active locale cannot be loaded.
        """
        ordinal = require_scalar(scalar)
        if is_fast_path(scalar):
            return ascii_isspace(ordinal)
        wc = encode_to_wide(self._bridge, scalar)
        return self._bridge.is_whitespace(wc)

    def is_blank(self, scalar: str) -> bool:
        """Return whether ``scalar`` is a blank character in the current locale.

        A blank character separates words within a line. Space and horizontal
        tab are blank in every locale; line feed never is.

        Raises:
            ScalarEncodeError: If ``scalar`` cannot be converted to a wide character.
            ClassificationError: If the active locale cannot be loaded and
                ``check_blank_errors`` is enabled.
        """
        ordinal = require_scalar(scalar)
        if is_fast_path(scalar):
            return ascii_isblank(ordinal)
        wc = encode_to_wide(self._bridge, scalar)
        return self._bridge.is_blank(wc)

    def to_uppercase(self, scalar: str) -> str:
        """Convert ``scalar`` to the uppercase form listed in the current locale.

        If the locale lists no uppercase form, ``scalar`` is returned unchanged.
        Under a POSIX locale U+017F (LATIN SMALL LETTER LONG S) has no mapping;
        under en_US.UTF-8 it maps to "S".

        Raises:
            ScalarEncodeError: If ``scalar`` cannot be converted to a wide character.
            ScalarDecodeError: If the mapped wide character is not a scalar value.
        """
        ordinal = require_scalar(scalar)
        if self._config.ascii_casing_fast_path and is_fast_path(scalar):
            return chr(ascii_toupper(ordinal))
        wc = encode_to_wide(self._bridge, scalar)
        return decode_from_wide(self._bridge, self._bridge.to_upper(wc))

    def to_lowercase(self, scalar: str) -> str:
        """Convert ``scalar`` to the lowercase form listed in the current locale.

        If the locale lists no lowercase form, ``scalar`` is returned unchanged.
        Under a POSIX locale U+0190 has no mapping; under en_US.UTF-8 it maps
        to U+025B.

        Raises:
            ScalarEncodeError: If ``scalar`` cannot be converted to a wide character.
            ScalarDecodeError: If the mapped wide character is not a scalar value.
        """
        ordinal = require_scalar(scalar)
        if self._config.ascii_casing_fast_path and is_fast_path(scalar):
            return chr(ascii_tolower(ordinal))
        wc = encode_to_wide(self._bridge, scalar)
        return decode_from_wide(self._bridge, self._bridge.to_lower(wc))
