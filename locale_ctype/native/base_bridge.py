"""Base class for native locale bridges."""

from __future__ import annotations

from abc import ABC, abstractmethod
import logging
from typing import Any

from ..config import BridgeConfig
from ..const import (
    PRIMITIVE_ISWBLANK,
    PRIMITIVE_ISWSPACE,
    PRIMITIVE_UTF8TOWC,
    PRIMITIVE_WCTOUTF8,
)
from ..exceptions import ClassificationError

_LOGGER = logging.getLogger(__name__)


class NativeLocaleBridgeBase(ABC):
    """Abstract boundary to the host's locale-sensitive wide-character functions.

    Subclasses provide the raw primitives, which mirror the C shim one to one:
    integer status codes and sentinels in, integer status codes and sentinels
    out. This class turns the classification sentinels into exceptions so no
    raw status leaves the bridge as a boolean.

    Every primitive re-consults the active locale; nothing is cached.
    """

    def __init__(self, config: BridgeConfig) -> None:
        self._config: BridgeConfig = config
        self._failures: dict[str, int] = {}
        self._last_error_errno: int | None = None

    @property
    def config(self) -> BridgeConfig:
        """Return the bridge configuration."""
        return self._config

    # Raw primitives

    @abstractmethod
    def utf8towc(self, data: bytes) -> tuple[int, int]:
        """Convert one UTF-8 encoded scalar value to a wide-character code.

        Returns:
            ``(status, wc)``; status 0 on success.
        """

    @abstractmethod
    def wctoutf8(self, wc: int) -> tuple[int, bytes]:
        """Convert a wide-character code to UTF-8.

        Returns:
            ``(length, data)``; a non-positive length signals failure.
        """

    @abstractmethod
    def iswspace(self, wc: int) -> int:
        """Return 1 if whitespace in the active locale, 0 if not, -1 on failure."""

    @abstractmethod
    def iswblank(self, wc: int) -> int:
        """Return non-zero if blank in the active locale, -1 on failure."""

    @abstractmethod
    def towupper(self, wc: int) -> int:
        """Return the uppercase mapping in the active locale."""

    @abstractmethod
    def towlower(self, wc: int) -> int:
        """Return the lowercase mapping in the active locale."""

    @abstractmethod
    def last_errno(self) -> int:
        """Return the errno observed after the most recent native call."""

    @abstractmethod
    def get_library_info(self) -> str:
        """Return a human-readable description of the native library."""

    # Checked operations

    def is_whitespace(self, wc: int) -> bool:
        """Return whether ``wc`` is whitespace in the active locale."""
        ret = self.iswspace(wc)
        if ret < 0:
            raise self._classification_failure(PRIMITIVE_ISWSPACE)
        return ret != 0

    def is_blank(self, wc: int) -> bool:
        """Return whether ``wc`` is blank in the active locale."""
        ret = self.iswblank(wc)
        if ret < 0 and self._config.check_blank_errors:
            raise self._classification_failure(PRIMITIVE_ISWBLANK)
        return ret != 0

    def to_upper(self, wc: int) -> int:
        """Return the uppercase mapping of ``wc``, or ``wc`` when none exists."""
        return self.towupper(wc)

    def to_lower(self, wc: int) -> int:
        """Return the lowercase mapping of ``wc``, or ``wc`` when none exists."""
        return self.towlower(wc)

    def record_failure(self, primitive: str) -> int:
        """Remember a hard failure of ``primitive`` and return the errno."""
        errno = self.last_errno()
        self._failures[primitive] = self._failures.get(primitive, 0) + 1
        self._last_error_errno = errno
        return errno

    def _classification_failure(self, primitive: str) -> ClassificationError:
        errno = self.record_failure(primitive)
        _LOGGER.error("%s failed for the active locale (errno=%s)", primitive, errno)
        return ClassificationError(primitive, errno)

    def get_diagnostics(self) -> dict[str, Any]:
        """Return diagnostic information about the bridge."""
        return {
            "library": self.get_library_info(),
            "last_error_errno": self._last_error_errno,
            "failures": {
                name: self._failures.get(name, 0)
                for name in (PRIMITIVE_UTF8TOWC, PRIMITIVE_WCTOUTF8, PRIMITIVE_ISWSPACE, PRIMITIVE_ISWBLANK)
            },
        }
