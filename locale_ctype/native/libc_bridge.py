"""ctypes bridge to the C library's locale-sensitive wide-character functions."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
import contextlib
import ctypes
import ctypes.util
import locale
import logging
import os
import sys
from typing import Any

from ..config import BridgeConfig
from ..const import (
    ACTIVE_LOCALE_NAME,
    CLASSIFY_NO_LOCALE,
    DECODE_BAD_WIDE,
    DECODE_NO_CODEC_LOCALE,
    MB_LEN_MAX,
    MBSTATE_SIZE,
    PRIMITIVE_TOWLOWER,
    PRIMITIVE_TOWUPPER,
    STATUS_BAD_SEQUENCE,
    STATUS_NO_CODEC_LOCALE,
    STATUS_OK,
)
from ..exceptions import NativeLibraryError
from .base_bridge import NativeLocaleBridgeBase

_LOGGER = logging.getLogger(__name__)

_WCHAR_T = ctypes.c_int32 if ctypes.sizeof(ctypes.c_wchar) == 4 else ctypes.c_uint16
_WINT_T = ctypes.c_uint32
_LOCALE_T = ctypes.c_void_p

# (locale_t)-1
_LC_GLOBAL_LOCALE = ctypes.c_size_t(-1).value


def _lc_ctype_mask() -> int:
    """Return LC_CTYPE_MASK for the running platform."""
    # BSD-derived libcs number the masks independently of the categories
    if sys.platform == "darwin" or "bsd" in sys.platform:
        return 1 << 1
    return 1 << locale.LC_CTYPE


def _find_libc() -> str | None:
    """Locate the C library."""
    name = ctypes.util.find_library("c")
    if name is None and sys.platform.startswith("linux"):
        name = "libc.so.6"
    return name


def _bind(lib: ctypes.CDLL, name: str, restype: Any, argtypes: list[Any]) -> Any:
    """Look up a C function and declare its signature."""
    try:
        func = getattr(lib, name)
    except AttributeError as err:
        raise NativeLibraryError(f"C library has no symbol '{name}'") from err
    func.restype = restype
    func.argtypes = argtypes
    return func


class LibcLocaleBridge(NativeLocaleBridgeBase):
    """Locale bridge calling libc through ctypes.

    Each primitive builds its own ``locale_t`` with ``newlocale``, installs it
    on the calling thread with ``uselocale``, calls the libc function, then
    restores the thread's previous locale and frees the one it built. The
    process-wide locale set by ``setlocale`` is never touched.
    """

    def __init__(self, config: BridgeConfig) -> None:
        super().__init__(config)
        self._library_name = config.library or _find_libc()
        if self._library_name is None:
            raise NativeLibraryError("Unable to locate the C library")
        try:
            lib = ctypes.CDLL(self._library_name, use_errno=True)
        except OSError as err:
            raise NativeLibraryError(f"Unable to load C library '{self._library_name}': {err}") from err
        _LOGGER.debug("Loaded C library %s", self._library_name)

        self._ctype_mask = _lc_ctype_mask()
        self._codec_locale: str | None = None

        self._newlocale = _bind(lib, "newlocale", _LOCALE_T, [ctypes.c_int, ctypes.c_char_p, _LOCALE_T])
        self._uselocale = _bind(lib, "uselocale", _LOCALE_T, [_LOCALE_T])
        self._freelocale = _bind(lib, "freelocale", None, [_LOCALE_T])
        self._mbrtowc = _bind(
            lib, "mbrtowc", ctypes.c_size_t, [ctypes.c_void_p, ctypes.c_char_p, ctypes.c_size_t, ctypes.c_void_p]
        )
        self._wcrtomb = _bind(lib, "wcrtomb", ctypes.c_ssize_t, [ctypes.c_void_p, _WCHAR_T, ctypes.c_void_p])
        self._iswspace = _bind(lib, "iswspace", ctypes.c_int, [_WINT_T])
        self._iswblank = _bind(lib, "iswblank", ctypes.c_int, [_WINT_T])
        self._towupper = _bind(lib, "towupper", _WINT_T, [_WINT_T])
        self._towlower = _bind(lib, "towlower", _WINT_T, [_WINT_T])

    def _new_locale(self, names: Iterable[str]) -> tuple[int | None, str | None]:
        """Build a locale_t from the first name newlocale() accepts."""
        for name in names:
            ctypes.set_errno(0)
            handle = self._newlocale(self._ctype_mask, os.fsencode(name), None)
            if handle:
                return handle, name
            _LOGGER.debug("newlocale(%r) failed (errno=%s)", name, ctypes.get_errno())
        return None, None

    @contextlib.contextmanager
    def _installed(self, handle: int) -> Iterator[None]:
        """Install ``handle`` on the calling thread for the duration of the block."""
        previous = self._uselocale(handle)
        try:
            yield
        finally:
            self._uselocale(previous or _LC_GLOBAL_LOCALE)
            self._freelocale(handle)

    def has_locale(self, name: str) -> bool:
        """Return whether ``name`` can be built by newlocale()."""
        handle, _ = self._new_locale((name,))
        if handle is None:
            return False
        self._freelocale(handle)
        return True

    def utf8towc(self, data: bytes) -> tuple[int, int]:
        """Decode ``data`` with mbrtowc() under a UTF-8 locale."""
        handle, name = self._new_locale(self._config.codec_locales)
        if handle is None:
            return STATUS_NO_CODEC_LOCALE, 0
        self._codec_locale = name

        wc = _WCHAR_T(0)
        state = ctypes.create_string_buffer(MBSTATE_SIZE)
        with self._installed(handle):
            ctypes.set_errno(0)
            consumed = self._mbrtowc(ctypes.byref(wc), data, len(data), ctypes.byref(state))

        # mbrtowc() reports the NUL character as zero bytes consumed
        if consumed == 0 and data == b"\x00":
            consumed = 1
        if consumed != len(data):
            return STATUS_BAD_SEQUENCE, 0
        return STATUS_OK, wc.value

    def wctoutf8(self, wc: int) -> tuple[int, bytes]:
        """Encode ``wc`` with wcrtomb() under a UTF-8 locale."""
        handle, name = self._new_locale(self._config.codec_locales)
        if handle is None:
            return DECODE_NO_CODEC_LOCALE, b""
        self._codec_locale = name

        buf = ctypes.create_string_buffer(MB_LEN_MAX)
        state = ctypes.create_string_buffer(MBSTATE_SIZE)
        with self._installed(handle):
            ctypes.set_errno(0)
            length = self._wcrtomb(ctypes.byref(buf), wc, ctypes.byref(state))

        if length <= 0:
            return DECODE_BAD_WIDE, b""
        return length, buf.raw[:length]

    def _classify(self, func: Any, wc: int) -> int:
        handle, _ = self._new_locale((ACTIVE_LOCALE_NAME,))
        if handle is None:
            return CLASSIFY_NO_LOCALE
        with self._installed(handle):
            ret = func(wc)
        return 1 if ret else 0

    def _map_case(self, func: Any, primitive: str, wc: int) -> int:
        handle, _ = self._new_locale((ACTIVE_LOCALE_NAME,))
        if handle is None:
            _LOGGER.warning("Active locale unavailable for %s; using the thread's current locale", primitive)
            return int(func(wc))
        with self._installed(handle):
            return int(func(wc))

    def iswspace(self, wc: int) -> int:
        """Call iswspace() under the active locale."""
        return self._classify(self._iswspace, wc)

    def iswblank(self, wc: int) -> int:
        """Call iswblank() under the active locale."""
        return self._classify(self._iswblank, wc)

    def towupper(self, wc: int) -> int:
        """Call towupper() under the active locale."""
        return self._map_case(self._towupper, PRIMITIVE_TOWUPPER, wc)

    def towlower(self, wc: int) -> int:
        """Call towlower() under the active locale."""
        return self._map_case(self._towlower, PRIMITIVE_TOWLOWER, wc)

    def last_errno(self) -> int:
        """Return ctypes' thread-local copy of errno."""
        return ctypes.get_errno()

    def get_library_info(self) -> str:
        """Return the name the C library was loaded from."""
        return str(self._library_name)

    def get_diagnostics(self) -> dict[str, Any]:
        """Return diagnostic information including the codec locale in use."""
        info = super().get_diagnostics()
        info["codec_locale"] = self._codec_locale
        info["lc_ctype_mask"] = self._ctype_mask
        return info
