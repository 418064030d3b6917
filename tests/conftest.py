from collections.abc import Callable, Generator
import os
from typing import Any
import unicodedata

import pytest

from locale_ctype import reset_default_service
from locale_ctype.config import BridgeConfig
from locale_ctype.const import ASCII_BLANK, ASCII_SPACE, LOCALE_ENV_VARS
from locale_ctype.native import NativeLocaleBridgeBase

POSIX_LOCALES = {"C", "POSIX"}
I18N_LOCALES = {"en_US", "en_US.UTF-8", "C.UTF-8", "de_DE.UTF-8", "tr_TR.UTF-8"}
TURKISH_LOCALES = {"tr_TR.UTF-8"}

# iswspace() excludes the no-break spaces that str.isspace() accepts
_NO_BREAK_SPACES = {0x00A0, 0x2007, 0x202F}

EILSEQ = 84
ENOENT = 2


class FakeLocaleBridge(NativeLocaleBridgeBase):
    """Pure Python stand-in for the libc bridge.

    The active locale is read from LC_ALL/LC_CTYPE/LANG on every call, like
    newlocale(LC_CTYPE_MASK, "", NULL). POSIX locales classify ASCII only;
    the UTF-8 locales classify with Python's Unicode database and map case
    1:1. Any other locale name cannot be loaded.
    """

    def __init__(self, config: BridgeConfig | None = None) -> None:
        super().__init__(config or BridgeConfig())
        self.encode_status = 0
        self.decode_result: tuple[int, bytes] | None = None
        self.errno = 0
        self.calls: list[str] = []

    def _active_locale(self) -> str | None:
        name = "C"
        for var in LOCALE_ENV_VARS:
            value = os.environ.get(var)
            if value:
                name = value
                break
        if name in POSIX_LOCALES or name in I18N_LOCALES:
            return name
        self.errno = ENOENT
        return None

    def utf8towc(self, data: bytes) -> tuple[int, int]:
        self.calls.append("utf8towc")
        if self.encode_status:
            self.errno = EILSEQ
            return self.encode_status, 0
        return 0, ord(data.decode("utf-8"))

    def wctoutf8(self, wc: int) -> tuple[int, bytes]:
        self.calls.append("wctoutf8")
        if self.decode_result is not None:
            self.errno = EILSEQ
            return self.decode_result
        try:
            data = chr(wc).encode("utf-8")
        except (ValueError, UnicodeEncodeError):
            self.errno = EILSEQ
            return -2, b""
        return len(data), data

    def iswspace(self, wc: int) -> int:
        self.calls.append("iswspace")
        name = self._active_locale()
        if name is None:
            return -1
        if name in POSIX_LOCALES:
            return 1 if wc in ASCII_SPACE else 0
        return 1 if chr(wc).isspace() and wc not in _NO_BREAK_SPACES else 0

    def iswblank(self, wc: int) -> int:
        self.calls.append("iswblank")
        name = self._active_locale()
        if name is None:
            return -1
        if name in POSIX_LOCALES:
            return 1 if wc in ASCII_BLANK else 0
        if wc in ASCII_BLANK:
            return 1
        return 1 if unicodedata.category(chr(wc)) == "Zs" and wc not in _NO_BREAK_SPACES else 0

    def _map(self, wc: int, upper: bool) -> int:
        name = self._active_locale()
        if name is None or (name in POSIX_LOCALES and wc > 0x7F):
            return wc
        if name in TURKISH_LOCALES and wc in (0x69, 0x49):
            return 0x130 if upper else 0x131
        mapped = chr(wc).upper() if upper else chr(wc).lower()
        return ord(mapped) if len(mapped) == 1 else wc

    def towupper(self, wc: int) -> int:
        self.calls.append("towupper")
        return self._map(wc, upper=True)

    def towlower(self, wc: int) -> int:
        self.calls.append("towlower")
        return self._map(wc, upper=False)

    def last_errno(self) -> int:
        return self.errno

    def get_library_info(self) -> str:
        return "fake"


@pytest.fixture(autouse=True)
def clean_locale_env(monkeypatch: Any) -> Generator[None, None, None]:
    """Start every test from LC_ALL=C with no LOCALE_CTYPE_* overrides."""
    for var in LOCALE_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    for var in list(os.environ):
        if var.startswith("LOCALE_CTYPE_"):
            monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("LC_ALL", "C")
    reset_default_service()
    yield
    reset_default_service()


@pytest.fixture
def make_fake_bridge() -> Callable[..., FakeLocaleBridge]:
    """Return a factory building fake bridges from BridgeConfig keyword arguments."""

    def _make(**kwargs: Any) -> FakeLocaleBridge:
        return FakeLocaleBridge(BridgeConfig(**kwargs))

    return _make


@pytest.fixture
def fake_bridge(make_fake_bridge: Callable[..., FakeLocaleBridge]) -> FakeLocaleBridge:
    """Return a fake locale bridge with default configuration."""
    return make_fake_bridge()


@pytest.fixture
def posix_locale(monkeypatch: Any) -> None:
    monkeypatch.setenv("LC_ALL", "POSIX")


@pytest.fixture
def i18n_locale(monkeypatch: Any) -> None:
    monkeypatch.setenv("LC_ALL", "en_US.UTF-8")
