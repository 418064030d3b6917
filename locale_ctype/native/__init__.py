"""Native locale bridge package.

This package wraps the host C library's locale-sensitive wide-character
functions (``iswspace``, ``iswblank``, ``towupper``, ``towlower``) and the
single-scalar UTF-8 codec behind a narrow interface that validates every
return code before a value reaches the rest of the package.
"""

from __future__ import annotations

from .base_bridge import NativeLocaleBridgeBase
from .factory import create_locale_bridge
from .libc_bridge import LibcLocaleBridge

__all__ = [
    "LibcLocaleBridge",
    "NativeLocaleBridgeBase",
    "create_locale_bridge",
]
