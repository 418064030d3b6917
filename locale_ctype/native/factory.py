"""Factory function for creating locale bridges."""

from __future__ import annotations

from ..config import BridgeConfig
from .base_bridge import NativeLocaleBridgeBase
from .libc_bridge import LibcLocaleBridge


def create_locale_bridge(config: BridgeConfig | None = None) -> NativeLocaleBridgeBase:
    """Factory function to create the native locale bridge for this host."""
    return LibcLocaleBridge(config or BridgeConfig())
