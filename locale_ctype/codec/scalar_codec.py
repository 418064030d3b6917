"""Conversion of single scalar values to and from wide-character codes.

This is the only module that interprets raw byte buffers. Buffers are built
per call and dropped when the call returns; nothing is shared between calls.

Conversion Strategy:
--------------------
1. ``encode_to_wide`` encodes the scalar value to UTF-8 (exactly
   ``utf8_length`` bytes) and hands the buffer to the bridge's ``utf8towc``.
2. ``decode_from_wide`` asks the bridge's ``wctoutf8`` for the UTF-8 form of
   a wide-character code and rebuilds the scalar value from it.

Any abnormal status is a hard failure: the caller gets ``ScalarEncodeError``
or ``ScalarDecodeError``, never a guessed value.
"""

from __future__ import annotations

import logging

from ..const import ASCII_MAX, MAX_UTF8_LEN, PRIMITIVE_UTF8TOWC, PRIMITIVE_WCTOUTF8, STATUS_OK
from ..exceptions import ScalarDecodeError, ScalarEncodeError
from ..native import NativeLocaleBridgeBase

_LOGGER = logging.getLogger(__name__)


def require_scalar(scalar: str) -> int:
    """Validate a scalar value and return its code point.

    Raises:
        TypeError: If ``scalar`` is not a str.
        ValueError: If ``scalar`` is not exactly one non-surrogate code point.
    """
    if not isinstance(scalar, str):
        raise TypeError(f"expected str, got {type(scalar).__name__}")
    if len(scalar) != 1:
        raise ValueError(f"expected a single character, got {len(scalar)}")
    ordinal = ord(scalar)
    if 0xD800 <= ordinal <= 0xDFFF:
        raise ValueError(f"U+{ordinal:04X} is a surrogate, not a scalar value")
    return ordinal


def utf8_length(scalar: str) -> int:
    """Return the number of bytes in the UTF-8 encoding of ``scalar``."""
    ordinal = ord(scalar)
    if ordinal <= ASCII_MAX:
        return 1
    if ordinal < 0x800:
        return 2
    if ordinal < 0x10000:
        return 3
    return 4


def is_fast_path(scalar: str) -> bool:
    """Return whether ``scalar`` is ASCII, where byte value equals ordinal."""
    return utf8_length(scalar) == 1


def utf8_bytes(scalar: str) -> bytes:
    """Encode ``scalar`` into a fresh buffer of exactly ``utf8_length`` bytes."""
    return scalar.encode("utf-8")


def encode_to_wide(bridge: NativeLocaleBridgeBase, scalar: str) -> int:
    """Convert ``scalar`` to the host's wide-character code.

    Args:
        bridge: Native bridge providing ``utf8towc``.
        scalar: Single scalar value.

    Returns:
        The wide-character code.

    Raises:
        ScalarEncodeError: If the native conversion reports a non-zero status.
    """
    status, wc = bridge.utf8towc(utf8_bytes(scalar))
    if status != STATUS_OK:
        errno = bridge.record_failure(PRIMITIVE_UTF8TOWC)
        _LOGGER.error("utf8towc failed for U+%04X (status=%s errno=%s)", ord(scalar), status, errno)
        raise ScalarEncodeError(status, errno)
    return wc


def decode_from_wide(bridge: NativeLocaleBridgeBase, wc: int) -> str:
    """Convert a wide-character code back to a scalar value.

    Args:
        bridge: Native bridge providing ``wctoutf8``.
        wc: Wide-character code.

    Returns:
        The scalar value as a one-character str.

    Raises:
        ScalarDecodeError: If the native call reports a non-positive length,
            writes more than four bytes, or the bytes are not exactly one
            UTF-8 encoded scalar value.
    """
    length, data = bridge.wctoutf8(wc)
    if length <= 0:
        raise _decode_failure(bridge, wc, length, b"")
    if length > MAX_UTF8_LEN:
        raise _decode_failure(bridge, wc, length, data)

    try:
        text = data[:length].decode("utf-8")
    except UnicodeDecodeError as err:
        raise _decode_failure(bridge, wc, length, data) from err

    if len(text) != 1:
        raise _decode_failure(bridge, wc, length, data)
    return text


def _decode_failure(bridge: NativeLocaleBridgeBase, wc: int, status: int, data: bytes) -> ScalarDecodeError:
    errno = bridge.record_failure(PRIMITIVE_WCTOUTF8)
    _LOGGER.error("wctoutf8 failed for wide code 0x%X (status=%s errno=%s)", wc, status, errno)
    return ScalarDecodeError(status, errno, data)
