"""Single scalar value codec.

Converts one Unicode scalar value to the host's wide-character
representation and back through the native bridge.
"""

from __future__ import annotations

from .scalar_codec import (
    decode_from_wide,
    encode_to_wide,
    is_fast_path,
    require_scalar,
    utf8_bytes,
    utf8_length,
)

__all__ = [
    "decode_from_wide",
    "encode_to_wide",
    "is_fast_path",
    "require_scalar",
    "utf8_bytes",
    "utf8_length",
]
