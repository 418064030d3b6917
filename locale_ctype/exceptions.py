"""Exceptions raised by locale_ctype.

Hard failures (``ScalarEncodeError``, ``ScalarDecodeError`` and
``ClassificationError``) abort the call that raised them. They are never
retried and never turned into a default answer.
"""

from __future__ import annotations


class LocaleCTypeError(Exception):
    """Base class for all locale_ctype errors."""


class ConfigurationError(LocaleCTypeError):
    """Raised when the bridge configuration is invalid."""


class NativeLibraryError(LocaleCTypeError):
    """Raised when the C library or one of its symbols cannot be loaded."""


class ScalarEncodeError(LocaleCTypeError):
    """A scalar value could not be converted to a wide-character code."""

    def __init__(self, status: int, errno: int) -> None:
        self.status = status
        self.errno = errno
        super().__init__(f"utf8towc failed. status={status}, error={errno}")


class ScalarDecodeError(LocaleCTypeError):
    """A wide-character code could not be converted back to a scalar value."""

    def __init__(self, status: int, errno: int, data: bytes = b"") -> None:
        self.status = status
        self.errno = errno
        self.data = data
        message = f"wctochar failed. status={status}, error={errno}"
        if data:
            message += f", bytes={data.hex()}"
        super().__init__(message)


class ClassificationError(LocaleCTypeError):
    """A native classification primitive returned its error sentinel."""

    def __init__(self, primitive: str, errno: int) -> None:
        self.primitive = primitive
        self.errno = errno
        super().__init__(f"{primitive}_native failed. error={errno}")
