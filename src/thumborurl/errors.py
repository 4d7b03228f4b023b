"""Error hierarchy for the thumborurl package.

Every public error class inherits from ThumborUrlError. Each carries a
machine-readable ``code`` (from :class:`ErrorCode`), a human-readable
``message``, an optional structured ``context`` dict, and an optional
``cause`` (chained exception).

Only two kinds of failure exist.  A value outside its documented domain
raises :class:`ThumborInvalidArgumentError`; an operation requested before
its prerequisite raises :class:`ThumborInvalidStateError`.  Neither is
retryable: the caller must fix its inputs or call sequence.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error the package can raise."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INVALID_STATE = "INVALID_STATE"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class ThumborUrlError(Exception):
    """Base exception for all thumborurl errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
        Keys and expected types are documented per subclass.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


# ---------------------------------------------------------------------------
# Concrete errors
# ---------------------------------------------------------------------------

class ThumborInvalidArgumentError(ThumborUrlError, ValueError):
    """A supplied value is outside its documented domain.

    Raised for negative dimensions, malformed crop rectangles, out-of-range
    filter amounts, blank strings and similar.

    Context keys: ``field``, ``value``, ``constraint``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ARGUMENT,
            message=message,
            context=context,
            cause=cause,
        )


class ThumborInvalidStateError(ThumborUrlError, RuntimeError):
    """An operation was requested before its prerequisite.

    Examples are aligning before resizing, or asking for a signed URL from
    a builder that has no key.

    Context keys: ``operation``, ``requires``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_STATE,
            message=message,
            context=context,
            cause=cause,
        )
