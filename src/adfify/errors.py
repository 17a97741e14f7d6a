"""Error hierarchy for adfify.

Conversion itself never raises: unsupported content is reported as
:class:`~adfify.models.ConversionWarning`.  Errors only arise at the
edges, when a caller hands adfify something that is not an ADF
document at all (for example an API response body that is not JSON).

Every error carries a machine-readable ``code`` (from :class:`ErrorCode`),
a human-readable ``message``, an optional structured ``context`` dict,
and an optional ``cause`` (chained exception).
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Machine-readable error codes for every error adfify can raise."""

    DOCUMENT_ERROR = "DOCUMENT_ERROR"


class AdfifyError(Exception):
    """Base exception for all adfify errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
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


class AdfifyDocumentError(AdfifyError):
    """Input could not be decoded into an ADF document.

    Context keys: ``position`` (character offset of a JSON syntax error),
    ``root_type`` (Python type name of a non-object JSON root).
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.DOCUMENT_ERROR,
            message=message,
            context=context,
            cause=cause,
        )
