"""Root of the citydir error hierarchy.

Errors leave the library through two doors: as structured log events
(:meth:`BaseError.log_fields`) and as the ``error`` of a listing view state,
where the UI reads :attr:`BaseError.retryable` to decide whether a retry
button makes sense.
"""

from __future__ import annotations

import json
from typing import Any, ClassVar


class BaseError(Exception):
    """Base class for every error raised by citydir.

    Args:
        message: Human-readable description, never shown verbatim to end users.
        code: Machine-readable slug; falls back to the class's ``default_code``.
        detail: Extra context, kept JSON-serialisable for the log pipeline.
        cause: The lower-level exception being translated, if any.
    """

    default_code: ClassVar[str] = "base_error"
    default_retryable: ClassVar[bool] = False

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def retryable(self) -> bool:
        """Whether repeating the same operation unchanged could succeed."""
        return self.default_retryable

    def log_fields(self) -> dict[str, Any]:
        """Key-value context for ``log.error(event, **err.log_fields())``."""
        fields: dict[str, Any] = {"error_code": self.code, "error": self.message}
        if self.detail:
            fields["error_detail"] = self.detail
        if self.cause is not None:
            fields["error_cause"] = type(self.cause).__name__
        return fields

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {
            "code": self.code,
            "message": self.message,
            "detail": self.detail,
            "retryable": self.retryable,
        }
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


__all__ = ["BaseError"]
