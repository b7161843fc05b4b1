"""Observability – RequestContext, CorrelationContext."""
from __future__ import annotations

import dataclasses
from contextvars import ContextVar
from uuid import uuid4


@dataclasses.dataclass(frozen=True)
class RequestContext:
    """Ambient context for one listing refresh or API call chain."""
    correlation_id: str
    tenant_id: str | None = None
    user_id: str | None = None

    @classmethod
    def new(cls, tenant_id: str | None = None, user_id: str | None = None) -> "RequestContext":
        return cls(correlation_id=str(uuid4()), tenant_id=tenant_id, user_id=user_id)


_CTX_VAR: ContextVar[RequestContext | None] = ContextVar("_citydir_request_ctx", default=None)


class CorrelationContext:
    """Ambient correlation context stored in a ``ContextVar``.

    Each asyncio task sees its own copy, so overlapping refreshes never share
    a correlation id.
    """

    @staticmethod
    def set(ctx: RequestContext) -> None:
        _CTX_VAR.set(ctx)

    @staticmethod
    def get() -> RequestContext | None:
        return _CTX_VAR.get()

    @staticmethod
    def clear() -> None:
        _CTX_VAR.set(None)

    @staticmethod
    def headers() -> dict[str, str]:
        """Outgoing HTTP headers for the active context (empty when none)."""
        ctx = _CTX_VAR.get()
        if ctx is None:
            return {}
        headers = {"X-Correlation-ID": ctx.correlation_id}
        if ctx.tenant_id is not None:
            headers["X-Tenant-ID"] = ctx.tenant_id
        if ctx.user_id is not None:
            headers["X-User-ID"] = ctx.user_id
        return headers


__all__ = ["CorrelationContext", "RequestContext"]
