"""Application notifications – push token registration."""
from __future__ import annotations

from typing import Any, Protocol

from citydir.kernel.errors import FetchError
from citydir.observability.logging import get_logger

log = get_logger(__name__)

REGISTER_PATH = "/notifications/register"


def _mask(token: str) -> str:
    return token[:4] + "..." if len(token) > 8 else "[REDACTED]"


class PostClient(Protocol):
    async def post(self, url: str, **kwargs: Any) -> Any: ...


class NotificationRegistrar:
    """Hands a push token obtained from the push provider to the backend.

    Registration is best-effort: failures are logged and reported as
    ``False``, never raised.
    """

    def __init__(self, client: PostClient) -> None:
        self._client = client
        self.registered_token: str | None = None

    async def register(self, token: str) -> bool:
        if not token:
            return False
        try:
            await self._client.post(REGISTER_PATH, json={"token": token})
        except FetchError as exc:
            log.warning("notifications.register_failed", token=_mask(token), error=exc.message)
            return False
        self.registered_token = token
        log.info("notifications.registered")
        return True


__all__ = ["NotificationRegistrar", "PostClient"]
