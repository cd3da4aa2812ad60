import httpx
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from weather_widget.core.config import settings


class HTTPService:
    """
    Shared plumbing for services that talk to an HTTP provider.
    Uses the injected client when given, otherwise opens one per request.
    """

    def __init__(self, client: Optional[httpx.AsyncClient] = None):
        self.client = client

    @asynccontextmanager
    async def _session(self) -> AsyncIterator[httpx.AsyncClient]:
        if self.client is not None:
            yield self.client
            return
        async with httpx.AsyncClient(timeout=settings.HTTP_TIMEOUT) as client:
            yield client
