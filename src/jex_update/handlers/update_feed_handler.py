"""HTTP handlers for update feed requests.

Handlers translate paths into feed targets and domain errors into HTTP
status codes.
"""

from fastapi import HTTPException, Response, status

from jex_update.config import INDEX_TARGET
from jex_update.dto import HealthCheckResponse
from jex_update.exceptions import ExtensionUnavailableError
from jex_update.repositories import FileCacheRepository
from jex_update.services import UpdateFeedService

XML_MEDIA_TYPE = "application/xml"


class UpdateFeedHandler:
    """HTTP handlers for the update server.

    Example:
        ```python
        handler = UpdateFeedHandler(feed_service=feed, cache_store=store)

        @app.get("/{extension}")
        async def extension_feed(extension: str, request: Request):
            return await handler.get_feed(extension, str(request.base_url))
        ```
    """

    def __init__(self, feed_service: UpdateFeedService, cache_store: FileCacheRepository) -> None:
        self._feed = feed_service
        self._cache_store = cache_store

    @staticmethod
    def resolve_target(extension: str | None) -> str:
        """Map a path segment to a feed target.

        ``None`` or an empty segment selects the index; otherwise everything
        before the first "." is used (``mod_weather.xml`` -> ``mod_weather``).
        """
        if not extension:
            return INDEX_TARGET
        return extension.split(".", 1)[0]

    async def get_feed(self, extension: str | None, base_url: str) -> Response:
        """Handle GET / and GET /{extension} requests.

        Args:
            extension: The requested path segment, or None for the root
            base_url: Base URL of the request

        Returns:
            200 with the XML document, or 404 with an empty body for an
            identifier that is not in the catalog

        Raises:
            HTTPException: 502 if the extension's GitHub data is unusable
        """
        target = self.resolve_target(extension)
        if not self._feed.is_known(target):
            return Response(status_code=status.HTTP_404_NOT_FOUND)

        try:
            document = await self._feed.get_document(target, base_url)
        except ExtensionUnavailableError as e:
            raise HTTPException(
                status_code=status.HTTP_502_BAD_GATEWAY,
                detail=f"No update information available for {e.identifier}: {e.reason.value}",
            ) from e

        return Response(content=document, media_type=XML_MEDIA_TYPE)

    async def health_check(self) -> HealthCheckResponse:
        """Handle GET /health requests."""
        writable = self._cache_store.is_writable()
        return HealthCheckResponse(
            status="healthy" if writable else "unhealthy",
            catalog_size=len(self._feed.catalog),
            cache_dir=str(self._cache_store.cache_dir),
            cache_writable=writable,
        )
