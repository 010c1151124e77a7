"""Dependency injection configuration for FastAPI app.

Uses FastAPI's app.state pattern for storing service instances.

Pattern:
    - Services stored in app.state during lifespan
    - Dependency functions retrieve from request.app.state
    - Collaborators (source client, clock) can be injected for tests
"""

import logging
from collections.abc import AsyncIterator, Callable
from contextlib import AbstractAsyncContextManager, asynccontextmanager
from typing import Annotated

from fastapi import Depends, FastAPI, Request

from jex_update.config import Settings
from jex_update.handlers import UpdateFeedHandler
from jex_update.logging_setup import setup_logging
from jex_update.protocols import Clock, SourceClient
from jex_update.repositories import FileCacheRepository, GitHubSourceClient
from jex_update.services import UpdateFeedService

logger = logging.getLogger(__name__)


def get_handler(request: Request) -> UpdateFeedHandler:
    """Dependency injection for UpdateFeedHandler from app.state.

    Raises:
        RuntimeError: If handler is not initialized
    """
    handler = getattr(request.app.state, "feed_handler", None)
    if handler is None:
        raise RuntimeError("UpdateFeedHandler not initialized. Check lifespan setup.")
    return handler


def build_lifespan(
    config: Settings,
    source_client: SourceClient | None = None,
    clock: Clock | None = None,
) -> Callable[[FastAPI], AbstractAsyncContextManager[None]]:
    """Create the lifespan context manager for the app.

    Args:
        config: Settings used to wire every layer
        source_client: Source client to use instead of a GitHub client
        clock: Clock to use instead of the system clock

    Returns:
        A lifespan callable for FastAPI(lifespan=...)
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """Initialize all layers and store them in app.state.

        1. Repositories (GitHub client, file cache) - created explicitly
        2. Service (business logic) - app.state.feed_service
        3. Handler (HTTP endpoints) - app.state.feed_handler
        """
        setup_logging(config.log_level)

        client = source_client or GitHubSourceClient.create(config)
        cache_store = FileCacheRepository.create(config, clock=clock)
        feed_service = UpdateFeedService.create(
            source_client=client,
            cache_store=cache_store,
            config=config,
        )

        app.state.source_client = client
        app.state.cache_store = cache_store
        app.state.feed_service = feed_service
        app.state.feed_handler = UpdateFeedHandler(feed_service=feed_service, cache_store=cache_store)

        logger.info(
            "Update server '%s' started: %d extensions, cache %s (ttl %ds)",
            config.server_name,
            len(feed_service.catalog),
            cache_store.cache_dir,
            cache_store.ttl,
        )

        yield

        # Only close what we created
        if isinstance(client, GitHubSourceClient) and source_client is None:
            await client.close()

        del app.state.feed_handler
        del app.state.feed_service
        del app.state.cache_store
        del app.state.source_client
        logger.info("Update server shut down")

    return lifespan


# Type aliases for cleaner dependency injection
HandlerDep = Annotated[UpdateFeedHandler, Depends(get_handler)]
