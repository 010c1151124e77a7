"""Service layer for business logic.

Architecture:
    Handler -> UpdateFeedService -> ExtensionResolver -> SourceClient
                                 -> xml_renderer
                                 -> CacheStore

Usage:
    ```python
    from jex_update.services import UpdateFeedService

    feed = UpdateFeedService.create(source_client=client, cache_store=store)
    document = await feed.get_document("mod_weather", "https://updates.example.com/")
    ```
"""

from .extension_resolver import ExtensionResolver
from .update_feed_service import UpdateFeedService
from .xml_renderer import render_extension_set, render_update

__all__ = [
    "ExtensionResolver",
    "UpdateFeedService",
    "render_extension_set",
    "render_update",
]
