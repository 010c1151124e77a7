"""Handler layer for HTTP endpoints.

Handlers depend on services (business logic), not directly on repositories.

Architecture:
    Handler -> Service -> Repository
    (HTTP)  -> (Business) -> (Data Access)
"""

from .update_feed_handler import UpdateFeedHandler

__all__ = [
    "UpdateFeedHandler",
]
