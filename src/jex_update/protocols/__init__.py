"""Protocol interfaces for swappable implementations.

Protocols enable:
- Swapping the source host (GitHub today, anything with releases tomorrow)
- Unit testing with fake clients, stores and clocks
- Clear separation of concerns
"""

from .cache_store import CacheStore
from .clock import Clock
from .source_client import SourceClient

__all__ = [
    "CacheStore",
    "Clock",
    "SourceClient",
]
