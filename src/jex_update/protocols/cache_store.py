"""Rendered document cache protocol."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    """Protocol for storage of rendered XML documents, keyed by target name."""

    def is_valid(self, target: str) -> bool:
        """Check whether a fresh, readable document exists.

        Args:
            target: "index" or an extension identifier

        Returns:
            True if the cached document may be served
        """
        ...

    def read(self, target: str) -> bytes | None:
        """Read a cached document.

        Returns:
            The document bytes, or None if it cannot be read
        """
        ...

    def write(self, target: str, document: bytes) -> None:
        """Replace a cached document atomically."""
        ...
