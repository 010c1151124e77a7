"""Domain exceptions.

Repositories raise these instead of transport-specific errors so that
services and handlers never depend on httpx or the XML parser directly.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from jex_update.entities import SkipReason


class JexUpdateError(Exception):
    """Base class for update server errors."""


class SourceClientError(JexUpdateError):
    """The source hosting API could not be reached or returned an unusable payload."""


class ManifestError(JexUpdateError):
    """An extension manifest is not well-formed or misses required data."""


class ExtensionUnavailableError(JexUpdateError):
    """No update document can be produced for a catalog entry.

    Attributes:
        identifier: The catalog identifier that was requested
        reason: Why the entry could not be resolved
        detail: Human-readable explanation
    """

    def __init__(self, identifier: str, reason: "SkipReason", detail: str = "") -> None:
        self.identifier = identifier
        self.reason = reason
        self.detail = detail
        message = f"{identifier}: {reason.value}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)
