"""Clock protocol."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Source of the current time as a Unix timestamp."""

    def now(self) -> float:
        ...
