from __future__ import annotations

"""Domain records produced by the header-info data source."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Tuple


@dataclass(frozen=True)
class ItemInfo:
    """Single feed entry attached to a header, in upstream order."""

    title: str
    description: str
    image_url: str
    timestamp: datetime
    """Instant the entry was published."""


@dataclass(frozen=True)
class HeaderInfo:
    """Header record and its ordered entries, before any presentation formatting."""

    id: int
    title: str
    description: str
    timestamp: datetime
    """Instant the header was last updated."""
    items: Tuple[ItemInfo, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any sequence from adapters but store an immutable tuple.
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))


__all__ = ["HeaderInfo", "ItemInfo"]
