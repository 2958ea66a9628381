"""Display-ready models consumed by the screen renderer."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HeaderUiModel:
    """Header card content with the timestamp already formatted."""

    id: int
    title: str
    description: str
    timestamp: str


@dataclass(frozen=True)
class ItemUiModel:
    """One row of the content list."""

    title: str
    description: str
    image_url: str
    timestamp: str


__all__ = ["HeaderUiModel", "ItemUiModel"]
