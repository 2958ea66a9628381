"""Domain-to-UI projections.

Call context:
    ``MainVM`` maps every successfully loaded ``HeaderInfo`` through these
    mappers before assembling the next ``MainUiState``.
"""

from __future__ import annotations

from typing import Callable, Iterable, Tuple

from intern.domain.models import HeaderInfo, ItemInfo
from intern.domain.time_utils import format_display_date
from .ui_models import HeaderUiModel, ItemUiModel

DateFormatter = Callable[..., str]


class HeaderUiModelMapper:
    """Convert a ``HeaderInfo`` into a ``HeaderUiModel``."""

    def __init__(self, date_formatter: DateFormatter = format_display_date) -> None:
        self._format_date = date_formatter

    def to_ui_model(self, header_info: HeaderInfo) -> HeaderUiModel:
        return HeaderUiModel(
            id=header_info.id,
            title=header_info.title,
            description=header_info.description,
            timestamp=self._format_date(header_info.timestamp),
        )


class ItemUiModelMapper:
    """Convert ``ItemInfo`` entries into list rows, keeping their order."""

    def __init__(self, date_formatter: DateFormatter = format_display_date) -> None:
        self._format_date = date_formatter

    def to_ui_model(self, item_info: ItemInfo) -> ItemUiModel:
        return ItemUiModel(
            title=item_info.title,
            description=item_info.description,
            image_url=item_info.image_url,
            timestamp=self._format_date(item_info.timestamp),
        )

    def to_ui_models(self, items: Iterable[ItemInfo]) -> Tuple[ItemUiModel, ...]:
        return tuple(self.to_ui_model(item) for item in items)


__all__ = ["HeaderUiModelMapper", "ItemUiModelMapper"]
