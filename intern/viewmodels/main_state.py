from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .ui_models import HeaderUiModel, ItemUiModel


class MainIntent(Enum):
    """User actions the main screen sends to ``MainVM``."""

    REFRESH_SCREEN = "refresh_screen"
    HIDE_ERROR_MESSAGE = "hide_error_message"


@dataclass(frozen=True)
class MainUiState:
    """Immutable snapshot rendered by the main screen.

    A new instance is published for every transition; widgets never see a
    partially updated state.
    """

    is_loading: bool = False
    error_message: Optional[str] = None
    header: Optional[HeaderUiModel] = None
    items: Tuple[ItemUiModel, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.items, tuple):
            object.__setattr__(self, "items", tuple(self.items))

    @property
    def is_empty(self) -> bool:
        return len(self.items) == 0


__all__ = ["MainIntent", "MainUiState"]
