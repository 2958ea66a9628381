"""Pure projection from ``MainUiState`` to the main screen's layout tree.

``MainScreenView.apply_layout`` consumes the result. Keeping this step free
of Tk makes every render decision checkable without a display, and equal
states always produce equal layouts.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional, Tuple

from intern.viewmodels.main_state import MainUiState
from intern.viewmodels.ui_models import HeaderUiModel, ItemUiModel

DEFAULT_TITLE = "Intern"
EMPTY_STATE_TEXT = "Nothing to show yet. Press Refresh to load items."

RowKind = Literal["header", "item"]


@dataclass(frozen=True)
class TopBarLayout:
    title: str
    is_loading: bool


@dataclass(frozen=True)
class ErrorMessageLayout:
    text: str


@dataclass(frozen=True)
class ContentRow:
    """One visual row in the content region."""

    kind: RowKind
    title: str
    description: str
    timestamp: str
    image_url: str = ""


@dataclass(frozen=True)
class ContentLayout:
    rows: Tuple[ContentRow, ...]
    empty_text: Optional[str] = None
    """Set only when the state has no items."""

    @property
    def is_empty(self) -> bool:
        return self.empty_text is not None


@dataclass(frozen=True)
class MainScreenLayout:
    top_bar: TopBarLayout
    error_message: Optional[ErrorMessageLayout]
    content: ContentLayout


def render_main_screen(state: MainUiState, *, title: str = DEFAULT_TITLE) -> MainScreenLayout:
    """Build the three screen regions from one state snapshot."""
    return MainScreenLayout(
        top_bar=TopBarLayout(title=title, is_loading=state.is_loading),
        error_message=_error_layout(state.error_message),
        content=ContentLayout(
            rows=_content_rows(state.header, state.items),
            empty_text=EMPTY_STATE_TEXT if state.is_empty else None,
        ),
    )


def _error_layout(message: Optional[str]) -> Optional[ErrorMessageLayout]:
    if not message:
        return None
    return ErrorMessageLayout(text=message)


def _content_rows(
    header: Optional[HeaderUiModel], items: Tuple[ItemUiModel, ...]
) -> Tuple[ContentRow, ...]:
    rows = []
    if header is not None:
        rows.append(
            ContentRow(
                kind="header",
                title=header.title,
                description=header.description,
                timestamp=header.timestamp,
            )
        )
    for item in items:
        rows.append(
            ContentRow(
                kind="item",
                title=item.title,
                description=item.description,
                timestamp=item.timestamp,
                image_url=item.image_url,
            )
        )
    return tuple(rows)


__all__ = [
    "ContentLayout",
    "ContentRow",
    "DEFAULT_TITLE",
    "EMPTY_STATE_TEXT",
    "ErrorMessageLayout",
    "MainScreenLayout",
    "TopBarLayout",
    "render_main_screen",
]
