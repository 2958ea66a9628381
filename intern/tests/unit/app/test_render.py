from intern.app.render import (
    EMPTY_STATE_TEXT,
    ContentRow,
    ErrorMessageLayout,
    TopBarLayout,
    render_main_screen,
)
from intern.viewmodels.main_state import MainUiState
from intern.viewmodels.ui_models import HeaderUiModel, ItemUiModel

HEADER = HeaderUiModel(
    id=1,
    title="Sample Title",
    description="Sample Description",
    timestamp="2023-06-23T01:23:40.887Z",
)
ITEMS = (
    ItemUiModel(
        title="Libra",
        description="Description 1",
        image_url="https://example.org/libra.png",
        timestamp="2023-06-23T01:23:40.887Z",
    ),
    ItemUiModel(
        title="Sagittarius",
        description="Description 2",
        image_url="https://example.org/sgr.png",
        timestamp="2023-06-23T01:23:40.887Z",
    ),
)


def test_loading_state_without_content_shows_busy_bar_and_empty_region():
    state = MainUiState(is_loading=True, error_message=None, header=None, items=())

    layout = render_main_screen(state)

    assert layout.top_bar.is_loading is True
    assert layout.error_message is None
    assert layout.content.rows == ()
    assert layout.content.is_empty
    assert layout.content.empty_text == EMPTY_STATE_TEXT


def test_error_state_with_content_shows_message_header_then_items():
    state = MainUiState(
        is_loading=False,
        error_message="An error occurred",
        header=HEADER,
        items=ITEMS,
    )

    layout = render_main_screen(state, title="Feed")

    assert layout.top_bar == TopBarLayout(title="Feed", is_loading=False)
    assert layout.error_message == ErrorMessageLayout(text="An error occurred")
    assert [row.kind for row in layout.content.rows] == ["header", "item", "item"]
    assert [row.title for row in layout.content.rows] == ["Sample Title", "Libra", "Sagittarius"]
    assert layout.content.rows[1] == ContentRow(
        kind="item",
        title="Libra",
        description="Description 1",
        timestamp="2023-06-23T01:23:40.887Z",
        image_url="https://example.org/libra.png",
    )
    assert not layout.content.is_empty


def test_header_without_items_still_renders_empty_state():
    layout = render_main_screen(MainUiState(header=HEADER))

    assert [row.kind for row in layout.content.rows] == ["header"]
    assert layout.content.is_empty


def test_blank_error_message_hides_error_region():
    assert render_main_screen(MainUiState(error_message="")).error_message is None


def test_rendering_same_state_twice_is_identical():
    state = MainUiState(error_message="An error occurred", header=HEADER, items=ITEMS)
    assert render_main_screen(state) == render_main_screen(state)
