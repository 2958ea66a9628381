"""NiceGUI entrypoint serving the main screen in a browser.

Each browser client gets its own ``MainVM`` and ``MainScreenBinding``; the
asyncio loop plays the role of the Tk UI thread.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
from concurrent.futures import Executor, ThreadPoolExecutor
from typing import Callable, List, Optional

from nicegui import app, ui

from intern.adapters.header_info_mock import HeaderInfoMock
from intern.app.app_config import AppConfig, load_app_config
from intern.app.render import MainScreenLayout, render_main_screen
from intern.app.screen_binding import MainScreenBinding
from intern.app.ui_dispatcher import UiDispatcher
from intern.app.views.view_utils import safe_call
from intern.usecases.load_header_info import LoadHeaderInfo
from intern.utils import logging as logging_utils
from intern.viewmodels.main_state import MainIntent
from intern.viewmodels.main_vm import MainVM

LOGGER = logging.getLogger(__name__)


def _install_theme() -> None:
    """Install global CSS tokens for the web runtime."""
    ui.add_head_html(
        """
<style>
:root {
  --intern-bg: #f3f5f9;
  --intern-card: #ffffff;
  --intern-border: #d9dfeb;
  --intern-accent: #0caa41;
  --intern-muted: #64748b;
  --intern-snackbar: #323232;
}
body { background: var(--intern-bg); }
.intern-page { max-width: 720px; margin: 0 auto; padding: 12px; }
.intern-card {
  background: var(--intern-card);
  border: 1px solid var(--intern-border);
  border-radius: 12px;
}
.intern-muted { color: var(--intern-muted); }
.intern-snackbar {
  position: fixed;
  left: 50%;
  bottom: 24px;
  transform: translateX(-50%);
  background: var(--intern-snackbar);
  color: #ffffff;
  border-radius: 8px;
  padding: 6px 8px 6px 16px;
}
</style>
        """
    )


class WebMainScreenView:
    """Browser counterpart of ``MainScreenView``; redraws on each new layout."""

    def __init__(self) -> None:
        self.on_refresh: Optional[Callable[[], None]] = None
        self.on_hide_error_message: Optional[Callable[[], None]] = None
        self.layout: Optional[MainScreenLayout] = None
        self._render: Optional[ui.refreshable] = None

    def mount(self) -> None:
        """Create the refreshable screen container in the current page context."""

        @ui.refreshable
        def render_screen() -> None:
            self._build(self.layout)

        self._render = render_screen
        render_screen()

    def apply_layout(self, layout: MainScreenLayout) -> None:
        if layout == self.layout:
            return
        self.layout = layout
        if self._render is not None:
            self._render.refresh()

    # ------------------------------------------------------------------
    def _build(self, layout: Optional[MainScreenLayout]) -> None:
        if layout is None:
            ui.spinner(size="lg")
            return
        top_bar = layout.top_bar
        with ui.row().classes("w-full items-center justify-between intern-card q-pa-sm"):
            ui.label(top_bar.title).classes("text-h6")
            with ui.row().classes("items-center"):
                if top_bar.is_loading:
                    ui.spinner(size="md")
                ui.button("Refresh", on_click=lambda: safe_call(self.on_refresh)).props("flat")

        with ui.column().classes("w-full q-gutter-sm q-mt-sm"):
            for row in layout.content.rows:
                with ui.card().classes("w-full intern-card"):
                    with ui.row().classes("w-full items-baseline justify-between"):
                        title_class = "text-h6" if row.kind == "header" else "text-subtitle1"
                        ui.label(row.title).classes(title_class)
                        ui.label(row.timestamp).classes("text-caption intern-muted")
                    ui.label(row.description)
                    if row.image_url:
                        ui.image(row.image_url).classes("w-32")
            if layout.content.empty_text is not None:
                ui.label(layout.content.empty_text).classes("intern-muted q-pa-lg")

        if layout.error_message is not None:
            with ui.row().classes("items-center intern-snackbar"):
                ui.label(layout.error_message.text)
                ui.button(
                    "Dismiss", on_click=lambda: safe_call(self.on_hide_error_message)
                ).props("flat color=positive")


def _loop_dispatcher(loop: asyncio.AbstractEventLoop) -> UiDispatcher:
    return UiDispatcher(
        lambda delay_ms, callback: loop.call_later(delay_ms / 1000.0, callback),
        lambda handle: handle.cancel(),
    )


def _build_ui(config: AppConfig, executor: Executor) -> None:
    """Register the NiceGUI page for the runtime."""
    source = HeaderInfoMock(
        fail_with=config.mock_fail_message,
        delay_s=config.mock_delay_ms / 1000.0,
    )
    uc_load = LoadHeaderInfo(source)

    @ui.page("/")
    async def index() -> None:
        vm = MainVM(uc_load, executor=executor)
        view = WebMainScreenView()
        dispatcher = _loop_dispatcher(asyncio.get_running_loop())
        binding = MainScreenBinding(
            vm,
            view,
            dispatcher,
            title=config.window_title,
            render_interval_ms=config.render_interval_ms,
        )

        with ui.column().classes("w-full intern-page"):
            view.mount()

        def teardown() -> None:
            binding.close()
            dispatcher.close()
            vm.close()

        ui.context.client.on_disconnect(teardown)
        binding.start()
        if config.refresh_on_start:
            binding.intents.send(MainIntent.REFRESH_SCREEN)


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse CLI args for web runtime startup."""
    parser = argparse.ArgumentParser(description="Run the intern screen as a NiceGUI web UI.")
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8080)
    parser.add_argument("--reload", action="store_true")
    parser.add_argument("--smoke-test", action="store_true")
    return parser.parse_args(argv)


def _smoke_test(config: AppConfig) -> str:
    """Load once without a server and summarize the resulting layout."""
    vm = MainVM(LoadHeaderInfo(HeaderInfoMock(fail_with=config.mock_fail_message)))
    vm.refresh()
    layout = render_main_screen(vm.ui_state.value, title=config.window_title)
    error = layout.error_message.text if layout.error_message else "-"
    return f"web-smoke-ok rows={len(layout.content.rows)} error={error}"


def _shutdown_executor(executor: Executor) -> None:
    LOGGER.info("Stopping header loader pool")
    executor.shutdown(wait=False, cancel_futures=True)


def main(argv: Optional[List[str]] = None) -> None:
    """CLI entrypoint for the NiceGUI runtime."""
    args = _parse_args(argv)
    logging_utils.configure_logging()
    config = load_app_config()
    if args.smoke_test:
        print(_smoke_test(config))
        return
    executor = ThreadPoolExecutor(max_workers=config.workers, thread_name_prefix="intern-web-load")
    app.on_shutdown(lambda: _shutdown_executor(executor))
    _install_theme()
    _build_ui(config, executor)
    LOGGER.info("Serving on http://%s:%d", args.host, args.port)
    ui.run(
        host=args.host,
        port=args.port,
        title=config.window_title,
        reload=args.reload,
        show=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
