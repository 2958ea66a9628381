# intern/app/main.py
from __future__ import annotations

import logging
import tkinter as tk
from concurrent.futures import ThreadPoolExecutor
from typing import Optional

# ---- Views (UI-only) ----
from .views.main_screen import MainScreenView
from .views.theme import apply_theme

# ---- ViewModels ----
from ..viewmodels.main_state import MainIntent
from ..viewmodels.main_vm import MainVM

# ---- UseCases & Adapter ----
from ..adapters.header_info_mock import HeaderInfoMock
from ..usecases.load_header_info import LoadHeaderInfo
from ..utils import logging as logging_utils

from .app_config import AppConfig, load_app_config
from .screen_binding import MainScreenBinding
from .ui_dispatcher import UiDispatcher


class App:
    """Bootstrap: wire the main screen <-> MainVM, the data source, and the render pump."""

    def __init__(self, config: Optional[AppConfig] = None, root: Optional[tk.Tk] = None) -> None:
        self._log = logging.getLogger(__name__)
        self.config = config or load_app_config()

        # ---- Data source & use case ----
        self.source = HeaderInfoMock(
            fail_with=self.config.mock_fail_message,
            delay_s=self.config.mock_delay_ms / 1000.0,
        )
        self.uc_load = LoadHeaderInfo(self.source)

        # ---- ViewModel ----
        self.executor = ThreadPoolExecutor(
            max_workers=self.config.workers, thread_name_prefix="intern-load"
        )
        self.vm = MainVM(self.uc_load, executor=self.executor)

        # ---- Window & screen ----
        self.win = root if root is not None else tk.Tk()
        self.win.title(self.config.window_title)
        self.win.geometry(self.config.window_geometry)
        self.win.minsize(360, 480)
        apply_theme(self.win)

        self.screen = MainScreenView(self.win)
        self.screen.pack(fill="both", expand=True)

        self.dispatcher = UiDispatcher(self.win.after, self.win.after_cancel)
        self.binding = MainScreenBinding(
            self.vm,
            self.screen,
            self.dispatcher,
            title=self.config.window_title,
            render_interval_ms=self.config.render_interval_ms,
        )

        self.win.protocol("WM_DELETE_WINDOW", self.on_close)
        self.win.bind("<F5>", lambda e: self.binding.intents.send(MainIntent.REFRESH_SCREEN))
        self.win.bind("<Escape>", lambda e: self.binding.intents.send(MainIntent.HIDE_ERROR_MESSAGE))

        self.binding.start()
        if self.config.refresh_on_start:
            self.binding.intents.send(MainIntent.REFRESH_SCREEN)
        self._log.debug("App started with %s", self.config)

    def on_close(self) -> None:
        """Tear down in reverse order: stop rendering, stop the VM, then the workers."""
        self.binding.close()
        self.dispatcher.close()
        self.vm.close()
        self.executor.shutdown(wait=False, cancel_futures=True)
        self.win.destroy()


def main() -> None:
    logging_utils.configure_logging()
    app = App()
    app.win.mainloop()


if __name__ == "__main__":
    main()
