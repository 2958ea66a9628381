"""Runtime configuration for the desktop app, read from ``INTERN_*`` variables."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from intern.utils.logging import env_truthy

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppConfig:
    """Typed settings for window, render pump, and the offline data source."""

    window_title: str = "Intern"
    window_geometry: str = "480x720"
    render_interval_ms: int = 50
    refresh_on_start: bool = True
    mock_fail_message: Optional[str] = None
    mock_delay_ms: int = 600
    workers: int = 1


def _coerce_int(name: str, value: Any, default: int, *, minimum: int) -> int:
    if value is None or str(value).strip() == "":
        return default
    try:
        coerced = int(str(value).strip())
    except ValueError:
        log.warning("Ignoring %s=%r; expected an integer", name, value)
        return default
    if coerced < minimum:
        log.warning("Ignoring %s=%r; must be >= %d", name, value, minimum)
        return default
    return coerced


def _coerce_bool(value: Optional[str], default: bool) -> bool:
    if value is None or not value.strip():
        return default
    return env_truthy(value)


def load_app_config(env: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Build an ``AppConfig`` from ``env`` (defaults to ``os.environ``).

    ``INTERN_MOCK_FAIL`` accepts either a truthy flag, which uses the generic
    failure text, or the failure message itself.
    """
    source = os.environ if env is None else env
    defaults = AppConfig()

    fail_raw = (source.get("INTERN_MOCK_FAIL") or "").strip()
    if not fail_raw or fail_raw.lower() in {"0", "false", "no", "off"}:
        fail_message = None
    elif env_truthy(fail_raw):
        fail_message = "Simulated data source failure"
    else:
        fail_message = fail_raw

    return AppConfig(
        window_title=(source.get("INTERN_WINDOW_TITLE") or "").strip() or defaults.window_title,
        window_geometry=(source.get("INTERN_WINDOW_GEOMETRY") or "").strip() or defaults.window_geometry,
        render_interval_ms=_coerce_int(
            "INTERN_RENDER_INTERVAL_MS",
            source.get("INTERN_RENDER_INTERVAL_MS"),
            defaults.render_interval_ms,
            minimum=1,
        ),
        refresh_on_start=_coerce_bool(source.get("INTERN_REFRESH_ON_START"), defaults.refresh_on_start),
        mock_fail_message=fail_message,
        mock_delay_ms=_coerce_int(
            "INTERN_MOCK_DELAY_MS", source.get("INTERN_MOCK_DELAY_MS"), defaults.mock_delay_ms, minimum=0
        ),
        workers=_coerce_int("INTERN_WORKERS", source.get("INTERN_WORKERS"), defaults.workers, minimum=1),
    )


__all__ = ["AppConfig", "load_app_config"]
