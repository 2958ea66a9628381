from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Optional

from intern.domain.models import HeaderInfo, ItemInfo
from intern.domain.ports import HeaderInfoPort
from intern.domain.time_utils import parse_instant

SAMPLE_TIMESTAMP = "2023-06-23T01:23:40.887Z"


def sample_header_info() -> HeaderInfo:
    """Return the deterministic sample header with two entries."""
    stamp = parse_instant(SAMPLE_TIMESTAMP)
    return HeaderInfo(
        id=1,
        title="Sample Title",
        description="Sample Description",
        timestamp=stamp,
        items=(
            ItemInfo(
                title="Libra",
                description="Description 1",
                image_url="https://upload.wikimedia.org/wikipedia/commons/thumb/7/76/Libra_IAU.svg/2560px-Libra_IAU.svg.png",
                timestamp=stamp,
            ),
            ItemInfo(
                title="Sagittarius",
                description="Description 2",
                image_url="https://upload.wikimedia.org/wikipedia/commons/thumb/1/12/Terebellum_asterism.png/1920px-Terebellum_asterism.png",
                timestamp=stamp,
            ),
        ),
    )


@dataclass
class HeaderInfoMock(HeaderInfoPort):
    """In-memory header source used for offline runs and tests.

    ``fail_with`` makes every fetch raise that message, ``delay_s`` simulates
    a slow source when the fetch runs on a worker thread.
    """

    header: HeaderInfo = field(default_factory=sample_header_info)
    fail_with: Optional[str] = None
    delay_s: float = 0.0

    def __post_init__(self) -> None:
        self._log = logging.getLogger(__name__)
        self.calls = 0

    def fetch_header_info(self) -> HeaderInfo:
        self.calls += 1
        if self.delay_s > 0:
            time.sleep(self.delay_s)
        if self.fail_with:
            self._log.debug("Mock fetch #%d failing: %s", self.calls, self.fail_with)
            raise RuntimeError(self.fail_with)
        self._log.debug("Mock fetch #%d returning header id=%s", self.calls, self.header.id)
        return self.header


__all__ = ["HeaderInfoMock", "SAMPLE_TIMESTAMP", "sample_header_info"]
