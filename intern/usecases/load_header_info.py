from __future__ import annotations

import logging
from dataclasses import dataclass

from intern.domain.models import HeaderInfo
from intern.domain.ports import HeaderInfoPort
from .error_mapping import map_load_error

log = logging.getLogger(__name__)


@dataclass
class LoadHeaderInfo:
    """Fetch the header record; every failure surfaces as ``UseCaseError``."""

    source: HeaderInfoPort

    def __call__(self) -> HeaderInfo:
        try:
            header = self.source.fetch_header_info()
        except Exception as exc:
            log.warning("Loading header info failed: %s", exc)
            raise map_load_error(exc) from exc
        log.debug("Loaded header id=%s with %d items", header.id, len(header.items))
        return header


__all__ = ["LoadHeaderInfo"]
