from __future__ import annotations

from typing import Protocol

from .models import HeaderInfo


# ---- Error model ----
class UseCaseError(Exception):
    """Base class for use case level errors (user-presentable)."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


# ---- Ports (Hexagonal boundaries) ----
class HeaderInfoPort(Protocol):
    """Source of the header record and its entries."""

    def fetch_header_info(self) -> HeaderInfo: ...
