"""Domain package exports for records, ports, and time helpers."""

from .models import HeaderInfo, ItemInfo
from .ports import HeaderInfoPort, UseCaseError
from .time_utils import format_display_date, parse_instant

__all__ = [
    "HeaderInfo",
    "HeaderInfoPort",
    "ItemInfo",
    "UseCaseError",
    "format_display_date",
    "parse_instant",
]
