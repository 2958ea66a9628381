from datetime import datetime, timezone

import pytest

from intern.adapters.header_info_mock import sample_header_info
from intern.domain.models import HeaderInfo, ItemInfo


def test_header_info_stores_items_as_tuple():
    stamp = datetime(2023, 6, 23, tzinfo=timezone.utc)
    item = ItemInfo(title="A", description="d", image_url="u", timestamp=stamp)
    header = HeaderInfo(id=7, title="T", description="D", timestamp=stamp, items=[item])

    assert header.items == (item,)
    with pytest.raises(AttributeError):
        header.title = "changed"  # type: ignore[misc]


def test_sample_header_info_is_stable():
    first = sample_header_info()
    second = sample_header_info()

    assert first == second
    assert first.id == 1
    assert [item.title for item in first.items] == ["Libra", "Sagittarius"]
