import pytest

from intern.adapters.header_info_mock import HeaderInfoMock, sample_header_info
from intern.domain.ports import UseCaseError
from intern.usecases.load_header_info import LoadHeaderInfo


def test_load_header_info_returns_source_record():
    source = HeaderInfoMock()
    uc = LoadHeaderInfo(source)

    assert uc() == sample_header_info()
    assert source.calls == 1


def test_load_header_info_maps_failures_to_use_case_error():
    uc = LoadHeaderInfo(HeaderInfoMock(fail_with="backend exploded"))

    with pytest.raises(UseCaseError) as info:
        uc()

    assert info.value.code == "LOAD_FAILED"
    assert info.value.message == "An error occurred"
    assert isinstance(info.value.__cause__, RuntimeError)


def test_load_header_info_passes_use_case_errors_through():
    class _Source:
        def fetch_header_info(self):
            raise UseCaseError("NOT_FOUND", "Header not found.")

    with pytest.raises(UseCaseError) as info:
        LoadHeaderInfo(_Source())()

    assert info.value.code == "NOT_FOUND"
    assert info.value.message == "Header not found."
