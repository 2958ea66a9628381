from concurrent.futures import ThreadPoolExecutor

import pytest

from intern.adapters.header_info_mock import HeaderInfoMock
from intern.usecases.load_header_info import LoadHeaderInfo
from intern.viewmodels.main_state import MainIntent, MainUiState
from intern.viewmodels.main_vm import MainVM


def _make_vm(source=None, **kwargs):
    source = source or HeaderInfoMock()
    return MainVM(LoadHeaderInfo(source), **kwargs), source


def test_initial_state_is_idle_and_empty():
    vm, _ = _make_vm()
    assert vm.ui_state.value == MainUiState()


def test_refresh_publishes_loading_then_content():
    vm, _ = _make_vm()
    states = []
    vm.ui_state.subscribe(states.append)

    vm.accept_intent(MainIntent.REFRESH_SCREEN)

    assert [s.is_loading for s in states] == [False, True, False]
    final = states[-1]
    assert final.error_message is None
    assert final.header is not None
    assert final.header.title == "Sample Title"
    assert final.header.timestamp == "Jun 23, 2023"
    assert [item.title for item in final.items] == ["Libra", "Sagittarius"]
    assert final.is_empty is False


def test_failed_refresh_sets_error_and_keeps_content():
    source = HeaderInfoMock()
    vm, _ = _make_vm(source)
    vm.refresh()
    loaded = vm.ui_state.value

    source.fail_with = "offline"
    vm.refresh()

    state = vm.ui_state.value
    assert state.is_loading is False
    assert state.error_message == "An error occurred"
    assert state.header == loaded.header
    assert state.items == loaded.items


def test_hide_error_message_clears_only_the_message():
    vm, _ = _make_vm(HeaderInfoMock(fail_with="offline"))
    vm.refresh()
    assert vm.ui_state.value.error_message == "An error occurred"

    vm.accept_intent(MainIntent.HIDE_ERROR_MESSAGE)

    assert vm.ui_state.value == MainUiState()


def test_successful_refresh_replaces_previous_error():
    source = HeaderInfoMock(fail_with="offline")
    vm, _ = _make_vm(source)
    vm.refresh()

    source.fail_with = None
    vm.refresh()

    assert vm.ui_state.value.error_message is None
    assert vm.ui_state.value.header is not None


def test_refresh_runs_on_executor():
    executor = ThreadPoolExecutor(max_workers=1)
    vm, source = _make_vm(executor=executor)

    vm.refresh()
    executor.shutdown(wait=True)

    assert source.calls == 1
    assert vm.ui_state.value.is_loading is False
    assert len(vm.ui_state.value.items) == 2


def test_refresh_while_in_flight_is_ignored():
    class _ReentrantSource:
        def __init__(self):
            self.calls = 0
            self.vm = None

        def fetch_header_info(self):
            self.calls += 1
            self.vm.refresh()
            return HeaderInfoMock().header

    source = _ReentrantSource()
    vm = MainVM(LoadHeaderInfo(source))
    source.vm = vm

    vm.refresh()

    assert source.calls == 1


def test_closed_vm_discards_results():
    vm, source = _make_vm()
    vm.close()

    vm.refresh()

    assert source.calls == 0
    assert vm.ui_state.value == MainUiState()
    assert vm.closed


def test_unknown_intent_is_rejected():
    vm, _ = _make_vm()
    with pytest.raises(AssertionError):
        vm.accept_intent("refresh")  # type: ignore[arg-type]


class _BrokenHeaderMapper:
    def to_ui_model(self, header_info):
        raise AttributeError("timestamp is missing")


def test_unexpected_failure_inline_clears_loading_and_shows_error():
    vm, _ = _make_vm(header_mapper=_BrokenHeaderMapper())

    vm.refresh()

    state = vm.ui_state.value
    assert state.is_loading is False
    assert state.error_message == "An error occurred"


def test_unexpected_failure_on_executor_clears_loading_and_shows_error():
    executor = ThreadPoolExecutor(max_workers=1)
    vm, _ = _make_vm(executor=executor, header_mapper=_BrokenHeaderMapper())

    vm.refresh()
    executor.shutdown(wait=True)

    state = vm.ui_state.value
    assert state.is_loading is False
    assert state.error_message == "An error occurred"


def test_refresh_is_accepted_again_after_unexpected_failure():
    vm, source = _make_vm(header_mapper=_BrokenHeaderMapper())
    vm.refresh()
    vm.refresh()

    assert source.calls == 2


def test_hide_error_message_after_close_emits_nothing():
    vm, _ = _make_vm(HeaderInfoMock(fail_with="offline"))
    vm.refresh()
    states = []
    vm.ui_state.subscribe(states.append)

    vm.close()
    vm.accept_intent(MainIntent.HIDE_ERROR_MESSAGE)

    assert len(states) == 1
    assert vm.ui_state.value.error_message == "An error occurred"
