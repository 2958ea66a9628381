from intern.app.intent_channel import IntentChannel
from intern.app.ui_dispatcher import UiDispatcher
from intern.tests.unit.app.helpers import ManualScheduler
from intern.viewmodels.main_state import MainIntent


def _make_channel():
    scheduler = ManualScheduler()
    dispatcher = UiDispatcher(scheduler.after, scheduler.after_cancel)
    delivered = []
    return IntentChannel(delivered.append, dispatcher), scheduler, delivered


def test_send_does_not_deliver_inline():
    channel, scheduler, delivered = _make_channel()

    channel.send(MainIntent.REFRESH_SCREEN)

    assert delivered == []
    assert channel.pending == 1
    assert len(scheduler.pending) == 1


def test_intents_are_delivered_in_send_order():
    channel, scheduler, delivered = _make_channel()

    channel.send(MainIntent.REFRESH_SCREEN)
    channel.send(MainIntent.HIDE_ERROR_MESSAGE)
    channel.send(MainIntent.REFRESH_SCREEN)
    assert len(scheduler.pending) == 1
    scheduler.run_pending()

    assert delivered == [
        MainIntent.REFRESH_SCREEN,
        MainIntent.HIDE_ERROR_MESSAGE,
        MainIntent.REFRESH_SCREEN,
    ]
    assert channel.pending == 0


def test_failing_handler_does_not_stop_later_intents():
    scheduler = ManualScheduler()
    dispatcher = UiDispatcher(scheduler.after, scheduler.after_cancel)
    delivered = []

    def _deliver(intent):
        if intent is MainIntent.REFRESH_SCREEN:
            raise RuntimeError("handler failed")
        delivered.append(intent)

    channel = IntentChannel(_deliver, dispatcher)
    channel.send(MainIntent.REFRESH_SCREEN)
    channel.send(MainIntent.HIDE_ERROR_MESSAGE)
    scheduler.run_pending()

    assert delivered == [MainIntent.HIDE_ERROR_MESSAGE]


def test_closed_channel_drops_queued_and_new_intents():
    channel, scheduler, delivered = _make_channel()
    channel.send(MainIntent.REFRESH_SCREEN)

    channel.close()
    channel.send(MainIntent.HIDE_ERROR_MESSAGE)
    scheduler.run_pending()

    assert delivered == []
    assert channel.closed
    assert scheduler.pending == {}
