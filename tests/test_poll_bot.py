from __future__ import annotations

import asyncio
import threading
from datetime import datetime
from types import SimpleNamespace
from unittest.mock import AsyncMock

from bookclub.application.use_cases.handle_poll_callback import HandlePollCallbackUseCase
from bookclub.application.use_cases.handle_poll_message import HandlePollMessageUseCase
from bookclub.domain.entities.dialogue import DialogueState, PollingState, StartState
from bookclub.domain.exceptions import DialogueStateDecodeError
from bookclub.infrastructure.telegram.poll_bot import PollBot


class FakeDialogueStatePort:
    def __init__(self):
        self.states: dict[str, DialogueState] = {}

    def get_state(self, *, conversation_id: str) -> DialogueState:
        return self.states.get(conversation_id, StartState())

    def save_state(self, *, conversation_id: str, state: DialogueState) -> None:
        self.states[conversation_id] = state


class BrokenDialogueStatePort(FakeDialogueStatePort):
    def get_state(self, *, conversation_id: str) -> DialogueState:
        raise DialogueStateDecodeError("Unsupported dialogue state schema: 9")


def _make_bot(port: FakeDialogueStatePort) -> PollBot:
    return PollBot(
        message_use_case=HandlePollMessageUseCase(
            dialogue_state_port=port,
            now=lambda: datetime(2024, 1, 1, 9, 0),
        ),
        callback_use_case=HandlePollCallbackUseCase(dialogue_state_port=port),
        bot_username="poll_bot",
    )


def _message_update(text: str, chat_id: int = 42):
    message = SimpleNamespace(text=text, reply_text=AsyncMock())
    update = SimpleNamespace(effective_message=message, effective_chat=SimpleNamespace(id=chat_id))
    return update, message


def _callback_update(data: str, chat_id: int = 42):
    query = SimpleNamespace(data=data, answer=AsyncMock(), edit_message_reply_markup=AsyncMock())
    update = SimpleNamespace(callback_query=query, effective_chat=SimpleNamespace(id=chat_id))
    return update, query


def test_polldate_message_replies_with_inline_keyboard():
    port = FakeDialogueStatePort()
    bot = _make_bot(port)
    update, message = _message_update("/polldate 1 January 2024 to 4 January 2024")

    asyncio.run(bot.on_message(update, SimpleNamespace(bot=None)))

    assert message.reply_text.await_count == 2
    first_call, second_call = message.reply_text.await_args_list
    assert first_call.args == ("start: 2024-01-01 00:00:00, end: 2024-01-04 00:00:00",)
    assert first_call.kwargs["reply_markup"] is None
    assert second_call.args == ("Select Days",)
    rows = second_call.kwargs["reply_markup"].inline_keyboard
    assert [row[0].text for row in rows] == ["Mon 01 Jan", "Tue 02 Jan", "Wed 03 Jan"]
    assert [row[0].callback_data for row in rows] == ["2024-01-01", "2024-01-02", "2024-01-03"]
    assert isinstance(port.states["42"], PollingState)


def test_callback_edits_keyboard_on_original_message():
    port = FakeDialogueStatePort()
    port.states["42"] = PollingState(start=datetime(2024, 1, 1), end=datetime(2024, 1, 4))
    bot = _make_bot(port)
    update, query = _callback_update("2024-01-03")

    asyncio.run(bot.on_callback(update, SimpleNamespace(bot=None)))

    query.answer.assert_awaited_once()
    markup = query.edit_message_reply_markup.await_args.kwargs["reply_markup"]
    assert [row[0].text for row in markup.inline_keyboard] == ["Mon 01 Jan", "Tue 02 Jan", "Wed 03 Jan ✅"]


def test_callback_without_poll_does_not_edit():
    bot = _make_bot(FakeDialogueStatePort())
    update, query = _callback_update("2024-01-03")

    asyncio.run(bot.on_callback(update, SimpleNamespace(bot=None)))

    query.edit_message_reply_markup.assert_not_awaited()


def test_handler_errors_are_logged_and_swallowed(caplog):
    bot = _make_bot(BrokenDialogueStatePort())
    update, query = _callback_update("2024-01-03")

    asyncio.run(bot.on_callback(update, SimpleNamespace(bot=None)))

    query.edit_message_reply_markup.assert_not_awaited()
    assert "callback_failed" in caplog.text


class ThreadRecordingMessageUseCase(HandlePollMessageUseCase):
    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.thread_ids: list[int] = []

    def execute(self, command):
        self.thread_ids.append(threading.get_ident())
        return super().execute(command)


class ThreadRecordingCallbackUseCase(HandlePollCallbackUseCase):
    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.thread_ids: list[int] = []

    def execute(self, command):
        self.thread_ids.append(threading.get_ident())
        return super().execute(command)


def test_use_cases_run_off_the_event_loop_thread():
    port = FakeDialogueStatePort()
    message_use_case = ThreadRecordingMessageUseCase(
        dialogue_state_port=port,
        now=lambda: datetime(2024, 1, 1, 9, 0),
    )
    callback_use_case = ThreadRecordingCallbackUseCase(dialogue_state_port=port)
    bot = PollBot(
        message_use_case=message_use_case,
        callback_use_case=callback_use_case,
        bot_username="poll_bot",
    )
    message_update, _ = _message_update("/polldate 2024-01-01 to 2024-01-04")
    callback_update, query = _callback_update("2024-01-02")

    async def run_handlers() -> int:
        await bot.on_message(message_update, SimpleNamespace(bot=None))
        await bot.on_callback(callback_update, SimpleNamespace(bot=None))
        return threading.get_ident()

    loop_thread = asyncio.run(run_handlers())

    assert len(message_use_case.thread_ids) == 1
    assert len(callback_use_case.thread_ids) == 1
    assert loop_thread not in message_use_case.thread_ids + callback_use_case.thread_ids
    markup = query.edit_message_reply_markup.await_args.kwargs["reply_markup"]
    assert [row[0].text for row in markup.inline_keyboard] == ["Mon 01 Jan", "Tue 02 Jan ✅", "Wed 03 Jan"]
