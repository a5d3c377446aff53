from __future__ import annotations

from datetime import datetime

from bookclub.application.dto.dialogue import PollCallbackInput, PollMessageInput
from bookclub.application.use_cases.handle_poll_callback import HandlePollCallbackUseCase
from bookclub.application.use_cases.handle_poll_message import HandlePollMessageUseCase
from bookclub.domain.entities.dialogue import DialogueState, PollingState, StartState


class FakeDialogueStatePort:
    def __init__(self):
        self.states: dict[str, DialogueState] = {}
        self.saves = 0

    def get_state(self, *, conversation_id: str) -> DialogueState:
        return self.states.get(conversation_id, StartState())

    def save_state(self, *, conversation_id: str, state: DialogueState) -> None:
        self.saves += 1
        self.states[conversation_id] = state


NOW = datetime(2024, 1, 1, 9, 30)


def _message_use_case(port: FakeDialogueStatePort) -> HandlePollMessageUseCase:
    return HandlePollMessageUseCase(dialogue_state_port=port, now=lambda: NOW)


def _send(port: FakeDialogueStatePort, text: str, chat: str = "chat-1"):
    return _message_use_case(port).execute(
        PollMessageInput(conversation_id=chat, text=text, bot_username="poll_bot")
    )


def test_polldate_starts_poll_and_renders_keyboard():
    port = FakeDialogueStatePort()

    output = _send(port, "/polldate 1 January 2024 to 4 January 2024")

    assert [reply.text for reply in output.replies] == [
        "start: 2024-01-01 00:00:00, end: 2024-01-04 00:00:00",
        "Select Days",
    ]
    assert output.replies[0].keyboard is None
    keyboard = output.replies[1].keyboard
    assert [button.label for button in keyboard] == ["Mon 01 Jan", "Tue 02 Jan", "Wed 03 Jan"]
    assert [button.payload for button in keyboard] == ["2024-01-01", "2024-01-02", "2024-01-03"]
    assert port.states["chat-1"] == PollingState(
        start=datetime(2024, 1, 1),
        end=datetime(2024, 1, 4),
        selected=frozenset(),
    )


def test_polldate_with_iso_dates_renders_three_days():
    port = FakeDialogueStatePort()

    output = _send(port, "/polldate 2024-01-01 to 2024-01-04")

    keyboard = output.replies[1].keyboard
    assert len(keyboard) == 3
    assert [button.payload for button in keyboard] == ["2024-01-01", "2024-01-02", "2024-01-03"]
    assert port.states["chat-1"] == PollingState(
        start=datetime(2024, 1, 1),
        end=datetime(2024, 1, 4),
        selected=frozenset(),
    )


def test_new_poll_resets_previous_selection():
    port = FakeDialogueStatePort()
    port.states["chat-1"] = PollingState(
        start=datetime(2024, 3, 1),
        end=datetime(2024, 3, 5),
        selected=frozenset({"2024-03-02"}),
    )

    _send(port, "/polldate 1 January 2024 to 4 January 2024")

    assert port.states["chat-1"].selected == frozenset()


def test_echo_leaves_polling_state_untouched():
    port = FakeDialogueStatePort()
    polling = PollingState(
        start=datetime(2024, 1, 1),
        end=datetime(2024, 1, 4),
        selected=frozenset({"2024-01-02"}),
    )
    port.states["chat-1"] = polling

    output = _send(port, "/echo hi there")

    assert [reply.text for reply in output.replies] == ["you said 'hi there'"]
    assert port.states["chat-1"] == polling
    assert port.saves == 0


def test_malformed_polldate_keeps_state_and_help_still_works():
    port = FakeDialogueStatePort()

    failed = _send(port, "/polldate soon")
    assert [reply.text for reply in failed.replies] == ["dates must be separated by 'to'"]
    assert port.states == {}

    helped = _send(port, "/help")
    assert helped.replies[0].text.startswith("These commands are supported:")
    assert port.states == {}


def test_plain_text_replies_with_parse_error():
    port = FakeDialogueStatePort()

    output = _send(port, "good morning")

    assert [reply.text for reply in output.replies] == ["Unknown command: good morning"]


def _polling_port() -> FakeDialogueStatePort:
    port = FakeDialogueStatePort()
    port.states["chat-1"] = PollingState(start=datetime(2024, 1, 1), end=datetime(2024, 1, 4))
    return port


def test_callback_toggles_day_and_persists_before_render():
    port = _polling_port()
    use_case = HandlePollCallbackUseCase(dialogue_state_port=port)

    output = use_case.execute(PollCallbackInput(conversation_id="chat-1", data="2024-01-02"))

    assert port.states["chat-1"].selected == frozenset({"2024-01-02"})
    assert [button.label for button in output.keyboard] == ["Mon 01 Jan", "Tue 02 Jan ✅", "Wed 03 Jan"]

    output = use_case.execute(PollCallbackInput(conversation_id="chat-1", data="2024-01-02"))

    assert port.states["chat-1"].selected == frozenset()
    assert [button.label for button in output.keyboard] == ["Mon 01 Jan", "Tue 02 Jan", "Wed 03 Jan"]


def test_callback_outside_poll_range_is_ignored():
    port = _polling_port()
    use_case = HandlePollCallbackUseCase(dialogue_state_port=port)

    output = use_case.execute(PollCallbackInput(conversation_id="chat-1", data="2024-01-04"))

    assert output.keyboard is None
    assert port.states["chat-1"].selected == frozenset()
    assert port.saves == 0


def test_callback_without_poll_is_noop():
    port = FakeDialogueStatePort()
    use_case = HandlePollCallbackUseCase(dialogue_state_port=port)

    output = use_case.execute(PollCallbackInput(conversation_id="chat-9", data="2024-01-02"))

    assert output.keyboard is None
    assert port.states == {}
