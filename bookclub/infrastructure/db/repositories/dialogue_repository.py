from __future__ import annotations

from sqlalchemy import text

from bookclub.application.ports.dialogue_state_port import DialogueStatePort
from bookclub.domain.entities.dialogue import DialogueState, StartState
from bookclub.infrastructure.db.mappers.dialogue_mapper import decode_dialogue_state, encode_dialogue_state


class SqlDialogueRepository(DialogueStatePort):
    def __init__(self, engine):
        self._engine = engine

    def get_state(self, *, conversation_id: str) -> DialogueState:
        sql = """
            SELECT state
            FROM bot_dialogues
            WHERE conversation_id = :conversation_id
            LIMIT 1
        """
        with self._engine.connect() as conn:
            row = conn.execute(text(sql), {"conversation_id": conversation_id}).mappings().first()
        if row is None:
            return StartState()
        return decode_dialogue_state(row["state"])

    def save_state(self, *, conversation_id: str, state: DialogueState) -> None:
        sql = """
            INSERT INTO bot_dialogues (conversation_id, state)
            VALUES (:conversation_id, :state)
            ON CONFLICT (conversation_id) DO UPDATE
            SET state = excluded.state
        """
        with self._engine.begin() as conn:
            conn.execute(
                text(sql),
                {
                    "conversation_id": conversation_id,
                    "state": encode_dialogue_state(state),
                },
            )
