from __future__ import annotations

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from bookclub.infrastructure.db.engine import Base


class BotDialogueModel(Base):
    __tablename__ = "bot_dialogues"

    conversation_id: Mapped[str] = mapped_column(Text, primary_key=True)
    state: Mapped[str] = mapped_column(Text, nullable=False)
