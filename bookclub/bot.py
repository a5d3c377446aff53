from __future__ import annotations

import logging

from bookclub.application.use_cases.handle_poll_callback import HandlePollCallbackUseCase
from bookclub.application.use_cases.handle_poll_message import HandlePollMessageUseCase
from bookclub.infrastructure.db.engine import create_bot_schema, get_engine
from bookclub.infrastructure.db.repositories.dialogue_repository import SqlDialogueRepository
from bookclub.infrastructure.telegram.poll_bot import PollBot
from bookclub.shared.config import get_settings


logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if not settings.telegram_bot_token:
        raise SystemExit("TELEGRAM_BOT_TOKEN is required.")
    if not settings.bot_database_url:
        raise SystemExit("BOT_DATABASE_URL is required.")

    engine = get_engine(settings.bot_database_url)
    create_bot_schema(engine)
    dialogue_repository = SqlDialogueRepository(engine)

    bot = PollBot(
        message_use_case=HandlePollMessageUseCase(dialogue_state_port=dialogue_repository),
        callback_use_case=HandlePollCallbackUseCase(dialogue_state_port=dialogue_repository),
    )
    application = bot.build_application(settings.telegram_bot_token)
    logger.info("bot: polling_started")
    application.run_polling()


if __name__ == "__main__":
    main()
