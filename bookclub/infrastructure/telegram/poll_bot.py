from __future__ import annotations

import asyncio
import logging

from sqlalchemy.exc import SQLAlchemyError
from telegram import InlineKeyboardButton, InlineKeyboardMarkup, Update
from telegram.error import TelegramError
from telegram.ext import Application, CallbackQueryHandler, ContextTypes, MessageHandler, filters

from bookclub.application.dto.dialogue import PollCallbackInput, PollMessageInput
from bookclub.application.use_cases.handle_poll_callback import HandlePollCallbackUseCase
from bookclub.application.use_cases.handle_poll_message import HandlePollMessageUseCase
from bookclub.domain.entities.dialogue import KeyboardButton
from bookclub.domain.exceptions import DomainError


logger = logging.getLogger(__name__)


def to_inline_markup(keyboard: list[KeyboardButton] | None) -> InlineKeyboardMarkup | None:
    if keyboard is None:
        return None
    return InlineKeyboardMarkup(
        [[InlineKeyboardButton(button.label, callback_data=button.payload)] for button in keyboard]
    )


class PollBot:
    """python-telegram-bot transport for the date-poll dialogue.

    Handler failures are logged and dropped so one bad update never stops
    the polling loop; the conversation keeps whatever state it had.
    """

    def __init__(
        self,
        *,
        message_use_case: HandlePollMessageUseCase,
        callback_use_case: HandlePollCallbackUseCase,
        bot_username: str | None = None,
    ):
        self._message_use_case = message_use_case
        self._callback_use_case = callback_use_case
        self._bot_username = bot_username

    def build_application(self, token: str) -> Application:
        application = Application.builder().token(token).build()
        application.add_handler(MessageHandler(filters.TEXT, self.on_message))
        application.add_handler(CallbackQueryHandler(self.on_callback))
        return application

    async def on_message(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        message = update.effective_message
        chat = update.effective_chat
        if message is None or chat is None or not message.text:
            return

        bot_username = self._bot_username or getattr(context.bot, "username", None)
        try:
            output = await asyncio.to_thread(
                self._message_use_case.execute,
                PollMessageInput(
                    conversation_id=str(chat.id),
                    text=message.text,
                    bot_username=bot_username,
                ),
            )
            for reply in output.replies:
                await message.reply_text(reply.text, reply_markup=to_inline_markup(reply.keyboard))
        except (DomainError, SQLAlchemyError, TelegramError):
            logger.exception("poll_bot: message_failed chat_id=%s", chat.id)

    async def on_callback(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        query = update.callback_query
        chat = update.effective_chat
        if query is None or chat is None:
            return

        try:
            await query.answer()
            output = await asyncio.to_thread(
                self._callback_use_case.execute,
                PollCallbackInput(conversation_id=str(chat.id), data=query.data),
            )
            if output.keyboard is not None:
                await query.edit_message_reply_markup(reply_markup=to_inline_markup(output.keyboard))
        except (DomainError, SQLAlchemyError, TelegramError):
            logger.exception("poll_bot: callback_failed chat_id=%s", chat.id)
