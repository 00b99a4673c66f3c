"""Telegram Bot API notifier adapter."""

import io
from telegram import Bot
from ..interfaces import INotifier

ICONS = {"info": "✅", "warn": "⚠️", "error": "❌"}


class TelegramNotifierAdapter:
    """Adapter delivering notifications and QR codes to a Telegram chat."""

    def __init__(self, bot_token: str, chat_id: int):
        self.bot = Bot(token=bot_token)
        self.chat_id = chat_id

    async def notify(self, level: str, title: str, description: str) -> None:
        """Send notification as a text message."""
        icon = ICONS.get(level, "")
        await self.bot.send_message(
            chat_id=self.chat_id,
            text=f"{icon} {title}\n\n{description}".strip()
        )

    async def send_qr(self, png: bytes, filename: str) -> None:
        """Send QR image as a photo and as a downloadable file."""
        await self.bot.send_photo(chat_id=self.chat_id, photo=io.BytesIO(png))
        document = io.BytesIO(png)
        document.name = filename
        await self.bot.send_document(
            chat_id=self.chat_id,
            document=document,
            filename=filename
        )
