# finboard/core/notifier.py
import hmac
from typing import Any, Dict, Union

from telegram import Bot
from telegram.constants import ParseMode

from finboard import config


def is_secret_valid(secret: Union[str, None], expected: Union[str, None] = None) -> bool:
    """Sem segredo configurado, qualquer chamada é aceita."""
    expected = config.INTERNAL_WEBHOOK_SECRET if expected is None else expected
    if not expected:
        return True
    return hmac.compare_digest(str(secret or ""), expected)


def is_configured() -> bool:
    return bool(config.TELEGRAM_BOT_TOKEN and config.TELEGRAM_CHAT_ID)


async def send_telegram_message(message: str) -> Dict[str, Any]:
    """Envia a mensagem para o chat configurado e retorna a resposta da API do bot."""
    bot = Bot(token=config.TELEGRAM_BOT_TOKEN)
    async with bot:
        sent = await bot.send_message(
            chat_id=config.TELEGRAM_CHAT_ID,
            text=message,
            parse_mode=ParseMode.HTML,
        )
    return sent.to_dict()
