"""
Localized Telegram notifications.

Each helper formats one of two hardcoded strings (Russian or English) and
sends it once through the bot registered under bot_name. There is no retry;
delivery errors propagate to the caller.
"""

from typing import Optional

from ai_server.config import get_settings
from ai_server.logging_config import logger
from .bots import get_bot_by_name


def balance_message_text(new_balance: float, amount: float, is_ru: bool) -> str:
    if is_ru:
        return f"Стоимость: {amount:.2f} ⭐️\nВаш баланс: {new_balance:.2f} ⭐️"
    return f"Cost: {amount:.2f} ⭐️\nYour balance: {new_balance:.2f} ⭐️"


def insufficient_stars_text(balance: float, is_ru: bool) -> str:
    if is_ru:
        return (
            f"Недостаточно звезд для генерации. Ваш баланс: {balance:.2f} ⭐️. "
            "Пополните баланс, вызвав команду /buy."
        )
    return (
        f"Insufficient stars for generation. Your balance: {balance:.2f} ⭐️. "
        "Top up your balance by calling the /buy command."
    )


def payment_text(stars: float, subscription: Optional[str], is_ru: bool) -> str:
    if subscription:
        if is_ru:
            return f"💫 Ваша подписка {subscription} активирована!"
        return f"💫 Your {subscription} subscription is active!"
    if is_ru:
        return f"💫 Ваш баланс пополнен на {stars:.2f} ⭐️"
    return f"💫 Your balance has been topped up by {stars:.2f} ⭐️"


def training_text(model_name: str, succeeded: bool, is_ru: bool, error: Optional[str] = None) -> str:
    if succeeded:
        if is_ru:
            return f"✅ Модель {model_name} успешно обучена!"
        return f"✅ Model {model_name} trained successfully!"
    reason = error or ("неизвестная ошибка" if is_ru else "unknown error")
    if is_ru:
        return f"❌ Обучение модели {model_name} не удалось: {reason}"
    return f"❌ Training of model {model_name} failed: {reason}"


async def send_text(telegram_id: str, text: str, bot_name: Optional[str] = None) -> None:
    bot = get_bot_by_name(bot_name)
    await bot.send_message(chat_id=int(telegram_id), text=text)


async def send_balance_message(
    telegram_id: str,
    new_balance: float,
    amount: float,
    is_ru: bool,
    bot_name: Optional[str] = None,
) -> None:
    await send_text(telegram_id, balance_message_text(new_balance, amount, is_ru), bot_name)


async def send_insufficient_stars_message(
    telegram_id: str,
    balance: float,
    is_ru: bool,
    bot_name: Optional[str] = None,
) -> None:
    await send_text(telegram_id, insufficient_stars_text(balance, is_ru), bot_name)


async def send_payment_notification(
    telegram_id: str,
    amount: float,
    stars: float,
    is_ru: bool,
    username: str,
    subscription: Optional[str] = None,
    bot_name: Optional[str] = None,
) -> None:
    """Notify the payer and, if configured, the admin group."""
    await send_text(telegram_id, payment_text(stars, subscription, is_ru), bot_name)

    group_id = get_settings().admin_group_id
    if group_id:
        what = f"оформил подписку {subscription}" if subscription else f"получил {stars:.2f} ⭐️"
        await send_text(
            group_id,
            f"💸 Пользователь @{username} (ID: {telegram_id}) оплатил {amount:.2f} ₽ и {what}",
            bot_name
        )
    logger.info(f"[PAYMENT] Notification sent to {telegram_id}")


async def send_training_notification(
    telegram_id: str,
    model_name: str,
    succeeded: bool,
    is_ru: bool,
    error: Optional[str] = None,
    bot_name: Optional[str] = None,
) -> None:
    await send_text(telegram_id, training_text(model_name, succeeded, is_ru, error), bot_name)


async def send_tasks_summary(
    chat_id: str,
    summary: str,
    tasks_count: int,
    is_ru: bool,
    bot_name: Optional[str] = None,
) -> None:
    if is_ru:
        text = f"🚀 {summary}\n\nЗадач создано: {tasks_count}"
    else:
        text = f"🚀 {summary}\n\nTasks created: {tasks_count}"
    await send_text(chat_id, text, bot_name)
