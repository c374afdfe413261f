"""
Robokassa payment success handling.

The paid sum (OutSum, rubles) either matches a subscription plan or one of
the star packages. Robokassa must always get `OK<InvId>` back once the
parameters are valid, otherwise it keeps retrying; failures after that
point are logged, not raised.
"""

from dataclasses import dataclass
from typing import Optional

from ai_server.db import payments, users
from ai_server.logging_config import logger
from ai_server.telegram_bot import send_payment_notification


@dataclass(frozen=True)
class SubscriptionPlan:
    name: str
    ru_price: int
    stars: int


# rubles -> stars
PAYMENT_OPTIONS = {
    500: 217,
    1000: 434,
    2000: 869,
    5000: 2173,
    10000: 4347,
    10: 6,
}

SUBSCRIPTION_PLANS = [
    SubscriptionPlan("neurophoto", 1110, 476),
    SubscriptionPlan("neurobase", 2999, 1303),
    SubscriptionPlan("neuroblogger", 75000, 32608),
]


def resolve_purchase(amount: float) -> tuple[int, Optional[str]]:
    """Map a paid amount to (stars, subscription). (0, None) if unknown."""
    for plan in SUBSCRIPTION_PLANS:
        if plan.ru_price == amount:
            return plan.stars, plan.name
    return PAYMENT_OPTIONS.get(amount, 0), None


def parse_payment_params(out_sum, inv_id) -> tuple[float, int]:
    if out_sum in (None, "") or inv_id in (None, ""):
        raise ValueError("Missing OutSum or InvId")
    try:
        return float(out_sum), int(inv_id)
    except (TypeError, ValueError):
        raise ValueError("Invalid OutSum or InvId format")


async def process_payment(out_sum, inv_id) -> str:
    """
    Apply a successful payment.

    Raises:
        ValueError: OutSum/InvId missing or not numeric

    Returns:
        "OK<InvId>" for Robokassa
    """
    amount, invoice = parse_payment_params(out_sum, inv_id)

    try:
        await _apply_payment(amount, invoice)
    except Exception as e:
        logger.error(f"[PAYMENT] Error processing InvId {invoice}: {e}", exc_info=True)

    return f"OK{invoice}"


async def _apply_payment(amount: float, inv_id: int) -> None:
    stars, subscription = resolve_purchase(amount)
    logger.info(f"[PAYMENT] InvId {inv_id}: stars={stars}, subscription={subscription or 'none'}")

    if stars <= 0:
        logger.warning(f"[PAYMENT] No stars for InvId {inv_id}, amount {amount}. No action taken.")
        return

    payment = await payments.get_payment_by_inv_id(inv_id)
    if not payment.ok:
        raise RuntimeError(f"Payment {inv_id} not available ({payment.outcome.value})")

    if payment.data.get("status") == "COMPLETED":
        logger.warning(f"[PAYMENT] InvId {inv_id} already processed")
        return

    completed = await payments.complete_payment(inv_id, stars)
    if not completed.ok:
        raise RuntimeError(f"Payment {inv_id} status not updated ({completed.outcome.value})")

    telegram_id = str(payment.data["telegram_id"])
    bot_name = payment.data.get("bot_name")

    user = await users.get_user_by_telegram_id(telegram_id)
    user_row = user.data or {}
    username = user_row.get("username") or "User"
    is_ru = (user_row.get("language_code") or "ru") == "ru"

    if subscription:
        updated = await users.update_user_subscription(telegram_id, subscription)
    else:
        balance = await users.get_user_balance(telegram_id)
        if not balance.ok:
            raise RuntimeError(f"Balance of {telegram_id} not available ({balance.outcome.value})")
        updated = await users.update_user_balance(telegram_id, balance.data + stars)

    if not updated.ok:
        raise RuntimeError(f"User {telegram_id} not updated ({updated.outcome.value})")

    try:
        await send_payment_notification(
            telegram_id,
            amount=amount,
            stars=stars,
            is_ru=is_ru,
            username=username,
            subscription=subscription,
            bot_name=bot_name,
        )
    except Exception as e:
        logger.error(f"[PAYMENT] Failed to notify {telegram_id}: {e}")
