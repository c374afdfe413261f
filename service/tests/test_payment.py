"""
Tests for Robokassa payment handling.
"""

import pytest

from ai_server.db import DbResult
from ai_server.db import payments as payments_db
from ai_server.db import users as users_db
from ai_server.services import payment


class TestResolvePurchase:

    @pytest.mark.parametrize("amount,expected", [
        (1110, (476, "neurophoto")),
        (2999, (1303, "neurobase")),
        (75000, (32608, "neuroblogger")),
        (500, (217, None)),
        (1000.0, (434, None)),
        (10, (6, None)),
        (123, (0, None)),
    ])
    def test_amounts(self, amount, expected):
        """Plans and star packages by paid amount."""
        assert payment.resolve_purchase(amount) == expected


class TestParseParams:

    def test_strings_are_converted(self):
        """String params are converted."""
        assert payment.parse_payment_params("1000.00", "42") == (1000.0, 42)

    @pytest.mark.parametrize("out_sum,inv_id", [
        (None, 1),
        ("", 1),
        ("1000", None),
        ("abc", 1),
        ("1000", "x"),
    ])
    def test_invalid(self, out_sum, inv_id):
        """Missing or non-numeric params are rejected."""
        with pytest.raises(ValueError):
            payment.parse_payment_params(out_sum, inv_id)


@pytest.fixture
def ledger(monkeypatch):
    """
    Fake payments/users accessors backed by dicts.

    Returns the state dict so tests can inspect writes.
    """
    state = {
        "payment": {"inv_id": 42, "telegram_id": 144022504, "bot_name": "test_bot", "status": "PENDING"},
        "user": {"telegram_id": "144022504", "username": "neo", "language_code": "en"},
        "balance": 100.0,
        "completed": [],
        "subscription": None,
        "notified": [],
    }

    async def get_payment_by_inv_id(inv_id):
        if state["payment"] is None:
            return DbResult.missing()
        return DbResult.found(state["payment"])

    async def complete_payment(inv_id, stars):
        state["completed"].append((inv_id, stars))
        return DbResult.found({**state["payment"], "status": "COMPLETED", "stars": stars})

    async def get_user_by_telegram_id(telegram_id):
        return DbResult.found(state["user"])

    async def get_user_balance(telegram_id):
        return DbResult.found(state["balance"])

    async def update_user_balance(telegram_id, balance):
        state["balance"] = balance
        return DbResult.found({"balance": balance})

    async def update_user_subscription(telegram_id, subscription):
        state["subscription"] = subscription
        return DbResult.found({"subscription": subscription})

    async def send_payment_notification(telegram_id, **kwargs):
        state["notified"].append((telegram_id, kwargs))

    monkeypatch.setattr(payments_db, "get_payment_by_inv_id", get_payment_by_inv_id)
    monkeypatch.setattr(payments_db, "complete_payment", complete_payment)
    monkeypatch.setattr(users_db, "get_user_by_telegram_id", get_user_by_telegram_id)
    monkeypatch.setattr(users_db, "get_user_balance", get_user_balance)
    monkeypatch.setattr(users_db, "update_user_balance", update_user_balance)
    monkeypatch.setattr(users_db, "update_user_subscription", update_user_subscription)
    monkeypatch.setattr(payment, "send_payment_notification", send_payment_notification)
    return state


class TestProcessPayment:

    @pytest.mark.anyio
    async def test_star_package_credits_balance(self, ledger):
        """Star package credits the balance and notifies."""
        assert await payment.process_payment("1000", "42") == "OK42"

        assert ledger["completed"] == [(42, 434)]
        assert ledger["balance"] == 534.0
        assert ledger["subscription"] is None

        telegram_id, kwargs = ledger["notified"][0]
        assert telegram_id == "144022504"
        assert kwargs["stars"] == 434
        assert kwargs["is_ru"] is False
        assert kwargs["username"] == "neo"
        assert kwargs["bot_name"] == "test_bot"

    @pytest.mark.anyio
    async def test_subscription_plan(self, ledger):
        """Subscription plan is applied without credit."""
        assert await payment.process_payment(2999, 42) == "OK42"

        assert ledger["subscription"] == "neurobase"
        assert ledger["balance"] == 100.0
        assert ledger["notified"][0][1]["subscription"] == "neurobase"

    @pytest.mark.anyio
    async def test_already_completed_is_skipped(self, ledger):
        """Completed payments are not applied twice."""
        ledger["payment"]["status"] = "COMPLETED"

        assert await payment.process_payment("1000", "42") == "OK42"

        assert ledger["completed"] == []
        assert ledger["notified"] == []

    @pytest.mark.anyio
    async def test_unknown_amount_changes_nothing(self, ledger):
        """Unknown amount changes nothing."""
        assert await payment.process_payment("777", "42") == "OK42"

        assert ledger["completed"] == []
        assert ledger["balance"] == 100.0

    @pytest.mark.anyio
    async def test_missing_payment_still_answers_ok(self, ledger):
        """Missing payment row still answers OK."""
        ledger["payment"] = None

        assert await payment.process_payment("1000", "42") == "OK42"
        assert ledger["completed"] == []

    @pytest.mark.anyio
    async def test_notification_failure_still_answers_ok(self, ledger, monkeypatch):
        """Failed notification still answers OK."""
        async def broken(telegram_id, **kwargs):
            raise RuntimeError("bot blocked")

        monkeypatch.setattr(payment, "send_payment_notification", broken)

        assert await payment.process_payment("1000", "42") == "OK42"
        assert ledger["balance"] == 534.0

    @pytest.mark.anyio
    async def test_invalid_params_raise(self, ledger):
        """Invalid params raise."""
        with pytest.raises(ValueError):
            await payment.process_payment("abc", "42")
