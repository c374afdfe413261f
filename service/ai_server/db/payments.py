"""
Accessors for `payments_v2`, keyed by inv_id.
"""

from .base import table, fetch_one, write_one
from .result import DbResult


async def get_payment_by_inv_id(inv_id: int) -> DbResult:
    return fetch_one(
        f"get_payment_by_inv_id({inv_id})",
        lambda: table("payments_v2").select("*").eq("inv_id", inv_id).limit(1)
    )


async def complete_payment(inv_id: int, stars: int) -> DbResult:
    return write_one(
        f"complete_payment({inv_id})",
        lambda: table("payments_v2").update({"status": "COMPLETED", "stars": stars}).eq("inv_id", inv_id)
    )
