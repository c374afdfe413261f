"""
Shared helpers for Supabase accessors.

Every accessor builds one query and hands it to `fetch_one`, `fetch_many`
or `write_one`. These execute it, log errors and wrap the response in a
DbResult.
"""

from typing import Any, Callable

from ai_server.supabase_client import get_supabase_admin
from ai_server.logging_config import logger
from .result import DbResult


def table(name: str):
    """Query builder for a table using the service role client."""
    return get_supabase_admin().table(name)


def fetch_one(label: str, build: Callable[[], Any]) -> DbResult:
    """Run a point lookup. Returns the first row unchanged."""
    try:
        response = build().execute()
    except Exception as e:
        logger.error(f"[DB] {label} failed: {e}")
        return DbResult.failure(str(e))

    rows = response.data or []
    if isinstance(rows, dict):
        rows = [rows]
    if not rows:
        logger.info(f"[DB] {label}: not found")
        return DbResult.missing()

    return DbResult.found(rows[0])


def fetch_many(label: str, build: Callable[[], Any]) -> DbResult:
    """Run a list query. An empty list is still FOUND."""
    try:
        response = build().execute()
    except Exception as e:
        logger.error(f"[DB] {label} failed: {e}")
        return DbResult.failure(str(e))

    return DbResult.found(response.data or [])


def write_one(label: str, build: Callable[[], Any]) -> DbResult:
    """Run an insert/update. NOT_FOUND means no row matched the filter."""
    result = fetch_one(label, build)
    if result.ok:
        logger.debug(f"[DB] {label}: ok")
    return result
