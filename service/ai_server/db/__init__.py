"""
Supabase accessors.

Each accessor performs one read or write and returns a DbResult; none of
them raise.
"""

from .result import DbResult, Outcome

__all__ = ["DbResult", "Outcome"]
