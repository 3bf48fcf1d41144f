"""Recognise unique-constraint violations across database backends."""

from sqlalchemy.exc import IntegrityError


def is_unique_violation(error: IntegrityError) -> bool:
    """SQLite says "UNIQUE constraint failed", PostgreSQL "unique constraint"."""
    message = str(error.orig or error).lower()
    return "unique" in message
