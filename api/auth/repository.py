"""
User persistence helpers.
"""

from __future__ import annotations

from core import db


def normalize_username(username: str) -> str:
    return (username or "").strip().lower()


async def create_user(*, username: str, password_hash: str, is_admin: bool = False) -> dict | None:
    """
    Insert a user. Returns None when the username is already taken.
    """
    return await db.fetch_one(
        """
        INSERT INTO users (username, password_hash, is_admin)
        VALUES ($1, $2, $3)
        ON CONFLICT (username) DO NOTHING
        RETURNING username, is_admin, created_at
        """,
        normalize_username(username),
        password_hash,
        is_admin,
    )


async def get_user(username: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT username, password_hash, is_admin, created_at
        FROM users
        WHERE username = $1
        """,
        normalize_username(username),
    )
