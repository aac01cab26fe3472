"""
Auth business logic.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from . import repository, schemas, security

logger = logging.getLogger(__name__)


async def register(payload: schemas.RegisterRequest) -> schemas.TokenResponse:
    password_hash = security.hash_password(payload.password)
    user_row = await repository.create_user(username=payload.username, password_hash=password_hash)
    if user_row is None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Duplicate username: {payload.username}",
        )

    logger.info("user_registered username=%s", user_row["username"])
    token = security.build_access_token(
        username=str(user_row["username"]),
        is_admin=bool(user_row["is_admin"]),
    )
    return schemas.TokenResponse(token=token)


async def login(payload: schemas.LoginRequest) -> schemas.TokenResponse:
    user_row = await repository.get_user(payload.username)
    if user_row is None or not security.verify_password(
        payload.password, str(user_row.get("password_hash") or "")
    ):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid username/password.",
        )

    token = security.build_access_token(
        username=str(user_row["username"]),
        is_admin=bool(user_row["is_admin"]),
    )
    return schemas.TokenResponse(token=token)


def get_user_from_access_token(access_token: str) -> dict:
    """
    Identity carried by the token: {"username": str, "is_admin": bool}.
    """
    try:
        payload = security.decode_access_token(access_token)
    except security.AuthSecurityError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc

    username = str(payload.get("sub") or "").strip()
    if not username:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid access token subject.",
        )
    return {"username": username, "is_admin": bool(payload.get("is_admin", False))}
