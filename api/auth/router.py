"""
Auth API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from . import schemas, service

router = APIRouter()


@router.post("/auth/register", status_code=status.HTTP_201_CREATED)
async def register(request: schemas.RegisterRequest) -> schemas.TokenResponse:
    return await service.register(request)


@router.post("/auth/token")
async def token(request: schemas.LoginRequest) -> schemas.TokenResponse:
    return await service.login(request)
