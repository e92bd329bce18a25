"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health", summary="Health probe")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/api/health-check", summary="Liveness probe polled by connection-error checks")
async def health_check() -> dict[str, str]:
    return {"status": "ok"}
