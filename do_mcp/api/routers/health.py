"""Health endpoint."""

from fastapi import APIRouter

from ... import SERVER_NAME

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict[str, str]:
    """Liveness probe. Requires no credentials."""
    return {"status": "ok", "server": SERVER_NAME}
