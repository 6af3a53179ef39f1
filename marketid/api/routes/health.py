"""Health & Readiness — liveness, readiness and the identifier catalogue the service serves.

Invariants:
    - GET /health/ returns 200 while the process is up, with every served kind and its bound
    - GET /health/ready runs every readiness check; any failure -> 503 naming the failed checks
    - The codec check packs and unpacks a mixed-case actor id; no database access

Design Decisions:
    - Checks as a name -> coroutine table: adding a check is one entry, and the 503 body
      lists exactly which ones failed
"""

import logging
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

from marketid.config import get_settings
from marketid.core.actor_id import ActorId
from marketid.core.identifier_types import IDENTIFIER_TYPES
import marketid.infrastructure.database as database

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/health", tags=["health"])

_CODEC_SAMPLE = "Anthol_User-123"


async def _database_ready() -> bool:
    manager = database.db_manager
    return await manager.health_check() if manager else False


async def _codec_ready() -> bool:
    restored = ActorId.decode_bytes(ActorId.encode(_CODEC_SAMPLE).to_bytes())
    return restored.to_display_string() == _CODEC_SAMPLE


READINESS_CHECKS = {
    "database": _database_ready,
    "codec": _codec_ready,
}


@router.get("/", status_code=status.HTTP_200_OK)
async def health_check():
    """Liveness: service identity plus the identifier kinds it serves."""
    settings = get_settings()
    return {
        "status": "healthy",
        "service": settings.service_name,
        "version": settings.service_version,
        "identifier_kinds": {
            kind.value: cls.BOUND.max_size_bytes
            for kind, cls in IDENTIFIER_TYPES.items()
        },
    }


@router.get("/ready")
async def readiness_check():
    checks = {}
    for name, check in READINESS_CHECKS.items():
        checks[name] = "healthy" if await check() else "unavailable"
    failed = [name for name, result in checks.items() if result != "healthy"]
    if failed:
        logger.warning(f"Readiness failed: {', '.join(failed)}")
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"status": "not_ready", "failed": failed, "checks": checks},
        )
    return {"status": "ready", "checks": checks}
