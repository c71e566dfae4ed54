from datetime import datetime, timezone

from fastapi import APIRouter

from app.core.config import settings
from app.core.exceptions import RouteNotFoundException
from app.schemas.health_schema import ApiTestData, ApiTestOut, HealthOut

router = APIRouter(prefix="/api", tags=["health"])


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


@router.get("/health", response_model=HealthOut)
async def health():
    return HealthOut(
        message=f"{settings.APP_NAME} Server is Running!",
        timestamp=_now(),
        port=settings.PORT,
        environment=settings.ENVIRONMENT,
        version=settings.APP_VERSION,
    )


@router.get("/test", response_model=ApiTestOut)
async def api_test():
    return ApiTestOut(data=ApiTestData(time=_now()))


# registered last so it only sees paths no other router matched
fallback_router = APIRouter(prefix="/api", include_in_schema=False)


@fallback_router.api_route("/{path:path}", methods=["GET", "HEAD", "OPTIONS", "POST", "PUT", "PATCH", "DELETE"])
async def api_not_found(path: str):
    raise RouteNotFoundException()
