from fastapi import APIRouter
from app.schemas.response import HealthStatus

router = APIRouter(prefix="", tags=["system"])


@router.get(
    "/health",
    summary="Service health",
    response_model=HealthStatus,
    description="Always answers `{\"status\": \"ok\"}` while the process is serving requests.",
)
@router.head("/health", include_in_schema=False)
def health():
    return HealthStatus()
