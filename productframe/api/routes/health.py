from fastapi import APIRouter

from productframe.config import settings
from productframe.schemas import HealthResponse


router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse(app_name=settings.app_name, env=settings.env)
