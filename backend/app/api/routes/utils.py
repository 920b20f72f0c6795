from fastapi import APIRouter

from app.api.deps import SettingsDep
from app.models import HealthStatus

router = APIRouter(prefix="/utils", tags=["utils"])


@router.get("/health-check/", response_model=HealthStatus)
async def health_check(settings: SettingsDep) -> HealthStatus:
    return HealthStatus(ok=True, openai_configured=settings.openai_configured)
