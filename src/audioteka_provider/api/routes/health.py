from __future__ import annotations

from fastapi import APIRouter, Depends

from audioteka_provider.api.dependencies import get_provider
from audioteka_provider.schemas.system import HealthStatus
from audioteka_provider.scrape.provider import AudiotekaProvider

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthStatus)
def health_check(provider: AudiotekaProvider = Depends(get_provider)) -> HealthStatus:
    return HealthStatus(status="ok", provider=provider.slug)
