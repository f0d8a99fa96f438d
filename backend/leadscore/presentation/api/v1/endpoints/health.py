"""Health check endpoint — no dependencies, always available."""

from fastapi import APIRouter

from leadscore.config import get_settings
from leadscore.domain.scoring_rules import SCORING_RULES

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Returns the application health status and the active scoring configuration."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "scoring": {
            "lookback_days": settings.lead_score_lookback_days,
            "rules": len(SCORING_RULES),
        },
    }
