"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from leadscore.presentation.api.v1.endpoints.health import router as health_router
from leadscore.presentation.api.v1.endpoints.interactions import router as interactions_router
from leadscore.presentation.api.v1.endpoints.lead_scores import router as lead_scores_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(interactions_router)
router.include_router(lead_scores_router)
