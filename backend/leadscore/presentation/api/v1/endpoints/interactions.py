"""Interaction endpoints: record touchpoints (triggering a score recalculation) and list them."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from leadscore.application.schemas import InteractionCreate, InteractionResponse
from leadscore.application.services import InteractionService
from leadscore.domain.exceptions import DataAccessError, ValidationError
from leadscore.infrastructure.dependencies import get_interaction_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/interactions", tags=["Interactions"])


@router.post("", response_model=InteractionResponse, status_code=status.HTTP_201_CREATED)
async def record_interaction(
    data: InteractionCreate,
    service: InteractionService = Depends(get_interaction_service),
) -> InteractionResponse:
    """Record a client interaction and recalculate the client's lead score."""
    try:
        interaction = await service.record_interaction(
            data.client_id,
            data.interaction_type,
            source=data.source,
            value=data.value,
            metadata=data.metadata,
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except DataAccessError as e:
        logger.error("Failed to record interaction for %s: %s", data.client_id, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to record interaction",
        )
    return InteractionResponse.model_validate(interaction, from_attributes=True)


@router.get("/{client_id}", response_model=list[InteractionResponse])
async def list_interactions(
    client_id: str,
    lookback_days: int = Query(90, description="Lookback window in days"),
    service: InteractionService = Depends(get_interaction_service),
) -> list[InteractionResponse]:
    """List a client's interactions inside the lookback window, newest first."""
    try:
        interactions = await service.list_interactions(client_id, lookback_days)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))
    except DataAccessError as e:
        logger.error("Failed to list interactions for %s: %s", client_id, e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to list interactions",
        )
    return [InteractionResponse.model_validate(i, from_attributes=True) for i in interactions]
