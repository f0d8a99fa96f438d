"""Lead score endpoints: calculation, score log queries, distribution and insights.

The static routes `/distribution` and `/rules` are declared before
`/{client_id}` and take precedence over it, so a client whose id is
literally "distribution" or "rules" cannot be read through
`GET /lead-scores/{client_id}`. Use `GET /lead-scores/{client_id}/history?limit=1`
for such a client.
"""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, Query, status

from leadscore.application.schemas import (
    LeadScoreResponse,
    ScoreDistributionResponse,
    ScoreSnapshotResponse,
    ScoringInsightsResponse,
    ScoringRuleResponse,
)
from leadscore.application.services import LeadScoringService, ScoringInsightsService
from leadscore.domain.entities import ScoreFilters
from leadscore.domain.exceptions import DataAccessError, EntityNotFoundError, ValidationError
from leadscore.domain.scoring_rules import SCORING_RULES
from leadscore.infrastructure.dependencies import (
    get_lead_scoring_service,
    get_scoring_insights_service,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/lead-scores", tags=["Lead Scores"])


def _unprocessable(e: ValidationError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(e))


def _storage_failure(e: DataAccessError) -> HTTPException:
    logger.error("Lead score storage failure: %s", e)
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="Lead score storage is unavailable",
    )


@router.get("", response_model=list[LeadScoreResponse])
async def list_lead_scores(
    min_score: int | None = Query(None, description="Inclusive lower score bound"),
    max_score: int | None = Query(None, description="Inclusive upper score bound"),
    date_from: datetime | None = Query(None, description="Updated at or after"),
    date_to: datetime | None = Query(None, description="Updated at or before"),
    limit: int = Query(100),
    offset: int = Query(0),
    service: LeadScoringService = Depends(get_lead_scoring_service),
) -> list[LeadScoreResponse]:
    """Retrieve stored score records, newest first."""
    filters = ScoreFilters(
        min_score=min_score,
        max_score=max_score,
        date_from=date_from,
        date_to=date_to,
    )
    try:
        records = await service.get_all_lead_scores(filters, limit=limit, offset=offset)
    except ValidationError as e:
        raise _unprocessable(e)
    except DataAccessError as e:
        raise _storage_failure(e)
    return [LeadScoreResponse.model_validate(r, from_attributes=True) for r in records]


@router.get("/distribution", response_model=ScoreDistributionResponse)
async def get_distribution(
    service: LeadScoringService = Depends(get_lead_scoring_service),
) -> ScoreDistributionResponse:
    """Count clients per tier using each client's latest score."""
    try:
        distribution = await service.get_lead_score_distribution()
    except DataAccessError as e:
        raise _storage_failure(e)
    return ScoreDistributionResponse.model_validate(distribution, from_attributes=True)


@router.get("/rules", response_model=list[ScoringRuleResponse])
async def list_scoring_rules() -> list[ScoringRuleResponse]:
    """Return the static scoring rule table."""
    return [ScoringRuleResponse.model_validate(r, from_attributes=True) for r in SCORING_RULES]


@router.get("/{client_id}", response_model=LeadScoreResponse)
async def get_lead_score(
    client_id: str,
    service: LeadScoringService = Depends(get_lead_scoring_service),
) -> LeadScoreResponse:
    """Retrieve the current score for a client."""
    try:
        record = await service.get_lead_score(client_id)
    except DataAccessError as e:
        raise _storage_failure(e)
    if record is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError("LeadScore", client_id)),
        )
    return LeadScoreResponse.model_validate(record, from_attributes=True)


@router.get("/{client_id}/history", response_model=list[LeadScoreResponse])
async def get_score_history(
    client_id: str,
    limit: int = Query(20),
    service: LeadScoringService = Depends(get_lead_scoring_service),
) -> list[LeadScoreResponse]:
    """Retrieve a client's score records, newest first."""
    try:
        records = await service.get_score_history(client_id, limit=limit)
    except ValidationError as e:
        raise _unprocessable(e)
    except DataAccessError as e:
        raise _storage_failure(e)
    return [LeadScoreResponse.model_validate(r, from_attributes=True) for r in records]


@router.post("/{client_id}/calculate", response_model=ScoreSnapshotResponse)
async def calculate_lead_score(
    client_id: str,
    lookback_days: int | None = Query(None, description="Lookback window in days"),
    persist: bool = Query(False, description="Append the result to the score log"),
    service: LeadScoringService = Depends(get_lead_scoring_service),
) -> ScoreSnapshotResponse:
    """Calculate a score snapshot, optionally saving it."""
    try:
        snapshot = await service.calculate_lead_score(client_id, lookback_days)
        if persist:
            await service.save_lead_score(snapshot)
    except ValidationError as e:
        raise _unprocessable(e)
    except DataAccessError as e:
        raise _storage_failure(e)
    return ScoreSnapshotResponse.model_validate(snapshot, from_attributes=True)


@router.post("/{client_id}/recalculate", response_model=ScoreSnapshotResponse)
async def recalculate_lead_score(
    client_id: str,
    service: LeadScoringService = Depends(get_lead_scoring_service),
) -> ScoreSnapshotResponse:
    """Recalculate with the default lookback and append to the score log."""
    try:
        snapshot = await service.recalculate_score(client_id)
    except DataAccessError as e:
        raise _storage_failure(e)
    return ScoreSnapshotResponse.model_validate(snapshot, from_attributes=True)


@router.get("/{client_id}/insights", response_model=ScoringInsightsResponse)
async def get_scoring_insights(
    client_id: str,
    service: ScoringInsightsService = Depends(get_scoring_insights_service),
) -> ScoringInsightsResponse:
    """Recommendations and next actions derived from the client's latest score."""
    try:
        insights = await service.get_scoring_insights(client_id)
    except DataAccessError as e:
        raise _storage_failure(e)
    if insights is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(EntityNotFoundError("LeadScore", client_id)),
        )
    return ScoringInsightsResponse.model_validate(insights, from_attributes=True)
