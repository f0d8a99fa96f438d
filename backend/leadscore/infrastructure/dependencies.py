"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from leadscore.config import get_settings
from leadscore.application.services import (
    ClientLockRegistry,
    FactorCalculator,
    InteractionService,
    LeadScoringService,
    ScoringInsightsService,
)
from leadscore.infrastructure.database.session import get_db_session
from leadscore.infrastructure.database.repositories import (
    SQLAlchemyCommunicationRepository,
    SQLAlchemyInteractionRepository,
    SQLAlchemyLeadScoreRepository,
)


@lru_cache
def get_client_locks() -> ClientLockRegistry:
    """Process-wide lock registry shared by every request."""
    return ClientLockRegistry()


def _build_scoring_service(session: AsyncSession) -> LeadScoringService:
    settings = get_settings()
    calculator = FactorCalculator(
        interaction_repository=SQLAlchemyInteractionRepository(session),
        communication_repository=SQLAlchemyCommunicationRepository(session),
    )
    return LeadScoringService(
        calculator=calculator,
        score_repository=SQLAlchemyLeadScoreRepository(session),
        locks=get_client_locks(),
        default_lookback_days=settings.lead_score_lookback_days,
        max_page_limit=settings.lead_score_page_limit,
    )


async def get_lead_scoring_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[LeadScoringService, None]:
    """Provides a LeadScoringService with its factor calculator and score store wired up."""
    yield _build_scoring_service(session)


async def get_scoring_insights_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ScoringInsightsService, None]:
    """Provides a ScoringInsightsService reading from the score store."""
    yield ScoringInsightsService(SQLAlchemyLeadScoreRepository(session))


async def get_interaction_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[InteractionService, None]:
    """Provides an InteractionService that recalculates scores on every new interaction."""
    yield InteractionService(
        interaction_repository=SQLAlchemyInteractionRepository(session),
        scoring_service=_build_scoring_service(session),
    )
