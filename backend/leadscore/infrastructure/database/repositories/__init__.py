from .interaction_repository import (
    SQLAlchemyCommunicationRepository,
    SQLAlchemyInteractionRepository,
)
from .lead_score_repository import SQLAlchemyLeadScoreRepository

__all__ = [
    "SQLAlchemyCommunicationRepository",
    "SQLAlchemyInteractionRepository",
    "SQLAlchemyLeadScoreRepository",
]
