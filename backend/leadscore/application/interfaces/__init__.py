from .interaction_repository import InteractionRepository
from .communication_repository import CommunicationRepository
from .lead_score_repository import LeadScoreRepository
from .monetary_scorer import MonetaryScorer

__all__ = [
    "InteractionRepository",
    "CommunicationRepository",
    "LeadScoreRepository",
    "MonetaryScorer",
]
