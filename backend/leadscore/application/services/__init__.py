from .client_locks import ClientLockRegistry
from .factor_calculator import FactorCalculator, NoRevenueMonetaryScorer, ScoringWindow
from .lead_scoring_service import LeadScoringService
from .scoring_insights_service import ScoringInsightsService
from .interaction_service import InteractionService

__all__ = [
    "ClientLockRegistry",
    "FactorCalculator",
    "NoRevenueMonetaryScorer",
    "ScoringWindow",
    "LeadScoringService",
    "ScoringInsightsService",
    "InteractionService",
]
