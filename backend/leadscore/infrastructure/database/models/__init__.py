from .interaction import CommunicationModel, InteractionModel
from .lead_score import LeadScoreModel

__all__ = [
    "CommunicationModel",
    "InteractionModel",
    "LeadScoreModel",
]
