"""Extension point for the monetary scoring factor."""

from abc import ABC, abstractmethod
from datetime import datetime

from leadscore.domain.entities import Interaction


class MonetaryScorer(ABC):
    """Scores the monetary factor from a revenue source (invoices, payments).

    Implementations return raw points; the factor calculator caps them at the
    monetary ceiling.
    """

    @abstractmethod
    async def score(
        self,
        client_id: str,
        interactions: list[Interaction],
        since: datetime,
    ) -> int:
        ...
