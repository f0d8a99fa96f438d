"""Abstract repository interface (port) for the client communication log."""

from abc import ABC, abstractmethod
from datetime import datetime

from leadscore.domain.entities import Communication


class CommunicationRepository(ABC):
    """Port for reading client communications, implemented in the infrastructure layer."""

    @abstractmethod
    async def query(self, client_id: str, since: datetime) -> list[Communication]:
        """Return the client's communications with ``occurred_at >= since``."""
        ...
