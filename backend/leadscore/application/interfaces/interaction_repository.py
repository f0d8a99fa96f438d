"""Abstract repository interface (port) for the client interaction log."""

from abc import ABC, abstractmethod
from datetime import datetime

from leadscore.domain.entities import Interaction


class InteractionRepository(ABC):
    """Port for the append-only interaction log, implemented in the infrastructure layer."""

    @abstractmethod
    async def query(self, client_id: str, since: datetime) -> list[Interaction]:
        """Return the client's interactions with ``occurred_at >= since``."""
        ...

    @abstractmethod
    async def append(self, interaction: Interaction) -> Interaction:
        """Persist a new interaction and return it."""
        ...
