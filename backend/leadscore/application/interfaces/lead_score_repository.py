"""Abstract repository interface (port) for the lead score store."""

from abc import ABC, abstractmethod

from leadscore.domain.entities import LeadScore, ScoreFilters


class LeadScoreRepository(ABC):
    """Port for the append-only log of score snapshots per client.

    Records are ordered by ``last_updated`` and then by ``id``; the most recent
    record for a client is its current score.
    """

    @abstractmethod
    async def get_latest(self, client_id: str) -> LeadScore | None:
        """Return the most recent record for a client, or None."""
        ...

    @abstractmethod
    async def append(self, record: LeadScore) -> LeadScore:
        """Durably persist a new record and return it with its id assigned."""
        ...

    @abstractmethod
    async def query(
        self,
        filters: ScoreFilters,
        *,
        limit: int = 100,
        offset: int = 0,
    ) -> list[LeadScore]:
        """Return records matching inclusive filters, newest first."""
        ...

    @abstractmethod
    async def get_latest_per_client(self) -> list[LeadScore]:
        """Return exactly one record (the latest) for every scored client."""
        ...

    @abstractmethod
    async def get_history(self, client_id: str, limit: int = 20) -> list[LeadScore]:
        """Return a client's records, newest first."""
        ...
