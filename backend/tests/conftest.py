"""Shared in-memory fakes and fixtures for the lead scoring tests."""

from datetime import datetime, timedelta, timezone

import pytest

from leadscore.application.interfaces import (
    CommunicationRepository,
    InteractionRepository,
    LeadScoreRepository,
)
from leadscore.application.services import (
    ClientLockRegistry,
    FactorCalculator,
    InteractionService,
    LeadScoringService,
    ScoringInsightsService,
)
from leadscore.domain.entities import (
    Communication,
    Interaction,
    LeadScore,
    ScoreFilters,
)
from leadscore.domain.exceptions import DataAccessError

NOW = datetime(2026, 3, 2, 12, 0, tzinfo=timezone.utc)


class FixedClock:
    """Deterministic clock; ``advance`` moves time forward."""

    def __init__(self, start: datetime = NOW):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


class FakeInteractionRepository(InteractionRepository):
    """In-memory interaction log."""

    def __init__(self):
        self.items: list[Interaction] = []
        self.fail = False

    def add(self, client_id: str, interaction_type: str, occurred_at: datetime, value: float = 0.0):
        self.items.append(
            Interaction(
                client_id=client_id,
                interaction_type=interaction_type,
                value=value,
                occurred_at=occurred_at,
            )
        )

    async def query(self, client_id: str, since: datetime) -> list[Interaction]:
        if self.fail:
            raise DataAccessError("interaction query")
        return [i for i in self.items if i.client_id == client_id and i.occurred_at >= since]

    async def append(self, interaction: Interaction) -> Interaction:
        if self.fail:
            raise DataAccessError("interaction append")
        self.items.append(interaction)
        return interaction


class FakeCommunicationRepository(CommunicationRepository):
    """In-memory communication log."""

    def __init__(self):
        self.items: list[Communication] = []

    def add(self, client_id: str, occurred_at: datetime):
        self.items.append(Communication(client_id=client_id, occurred_at=occurred_at))

    async def query(self, client_id: str, since: datetime) -> list[Communication]:
        return [c for c in self.items if c.client_id == client_id and c.occurred_at >= since]


class FakeLeadScoreRepository(LeadScoreRepository):
    """In-memory append-only score log."""

    def __init__(self):
        self.records: list[LeadScore] = []
        self.fail_on_append = False
        self._next_id = 1

    def _newest_first(self, records: list[LeadScore]) -> list[LeadScore]:
        return sorted(records, key=lambda r: (r.last_updated, r.id), reverse=True)

    async def get_latest(self, client_id: str) -> LeadScore | None:
        mine = self._newest_first([r for r in self.records if r.client_id == client_id])
        return mine[0] if mine else None

    async def append(self, record: LeadScore) -> LeadScore:
        if self.fail_on_append:
            raise DataAccessError("lead score append")
        record.id = self._next_id
        self._next_id += 1
        self.records.append(record)
        return record

    async def query(self, filters: ScoreFilters, *, limit: int = 100, offset: int = 0) -> list[LeadScore]:
        result = [
            r for r in self.records
            if (filters.min_score is None or r.score >= filters.min_score)
            and (filters.max_score is None or r.score <= filters.max_score)
            and (filters.date_from is None or r.last_updated >= filters.date_from)
            and (filters.date_to is None or r.last_updated <= filters.date_to)
        ]
        return self._newest_first(result)[offset : offset + limit]

    async def get_latest_per_client(self) -> list[LeadScore]:
        latest: dict[str, LeadScore] = {}
        for record in self._newest_first(self.records):
            latest.setdefault(record.client_id, record)
        return list(latest.values())

    async def get_history(self, client_id: str, limit: int = 20) -> list[LeadScore]:
        return self._newest_first([r for r in self.records if r.client_id == client_id])[:limit]


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def interactions() -> FakeInteractionRepository:
    return FakeInteractionRepository()


@pytest.fixture
def communications() -> FakeCommunicationRepository:
    return FakeCommunicationRepository()


@pytest.fixture
def scores() -> FakeLeadScoreRepository:
    return FakeLeadScoreRepository()


@pytest.fixture
def calculator(interactions, communications, clock) -> FactorCalculator:
    return FactorCalculator(interactions, communications, clock=clock)


@pytest.fixture
def scoring_service(calculator, scores, clock) -> LeadScoringService:
    return LeadScoringService(calculator, scores, ClientLockRegistry(), clock=clock)


@pytest.fixture
def insights_service(scores) -> ScoringInsightsService:
    return ScoringInsightsService(scores)


@pytest.fixture
def interaction_service(interactions, scoring_service, clock) -> InteractionService:
    return InteractionService(interactions, scoring_service, clock=clock)
