"""Domain entities for lead scores: factor breakdowns, snapshots, and stored records."""

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

MAX_SCORE = 100
HOT_THRESHOLD = 80
WARM_THRESHOLD = 50


def as_utc(value: datetime | None) -> datetime | None:
    """Treat naive datetimes as UTC and convert aware ones to UTC."""
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


class LeadTier(str, Enum):
    """Outreach priority derived from the total score."""

    HOT = "hot"
    WARM = "warm"
    COLD = "cold"

    @classmethod
    def from_score(cls, score: float) -> "LeadTier":
        if score >= HOT_THRESHOLD:
            return cls.HOT
        if score >= WARM_THRESHOLD:
            return cls.WARM
        return cls.COLD


@dataclass(frozen=True)
class ScoringFactors:
    """Five bounded sub-scores that make up a lead score.

    Ceilings: engagement 30, recency 20, frequency 20, monetary 15, behavior 15.
    """

    engagement: int = 0
    recency: int = 0
    frequency: int = 0
    monetary: int = 0
    behavior: int = 0

    @property
    def total(self) -> int:
        return self.engagement + self.recency + self.frequency + self.monetary + self.behavior

    def as_dict(self) -> dict[str, int]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "ScoringFactors":
        data = data or {}
        return cls(
            engagement=int(data.get("engagement", 0)),
            recency=int(data.get("recency", 0)),
            frequency=int(data.get("frequency", 0)),
            monetary=int(data.get("monetary", 0)),
            behavior=int(data.get("behavior", 0)),
        )


@dataclass
class ScoreSnapshot:
    """Result of a single score calculation, before it is persisted."""

    client_id: str
    score: int
    factors: ScoringFactors
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass
class LeadScore:
    """Persisted score record. Appended on every recalculation, never updated.

    ``score_change`` is relative to the immediately prior record for the same
    client, or equals ``score`` for the first record.
    """

    client_id: str
    score: int
    factors: ScoringFactors
    score_change: int
    previous_score: int | None = None
    metadata: dict[str, Any] = field(default_factory=dict)
    id: int | None = None
    last_updated: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def tier(self) -> LeadTier:
        return LeadTier.from_score(self.score)


@dataclass
class ScoreFilters:
    """Inclusive range filters for querying stored lead scores."""

    min_score: int | None = None
    max_score: int | None = None
    date_from: datetime | None = None
    date_to: datetime | None = None


@dataclass
class ScoreDistribution:
    """Count of clients per tier, using each client's latest score only."""

    hot: int = 0
    warm: int = 0
    cold: int = 0

    @property
    def total(self) -> int:
        return self.hot + self.warm + self.cold


@dataclass
class ScoringInsights:
    """Recommendations and next actions derived from a client's latest score."""

    client_id: str
    current_score: int
    score_change: int
    factors: ScoringFactors
    tier: LeadTier
    recommendations: list[str] = field(default_factory=list)
    next_actions: list[str] = field(default_factory=list)
