"""Factor calculator: turns a client's windowed history into five bounded sub-scores.

Factor rules:
  engagement / behavior  sum of matching rule points, capped at 30 / 15
  recency                step function of whole days since the last interaction
  frequency              step function of the interaction count
  monetary               delegated to a MonetaryScorer (0 until revenue data is wired in)
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from leadscore.application.interfaces import (
    CommunicationRepository,
    InteractionRepository,
    MonetaryScorer,
)
from leadscore.domain.entities import Communication, Interaction, ScoringFactors
from leadscore.domain.exceptions import ValidationError
from leadscore.domain.scoring_rules import (
    CATEGORY_CEILINGS,
    INTERACTION_RULES,
    ScoringFactor,
)

logger = logging.getLogger(__name__)

DEFAULT_LOOKBACK_DAYS = 90
MAX_LOOKBACK_DAYS = 3650

# (max days since last activity, points), checked in order
_RECENCY_STEPS = ((7, 20), (30, 15), (90, 10))
# (min interaction count, points), checked in order
_FREQUENCY_STEPS = ((20, 20), (10, 15), (5, 10))


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def recency_points(days_since_activity: int | None) -> int:
    """Points for recency; None means no activity in the window."""
    if days_since_activity is None:
        return 0
    for max_days, points in _RECENCY_STEPS:
        if days_since_activity <= max_days:
            return points
    return 0


def frequency_points(interaction_count: int) -> int:
    for min_count, points in _FREQUENCY_STEPS:
        if interaction_count >= min_count:
            return points
    return 0


def validate_lookback_days(lookback_days: object) -> int:
    """Return ``lookback_days`` if it is an int in 1..MAX_LOOKBACK_DAYS, else raise ValidationError."""
    if isinstance(lookback_days, bool) or not isinstance(lookback_days, int):
        raise ValidationError("lookback_days", "must be a positive integer")
    if lookback_days <= 0:
        raise ValidationError("lookback_days", "must be a positive integer")
    if lookback_days > MAX_LOOKBACK_DAYS:
        raise ValidationError("lookback_days", f"must be at most {MAX_LOOKBACK_DAYS}")
    return lookback_days


class NoRevenueMonetaryScorer(MonetaryScorer):
    """Default monetary scorer used until invoicing data is integrated. Always 0."""

    async def score(
        self,
        client_id: str,
        interactions: list[Interaction],
        since: datetime,
    ) -> int:
        return 0


@dataclass
class ScoringWindow:
    """Everything fetched for one client over one lookback window."""

    client_id: str
    lookback_days: int
    since: datetime
    now: datetime
    interactions: list[Interaction]
    communications: list[Communication]

    @property
    def last_activity(self) -> datetime | None:
        if not self.interactions:
            return None
        return max(i.occurred_at for i in self.interactions)


class FactorCalculator:
    """Computes ScoringFactors for a client from the interaction and communication logs.

    Collaborator failures (DataAccessError) propagate unchanged; no partial
    factors are ever returned.
    """

    def __init__(
        self,
        interaction_repository: InteractionRepository,
        communication_repository: CommunicationRepository,
        monetary_scorer: MonetaryScorer | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._interactions = interaction_repository
        self._communications = communication_repository
        self._monetary_scorer = monetary_scorer or NoRevenueMonetaryScorer()
        self._clock = clock

    async def compute(
        self,
        client_id: str,
        lookback_days: int = DEFAULT_LOOKBACK_DAYS,
        *,
        now: datetime | None = None,
    ) -> ScoringFactors:
        window = await self.gather(client_id, lookback_days, now=now)
        return await self.score_window(window)

    async def gather(
        self,
        client_id: str,
        lookback_days: int = DEFAULT_LOOKBACK_DAYS,
        *,
        now: datetime | None = None,
    ) -> ScoringWindow:
        """Fetch the client's interactions and communications for the lookback window."""
        lookback_days = validate_lookback_days(lookback_days)
        now = now or self._clock()
        since = now - timedelta(days=lookback_days)

        interactions = await self._interactions.query(client_id, since)
        communications = await self._communications.query(client_id, since)

        return ScoringWindow(
            client_id=client_id,
            lookback_days=lookback_days,
            since=since,
            now=now,
            interactions=interactions,
            communications=communications,
        )

    async def score_window(self, window: ScoringWindow) -> ScoringFactors:
        monetary = await self._monetary_scorer.score(
            window.client_id, window.interactions, window.since
        )

        last_activity = window.last_activity
        days_since = None
        if last_activity is not None:
            days_since = (window.now - last_activity) // timedelta(days=1)

        factors = ScoringFactors(
            engagement=self._matched_points(window.interactions, ScoringFactor.ENGAGEMENT),
            recency=recency_points(days_since),
            frequency=frequency_points(len(window.interactions)),
            monetary=_cap(monetary, ScoringFactor.MONETARY),
            behavior=self._matched_points(window.interactions, ScoringFactor.BEHAVIOR),
        )
        logger.debug(
            "Factors for client %s over %d days: %s",
            window.client_id,
            window.lookback_days,
            factors,
        )
        return factors

    @staticmethod
    def _matched_points(interactions: list[Interaction], factor: ScoringFactor) -> int:
        total = 0
        for interaction in interactions:
            kind = interaction.kind
            if kind is None:
                continue
            rule = INTERACTION_RULES.get(kind)
            if rule is not None and rule.factor == factor:
                total += rule.points
        return _cap(total, factor)


def _cap(points: int, factor: ScoringFactor) -> int:
    return max(0, min(int(points), CATEGORY_CEILINGS[factor]))
