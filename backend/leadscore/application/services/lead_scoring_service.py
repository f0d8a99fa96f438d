"""Lead scoring service: aggregates factors into scores and maintains the score log.

A recalculation is: gather windowed history -> compute factors -> clamp the
sum to [0, 100] -> read the client's previous record -> append a new record
with the delta. The read-then-append runs under a per-client lock.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone

from leadscore.application.interfaces import LeadScoreRepository
from leadscore.application.services.client_locks import ClientLockRegistry
from leadscore.application.services.factor_calculator import (
    DEFAULT_LOOKBACK_DAYS,
    FactorCalculator,
    validate_lookback_days,
)
from leadscore.domain.entities import (
    MAX_SCORE,
    LeadScore,
    LeadTier,
    ScoreDistribution,
    ScoreFilters,
    ScoreSnapshot,
    as_utc,
)
from leadscore.domain.exceptions import ValidationError
from leadscore.infrastructure.logging.colored_logger import ScoringLogger, ScoringStage

logger = logging.getLogger(__name__)
slog = ScoringLogger("LeadScoringService")

DEFAULT_PAGE_LIMIT = 100
MAX_PAGE_LIMIT = 500


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class LeadScoringService:
    """Application service for calculating, saving and querying lead scores."""

    def __init__(
        self,
        calculator: FactorCalculator,
        score_repository: LeadScoreRepository,
        locks: ClientLockRegistry | None = None,
        *,
        default_lookback_days: int = DEFAULT_LOOKBACK_DAYS,
        max_page_limit: int = MAX_PAGE_LIMIT,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._calculator = calculator
        self._scores = score_repository
        self._locks = locks or ClientLockRegistry()
        self._default_lookback_days = validate_lookback_days(default_lookback_days)
        self._max_page_limit = max_page_limit
        self._clock = clock

    # ── Calculation ─────────────────────────────────────────────────

    async def calculate_lead_score(
        self,
        client_id: str,
        lookback_days: int | None = None,
    ) -> ScoreSnapshot:
        """Compute a score snapshot without persisting it."""
        if lookback_days is None:
            lookback_days = self._default_lookback_days
        now = self._clock()

        with slog.timed_step(ScoringStage.FETCH, "Fetching history", client_id=client_id):
            window = await self._calculator.gather(client_id, lookback_days, now=now)

        with slog.timed_step(ScoringStage.FACTORS, "Scoring factors", client_id=client_id):
            factors = await self._calculator.score_window(window)
        slog.detail("Factor breakdown", **factors.as_dict())
        score = max(0, min(factors.total, MAX_SCORE))

        slog.step(
            ScoringStage.AGGREGATE,
            "Score calculated",
            client_id=client_id,
            score=score,
            raw_total=factors.total,
        )
        return ScoreSnapshot(
            client_id=client_id,
            score=score,
            factors=factors,
            metadata={
                "interactions_count": len(window.interactions),
                "communications_count": len(window.communications),
                "calculated_at": now.isoformat(),
                "period": window.lookback_days,
            },
        )

    async def save_lead_score(self, snapshot: ScoreSnapshot) -> LeadScore:
        """Append a snapshot to the score log with its delta from the previous record."""
        async with self._locks.hold(snapshot.client_id):
            return await self._append(snapshot)

    async def recalculate_score(self, client_id: str) -> ScoreSnapshot:
        """Calculate with the default lookback and save, as one serialized step per client."""
        async with self._locks.hold(client_id):
            snapshot = await self.calculate_lead_score(client_id)
            await self._append(snapshot)
        return snapshot

    async def _append(self, snapshot: ScoreSnapshot) -> LeadScore:
        previous = await self._scores.get_latest(snapshot.client_id)
        previous_score = previous.score if previous is not None else None
        score_change = snapshot.score - (previous_score or 0)

        record = LeadScore(
            client_id=snapshot.client_id,
            score=snapshot.score,
            factors=snapshot.factors,
            previous_score=previous_score,
            score_change=score_change,
            metadata=dict(snapshot.metadata),
            last_updated=self._clock(),
        )
        saved = await self._scores.append(record)
        slog.step(
            ScoringStage.PERSIST,
            "Score saved",
            client_id=saved.client_id,
            score=saved.score,
            change=saved.score_change,
        )
        return saved

    # ── Queries ─────────────────────────────────────────────────────

    async def get_lead_score(self, client_id: str) -> LeadScore | None:
        """Current score for a client; None when the client has never been scored."""
        return await self._scores.get_latest(client_id)

    async def get_score_history(self, client_id: str, limit: int = 20) -> list[LeadScore]:
        self._validate_page(limit, 0)
        return await self._scores.get_history(client_id, limit=limit)

    async def get_all_lead_scores(
        self,
        filters: ScoreFilters | None = None,
        limit: int = DEFAULT_PAGE_LIMIT,
        offset: int = 0,
    ) -> list[LeadScore]:
        filters = filters or ScoreFilters()
        filters = ScoreFilters(
            min_score=filters.min_score,
            max_score=filters.max_score,
            date_from=as_utc(filters.date_from),
            date_to=as_utc(filters.date_to),
        )
        self._validate_filters(filters)
        self._validate_page(limit, offset)
        return await self._scores.query(filters, limit=limit, offset=offset)

    async def get_lead_score_distribution(self) -> ScoreDistribution:
        """Bucket every client's latest score into hot / warm / cold."""
        distribution = ScoreDistribution()
        for record in await self._scores.get_latest_per_client():
            tier = LeadTier.from_score(record.score)
            if tier is LeadTier.HOT:
                distribution.hot += 1
            elif tier is LeadTier.WARM:
                distribution.warm += 1
            else:
                distribution.cold += 1
        logger.debug("Lead score distribution: %s", distribution)
        return distribution

    # ── Validation ──────────────────────────────────────────────────

    def _validate_page(self, limit: int, offset: int) -> None:
        if limit < 1 or limit > self._max_page_limit:
            raise ValidationError("limit", f"must be between 1 and {self._max_page_limit}")
        if offset < 0:
            raise ValidationError("offset", "must not be negative")

    @staticmethod
    def _validate_filters(filters: ScoreFilters) -> None:
        for name in ("min_score", "max_score"):
            value = getattr(filters, name)
            if value is not None and not 0 <= value <= MAX_SCORE:
                raise ValidationError(name, f"must be between 0 and {MAX_SCORE}")
        if (
            filters.min_score is not None
            and filters.max_score is not None
            and filters.min_score > filters.max_score
        ):
            raise ValidationError("min_score", "must not exceed max_score")
        if (
            filters.date_from is not None
            and filters.date_to is not None
            and filters.date_from > filters.date_to
        ):
            raise ValidationError("date_from", "must not be after date_to")
