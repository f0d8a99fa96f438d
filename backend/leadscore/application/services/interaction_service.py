"""Interaction recorder: entry point for new client touchpoints."""

import math
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any

from leadscore.application.interfaces import InteractionRepository
from leadscore.application.services.factor_calculator import validate_lookback_days
from leadscore.application.services.lead_scoring_service import LeadScoringService
from leadscore.domain.entities import Interaction, InteractionType
from leadscore.domain.exceptions import ValidationError
from leadscore.infrastructure.logging.colored_logger import ScoringLogger, ScoringStage

slog = ScoringLogger("LeadScoringService")


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class InteractionService:
    """Persists interactions and keeps the client's current score fresh.

    Every recorded interaction triggers a recalculation, so there is no
    separate scheduler for score updates.
    """

    def __init__(
        self,
        interaction_repository: InteractionRepository,
        scoring_service: LeadScoringService,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._interactions = interaction_repository
        self._scoring = scoring_service
        self._clock = clock

    async def record_interaction(
        self,
        client_id: str,
        interaction_type: str | InteractionType,
        source: str | None = None,
        value: float | None = None,
        metadata: dict[str, Any] | None = None,
    ) -> Interaction:
        if not client_id or not client_id.strip():
            raise ValidationError("client_id", "must not be empty")

        kind = (
            interaction_type
            if isinstance(interaction_type, InteractionType)
            else InteractionType.parse(interaction_type)
        )
        if kind is None:
            allowed = ", ".join(t.value for t in InteractionType)
            raise ValidationError(
                "interaction_type", f"'{interaction_type}' is not one of: {allowed}"
            )

        value = 0.0 if value is None else float(value)
        if value < 0 or not math.isfinite(value):
            raise ValidationError("value", "must be a non-negative number")

        interaction = await self._interactions.append(
            Interaction(
                client_id=client_id,
                interaction_type=kind.value,
                source=source,
                value=value,
                metadata=metadata,
                occurred_at=self._clock(),
            )
        )
        slog.step(
            ScoringStage.RECORD,
            "Interaction recorded",
            client_id=client_id,
            type=kind.value,
        )

        await self._scoring.recalculate_score(client_id)
        return interaction

    async def list_interactions(
        self,
        client_id: str,
        lookback_days: int = 90,
    ) -> list[Interaction]:
        """Return the client's interactions inside the lookback window, newest first."""
        lookback_days = validate_lookback_days(lookback_days)
        since = self._clock() - timedelta(days=lookback_days)
        interactions = await self._interactions.query(client_id, since)
        return sorted(interactions, key=lambda i: i.occurred_at, reverse=True)
