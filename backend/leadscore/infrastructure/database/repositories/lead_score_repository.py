"""Concrete repository for the lead score log backed by SQLAlchemy."""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from leadscore.application.interfaces import LeadScoreRepository
from leadscore.domain.entities import LeadScore, ScoreFilters, ScoringFactors, as_utc
from leadscore.infrastructure.database.models import LeadScoreModel
from leadscore.infrastructure.database.repositories.errors import translate_errors

# Newest first; id breaks ties between records written in the same instant.
_NEWEST_FIRST = (LeadScoreModel.last_updated.desc(), LeadScoreModel.id.desc())


class SQLAlchemyLeadScoreRepository(LeadScoreRepository):
    """Implements the LeadScoreRepository port using SQLAlchemy async sessions.

    ``append`` commits, so a subsequent recalculation for the same client
    (serialized by the client lock) always reads the record just written.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: LeadScoreModel) -> LeadScore:
        """Map ORM model → domain entity."""
        return LeadScore(
            id=model.id,
            client_id=model.client_id,
            score=model.score,
            factors=ScoringFactors.from_dict(model.factors),
            previous_score=model.previous_score,
            score_change=model.score_change,
            metadata=dict(model.metadata_ or {}),
            last_updated=as_utc(model.last_updated),
        )

    async def get_latest(self, client_id: str) -> LeadScore | None:
        stmt = (
            select(LeadScoreModel)
            .where(LeadScoreModel.client_id == client_id)
            .order_by(*_NEWEST_FIRST)
            .limit(1)
        )
        with translate_errors("lead score lookup"):
            result = await self._session.execute(stmt)
            model = result.scalars().first()
        return self._to_entity(model) if model else None

    async def append(self, record: LeadScore) -> LeadScore:
        model = LeadScoreModel(
            client_id=record.client_id,
            score=record.score,
            factors=record.factors.as_dict(),
            previous_score=record.previous_score,
            score_change=record.score_change,
            metadata_=record.metadata,
            last_updated=record.last_updated,
        )
        with translate_errors("lead score append"):
            self._session.add(model)
            await self._session.flush()
            await self._session.commit()
        return self._to_entity(model)

    async def query(
        self,
        filters: ScoreFilters,
        *,
        limit: int = 100,
        offset: int = 0,
    ) -> list[LeadScore]:
        stmt = select(LeadScoreModel)

        if filters.min_score is not None:
            stmt = stmt.where(LeadScoreModel.score >= filters.min_score)
        if filters.max_score is not None:
            stmt = stmt.where(LeadScoreModel.score <= filters.max_score)
        if filters.date_from is not None:
            stmt = stmt.where(LeadScoreModel.last_updated >= filters.date_from)
        if filters.date_to is not None:
            stmt = stmt.where(LeadScoreModel.last_updated <= filters.date_to)

        stmt = stmt.order_by(*_NEWEST_FIRST).offset(offset).limit(limit)
        with translate_errors("lead score query"):
            result = await self._session.execute(stmt)
            return [self._to_entity(row) for row in result.scalars().all()]

    async def get_latest_per_client(self) -> list[LeadScore]:
        ranked = select(
            LeadScoreModel.id.label("id"),
            func.row_number()
            .over(partition_by=LeadScoreModel.client_id, order_by=_NEWEST_FIRST)
            .label("rank"),
        ).subquery()
        stmt = (
            select(LeadScoreModel)
            .join(ranked, ranked.c.id == LeadScoreModel.id)
            .where(ranked.c.rank == 1)
            .order_by(LeadScoreModel.client_id)
        )
        with translate_errors("lead score distribution"):
            result = await self._session.execute(stmt)
            return [self._to_entity(row) for row in result.scalars().all()]

    async def get_history(self, client_id: str, limit: int = 20) -> list[LeadScore]:
        stmt = (
            select(LeadScoreModel)
            .where(LeadScoreModel.client_id == client_id)
            .order_by(*_NEWEST_FIRST)
            .limit(limit)
        )
        with translate_errors("lead score history"):
            result = await self._session.execute(stmt)
            return [self._to_entity(row) for row in result.scalars().all()]
