"""Concrete repositories for the interaction and communication logs backed by SQLAlchemy."""

from datetime import datetime

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from leadscore.application.interfaces import CommunicationRepository, InteractionRepository
from leadscore.domain.entities import Communication, Interaction, as_utc
from leadscore.infrastructure.database.models import CommunicationModel, InteractionModel
from leadscore.infrastructure.database.repositories.errors import translate_errors


class SQLAlchemyInteractionRepository(InteractionRepository):
    """Implements the InteractionRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: InteractionModel) -> Interaction:
        """Map ORM model → domain entity."""
        return Interaction(
            id=model.id,
            client_id=model.client_id,
            interaction_type=model.interaction_type,
            source=model.source,
            value=model.value or 0.0,
            metadata=model.metadata_,
            occurred_at=as_utc(model.occurred_at),
        )

    async def query(self, client_id: str, since: datetime) -> list[Interaction]:
        stmt = (
            select(InteractionModel)
            .where(InteractionModel.client_id == client_id)
            .where(InteractionModel.occurred_at >= since)
            .order_by(InteractionModel.occurred_at.asc())
        )
        with translate_errors("interaction query"):
            result = await self._session.execute(stmt)
            return [self._to_entity(row) for row in result.scalars().all()]

    async def append(self, interaction: Interaction) -> Interaction:
        model = InteractionModel(
            id=interaction.id,
            client_id=interaction.client_id,
            interaction_type=interaction.interaction_type,
            source=interaction.source,
            value=interaction.value,
            metadata_=interaction.metadata,
            occurred_at=interaction.occurred_at,
        )
        with translate_errors("interaction append"):
            self._session.add(model)
            await self._session.flush()
        return self._to_entity(model)


class SQLAlchemyCommunicationRepository(CommunicationRepository):
    """Implements the CommunicationRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: CommunicationModel) -> Communication:
        return Communication(
            id=model.id,
            client_id=model.client_id,
            channel=model.channel,
            direction=model.direction,
            subject=model.subject,
            occurred_at=as_utc(model.occurred_at),
        )

    async def query(self, client_id: str, since: datetime) -> list[Communication]:
        stmt = (
            select(CommunicationModel)
            .where(CommunicationModel.client_id == client_id)
            .where(CommunicationModel.occurred_at >= since)
            .order_by(CommunicationModel.occurred_at.asc())
        )
        with translate_errors("communication query"):
            result = await self._session.execute(stmt)
            return [self._to_entity(row) for row in result.scalars().all()]
