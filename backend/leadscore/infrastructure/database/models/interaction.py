"""SQLAlchemy ORM models for the interaction and communication logs."""

from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, Float, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from leadscore.infrastructure.database.base import Base


class InteractionModel(Base):
    """ORM model — maps to the 'client_interactions' table."""

    __tablename__ = "client_interactions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    client_id: Mapped[str] = mapped_column(String(255), nullable=False)
    interaction_type: Mapped[str] = mapped_column(String(50), nullable=False)
    source: Mapped[str | None] = mapped_column(String(255), nullable=True)
    value: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    metadata_: Mapped[dict | None] = mapped_column("metadata", JSON, nullable=True)
    occurred_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_client_interactions_client_time", "client_id", "occurred_at"),
    )

    def __repr__(self) -> str:
        return (
            f"<InteractionModel(id={self.id}, client='{self.client_id}', "
            f"type='{self.interaction_type}')>"
        )


class CommunicationModel(Base):
    """ORM model — maps to the 'client_communications' table."""

    __tablename__ = "client_communications"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    client_id: Mapped[str] = mapped_column(String(255), nullable=False)
    channel: Mapped[str] = mapped_column(String(50), nullable=False, default="email")
    direction: Mapped[str] = mapped_column(String(20), nullable=False, default="outbound")
    subject: Mapped[str | None] = mapped_column(String(500), nullable=True)
    occurred_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_client_communications_client_time", "client_id", "occurred_at"),
    )
