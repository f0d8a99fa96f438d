"""SQLAlchemy ORM model for the append-only lead score log."""

from datetime import datetime, timezone

from sqlalchemy import JSON, DateTime, Index, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from leadscore.infrastructure.database.base import Base


class LeadScoreModel(Base):
    """ORM model — maps to the 'lead_scores' table. Rows are inserted, never updated."""

    __tablename__ = "lead_scores"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    client_id: Mapped[str] = mapped_column(String(255), nullable=False)
    score: Mapped[int] = mapped_column(Integer, nullable=False)
    factors: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    previous_score: Mapped[int | None] = mapped_column(Integer, nullable=True)
    score_change: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    metadata_: Mapped[dict] = mapped_column("metadata", JSON, nullable=False, default=dict)
    last_updated: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_lead_scores_client_updated", "client_id", "last_updated"),
        Index("ix_lead_scores_score", "score"),
    )

    def __repr__(self) -> str:
        return f"<LeadScoreModel(id={self.id}, client='{self.client_id}', score={self.score})>"
