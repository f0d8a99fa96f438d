"""Domain entities for client touchpoints read from the interaction and communication logs."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any
from uuid import uuid4


class InteractionType(str, Enum):
    """Fixed vocabulary of client touchpoints the scoring engine understands."""

    EMAIL_OPEN = "email_open"
    EMAIL_CLICK = "email_click"
    WEBSITE_VISIT = "website_visit"
    DEMO_REQUEST = "demo_request"
    DOWNLOAD = "download"
    SUPPORT_TICKET = "support_ticket"
    PAYMENT = "payment"
    REFERRAL = "referral"

    @classmethod
    def parse(cls, raw: str) -> "InteractionType | None":
        """Return the matching member, or None for types outside the vocabulary."""
        try:
            return cls(raw)
        except ValueError:
            return None


@dataclass
class Interaction:
    """Append-only record of a single client touchpoint.

    ``interaction_type`` is kept as the raw string stored in the log so that
    legacy rows outside the vocabulary can still be read (they score 0).
    """

    client_id: str
    interaction_type: str
    source: str | None = None
    value: float = 0.0
    metadata: dict[str, Any] | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def kind(self) -> InteractionType | None:
        return InteractionType.parse(self.interaction_type)


@dataclass
class Communication:
    """A message exchanged with a client. Only counted by the scoring engine."""

    client_id: str
    channel: str = "email"
    direction: str = "outbound"  # "inbound" | "outbound"
    subject: str | None = None
    id: str = field(default_factory=lambda: str(uuid4()))
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
