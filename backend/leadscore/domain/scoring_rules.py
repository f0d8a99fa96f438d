"""Static rule table for lead scoring.

Engagement and behavior rules are matched against an interaction's type and
their points summed (then capped at the category ceiling). Recency, frequency
and monetary rules are descriptive: those factors are computed as step
functions by the factor calculator, and the entries below document the
thresholds they use.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from leadscore.domain.entities import InteractionType


class ScoringFactor(str, Enum):
    """The five signal categories that make up a lead score."""

    ENGAGEMENT = "engagement"
    RECENCY = "recency"
    FREQUENCY = "frequency"
    MONETARY = "monetary"
    BEHAVIOR = "behavior"


@dataclass(frozen=True)
class ScoringRule:
    """One row of the rule table."""

    factor: ScoringFactor
    condition: str
    points: int
    description: str


CATEGORY_CEILINGS: MappingProxyType[ScoringFactor, int] = MappingProxyType({
    ScoringFactor.ENGAGEMENT: 30,
    ScoringFactor.RECENCY: 20,
    ScoringFactor.FREQUENCY: 20,
    ScoringFactor.MONETARY: 15,
    ScoringFactor.BEHAVIOR: 15,
})

SCORING_RULES: tuple[ScoringRule, ...] = (
    # Engagement
    ScoringRule(ScoringFactor.ENGAGEMENT, InteractionType.EMAIL_OPEN.value, 2, "Email opened"),
    ScoringRule(ScoringFactor.ENGAGEMENT, InteractionType.EMAIL_CLICK.value, 5, "Email link clicked"),
    ScoringRule(ScoringFactor.ENGAGEMENT, InteractionType.WEBSITE_VISIT.value, 3, "Website visited"),
    ScoringRule(ScoringFactor.ENGAGEMENT, InteractionType.DEMO_REQUEST.value, 15, "Demo requested"),
    ScoringRule(ScoringFactor.ENGAGEMENT, InteractionType.DOWNLOAD.value, 8, "Resource downloaded"),
    # Recency
    ScoringRule(ScoringFactor.RECENCY, "last_7_days", 20, "Active in last 7 days"),
    ScoringRule(ScoringFactor.RECENCY, "last_30_days", 15, "Active in last 30 days"),
    ScoringRule(ScoringFactor.RECENCY, "last_90_days", 10, "Active in last 90 days"),
    # Frequency
    ScoringRule(ScoringFactor.FREQUENCY, "high_frequency", 20, "High interaction frequency"),
    ScoringRule(ScoringFactor.FREQUENCY, "medium_frequency", 15, "Medium interaction frequency"),
    ScoringRule(ScoringFactor.FREQUENCY, "low_frequency", 10, "Low interaction frequency"),
    # Monetary
    ScoringRule(ScoringFactor.MONETARY, "high_value", 15, "High monetary value"),
    ScoringRule(ScoringFactor.MONETARY, "medium_value", 10, "Medium monetary value"),
    ScoringRule(ScoringFactor.MONETARY, "low_value", 5, "Low monetary value"),
    # Behavior
    ScoringRule(ScoringFactor.BEHAVIOR, InteractionType.SUPPORT_TICKET.value, 5, "Created support ticket"),
    ScoringRule(ScoringFactor.BEHAVIOR, InteractionType.PAYMENT.value, 10, "Made payment"),
    ScoringRule(ScoringFactor.BEHAVIOR, InteractionType.REFERRAL.value, 15, "Referred others"),
)

# Factors whose rules are matched by interaction type.
MATCHED_FACTORS = frozenset({ScoringFactor.ENGAGEMENT, ScoringFactor.BEHAVIOR})


def _build_interaction_rules() -> MappingProxyType[InteractionType, ScoringRule]:
    seen: set[str] = set()
    table: dict[InteractionType, ScoringRule] = {}
    for rule in SCORING_RULES:
        if rule.condition in seen:
            raise ValueError(f"Duplicate scoring rule condition: {rule.condition!r}")
        seen.add(rule.condition)
        if rule.factor in MATCHED_FACTORS:
            table[InteractionType(rule.condition)] = rule
    return MappingProxyType(table)


INTERACTION_RULES: MappingProxyType[InteractionType, ScoringRule] = _build_interaction_rules()


def rules_for(factor: ScoringFactor) -> list[ScoringRule]:
    """Return the rules for one factor, in table order."""
    return [rule for rule in SCORING_RULES if rule.factor == factor]
