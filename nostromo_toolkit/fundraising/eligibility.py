"""Tier-based investment eligibility per fundraising phase."""

from typing import Dict, FrozenSet, Optional

from nostromo_toolkit.fundraising.models import Campaign, Phase
from nostromo_toolkit.fundraising.phases import classify
from nostromo_toolkit.tiers.models import Tier
from nostromo_toolkit.utils.dates import TimeLike, YearMode

# None admits every tier, including untiered (0) investors.
# Phases missing from the table admit nobody.
PHASE_TIER_RULES: Dict[Phase, Optional[FrozenSet[int]]] = {
    Phase.PHASE1: None,
    Phase.PHASE2: frozenset({Tier.XENOMORPH, Tier.WARRIOR}),
    Phase.PHASE3: None,
}


def can_invest_in_phase(phase: Phase, tier: int) -> bool:
    """Check if a tier may invest while a campaign is in ``phase``."""
    if phase not in PHASE_TIER_RULES:
        return False
    allowed = PHASE_TIER_RULES[phase]
    return allowed is None or tier in allowed


def can_user_invest(
    campaign: Campaign, now: TimeLike, tier: int, mode: YearMode
) -> bool:
    """Check if a user of ``tier`` can invest in ``campaign`` right now."""
    return can_invest_in_phase(classify(campaign, now, mode), tier)


def eligibility_reason(phase: Phase, tier: int) -> str:
    """Human readable explanation of the eligibility decision."""
    if phase not in PHASE_TIER_RULES:
        return "Investment is not open in the current phase"
    if can_invest_in_phase(phase, tier):
        return f"Tier {tier} can invest in the current phase"
    allowed = ", ".join(
        str(int(level)) for level in sorted(PHASE_TIER_RULES[phase] or ())
    )
    return (
        f"Your tier level ({tier}) does not allow investment in the current "
        f"phase; only tiers {allowed} can participate"
    )
