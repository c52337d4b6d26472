"""
Phase classification for fundraising campaigns.

A campaign's phase is a pure function of its date windows and "now"; it is
never stored or advanced. Windows are half-open ``[start, end)`` and are
checked in a fixed priority order so that overlapping or malformed windows
still produce exactly one phase:

1. inside phase 1            -> phase1
2. inside phase 2            -> phase2
3. inside phase 3            -> phase3
4. before phase 1 starts     -> upcoming
5. at/after listing start    -> claimable
6. otherwise                 -> closed (sale over, listing not reached)

Display and permission data per phase live in PHASE_TABLE, so ``can_invest``
and ``can_claim`` cannot drift from the enumeration.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional

from nostromo_toolkit.fundraising.models import (
    Campaign,
    Phase,
    PhaseInfo,
    ResolvedWindows,
)
from nostromo_toolkit.utils.dates import (
    DateParts,
    TimeLike,
    YearMode,
    format_instant,
    to_utc,
)


@dataclass(frozen=True)
class PhaseDefinition:
    """Static description of a phase."""

    label: str
    can_invest: bool
    can_claim: bool
    start_field: Optional[str]  # ResolvedWindows attribute for PhaseInfo.start
    end_field: Optional[str]  # ResolvedWindows attribute for PhaseInfo.end
    description: str  # May reference {start} / {end}


PHASE_TABLE: Dict[Phase, PhaseDefinition] = {
    Phase.UPCOMING: PhaseDefinition(
        label="Upcoming",
        can_invest=False,
        can_claim=False,
        start_field="phase1_start",
        end_field=None,
        description="Fundraising starts on {start}",
    ),
    Phase.PHASE1: PhaseDefinition(
        label="Phase 1: ICO (All Tiers)",
        can_invest=True,
        can_claim=False,
        start_field="phase1_start",
        end_field="phase1_end",
        description="All tier levels can participate",
    ),
    Phase.PHASE2: PhaseDefinition(
        label="Phase 2: Public Sale (Tier 4-5)",
        can_invest=True,
        can_claim=False,
        start_field="phase2_start",
        end_field="phase2_end",
        description=(
            "Only Xenomorph (Tier 4) and Warrior (Tier 5) can participate"
        ),
    ),
    Phase.PHASE3: PhaseDefinition(
        label="Phase 3: Final Sale (Open)",
        can_invest=True,
        can_claim=False,
        start_field="phase3_start",
        end_field="phase3_end",
        description="Open to all participants",
    ),
    Phase.CLOSED: PhaseDefinition(
        label="Closed",
        can_invest=False,
        can_claim=False,
        start_field=None,
        end_field="phase3_end",
        description="Fundraising period has ended",
    ),
    Phase.CLAIMABLE: PhaseDefinition(
        label="Tokens Available",
        can_invest=False,
        can_claim=True,
        start_field="listing_start",
        end_field=None,
        description="Tokens can be claimed based on vesting schedule",
    ),
}


def resolve_windows(campaign: Campaign, mode: YearMode) -> ResolvedWindows:
    """Convert every date bound of a campaign to a UTC instant."""
    window = campaign.window
    return ResolvedWindows(
        phase1_start=window.phase1_start.to_instant(mode),
        phase1_end=window.phase1_end.to_instant(mode),
        phase2_start=window.phase2_start.to_instant(mode),
        phase2_end=window.phase2_end.to_instant(mode),
        phase3_start=window.phase3_start.to_instant(mode),
        phase3_end=window.phase3_end.to_instant(mode),
        listing_start=window.listing_start.to_instant(mode),
        cliff_end=_optional_instant(window.cliff_end, mode),
        vesting_end=_optional_instant(window.vesting_end, mode),
    )


def _optional_instant(
    parts: Optional[DateParts], mode: YearMode
) -> Optional[datetime]:
    if parts is None or parts.is_empty():
        return None
    return parts.to_instant(mode)


def classify_windows(windows: ResolvedWindows, now: datetime) -> Phase:
    """Classify already-resolved windows at ``now`` (aware UTC datetime)."""
    if windows.phase1_start <= now < windows.phase1_end:
        return Phase.PHASE1
    if windows.phase2_start <= now < windows.phase2_end:
        return Phase.PHASE2
    if windows.phase3_start <= now < windows.phase3_end:
        return Phase.PHASE3
    if now < windows.phase1_start:
        return Phase.UPCOMING
    if now >= windows.listing_start:
        return Phase.CLAIMABLE
    return Phase.CLOSED


def classify(campaign: Campaign, now: TimeLike, mode: YearMode) -> Phase:
    """
    Get the current phase of a campaign.

    Args:
        campaign: Campaign record
        now: Current time (datetime or Unix seconds)
        mode: Year convention of the campaign's date parts

    Returns:
        The single phase that holds at ``now``
    """
    return classify_windows(resolve_windows(campaign, mode), to_utc(now))


def phase_info(phase: Phase, windows: ResolvedWindows) -> PhaseInfo:
    """Build PhaseInfo for a phase from the static table."""
    entry = PHASE_TABLE[phase]
    start = getattr(windows, entry.start_field) if entry.start_field else None
    end = getattr(windows, entry.end_field) if entry.end_field else None
    return PhaseInfo(
        phase=phase,
        label=entry.label,
        can_invest=entry.can_invest,
        can_claim=entry.can_claim,
        start=start,
        end=end,
        description=entry.description.format(
            start=format_instant(start) if start else "",
            end=format_instant(end) if end else "",
        ),
    )


def describe(campaign: Campaign, now: TimeLike, mode: YearMode) -> PhaseInfo:
    """Get detailed phase information for a campaign at ``now``."""
    windows = resolve_windows(campaign, mode)
    return phase_info(classify_windows(windows, to_utc(now)), windows)
