"""
FundraisingLifecycle - single entry point for campaign lifecycle questions

This facade handles:
1. Describing a campaign's current phase (label, permissions, window bounds)
2. Tier-based investment eligibility
3. Progress and funding cap metrics
4. Project -> campaign index resolution through an instance-owned cache
5. Project voting status and the display schedule of a campaign

Callers pass "now" explicitly to every time-dependent method; the facade
never reads a clock for classification. Each method normalizes "now" once
and classifies once, so phase, eligibility and metrics returned together
can never disagree.

Year conventions come from LifecycleSettings: campaign dates are stored as
year - 2000, project voting dates as four-digit years.
"""

import time
from typing import Callable, List, Optional

from nostromo_toolkit.fundraising.eligibility import (
    can_invest_in_phase,
    can_user_invest,
    eligibility_reason,
)
from nostromo_toolkit.fundraising.metrics import campaign_metrics
from nostromo_toolkit.fundraising.models import (
    Campaign,
    CampaignMetrics,
    CampaignSnapshot,
    PhaseInfo,
    ScheduleEntry,
)
from nostromo_toolkit.fundraising.phases import (
    classify_windows,
    describe,
    phase_info,
    resolve_windows,
)
from nostromo_toolkit.fundraising.resolver import (
    CampaignIndexResolver,
    IndexLookup,
)
from nostromo_toolkit.projects.models import Project, VotingStatusInfo
from nostromo_toolkit.projects.voting import describe_voting
from nostromo_toolkit.shared.config import LifecycleSettings
from nostromo_toolkit.shared.logging import get_logger
from nostromo_toolkit.utils.dates import TimeLike, to_utc

_logger = get_logger(__name__)


class FundraisingLifecycle:
    """
    Facade over phase classification, eligibility, metrics and index lookup.

    Attributes:
        settings: Year conventions and cache TTL
        resolver: Owns the project -> campaign index cache
    """

    def __init__(
        self,
        settings: Optional[LifecycleSettings] = None,
        resolver: Optional[CampaignIndexResolver] = None,
        clock: Callable[[], float] = time.time,
    ):
        """
        Initialize the lifecycle facade.

        Args:
            settings: Engine settings (defaults to LifecycleSettings())
            resolver: Index resolver to use; a new one with its own cache
                is created when omitted
            clock: Time source for cache expiry of a newly created resolver
        """
        self.settings = settings or LifecycleSettings()
        self.resolver = resolver or CampaignIndexResolver(
            ttl=self.settings.index_cache_ttl, clock=clock
        )

    @classmethod
    def from_env(cls) -> "FundraisingLifecycle":
        """Create a facade configured from environment variables."""
        return cls(settings=LifecycleSettings.from_env())

    # -------------------------------------------------------------------------
    # Phase / eligibility / metrics
    # -------------------------------------------------------------------------

    def describe_campaign(
        self, campaign: Campaign, now: TimeLike
    ) -> PhaseInfo:
        """Get detailed phase information for a campaign at ``now``."""
        return describe(campaign, now, self.settings.campaign_year_mode)

    def can_invest(
        self, campaign: Campaign, now: TimeLike, tier: int
    ) -> bool:
        """Check if an investor of ``tier`` can invest at ``now``."""
        return can_user_invest(
            campaign, now, tier, self.settings.campaign_year_mode
        )

    def metrics(self, campaign: Campaign) -> CampaignMetrics:
        """Get progress percentage and funding caps."""
        return campaign_metrics(campaign)

    def evaluate(
        self, campaign: Campaign, now: TimeLike, tier: int
    ) -> CampaignSnapshot:
        """
        Evaluate phase, eligibility and metrics for one instant.

        Args:
            campaign: Campaign record
            now: Current time (datetime or Unix seconds)
            tier: Investor tier level (0-5)

        Returns:
            CampaignSnapshot derived from a single classification
        """
        current = to_utc(now)
        windows = resolve_windows(campaign, self.settings.campaign_year_mode)
        phase = classify_windows(windows, current)

        return CampaignSnapshot(
            campaign_index=campaign.index,
            now=current,
            phase_info=phase_info(phase, windows),
            can_invest=can_invest_in_phase(phase, tier),
            tier=tier,
            eligibility_reason=eligibility_reason(phase, tier),
            metrics=campaign_metrics(campaign),
        )

    def schedule(self, campaign: Campaign) -> List[ScheduleEntry]:
        """Get the labeled phase schedule of a campaign."""
        windows = resolve_windows(campaign, self.settings.campaign_year_mode)
        entries = [
            ScheduleEntry(
                key="phase1",
                label="Phase 1 (ICO)",
                start=windows.phase1_start,
                end=windows.phase1_end,
                note="All tiers can participate",
            ),
            ScheduleEntry(
                key="phase2",
                label="Phase 2 (Public Sale)",
                start=windows.phase2_start,
                end=windows.phase2_end,
                note="Tier 4-5 only",
            ),
            ScheduleEntry(
                key="phase3",
                label="Phase 3 (Final Sale)",
                start=windows.phase3_start,
                end=windows.phase3_end,
                note="Open to all participants",
            ),
            ScheduleEntry(
                key="listing",
                label="Token Listing",
                start=windows.listing_start,
                end=None,
                note="Tokens become claimable based on vesting schedule",
            ),
        ]
        if windows.cliff_end is not None:
            entries.append(
                ScheduleEntry(
                    key="cliff",
                    label="Cliff End",
                    start=None,
                    end=windows.cliff_end,
                )
            )
        if windows.vesting_end is not None:
            entries.append(
                ScheduleEntry(
                    key="vesting",
                    label="Vesting End",
                    start=None,
                    end=windows.vesting_end,
                )
            )
        return entries

    def voting_status(
        self, project: Project, now: TimeLike
    ) -> VotingStatusInfo:
        """Get the DAO voting status of a project at ``now``."""
        return describe_voting(project, now, self.settings.project_year_mode)

    # -------------------------------------------------------------------------
    # Index resolution
    # -------------------------------------------------------------------------

    async def resolve_campaign_index(
        self, project_index: int, fetch: IndexLookup
    ) -> int:
        """
        Get the campaign index of a project, using the index cache.

        Returns:
            The campaign index, or -1 (any negative) if none exists yet

        Raises:
            Whatever ``fetch`` raises, unchanged
        """
        return await self.resolver.resolve(project_index, fetch)

    def reset_index_cache(self) -> None:
        """Clear the index cache, e.g. after a campaign was created."""
        _logger.debug("Resetting campaign index cache")
        self.resolver.reset()
