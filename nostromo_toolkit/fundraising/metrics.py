"""Progress and funding cap calculations for campaigns."""

from nostromo_toolkit.fundraising.models import (
    Campaign,
    CampaignMetrics,
    FundingCaps,
)


def progress_percent(campaign: Campaign) -> float:
    """
    Calculate how much of the funding target has been raised.

    Returns:
        Percentage clamped to [0, 100]; 0 when the target is zero
    """
    if campaign.required_funds == 0:
        return 0.0
    progress = campaign.raised_funds / campaign.required_funds * 100
    return max(0.0, min(progress, 100.0))


def funding_caps(campaign: Campaign) -> FundingCaps:
    """
    Calculate min/max caps from the campaign threshold.

    A threshold of 10 allows raising between 90% and 110% of the target.
    """
    required = campaign.required_funds
    threshold = campaign.threshold
    return FundingCaps(
        min_cap=required * (100 - threshold) / 100,
        max_cap=required * (100 + threshold) / 100,
    )


def remaining_to_target(campaign: Campaign) -> int:
    """Funds still needed to reach the target (never negative)."""
    return max(campaign.required_funds - campaign.raised_funds, 0)


def campaign_metrics(campaign: Campaign) -> CampaignMetrics:
    caps = funding_caps(campaign)
    return CampaignMetrics(
        progress_percent=progress_percent(campaign),
        min_cap=caps.min_cap,
        max_cap=caps.max_cap,
    )
