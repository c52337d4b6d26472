"""Fundraising lifecycle module for Nostromo toolkit."""

from .models import (
    Campaign,
    CampaignDateWindow,
    CampaignMetrics,
    CampaignSnapshot,
    FundingCaps,
    Phase,
    PhaseInfo,
    ScheduleEntry,
)
from .resolver import CampaignIndexResolver, build_scanning_lookup
from .service import FundraisingLifecycle

__all__ = [
    "FundraisingLifecycle",
    "CampaignIndexResolver",
    "build_scanning_lookup",
    "Campaign",
    "CampaignDateWindow",
    "CampaignMetrics",
    "CampaignSnapshot",
    "FundingCaps",
    "Phase",
    "PhaseInfo",
    "ScheduleEntry",
]
