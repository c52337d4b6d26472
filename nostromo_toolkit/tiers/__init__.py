"""Investor tier catalogue for Nostromo toolkit."""

from .models import TIERS, Tier, TierInfo, get_tier_info, pool_share

__all__ = ["TIERS", "Tier", "TierInfo", "get_tier_info", "pool_share"]
