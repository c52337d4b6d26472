"""
Type definitions for Nostromo investor tiers.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, Optional

# =============================================================================
# ENUMS
# =============================================================================


class Tier(IntEnum):
    """Investor tier ranks, as stored by the contract."""

    NONE = 0
    FACEHUGGER = 1
    CHESTBURST = 2
    DOG = 3
    XENOMORPH = 4
    WARRIOR = 5


# =============================================================================
# DATACLASSES
# =============================================================================


@dataclass(frozen=True)
class TierInfo:
    """Staking parameters of a tier."""

    tier: Tier
    name: str  # Display name, e.g. "XENOMORPH"
    stake_amount: int  # Stake required to register (base units)
    pool_weight: int  # Weight in the investment pool
    unstake_fee: int  # Unstake fee, percent


TIERS: Dict[Tier, TierInfo] = {
    Tier.NONE: TierInfo(Tier.NONE, "NONE", 0, 0, 0),
    Tier.FACEHUGGER: TierInfo(Tier.FACEHUGGER, "FACEHUGGER", 20_000_000, 55, 5),
    Tier.CHESTBURST: TierInfo(
        Tier.CHESTBURST, "CHESTBURST", 100_000_000, 300, 4
    ),
    Tier.DOG: TierInfo(Tier.DOG, "DOG", 200_000_000, 750, 3),
    Tier.XENOMORPH: TierInfo(Tier.XENOMORPH, "XENOMORPH", 800_000_000, 3050, 2),
    Tier.WARRIOR: TierInfo(Tier.WARRIOR, "WARRIOR", 3_200_000_000, 13750, 1),
}


def get_tier_info(level: int) -> Optional[TierInfo]:
    """Look up a tier by its integer level, None if unknown."""
    try:
        return TIERS[Tier(level)]
    except ValueError:
        return None


def pool_share(level: int, total_pool_weight: int) -> float:
    """
    Share of the investment pool held by one member of a tier.

    Args:
        level: Tier level (0-5)
        total_pool_weight: Sum of pool weights of all registered members

    Returns:
        Percentage (0-100); 0 for an unknown tier or an empty pool
    """
    info = get_tier_info(level)
    if info is None or not total_pool_weight:
        return 0.0
    return info.pool_weight / total_pool_weight * 100
