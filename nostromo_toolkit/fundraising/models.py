"""
Type definitions for Nostromo fundraising campaigns.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Mapping, Optional, TypedDict

from nostromo_toolkit.shared.exceptions import FundraisingDataException
from nostromo_toolkit.utils.dates import DateParts

# =============================================================================
# ENUMS
# =============================================================================


class Phase(Enum):
    """Fundraising phase enumeration."""

    UPCOMING = "upcoming"  # Before phase 1 starts
    PHASE1 = "phase1"  # ICO window, all tiers
    PHASE2 = "phase2"  # Public sale, tiers 4-5
    PHASE3 = "phase3"  # Final sale, open
    CLOSED = "closed"  # Sale over, tokens not listed yet
    CLAIMABLE = "claimable"  # Listing started, tokens can be claimed


# =============================================================================
# TYPED DICTS (for JSON serialization)
# =============================================================================


class PhaseInfoDict(TypedDict):
    """Phase information dictionary."""

    phase: str  # Will be Phase.value
    label: str
    can_invest: bool
    can_claim: bool
    start: Optional[str]  # ISO format
    end: Optional[str]  # ISO format
    description: str


class CampaignMetricsDict(TypedDict):
    """Campaign metrics dictionary."""

    progress_percent: float
    min_cap: float
    max_cap: float


# =============================================================================
# DATACLASSES
# =============================================================================


@dataclass(frozen=True)
class CampaignDateWindow:
    """Date bounds of a campaign, as stored on-chain."""

    phase1_start: DateParts
    phase1_end: DateParts
    phase2_start: DateParts
    phase2_end: DateParts
    phase3_start: DateParts
    phase3_end: DateParts
    listing_start: DateParts
    cliff_end: Optional[DateParts] = None  # Vesting cliff (display only)
    vesting_end: Optional[DateParts] = None  # Vesting end (display only)


# Record field prefix for each window bound
_WINDOW_FIELDS = {
    "phase1_start": "firstPhaseStart",
    "phase1_end": "firstPhaseEnd",
    "phase2_start": "secondPhaseStart",
    "phase2_end": "secondPhaseEnd",
    "phase3_start": "thirdPhaseStart",
    "phase3_end": "thirdPhaseEnd",
    "listing_start": "listingStart",
}

_OPTIONAL_WINDOW_FIELDS = {
    "cliff_end": "cliffEnd",
    "vesting_end": "vestingEnd",
}


@dataclass(frozen=True)
class Campaign:
    """
    A fundraising campaign read from the contract.

    Created on-chain once the project's vote passes. The engine treats it as
    read-only input.
    """

    index: int  # Campaign (fundraising) index
    index_of_project: int  # Project this campaign belongs to
    window: CampaignDateWindow
    token_price: int
    required_funds: int
    raised_funds: int
    sold_amount: int
    threshold: int  # Percentage points, e.g. 10 means +/-10%
    tge: int = 0  # Percent released at TGE
    step_of_vesting: int = 0
    is_created_token: bool = False

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], index: int) -> "Campaign":
        """
        Build a campaign from a decoded ``getFundraisingByIndex`` record.

        Args:
            data: Record with camelCase field names
            index: Index the record was read from

        Raises:
            FundraisingDataException: If a required field is missing
        """
        try:
            bounds = {
                name: DateParts.from_record(data, prefix)
                for name, prefix in _WINDOW_FIELDS.items()
            }
            for name, prefix in _OPTIONAL_WINDOW_FIELDS.items():
                if f"{prefix}Year" in data:
                    bounds[name] = DateParts.from_record(data, prefix)

            return cls(
                index=index,
                index_of_project=data["indexOfProject"],
                window=CampaignDateWindow(**bounds),
                token_price=data["tokenPrice"],
                required_funds=data["requiredFunds"],
                raised_funds=data["raisedFunds"],
                sold_amount=data["soldAmount"],
                threshold=data["threshold"],
                tge=data.get("TGE", 0),
                step_of_vesting=data.get("stepOfVesting", 0),
                is_created_token=bool(data.get("isCreatedToken", False)),
            )
        except KeyError as e:
            raise FundraisingDataException(
                f"Campaign record {index} is missing field {e.args[0]}"
            ) from e


@dataclass(frozen=True)
class ResolvedWindows:
    """Campaign window bounds converted to UTC instants."""

    phase1_start: datetime
    phase1_end: datetime
    phase2_start: datetime
    phase2_end: datetime
    phase3_start: datetime
    phase3_end: datetime
    listing_start: datetime
    cliff_end: Optional[datetime] = None
    vesting_end: Optional[datetime] = None


@dataclass(frozen=True)
class PhaseInfo:
    """Display and permission information for a campaign's current phase."""

    phase: Phase
    label: str
    can_invest: bool
    can_claim: bool
    start: Optional[datetime]
    end: Optional[datetime]
    description: str

    def to_dict(self) -> PhaseInfoDict:
        """Convert to dictionary for serialization."""
        return {
            "phase": self.phase.value,
            "label": self.label,
            "can_invest": self.can_invest,
            "can_claim": self.can_claim,
            "start": self.start.isoformat() if self.start else None,
            "end": self.end.isoformat() if self.end else None,
            "description": self.description,
        }


@dataclass(frozen=True)
class FundingCaps:
    """Threshold-based funding bounds."""

    min_cap: float
    max_cap: float


@dataclass(frozen=True)
class CampaignMetrics:
    """Progress and caps of a campaign."""

    progress_percent: float  # 0-100
    min_cap: float
    max_cap: float

    def to_dict(self) -> CampaignMetricsDict:
        return {
            "progress_percent": self.progress_percent,
            "min_cap": self.min_cap,
            "max_cap": self.max_cap,
        }


@dataclass(frozen=True)
class CampaignSnapshot:
    """
    Everything a caller needs to render a campaign at one instant.

    Phase, eligibility and metrics are all derived from the same ``now``.
    """

    campaign_index: int
    now: datetime
    phase_info: PhaseInfo
    can_invest: bool
    tier: int
    eligibility_reason: str
    metrics: CampaignMetrics

    def to_dict(self) -> Dict[str, Any]:
        return {
            "campaign_index": self.campaign_index,
            "now": self.now.isoformat(),
            "phase_info": self.phase_info.to_dict(),
            "can_invest": self.can_invest,
            "tier": self.tier,
            "eligibility_reason": self.eligibility_reason,
            "metrics": self.metrics.to_dict(),
        }


@dataclass(frozen=True)
class ScheduleEntry:
    """One labeled row of a campaign's schedule."""

    key: str  # e.g. "phase1", "listing"
    label: str
    start: Optional[datetime]
    end: Optional[datetime]
    note: str = ""
