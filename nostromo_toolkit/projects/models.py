"""
Type definitions for Nostromo projects and their DAO vote.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Mapping

from nostromo_toolkit.shared.exceptions import FundraisingDataException
from nostromo_toolkit.utils.dates import DateParts

# =============================================================================
# ENUMS
# =============================================================================


class VotingStatus(Enum):
    """Project voting status enumeration."""

    PENDING = "pending"  # Voting window not open yet
    ACTIVE = "active"  # Voting window open
    READY_FOR_FUNDRAISING = "ready_for_fundraising"  # Passed, no campaign yet
    FUNDRAISING_CREATED = "fundraising_created"  # Passed, campaign exists
    FAILED = "failed"  # Closed without a passing vote


class VoteLead(Enum):
    """Which side currently leads the vote."""

    NONE = "none"  # No votes cast
    YES = "yes"
    NO = "no"
    TIED = "tied"


# =============================================================================
# DATACLASSES
# =============================================================================


@dataclass(frozen=True)
class Project:
    """A project proposal read from the contract."""

    index: int  # Project index
    creator: str  # Creator identity
    token_name: int  # Token name packed as uint64
    supply: int  # Token supply
    start: DateParts  # Voting window start
    end: DateParts  # Voting window end
    number_of_yes: int = 0
    number_of_no: int = 0
    is_created_fundraising: bool = False

    @property
    def total_votes(self) -> int:
        return self.number_of_yes + self.number_of_no

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], index: int) -> "Project":
        """
        Build a project from a decoded ``getProjectByIndex`` record.

        Accepts both ``isCreatedFundraising`` and the contract's
        ``isCreatedFundarasing`` spelling.

        Raises:
            FundraisingDataException: If a required field is missing
        """
        try:
            created = data.get(
                "isCreatedFundraising", data.get("isCreatedFundarasing", False)
            )
            return cls(
                index=index,
                creator=data.get("creator", ""),
                token_name=data["tokenName"],
                supply=data["supply"],
                start=DateParts.from_record(data, "start"),
                end=DateParts.from_record(data, "end"),
                number_of_yes=data.get("numberOfYes") or 0,
                number_of_no=data.get("numberOfNo") or 0,
                is_created_fundraising=bool(created),
            )
        except KeyError as e:
            raise FundraisingDataException(
                f"Project record {index} is missing field {e.args[0]}"
            ) from e


@dataclass(frozen=True)
class VotingStatusInfo:
    """Voting status with display information."""

    status: VotingStatus
    label: str
    is_open: bool
    passed: bool
    leading: VoteLead
    can_create_fundraising: bool  # Passed, closed, and no campaign yet

    def to_dict(self) -> Dict[str, Any]:
        return {
            "status": self.status.value,
            "label": self.label,
            "is_open": self.is_open,
            "passed": self.passed,
            "leading": self.leading.value,
            "can_create_fundraising": self.can_create_fundraising,
        }
