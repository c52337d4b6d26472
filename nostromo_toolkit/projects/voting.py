"""
Voting status derivation for projects.

The voting window is inclusive on both ends (``start <= now <= end``),
unlike the half-open fundraising phase windows. A vote passes when at least
one vote was cast and YES votes outnumber NO votes.

A project whose window bounds are all zero (an unset record) is pending.
"""

from typing import Dict

from nostromo_toolkit.projects.models import (
    Project,
    VoteLead,
    VotingStatus,
    VotingStatusInfo,
)
from nostromo_toolkit.utils.dates import TimeLike, YearMode, to_utc

VOTING_LABELS: Dict[VotingStatus, str] = {
    VotingStatus.PENDING: "Voting Pending",
    VotingStatus.ACTIVE: "Voting Active",
    VotingStatus.READY_FOR_FUNDRAISING: "Ready for Fundraising",
    VotingStatus.FUNDRAISING_CREATED: "Fundraising Created",
    VotingStatus.FAILED: "Voting Failed",
}


def vote_passed(project: Project) -> bool:
    return (
        project.total_votes > 0
        and project.number_of_yes > project.number_of_no
    )


def vote_lead(project: Project) -> VoteLead:
    if project.total_votes == 0:
        return VoteLead.NONE
    if project.number_of_yes > project.number_of_no:
        return VoteLead.YES
    if project.number_of_no > project.number_of_yes:
        return VoteLead.NO
    return VoteLead.TIED


def classify_voting(
    project: Project, now: TimeLike, mode: YearMode
) -> VotingStatus:
    """
    Get the voting status of a project at ``now``.

    Args:
        project: Project record
        now: Current time (datetime or Unix seconds)
        mode: Year convention of the project's date parts

    Returns:
        The project's voting status
    """
    if project.start.is_empty() and project.end.is_empty():
        # Unset record: no voting window scheduled yet
        return VotingStatus.PENDING

    current = to_utc(now)
    start = project.start.to_instant(mode)
    end = project.end.to_instant(mode)

    if current < start:
        return VotingStatus.PENDING
    if current <= end:
        return VotingStatus.ACTIVE
    if not vote_passed(project):
        return VotingStatus.FAILED
    if project.is_created_fundraising:
        return VotingStatus.FUNDRAISING_CREATED
    return VotingStatus.READY_FOR_FUNDRAISING


def describe_voting(
    project: Project, now: TimeLike, mode: YearMode
) -> VotingStatusInfo:
    """Get the voting status of a project with display information."""
    status = classify_voting(project, now, mode)
    return VotingStatusInfo(
        status=status,
        label=VOTING_LABELS[status],
        is_open=status is VotingStatus.ACTIVE,
        passed=vote_passed(project),
        leading=vote_lead(project),
        can_create_fundraising=status is VotingStatus.READY_FOR_FUNDRAISING,
    )
