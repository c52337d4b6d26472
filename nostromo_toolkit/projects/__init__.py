"""Project voting module for Nostromo toolkit."""

from .models import Project, VoteLead, VotingStatus, VotingStatusInfo
from .voting import classify_voting, describe_voting

__all__ = [
    "Project",
    "VoteLead",
    "VotingStatus",
    "VotingStatusInfo",
    "classify_voting",
    "describe_voting",
]
