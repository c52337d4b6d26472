"""
Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests.

The default campaign (years stored as year - 2000):
    phase 1   2025-01-01 00:00 -> 2025-01-08 00:00
    phase 2   2025-01-08 00:00 -> 2025-01-15 00:00
    phase 3   2025-01-15 00:00 -> 2025-01-22 00:00
    listing   2025-02-01 00:00
    cliff     2025-03-01 00:00
    vesting   2025-06-01 00:00
"""

from datetime import datetime, timezone
from typing import Any, Callable, Dict, Tuple

import pytest

from nostromo_toolkit.fundraising.models import Campaign
from nostromo_toolkit.projects.models import Project
from nostromo_toolkit.shared.config import LifecycleSettings


def utc(*args: int) -> datetime:
    """Shorthand for an aware UTC datetime."""
    return datetime(*args, tzinfo=timezone.utc)


def _date_fields(prefix: str, parts: Tuple[int, int, int, int]) -> Dict[str, int]:
    year, month, day, hour = parts
    return {
        f"{prefix}Year": year,
        f"{prefix}Month": month,
        f"{prefix}Day": day,
        f"{prefix}Hour": hour,
    }


DEFAULT_DATES = {
    "firstPhaseStart": (25, 1, 1, 0),
    "firstPhaseEnd": (25, 1, 8, 0),
    "secondPhaseStart": (25, 1, 8, 0),
    "secondPhaseEnd": (25, 1, 15, 0),
    "thirdPhaseStart": (25, 1, 15, 0),
    "thirdPhaseEnd": (25, 1, 22, 0),
    "listingStart": (25, 2, 1, 0),
    "cliffEnd": (25, 3, 1, 0),
    "vestingEnd": (25, 6, 1, 0),
}


def build_campaign_record(
    dates: Dict[str, Tuple[int, int, int, int]] = None, **fields: Any
) -> Dict[str, Any]:
    """Decoded getFundraisingByIndex record with overridable fields."""
    record: Dict[str, Any] = {
        "tokenPrice": 1000,
        "soldAmount": 0,
        "requiredFunds": 1000,
        "raisedFunds": 0,
        "indexOfProject": 7,
        "threshold": 10,
        "TGE": 20,
        "stepOfVesting": 4,
        "isCreatedToken": False,
    }
    merged_dates = dict(DEFAULT_DATES)
    merged_dates.update(dates or {})
    for prefix, parts in merged_dates.items():
        record.update(_date_fields(prefix, parts))
    record.update(fields)
    return record


@pytest.fixture
def make_campaign() -> Callable[..., Campaign]:
    """Factory building Campaign records, defaults as in the module docstring."""

    def factory(
        index: int = 0,
        dates: Dict[str, Tuple[int, int, int, int]] = None,
        **fields: Any,
    ) -> Campaign:
        return Campaign.from_dict(
            build_campaign_record(dates, **fields), index=index
        )

    return factory


@pytest.fixture
def sample_campaign(make_campaign) -> Campaign:
    """Campaign with the default schedule."""
    return make_campaign()


@pytest.fixture
def sample_project_record() -> Dict[str, Any]:
    """Decoded getProjectByIndex record, voting 2025-01-01 -> 2025-01-10."""
    return {
        "creator": "NOSTROMOCREATORIDENTITY",
        "tokenName": 5128519,
        "supply": 21000000,
        "startYear": 2025,
        "startMonth": 1,
        "startDay": 1,
        "startHour": 0,
        "endYear": 2025,
        "endMonth": 1,
        "endDay": 10,
        "endHour": 0,
        "numberOfYes": 12,
        "numberOfNo": 3,
        "isCreatedFundarasing": False,
    }


@pytest.fixture
def sample_project(sample_project_record) -> Project:
    return Project.from_dict(sample_project_record, index=7)


@pytest.fixture
def settings() -> LifecycleSettings:
    return LifecycleSettings()


class FakeClock:
    """Manually advanced clock for cache expiry tests."""

    def __init__(self, start: float = 1_735_689_600.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )
