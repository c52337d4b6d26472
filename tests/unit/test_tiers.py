"""
Unit tests for the tier catalogue.
"""

import pytest

from nostromo_toolkit.tiers.models import TIERS, Tier, get_tier_info, pool_share


def test_catalogue_covers_every_tier():
    assert set(TIERS) == set(Tier)
    stakes = [TIERS[t].stake_amount for t in sorted(Tier)]
    assert stakes == sorted(stakes)


def test_get_tier_info():
    info = get_tier_info(4)
    assert info.tier is Tier.XENOMORPH
    assert info.name == "XENOMORPH"
    assert info.stake_amount == 800_000_000
    assert get_tier_info(9) is None


class TestPoolShare:
    def test_share_of_pool(self):
        assert pool_share(5, 27500) == pytest.approx(50.0)

    def test_empty_pool(self):
        assert pool_share(5, 0) == 0.0

    def test_unknown_tier(self):
        assert pool_share(-1, 1000) == 0.0
