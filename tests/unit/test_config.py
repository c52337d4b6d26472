"""
Unit tests for environment-driven settings.
"""

import pytest

from nostromo_toolkit.shared.config import (
    CACHE_TTL_ENV,
    CAMPAIGN_YEAR_MODE_ENV,
    PROJECT_YEAR_MODE_ENV,
    LifecycleSettings,
)
from nostromo_toolkit.shared.exceptions import (
    ConfigurationException,
    NonRetryableException,
)
from nostromo_toolkit.utils.dates import YearMode


class TestLifecycleSettings:
    def test_defaults(self):
        settings = LifecycleSettings.from_env({})

        assert settings == LifecycleSettings()
        assert settings.index_cache_ttl == 60.0
        assert settings.campaign_year_mode is YearMode.OFFSET_2000
        assert settings.project_year_mode is YearMode.ABSOLUTE

    def test_overrides(self):
        settings = LifecycleSettings.from_env(
            {
                CACHE_TTL_ENV: "0.5",
                CAMPAIGN_YEAR_MODE_ENV: "absolute",
                PROJECT_YEAR_MODE_ENV: "OFFSET_2000",
            }
        )

        assert settings.index_cache_ttl == 0.5
        assert settings.campaign_year_mode is YearMode.ABSOLUTE
        assert settings.project_year_mode is YearMode.OFFSET_2000

    def test_empty_mode_uses_default(self):
        settings = LifecycleSettings.from_env({CAMPAIGN_YEAR_MODE_ENV: ""})
        assert settings.campaign_year_mode is YearMode.OFFSET_2000

    @pytest.mark.parametrize("value", ["soon", "-1"])
    def test_bad_ttl(self, value):
        with pytest.raises(ConfigurationException) as exc_info:
            LifecycleSettings.from_env({CACHE_TTL_ENV: value})

        assert CACHE_TTL_ENV in exc_info.value.message
        assert isinstance(exc_info.value, NonRetryableException)

    def test_bad_mode(self):
        with pytest.raises(ConfigurationException, match="Unknown year mode"):
            LifecycleSettings.from_env({PROJECT_YEAR_MODE_ENV: "two_digit"})

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv(CACHE_TTL_ENV, "120")
        assert LifecycleSettings.from_env().index_cache_ttl == 120.0
