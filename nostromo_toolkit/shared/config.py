"""
Runtime settings for the fundraising lifecycle engine.

Values come from the environment (a local .env file is loaded first):

    NOSTROMO_INDEX_CACHE_TTL     index cache TTL in seconds (default 60)
    NOSTROMO_CAMPAIGN_YEAR_MODE  year convention of campaign dates (default offset_2000)
    NOSTROMO_PROJECT_YEAR_MODE   year convention of project dates (default absolute)
"""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from nostromo_toolkit.shared.exceptions import ConfigurationException
from nostromo_toolkit.utils.dates import YearMode

DEFAULT_INDEX_CACHE_TTL = 60.0  # seconds

CACHE_TTL_ENV = "NOSTROMO_INDEX_CACHE_TTL"
CAMPAIGN_YEAR_MODE_ENV = "NOSTROMO_CAMPAIGN_YEAR_MODE"
PROJECT_YEAR_MODE_ENV = "NOSTROMO_PROJECT_YEAR_MODE"


@dataclass(frozen=True)
class LifecycleSettings:
    """Settings shared by the lifecycle facade and the index resolver."""

    index_cache_ttl: float = DEFAULT_INDEX_CACHE_TTL
    campaign_year_mode: YearMode = YearMode.OFFSET_2000
    project_year_mode: YearMode = YearMode.ABSOLUTE

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> "LifecycleSettings":
        """
        Build settings from environment variables.

        Args:
            environ: Mapping to read instead of os.environ (no .env loading
                happens when a mapping is given)

        Raises:
            ConfigurationException: If a variable holds an invalid value
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        ttl_raw = environ.get(CACHE_TTL_ENV, str(DEFAULT_INDEX_CACHE_TTL))
        try:
            ttl = float(ttl_raw)
        except ValueError:
            raise ConfigurationException(
                f"Invalid {CACHE_TTL_ENV}: {ttl_raw!r} is not a number"
            )
        if ttl < 0:
            raise ConfigurationException(
                f"Invalid {CACHE_TTL_ENV}: {ttl_raw!r} must not be negative"
            )

        return cls(
            index_cache_ttl=ttl,
            campaign_year_mode=_parse_mode(
                environ, CAMPAIGN_YEAR_MODE_ENV, YearMode.OFFSET_2000
            ),
            project_year_mode=_parse_mode(
                environ, PROJECT_YEAR_MODE_ENV, YearMode.ABSOLUTE
            ),
        )


def _parse_mode(
    environ: Mapping[str, str], name: str, default: YearMode
) -> YearMode:
    raw = environ.get(name)
    if raw is None or raw == "":
        return default
    try:
        return YearMode.parse(raw)
    except ValueError as e:
        raise ConfigurationException(f"Invalid {name}: {e}")
