"""
Project index -> campaign index resolution with a wholesale TTL cache.

Finding the campaign of a project means scanning every campaign on-chain,
so results are memoized. Behavior:

- A cached project index is returned immediately, without calling fetch.
- On a miss, if the cache is older than its TTL it is cleared entirely and
  restamped *before* fetching. Expiry is applied lazily; there is no timer.
- Non-negative results are cached. Negative results ("no campaign yet") are
  returned but never cached, so they are re-fetched on every call.
- Exceptions raised by fetch propagate unchanged. Nothing is retried.

Concurrent misses for the same project each call fetch; callers needing
single-flight behavior must add it themselves.
"""

import time
from typing import Any, Awaitable, Callable, Mapping, Optional, Union

from nostromo_toolkit.fundraising.models import Campaign
from nostromo_toolkit.shared.exceptions import CampaignLookupException
from nostromo_toolkit.shared.logging import get_logger
from nostromo_toolkit.utils.cache import DEFAULT_TTL, IndexCache

_logger = get_logger(__name__)

NOT_FOUND = -1

IndexLookup = Callable[[int], Awaitable[int]]
StatsReader = Callable[[], Awaitable[Mapping[str, Any]]]
CampaignReader = Callable[
    [int], Awaitable[Union[Campaign, Mapping[str, Any]]]
]


class CampaignIndexResolver:
    """
    Resolves campaign indexes for projects, caching positive results.

    Each resolver owns its cache; construct one per composition root
    (or per test) rather than sharing a module-level instance.

    Attributes:
        cache: The IndexCache holding project -> campaign mappings
    """

    def __init__(
        self,
        ttl: float = DEFAULT_TTL,
        clock: Callable[[], float] = time.time,
        cache: Optional[IndexCache] = None,
    ):
        """
        Initialize the resolver.

        Args:
            ttl: Cache time-to-live in seconds (ignored when ``cache`` is given)
            clock: Returns the current time in seconds
            cache: Pre-built cache to use instead of a fresh one
        """
        self.cache = cache if cache is not None else IndexCache(ttl)
        self._clock = clock

    async def resolve(self, project_index: int, fetch: IndexLookup) -> int:
        """
        Get the campaign index of a project.

        Args:
            project_index: Project to look up
            fetch: Async lookup returning the campaign index, negative if
                the project has no campaign

        Returns:
            The campaign index, or a negative value if not found
        """
        cached = self.cache.get(project_index)
        if cached is not None:
            _logger.debug(
                f"Index cache hit: project {project_index} -> campaign {cached}"
            )
            return cached

        if self.cache.expire_if_stale(self._clock()):
            _logger.debug("Index cache expired, cleared all entries")

        campaign_index = await fetch(project_index)
        if campaign_index >= 0:
            self.cache.set(project_index, campaign_index)
        return campaign_index

    def reset(self) -> None:
        """Drop all cached entries, e.g. after creating a new campaign."""
        self.cache.clear()


def build_scanning_lookup(
    get_stats: StatsReader,
    get_campaign_by_index: CampaignReader,
    count_field: str = "numberOfFundraising",
) -> IndexLookup:
    """
    Build the default lookup: scan campaigns for a matching project.

    Args:
        get_stats: Async accessor for the contract stats record
        get_campaign_by_index: Async accessor for one campaign record
            (a Campaign or a decoded dict with ``indexOfProject``)
        count_field: Stats field holding the number of campaigns

    Returns:
        Async function usable as ``fetch`` for CampaignIndexResolver
    """

    async def lookup(project_index: int) -> int:
        try:
            stats = await get_stats()
        except Exception as e:
            raise CampaignLookupException(
                f"Failed to read campaign count: {e}"
            ) from e

        total = stats.get(count_field) or 0
        for campaign_index in range(total):
            try:
                record = await get_campaign_by_index(campaign_index)
            except Exception as e:
                _logger.debug(
                    f"Skipping campaign {campaign_index} during scan: {e}"
                )
                continue

            if _project_of(record) == project_index:
                return campaign_index

        _logger.info(
            f"No campaign found for project {project_index} "
            f"({total} campaigns scanned)"
        )
        return NOT_FOUND

    return lookup


def _project_of(record: Union[Campaign, Mapping[str, Any]]) -> Optional[int]:
    if isinstance(record, Campaign):
        return record.index_of_project
    return record.get("indexOfProject")
