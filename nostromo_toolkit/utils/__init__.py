from nostromo_toolkit.utils.cache import IndexCache
from nostromo_toolkit.utils.dates import (
    DateParts,
    YearMode,
    format_instant,
    to_instant,
    to_utc,
)

__all__ = [
    "IndexCache",
    "DateParts",
    "YearMode",
    "format_instant",
    "to_instant",
    "to_utc",
]
