# ABOUTME: Time-based cache for the catalog's painting id list
# ABOUTME: Explicit get-or-refresh object with an injectable clock instead of module globals

from datetime import datetime, timezone, timedelta
from typing import Callable, Optional

from paintingguessr.debug import debug_log


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class ObjectIdCache:
    """
    Cache for the list of candidate object ids.

    The list is refreshed at most once per TTL (default 24 hours). Refreshes
    are not locked: two callers racing a stale cache both load and the last
    write wins, which is harmless since both loads return the same list.
    """

    def __init__(
        self,
        loader: Callable[[], list[int]],
        ttl_hours: int = 24,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self.loader = loader
        self.ttl = timedelta(hours=ttl_hours)
        self.clock = clock or _utc_now

        self._object_ids: Optional[list[int]] = None
        self._fetched_at: Optional[datetime] = None

    def is_stale(self, now: Optional[datetime] = None) -> bool:
        """Check if the cached list is missing or older than the TTL."""
        if self._object_ids is None or self._fetched_at is None:
            return True

        now = now or self.clock()
        return now - self._fetched_at >= self.ttl

    def get_or_refresh(self, now: Optional[datetime] = None) -> list[int]:
        """
        Return cached ids, reloading when stale.

        An empty load is not cached. If an older list is available it keeps
        being served until a load succeeds.

        Args:
            now: Current time (defaults to the injected clock)

        Returns:
            List of object ids, possibly empty when nothing was ever loaded
        """
        now = now or self.clock()
        if not self.is_stale(now):
            return self._object_ids

        debug_log("Object id cache stale, reloading", "CACHE")
        object_ids = self.loader()

        if object_ids:
            self._object_ids = list(object_ids)
            self._fetched_at = now
            debug_log(f"Cached {len(object_ids)} object ids", "CACHE")
            return self._object_ids

        if self._object_ids:
            debug_log("Reload returned nothing, serving stale object ids", "CACHE")
            return self._object_ids

        return []

    def fetched_at(self) -> Optional[datetime]:
        return self._fetched_at

    def clear(self) -> None:
        """Drop the cached list."""
        self._object_ids = None
        self._fetched_at = None
