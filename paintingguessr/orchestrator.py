# ABOUTME: Main application orchestrator coordinating all components
# ABOUTME: Builds daily and custom painting sets, falling back to curated paintings on any failure

import logging
from datetime import datetime, timezone
from typing import Any, Optional

from paintingguessr.cache.manager import ObjectIdCache
from paintingguessr.config import Config
from paintingguessr.debug import debug_log
from paintingguessr.paintings.fallback import default_fallback_paintings
from paintingguessr.paintings.locations import default_resolver
from paintingguessr.paintings.met_client import MetClient
from paintingguessr.paintings.source import SOURCE_FALLBACK, SOURCE_MET, PaintingSource
from paintingguessr.sampling.daily import daily_seed, time_until_next_daily, today_date_string

log = logging.getLogger(__name__)


class AppOrchestrator:
    """Orchestrates catalog access, sampling and the daily challenge"""

    def __init__(self, painting_source: Optional[PaintingSource] = None):
        if painting_source is None:
            client = MetClient()
            painting_source = PaintingSource(
                client=client,
                id_cache=ObjectIdCache(
                    loader=client.fetch_object_ids,
                    ttl_hours=Config.OBJECT_ID_CACHE_TTL_HOURS,
                ),
                resolver=default_resolver(),
                fallback_paintings=default_fallback_paintings(),
            )
        self.painting_source = painting_source

    def get_daily(self, now: Optional[datetime] = None) -> dict[str, Any]:
        """
        Today's challenge: the same paintings for everyone on the same reference day.

        Returns:
            {
                "date": "YYYY-MM-DD",
                "seed": int,
                "paintings": [painting dict, ...]
            }
        """
        now = now or datetime.now(timezone.utc)
        date = today_date_string(now)
        seed = daily_seed(now)
        count = Config.DAILY_PAINTING_COUNT

        try:
            paintings = self.painting_source.fill(count, seed=seed)
        except Exception:
            log.exception(f"Daily challenge for {date} failed, serving fallback set")
            paintings = self.painting_source.fallback(count, seed=seed)

        debug_log(f"Daily {date} (seed {seed}): {[p.id for p in paintings]}", "ORCHESTRATOR")
        return {
            "date": date,
            "seed": seed,
            "paintings": [painting.to_dict() for painting in paintings],
        }

    def get_paintings(self, count: int = None, source: str = SOURCE_MET) -> dict[str, Any]:
        """
        An unseeded set of paintings for a personal game.

        Args:
            count: Paintings wanted, clamped to 1..MAX_PAINTING_COUNT
            source: "met" or "fallback"; anything else is treated as "met"

        Returns:
            {"paintings": [painting dict, ...]}
        """
        count = self.clamp_count(count)
        if source != SOURCE_FALLBACK:
            source = SOURCE_MET

        try:
            paintings = self.painting_source.fill(count, source=source)
        except Exception:
            log.exception(f"Fetching {count} paintings from {source} failed, serving fallback set")
            paintings = self.painting_source.fallback(count)

        return {"paintings": [painting.to_dict() for painting in paintings]}

    def get_countdown(self, now: Optional[datetime] = None) -> dict[str, int]:
        return time_until_next_daily(now)

    @staticmethod
    def clamp_count(count) -> int:
        if count is None:
            return Config.DEFAULT_PAINTING_COUNT
        try:
            count = int(count)
        except (TypeError, ValueError):
            return Config.DEFAULT_PAINTING_COUNT
        return max(1, min(count, Config.MAX_PAINTING_COUNT))

    def warmup_cache(self) -> None:
        """Load the catalog id list on server startup so the first request doesn't wait for it."""
        object_ids = self.painting_source.id_cache.get_or_refresh()
        log.info(f"Warmup: {len(object_ids)} catalog object ids cached at {self.painting_source.id_cache.fetched_at()}")
