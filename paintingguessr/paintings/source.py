# ABOUTME: Samples fair painting sets from the live catalog with a curated fallback
# ABOUTME: Seeded sampling, bounded parallel fetches per round, validation and location lookup

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Optional, Sequence

from paintingguessr.cache.manager import ObjectIdCache
from paintingguessr.config import Config
from paintingguessr.debug import debug_log
from paintingguessr.paintings.locations import ArtistLocationResolver
from paintingguessr.paintings.met_client import MetClient
from paintingguessr.paintings.models import Painting, PaintingOrigin
from paintingguessr.paintings.validation import parse_record_year, rejection_reason, text_field
from paintingguessr.sampling.seeded_random import SeededRandom

log = logging.getLogger(__name__)

SOURCE_MET = "met"
SOURCE_FALLBACK = "fallback"


class PaintingSource:
    """
    Turns the noisy collection API into a bounded list of playable paintings.

    Sampling runs up to `max_rounds` rounds. Each round draws
    `(count - found) * oversample_factor` random indices, skips ids already
    tried, fetches the new candidates in parallel and waits for all of them
    before merging. Candidates are merged in draw order so a seed always
    produces the same paintings in the same order.
    """

    def __init__(
        self,
        client: MetClient,
        id_cache: ObjectIdCache,
        resolver: ArtistLocationResolver,
        fallback_paintings: Sequence[Painting],
        max_workers: int = None,
        max_rounds: int = None,
        oversample_factor: int = None,
    ):
        self.client = client
        self.id_cache = id_cache
        self.resolver = resolver
        self.fallback_paintings = list(fallback_paintings)
        self.max_workers = max_workers or Config.MET_MAX_CONCURRENT_REQUESTS
        self.max_rounds = max_rounds or Config.MAX_SAMPLING_ROUNDS
        self.oversample_factor = oversample_factor or Config.SAMPLING_OVERSAMPLE_FACTOR

    # ==================== Live catalog ====================

    def fetch_random(self, count: int, seed: Optional[int] = None) -> list[Painting]:
        """
        Sample up to `count` valid paintings from the live catalog.

        Args:
            count: Paintings wanted
            seed: Makes the sample reproducible (daily challenge); None for
                a personal, unseeded sample

        Returns:
            Up to `count` paintings; fewer (possibly none) when the catalog is
            unreachable or sampling runs out of rounds
        """
        if count <= 0:
            return []

        object_ids = self.id_cache.get_or_refresh()
        if not object_ids:
            log.error("No catalog object ids available")
            return []

        rng = SeededRandom(seed)
        paintings: list[Painting] = []
        tried: set[int] = set()

        for round_number in range(self.max_rounds):
            if len(paintings) >= count or len(tried) >= len(object_ids):
                break

            batch = self._draw_batch(rng, object_ids, tried, (count - len(paintings)) * self.oversample_factor)
            if not batch:
                continue

            results = self._fetch_batch(batch)
            for painting in results:
                if painting is not None and len(paintings) < count:
                    paintings.append(painting)

            debug_log(
                f"Sampling round {round_number + 1}: {len(batch)} candidates, "
                f"{len(paintings)}/{count} valid",
                "SOURCE",
            )

        return paintings

    def _draw_batch(
        self,
        rng: SeededRandom,
        object_ids: Sequence[int],
        tried: set[int],
        batch_size: int,
    ) -> list[int]:
        batch = []
        for _ in range(batch_size):
            object_id = object_ids[rng.randbelow(len(object_ids))]
            if object_id not in tried:
                tried.add(object_id)
                batch.append(object_id)
        return batch

    def _fetch_batch(self, batch: list[int]) -> list[Optional[Painting]]:
        """Fetch a round's candidates concurrently; map() keeps draw order."""
        workers = max(1, min(self.max_workers, len(batch)))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(self._fetch_candidate, batch))

    def _fetch_candidate(self, object_id: int) -> Optional[Painting]:
        """One candidate: any failure means "invalid", never an error for the batch."""
        record = self.client.fetch_object(object_id)
        if record is None:
            return None
        try:
            return self.build_painting(object_id, record)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            log.warning(f"Could not build painting from object {object_id}: {e}")
            return None

    def build_painting(self, object_id: int, record: dict[str, Any]) -> Optional[Painting]:
        """
        Validate and normalize one catalog record.

        Returns:
            Painting, or None if the record is not eligible
        """
        reason = rejection_reason(record)
        if reason is not None:
            debug_log(f"Rejected object {object_id}: {reason}", "SOURCE")
            return None

        parsed = parse_record_year(record)
        title = text_field(record.get("title")) or "Untitled"
        artist = text_field(record.get("artistDisplayName"))
        medium = text_field(record.get("medium")) or None
        nationality = text_field(record.get("artistNationality"))
        culture = text_field(record.get("culture"))

        location = self.resolver.resolve(artist, nationality, culture, text_field(record.get("country")))

        return Painting(
            id=f"met_{object_id}",
            title=title,
            artist=artist or "Unknown Artist",
            year=parsed.year,
            year_start=parsed.year_start,
            year_end=parsed.year_end,
            year_display=text_field(record.get("objectDate")) or self._year_display(parsed.year, parsed.year_start, parsed.year_end),
            location=location,
            image_url=record.get("primaryImage") or record.get("primaryImageSmall"),
            description=self._description(record, artist, medium),
            nationality=nationality or culture or "Unknown",
            medium=medium,
            source=PaintingOrigin.MET_API,
        )

    def _year_display(self, year: int, year_start: Optional[int], year_end: Optional[int]) -> str:
        if year_start is not None and year_end is not None and year_start != year_end:
            return f"{year_start}–{year_end}"
        return str(year)

    def _description(self, record: dict[str, Any], artist: str, medium: Optional[str]) -> str:
        dimensions = record.get("dimensions")
        text = f"{text_field(record.get('title')) or 'This work'} by {artist or 'an unknown artist'}. {medium or ''}"
        if dimensions:
            text += f" ({dimensions})"
        return text.strip()

    # ==================== Curated fallback ====================

    def fallback(self, count: int, seed: Optional[int] = None) -> list[Painting]:
        """
        Take `count` paintings from the curated dataset.

        Deterministic when seeded, so the daily challenge falls back to the
        same paintings for everyone.
        """
        if count <= 0:
            return []
        return SeededRandom(seed).shuffle(self.fallback_paintings)[:count]

    def fill(self, count: int, seed: Optional[int] = None, source: str = SOURCE_MET) -> list[Painting]:
        """
        Live sample topped up from the fallback until `count` paintings.

        Args:
            count: Paintings wanted
            seed: Seed for both the live sample and the top-up
            source: "met" (live with top-up) or "fallback" (curated only)
        """
        if source == SOURCE_FALLBACK:
            return self.fallback(count, seed)

        paintings = self.fetch_random(count, seed)
        if len(paintings) < count:
            remaining = count - len(paintings)
            log.info(f"Catalog returned {len(paintings)}/{count} paintings, topping up {remaining} from fallback")
            paintings.extend(self.fallback(remaining, seed))
        return paintings
