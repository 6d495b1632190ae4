# ABOUTME: Curated, pre-vetted painting list used when the live catalog is down or short
# ABOUTME: Loaded once from packaged JSON; no network dependency

import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Any

from paintingguessr.paintings.models import Painting, PaintingLocation, PaintingOrigin

log = logging.getLogger(__name__)

FALLBACK_DATA_PATH = Path(__file__).resolve().parent.parent / "data" / "fallback_paintings.json"


def _to_painting(raw: dict[str, Any]) -> Painting:
    return Painting(
        id=raw["id"],
        title=raw["title"],
        artist=raw["artist"],
        year=int(raw["year"]),
        year_display=raw.get("yearDisplay") or str(raw["year"]),
        location=PaintingLocation.from_dict(raw["location"]),
        image_url=raw["imageUrl"],
        description=raw.get("description", ""),
        nationality=raw.get("nationality", "Unknown"),
        source=PaintingOrigin.FALLBACK,
        year_start=raw.get("yearStart"),
        year_end=raw.get("yearEnd"),
        medium=raw.get("medium"),
    )


def load_fallback_paintings(path: Path = FALLBACK_DATA_PATH) -> list[Painting]:
    """
    Read the curated dataset.

    The dataset ships with the package, so a missing or broken file is a
    packaging bug and is raised rather than hidden.
    """
    with path.open(encoding="utf-8") as f:
        raw_paintings = json.load(f)
    paintings = [_to_painting(raw) for raw in raw_paintings]
    log.info(f"Loaded {len(paintings)} fallback paintings from {path.name}")
    return paintings


@lru_cache(maxsize=1)
def default_fallback_paintings() -> tuple[Painting, ...]:
    return tuple(load_fallback_paintings())
