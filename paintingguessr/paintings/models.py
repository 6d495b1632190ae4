# ABOUTME: Data models for paintings shown in a round
# ABOUTME: Immutable values with camelCase JSON conversion for the HTTP and snapshot formats

from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class PaintingOrigin(str, Enum):
    """Where a painting record came from"""
    MET_API = "met_api"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class PaintingLocation:
    """Approximate place a painting was made"""
    lat: float
    lng: float
    name: str

    def to_dict(self) -> dict[str, Any]:
        return {"lat": self.lat, "lng": self.lng, "name": self.name}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PaintingLocation":
        return cls(lat=float(data["lat"]), lng=float(data["lng"]), name=data.get("name", "Unknown"))


@dataclass(frozen=True)
class Painting:
    """A painting to guess, with its answer (location and year)"""
    id: str
    title: str
    artist: str
    year: int
    year_display: str
    location: PaintingLocation
    image_url: str
    description: str
    nationality: str
    source: PaintingOrigin
    # Optional fields - inclusive date range when the exact year is unknown
    year_start: Optional[int] = None
    year_end: Optional[int] = None
    medium: Optional[str] = None

    def __post_init__(self):
        if (self.year_start is None) != (self.year_end is None):
            raise ValueError(f"{self.id}: year_start and year_end must be given together")
        if self.year_start is not None and self.year_end < self.year_start:
            raise ValueError(f"{self.id}: year_end {self.year_end} is before year_start {self.year_start}")

    @property
    def has_year_range(self) -> bool:
        return self.year_start is not None and self.year_end is not None

    def __str__(self) -> str:
        return f"{self.title} by {self.artist} ({self.year_display})"

    def to_dict(self) -> dict[str, Any]:
        data = {
            "id": self.id,
            "title": self.title,
            "artist": self.artist,
            "year": self.year,
            "yearDisplay": self.year_display,
            "location": self.location.to_dict(),
            "imageUrl": self.image_url,
            "description": self.description,
            "nationality": self.nationality,
            "source": self.source.value,
        }
        if self.has_year_range:
            data["yearStart"] = self.year_start
            data["yearEnd"] = self.year_end
        if self.medium is not None:
            data["medium"] = self.medium
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Painting":
        year = int(data["year"])
        return cls(
            id=data["id"],
            title=data.get("title", "Untitled"),
            artist=data.get("artist", "Unknown Artist"),
            year=year,
            year_display=data.get("yearDisplay") or str(year),
            location=PaintingLocation.from_dict(data["location"]),
            image_url=data.get("imageUrl", ""),
            description=data.get("description", ""),
            nationality=data.get("nationality", "Unknown"),
            source=PaintingOrigin(data.get("source", PaintingOrigin.FALLBACK.value)),
            year_start=data.get("yearStart"),
            year_end=data.get("yearEnd"),
            medium=data.get("medium"),
        )
