# ABOUTME: Data models for player guesses and scored rounds
# ABOUTME: RoundResult validates score ranges on construction and converts to/from JSON

from dataclasses import dataclass, field
from typing import Any, Optional

from paintingguessr.paintings.models import Painting

MAX_COMPONENT_SCORE = 5000


@dataclass(frozen=True)
class GuessLocation:
    """Map pin placed by the player"""
    lat: float
    lng: float


@dataclass
class PlayerGuess:
    """Scratch guess for the current round, filled in as the player interacts"""
    location: Optional[GuessLocation] = None
    year: Optional[int] = None

    def is_complete(self, require_location: bool = True) -> bool:
        if self.year is None:
            return False
        return self.location is not None or not require_location

    def snapshot(self) -> "PlayerGuess":
        return PlayerGuess(location=self.location, year=self.year)

    def to_dict(self) -> dict[str, Any]:
        location = None
        if self.location is not None:
            location = {"lat": self.location.lat, "lng": self.location.lng}
        return {"location": location, "year": self.year}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PlayerGuess":
        location = data.get("location")
        return cls(
            location=GuessLocation(float(location["lat"]), float(location["lng"])) if location else None,
            year=data.get("year"),
        )


@dataclass(frozen=True)
class RoundResult:
    """Score for one round"""
    painting: Painting
    guess: PlayerGuess = field(compare=False)
    distance_km: float
    year_difference: int
    location_score: int  # 0-5000
    year_score: int      # 0-5000
    total_score: int

    def __post_init__(self):
        if not 0 <= self.location_score <= MAX_COMPONENT_SCORE:
            raise ValueError(f"Location score must be 0-{MAX_COMPONENT_SCORE}, got {self.location_score}")
        if not 0 <= self.year_score <= MAX_COMPONENT_SCORE:
            raise ValueError(f"Year score must be 0-{MAX_COMPONENT_SCORE}, got {self.year_score}")
        if self.total_score != self.location_score + self.year_score:
            raise ValueError(
                f"Total score {self.total_score} != {self.location_score} + {self.year_score}"
            )
        if self.year_difference < 0:
            raise ValueError(f"Year difference must be >= 0, got {self.year_difference}")

    def to_dict(self) -> dict[str, Any]:
        return {
            "painting": self.painting.to_dict(),
            "guess": self.guess.to_dict(),
            "distanceKm": self.distance_km,
            "yearDifference": self.year_difference,
            "locationScore": self.location_score,
            "yearScore": self.year_score,
            "totalScore": self.total_score,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RoundResult":
        return cls(
            painting=Painting.from_dict(data["painting"]),
            guess=PlayerGuess.from_dict(data.get("guess") or {}),
            distance_km=float(data["distanceKm"]),
            year_difference=int(data["yearDifference"]),
            location_score=int(data["locationScore"]),
            year_score=int(data["yearScore"]),
            total_score=int(data["totalScore"]),
        )
