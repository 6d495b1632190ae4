# ABOUTME: Core scoring math for location and year guesses
# ABOUTME: Haversine distance plus the 0-5000 location and year score curves

import math
from typing import Optional

EARTH_RADIUS_KM = 6371.0

MAX_ROUND_SCORE = 5000

# Location curve: cubic falloff out to ~half the Earth's circumference
MAX_DISTANCE_KM = 20000.0
# Small "right country" bonus inside this radius
COUNTRY_RADIUS_KM = 1500.0
COUNTRY_BONUS = 500

# Year curve: gentle inside 100 years, collapses towards 250
MAX_YEARS_OFF = 250
GENTLE_YEARS_OFF = 100


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (x.5 -> x+1, -x.5 -> -x)."""
    return int(math.floor(value + 0.5))


def great_circle_distance_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """
    Haversine distance between two points given in degrees.

    Returns:
        Distance in kilometres along the Earth's surface
    """
    d_lat = math.radians(lat2 - lat1)
    d_lng = math.radians(lng2 - lng1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lng / 2) ** 2
    )
    # Float error can push antipodal points just past 1
    a = min(1.0, max(0.0, a))
    return EARTH_RADIUS_KM * 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))


def location_score(distance_km: float) -> int:
    """
    Score a map guess by its distance from the painting's location.

    0 km scores 5000, anything at or beyond 20000 km scores 0. Guesses
    within 1500 km get up to 500 bonus points (capped at 5000 total).

    Args:
        distance_km: Great-circle distance between guess and answer

    Returns:
        Integer score from 0-5000
    """
    base = MAX_ROUND_SCORE * max(0.0, 1 - distance_km / MAX_DISTANCE_KM) ** 3

    bonus = 0.0
    if distance_km < COUNTRY_RADIUS_KM:
        bonus = COUNTRY_BONUS * (1 - distance_km / COUNTRY_RADIUS_KM) ** 2

    return round_half_up(min(MAX_ROUND_SCORE, base + bonus))


def _has_range(year_start: Optional[int], year_end: Optional[int]) -> bool:
    return year_start is not None and year_end is not None


def year_difference(
    guess_year: int,
    actual_year: int,
    year_start: Optional[int] = None,
    year_end: Optional[int] = None,
) -> int:
    """Years between guess and answer; 0 anywhere inside a known date range."""
    if _has_range(year_start, year_end):
        if year_start <= guess_year <= year_end:
            return 0
        return min(abs(guess_year - year_start), abs(guess_year - year_end))
    return abs(guess_year - actual_year)


def year_score(
    guess_year: int,
    actual_year: int,
    year_start: Optional[int] = None,
    year_end: Optional[int] = None,
) -> int:
    """
    Score a year guess.

    Scoring philosophy: being in the right century should still feel good,
    being several centuries out should not. Inside 100 years the score
    decays quadratically; past 100 it continues from the value at exactly
    100 with a steep quartic falloff that reaches 0 at 250.

    Target scores:
    - 0 years off (or inside the range): 5000
    - 50 years off: 3200
    - 100 years off: 1800
    - 250+ years off: 0

    Returns:
        Integer score from 0-5000
    """
    if _has_range(year_start, year_end) and year_start <= guess_year <= year_end:
        return MAX_ROUND_SCORE

    years_off = year_difference(guess_year, actual_year, year_start, year_end)
    if years_off >= MAX_YEARS_OFF:
        return 0

    if years_off <= GENTLE_YEARS_OFF:
        score = MAX_ROUND_SCORE * (1 - years_off / MAX_YEARS_OFF) ** 2
    else:
        score_at_gentle_edge = MAX_ROUND_SCORE * (1 - GENTLE_YEARS_OFF / MAX_YEARS_OFF) ** 2
        remaining = (years_off - GENTLE_YEARS_OFF) / (MAX_YEARS_OFF - GENTLE_YEARS_OFF)
        score = score_at_gentle_edge * (1 - remaining) ** 4

    return round_half_up(score)


def score_ratio_blocks(score: int, max_score: int = MAX_ROUND_SCORE) -> str:
    """Coarse three-block indicator for a score, used in share text."""
    ratio = score / max_score if max_score else 0
    if ratio >= 0.8:
        return "🟩🟩🟩"
    if ratio >= 0.6:
        return "🟩🟩🟨"
    if ratio >= 0.4:
        return "🟩🟨⬛"
    if ratio > 0:
        return "🟨⬛⬛"
    return "⬛⬛⬛"


# (minimum total, title) checked top down
RATING_TITLES = [
    (45000, "Art Historian"),
    (35000, "Gallery Curator"),
    (25000, "Art Student"),
    (15000, "Museum Tourist"),
]


def rating_for_total(total_score: int) -> str:
    """Title awarded for a five-round total."""
    for threshold, title in RATING_TITLES:
        if total_score >= threshold:
            return title
    return "Finger Painter"
