# ABOUTME: Eligibility rules that turn raw catalog records into fair guessing rounds
# ABOUTME: Parses year metadata and rejects records that cannot be scored fairly

import re
from dataclasses import dataclass
from typing import Any, Optional

from paintingguessr.config import Config

MIN_YEAR = 1300
MAX_YEAR = 2000

# The game scores 2D paintings only
EXCLUDED_MEDIUM_TERMS = ["sculpture", "textile", "ceramic", "photograph", "print", "woodwork"]

FOUR_DIGIT_YEAR = re.compile(r"\b(\d{4})\b")
CENTURY = re.compile(r"(\d{1,2})(?:st|nd|rd|th)\s+century", re.IGNORECASE)


@dataclass(frozen=True)
class ParsedYear:
    """Best-estimate year, plus an inclusive range when the date is uncertain"""
    year: int
    year_start: Optional[int] = None
    year_end: Optional[int] = None

    @property
    def span(self) -> Optional[int]:
        if self.year_start is None or self.year_end is None:
            return None
        return self.year_end - self.year_start


def text_field(value: Any) -> str:
    """Free-text catalog field; anything that isn't a string counts as blank."""
    return value if isinstance(value, str) else ""


def _as_year(value: Any) -> Optional[int]:
    """Coerce a catalog bound to int; 0, blanks and junk count as missing."""
    if value is None or value == "":
        return None
    try:
        year = int(value)
    except (TypeError, ValueError):
        return None
    return year or None


def parse_year(
    date_text: Optional[str],
    begin_year: Any = None,
    end_year: Any = None,
) -> Optional[ParsedYear]:
    """
    Work out a year from catalog metadata.

    Precedence:
    1. Both numeric bounds -> rounded midpoint with the bounds as range
    2. A single bound -> that year
    3. A 4-digit year in the free text ("ca. 1665")
    4. "Nth century" -> 100-year range with the midpoint as estimate

    Args:
        date_text: Free-text date as displayed by the catalog
        begin_year: Numeric start bound, if any
        end_year: Numeric end bound, if any

    Returns:
        ParsedYear, or None if nothing is parseable
    """
    begin = _as_year(begin_year)
    end = _as_year(end_year)

    if begin is not None and end is not None:
        # Midpoint rounded half up
        return ParsedYear(year=(begin + end + 1) // 2, year_start=begin, year_end=end)
    if begin is not None:
        return ParsedYear(year=begin)
    if end is not None:
        return ParsedYear(year=end)

    if not date_text:
        return None

    match = FOUR_DIGIT_YEAR.search(date_text)
    if match:
        return ParsedYear(year=int(match.group(1)))

    match = CENTURY.search(date_text)
    if match:
        century = int(match.group(1))
        return ParsedYear(
            year=century * 100 - 50,
            year_start=(century - 1) * 100,
            year_end=century * 100,
        )

    return None


def parse_record_year(record: dict[str, Any]) -> Optional[ParsedYear]:
    return parse_year(
        text_field(record.get("objectDate")),
        record.get("objectBeginDate"),
        record.get("objectEndDate"),
    )


def rejection_reason(record: dict[str, Any]) -> Optional[str]:
    """
    Explain why a catalog record can't be used, or None if it can.

    Args:
        record: Raw object record from the collection API

    Returns:
        Short reason string, or None for eligible records
    """
    if not record.get("primaryImage"):
        return "no image"

    parsed = parse_record_year(record)
    if parsed is None:
        return "no parseable date"
    if not MIN_YEAR <= parsed.year <= MAX_YEAR:
        return f"year {parsed.year} outside {MIN_YEAR}-{MAX_YEAR}"

    span = parsed.span
    if span is not None:
        if span < 0:
            return f"date range {parsed.year_start}-{parsed.year_end} is reversed"
        if span > Config.MAX_YEAR_RANGE_SPAN:
            return f"date range spans {span} years"

    if not any(text_field(record.get(field)).strip() for field in ("artistNationality", "culture", "country")):
        return "no location metadata"

    medium = text_field(record.get("medium")).lower()
    classification = text_field(record.get("classification")).lower()
    for term in EXCLUDED_MEDIUM_TERMS:
        if term in medium or term in classification:
            return f"excluded medium ({term})"

    return None


def is_eligible(record: dict[str, Any]) -> bool:
    """True if the record can be turned into a fairly scored round."""
    return rejection_reason(record) is None
