# ABOUTME: Resolves an artist, nationality, culture or country to approximate coordinates
# ABOUTME: Tiered lookup over read-only reference tables, ending in an explicit "Unknown" point

import json
import logging
from pathlib import Path
from typing import Mapping, Optional

from paintingguessr.paintings.models import PaintingLocation

log = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent.parent / "data"

# Not a real answer: sits in open Sahara/Mediterranean territory so a
# no-information pin on Europe isn't silently rewarded
UNKNOWN_LOCATION = PaintingLocation(lat=30.0, lng=10.0, name="Unknown")

# Country, culture and historical names -> nationality-table keys
CULTURE_TO_NATIONALITY = {
    "China": "Chinese",
    "Japan": "Japanese",
    "Korea": "Korean",
    "India": "Indian",
    "Thailand": "Thai",
    "Vietnam": "Vietnamese",
    "Indonesia": "Indonesian",
    "Malaysia": "Malaysian",
    "Nepal": "Nepali",
    "Iran": "Iranian",
    "Persia": "Persian",
    "Turkey": "Turkish",
    "Ottoman Empire": "Turkish",
    "Egypt": "Egyptian",
    "Mexico": "Mexican",
    "New Spain": "Mexican",
    "Brazil": "Brazilian",
    "Argentina": "Argentine",
    "Russia": "Russian",
    "France": "French",
    "Germany": "German",
    "Prussia": "German",
    "Italy": "Italian",
    "Spain": "Spanish",
    "Portugal": "Portuguese",
    "Netherlands": "Dutch",
    "Holland": "Dutch",
    "Flanders": "Flemish",
    "Belgium": "Belgian",
    "Britain": "British",
    "Great Britain": "British",
    "England": "British",
    "Scotland": "British",
    "Wales": "British",
    "Ireland": "Irish",
    "Austria": "Austrian",
    "Switzerland": "Swiss",
    "Sweden": "Swedish",
    "Norway": "Norwegian",
    "Denmark": "Danish",
    "Finland": "Finnish",
    "Poland": "Polish",
    "Czech Republic": "Czech",
    "Bohemia": "Czech",
    "Hungary": "Hungarian",
    "Greece": "Greek",
    "Romania": "Romanian",
    "Serbia": "Serbian",
    "Croatia": "Croatian",
    "Bulgaria": "Bulgarian",
    "Ukraine": "Ukrainian",
    "Georgia": "Georgian",
    "Armenia": "Armenian",
    "Tibet": "Tibetan",
    "Mongolia": "Mongolian",
    "Burma": "Burmese",
    "Myanmar": "Burmese",
    "Cambodia": "Cambodian",
    "Philippines": "Filipino",
    "Pakistan": "Pakistani",
    "Sri Lanka": "Sri Lankan",
    "Iraq": "Iraqi",
    "Syria": "Syrian",
    "Morocco": "Moroccan",
    "Algeria": "Algerian",
    "Tunisia": "Tunisian",
    "Nigeria": "Nigerian",
    "Ethiopia": "Ethiopian",
    "South Africa": "South African",
    "Cuba": "Cuban",
    "Colombia": "Colombian",
    "Peru": "Peruvian",
    "Chile": "Chilean",
    "Canada": "Canadian",
    "Australia": "Australian",
    "United States": "American",
    "USA": "American",
}


def _load_table(path: Path) -> dict:
    try:
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        log.warning(f"Location table missing, using empty table: {path}")
        return {}
    except (OSError, json.JSONDecodeError) as e:
        log.warning(f"Location table unreadable, using empty table: {path} ({e})")
        return {}

    if not isinstance(data, dict):
        log.warning(f"Location table is not an object, using empty table: {path}")
        return {}
    return data


def load_location_tables(data_dir: Path = DATA_DIR) -> tuple[dict, dict]:
    """
    Load the artist and nationality tables, best effort.

    Returns:
        (artist_locations, nationality_map); a missing or corrupt file
        gives an empty dict rather than an error
    """
    return (
        _load_table(data_dir / "artist_locations.json"),
        _load_table(data_dir / "nationality_map.json"),
    )


class ArtistLocationResolver:
    """
    Maps catalog metadata to a map location.

    Tables:
        artist_locations: {"Artist Name": {"lat", "lng", "location"}}
        nationality_map: {"Dutch": {"lat", "lng", "city"}}
    """

    def __init__(
        self,
        artist_locations: Optional[Mapping[str, dict]] = None,
        nationality_map: Optional[Mapping[str, dict]] = None,
    ):
        self.artist_locations = artist_locations or {}
        self.nationality_map = nationality_map or {}

    def resolve(
        self,
        artist_name: str = "",
        nationality: str = "",
        culture: str = "",
        country: str = "",
    ) -> PaintingLocation:
        """
        Resolve a location, stopping at the first tier that matches.

        1. Exact artist name
        2. Exact nationality, then culture, then country
        3. Historical/country name translated to a nationality adjective
        4. Any nationality key contained in the candidate text
        5. UNKNOWN_LOCATION
        """
        if isinstance(artist_name, str) and artist_name in self.artist_locations:
            entry = self.artist_locations[artist_name]
            return PaintingLocation(lat=entry["lat"], lng=entry["lng"], name=entry["location"])

        # Catalog fields of the wrong JSON type carry no usable text
        candidates = [
            c.strip() for c in (nationality, culture, country)
            if isinstance(c, str) and c.strip()
        ]

        for candidate in candidates:
            if candidate in self.nationality_map:
                return self._from_nationality(candidate)

        for candidate in candidates:
            mapped = CULTURE_TO_NATIONALITY.get(candidate)
            if mapped and mapped in self.nationality_map:
                return self._from_nationality(mapped)

        # Fuzzy match as last resort ("possibly Chinese" -> Chinese)
        text = " ".join(candidates).lower()
        if text:
            for key in self.nationality_map:
                if key.lower() in text:
                    return self._from_nationality(key)

        return UNKNOWN_LOCATION

    def _from_nationality(self, key: str) -> PaintingLocation:
        entry = self.nationality_map[key]
        return PaintingLocation(lat=entry["lat"], lng=entry["lng"], name=entry["city"])


def default_resolver() -> ArtistLocationResolver:
    """Resolver backed by the tables shipped with the package."""
    artist_locations, nationality_map = load_location_tables()
    return ArtistLocationResolver(artist_locations, nationality_map)
