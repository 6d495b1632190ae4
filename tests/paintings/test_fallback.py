# ABOUTME: Tests for the curated fallback painting dataset
# ABOUTME: Validates the packaged data is complete and every entry would pass the live filters

import json

import pytest

from paintingguessr.paintings.fallback import default_fallback_paintings, load_fallback_paintings
from paintingguessr.paintings.models import PaintingOrigin
from paintingguessr.paintings.validation import MAX_YEAR, MIN_YEAR


class TestFallbackData:
    """Tests for the packaged dataset"""

    def test_dataset_is_large_enough_for_a_max_game(self):
        assert len(default_fallback_paintings()) >= 20

    def test_ids_are_unique(self):
        ids = [p.id for p in default_fallback_paintings()]
        assert len(ids) == len(set(ids))

    def test_every_entry_is_playable(self):
        for painting in default_fallback_paintings():
            assert painting.source is PaintingOrigin.FALLBACK
            assert painting.image_url.startswith("https://")
            assert MIN_YEAR <= painting.year <= MAX_YEAR
            assert -90 <= painting.location.lat <= 90
            assert -180 <= painting.location.lng <= 180
            assert painting.location.name

    def test_year_display_defaults_to_year(self):
        starry_night = next(p for p in default_fallback_paintings() if p.id == "fb_starry_night")
        assert starry_night.year == 1889
        assert starry_night.year_display == "1889"

    def test_loads_custom_file(self, tmp_path):
        path = tmp_path / "paintings.json"
        path.write_text(json.dumps([{
            "id": "fb_test",
            "title": "Test",
            "artist": "Tester",
            "year": 1700,
            "yearDisplay": "c. 1700",
            "location": {"lat": 1.0, "lng": 2.0, "name": "Somewhere"},
            "imageUrl": "https://example.org/test.jpg",
        }]))
        paintings = load_fallback_paintings(path)
        assert len(paintings) == 1
        assert paintings[0].year_display == "c. 1700"
        assert paintings[0].nationality == "Unknown"

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_fallback_paintings(tmp_path / "missing.json")
