# ABOUTME: Tests for the round state machine
# ABOUTME: Validates transitions, guess gating, scoring per round and timer expiry

import pytest

from paintingguessr.game.engine import TIMEOUT_YEAR, RoundEngine
from paintingguessr.game.models import Difficulty, GameMode, GameState
from paintingguessr.paintings.models import Painting, PaintingLocation, PaintingOrigin
from paintingguessr.scoring.models import GuessLocation, PlayerGuess


def create_paintings(count: int = 3) -> list[Painting]:
    return [
        Painting(
            id=f"fb_{n}",
            title=f"Painting {n}",
            artist="Artist",
            year=1600 + n * 50,
            year_display=str(1600 + n * 50),
            location=PaintingLocation(lat=40.0 + n, lng=10.0 + n, name=f"City {n}"),
            image_url=f"https://example.org/{n}.jpg",
            description="",
            nationality="Italian",
            source=PaintingOrigin.FALLBACK,
        )
        for n in range(count)
    ]


def perfect_guess(engine: RoundEngine) -> None:
    painting = engine.current_painting
    engine.set_guess_location(painting.location.lat, painting.location.lng)
    engine.set_guess_year(painting.year)


class TestLifecycle:
    """Tests for starting, resuming and resetting"""

    def test_new_engine_is_idle(self):
        engine = RoundEngine()
        assert engine.state is GameState.IDLE
        assert engine.current_painting is None

    def test_start_begins_first_round(self):
        engine = RoundEngine()
        paintings = create_paintings()
        session = engine.start(paintings)

        assert engine.state is GameState.PLAYING
        assert engine.current_painting == paintings[0]
        assert session.mode is GameMode.STANDARD
        assert session.current_round == 0
        assert session.total_score == 0
        assert session.id

    def test_start_without_paintings_raises(self):
        with pytest.raises(ValueError):
            RoundEngine().start([])

    def test_start_uses_given_session_id(self):
        session = RoundEngine().start(create_paintings(), mode="daily", session_id="daily_2025-03-10")
        assert session.id == "daily_2025-03-10"
        assert session.mode is GameMode.DAILY

    def test_reset_returns_to_idle(self):
        engine = RoundEngine()
        engine.start(create_paintings())
        engine.reset()

        assert engine.state is GameState.IDLE
        assert engine.session is None
        assert engine.current_painting is None


class TestGuessing:
    """Tests for submit_guess"""

    def test_perfect_guess_scores_10000(self):
        engine = RoundEngine()
        engine.start(create_paintings())
        perfect_guess(engine)

        result = engine.submit_guess()

        assert result.distance_km == 0
        assert result.location_score == 5000
        assert result.year_score == 5000
        assert result.total_score == 10000
        assert engine.session.total_score == 10000
        assert engine.state is GameState.ROUND_RESULT

    def test_incomplete_guess_is_not_submitted(self):
        """No year yet: nothing happens"""
        engine = RoundEngine()
        engine.start(create_paintings())
        engine.set_guess_location(40.0, 10.0)

        assert engine.submit_guess() is None
        assert engine.state is GameState.PLAYING
        assert engine.session.rounds == []

    def test_missing_location_is_not_submitted_in_normal_mode(self):
        engine = RoundEngine(Difficulty.NORMAL)
        engine.start(create_paintings())
        engine.set_guess_year(1600)

        assert engine.submit_guess() is None

    def test_year_only_mode_scores_year_alone(self):
        engine = RoundEngine(Difficulty.EASY)
        engine.start(create_paintings())
        engine.set_guess_year(1600)

        result = engine.submit_guess()

        assert result.distance_km == 0
        assert result.location_score == 0
        assert result.year_score == 5000
        assert result.total_score == 5000

    def test_explicit_guess_argument(self):
        engine = RoundEngine()
        engine.start(create_paintings())
        guess = PlayerGuess(location=GuessLocation(40.0, 10.0), year=1650)

        result = engine.submit_guess(guess)

        assert result.year_difference == 50
        assert result.year_score == 3200

    def test_cannot_submit_twice(self):
        engine = RoundEngine()
        engine.start(create_paintings())
        perfect_guess(engine)
        engine.submit_guess()

        assert engine.submit_guess() is None
        assert len(engine.session.rounds) == 1

    def test_result_keeps_guess_snapshot(self):
        engine = RoundEngine()
        engine.start(create_paintings())
        perfect_guess(engine)
        result = engine.submit_guess()

        engine.current_guess.year = 1900
        assert result.guess.year == 1600

    def test_cannot_submit_when_idle(self):
        engine = RoundEngine()
        assert engine.submit_guess(PlayerGuess(GuessLocation(0, 0), 1600)) is None


class TestTimer:
    """Tests for expire_timer"""

    def test_fills_neutral_defaults(self):
        engine = RoundEngine()
        engine.start(create_paintings())

        result = engine.expire_timer()

        assert result.guess.location == GuessLocation(0.0, 0.0)
        assert result.guess.year == TIMEOUT_YEAR
        assert engine.state is GameState.ROUND_RESULT

    def test_keeps_what_the_player_already_set(self):
        engine = RoundEngine()
        engine.start(create_paintings())
        engine.set_guess_year(1601)

        result = engine.expire_timer()
        assert result.guess.year == 1601

    def test_year_only_mode_has_no_default_pin(self):
        engine = RoundEngine(Difficulty.EASY)
        engine.start(create_paintings())

        result = engine.expire_timer()
        assert result.guess.location is None
        assert result.location_score == 0

    def test_ignored_outside_playing(self):
        engine = RoundEngine()
        assert engine.expire_timer() is None


class TestProgression:
    """Tests for advance and the final state"""

    def test_advance_moves_to_next_round(self):
        engine = RoundEngine()
        paintings = create_paintings()
        engine.start(paintings)
        perfect_guess(engine)
        engine.submit_guess()

        assert engine.advance() is GameState.PLAYING
        assert engine.session.current_round == 1
        assert engine.current_painting == paintings[1]
        assert engine.current_guess == PlayerGuess()

    def test_advance_ignored_while_playing(self):
        engine = RoundEngine()
        engine.start(create_paintings())

        assert engine.advance() is GameState.PLAYING
        assert engine.session.current_round == 0

    def test_full_game_ends_in_final(self):
        engine = RoundEngine()
        engine.start(create_paintings(3))

        for _ in range(3):
            perfect_guess(engine)
            engine.submit_guess()
            engine.advance()

        assert engine.state is GameState.FINAL
        assert engine.session.total_score == 30000
        assert engine.session.max_score == 30000
        assert engine.session.is_complete
        assert engine.session.completed_at is not None
        # Still on the last round; is_complete is the terminal check
        assert engine.session.current_round == 2


class TestResume:
    """Tests for continuing a saved session"""

    def test_resume_mid_round(self):
        engine = RoundEngine()
        engine.start(create_paintings())
        perfect_guess(engine)
        first = engine.submit_guess()

        resumed = RoundEngine()
        resumed.resume(create_paintings(), current_round=1, rounds=[first], total_score=10000, session_id="daily_x")
        # current_round 1 with one scored round -> still guessing round 1
        assert resumed.state is GameState.PLAYING
        assert resumed.current_painting.id == "fb_1"

    def test_resume_after_scoring_shows_result(self):
        engine = RoundEngine()
        engine.start(create_paintings())
        perfect_guess(engine)
        first = engine.submit_guess()

        resumed = RoundEngine()
        resumed.resume(create_paintings(), current_round=0, rounds=[first], total_score=10000, session_id="daily_x")

        assert resumed.state is GameState.ROUND_RESULT
        assert resumed.last_result == first
        assert resumed.advance() is GameState.PLAYING

    def test_resume_rejects_inconsistent_progress(self):
        with pytest.raises(ValueError):
            RoundEngine().resume(create_paintings(), current_round=2, rounds=[], total_score=0, session_id="x")
        with pytest.raises(ValueError):
            RoundEngine().resume(create_paintings(), current_round=5, rounds=[], total_score=0, session_id="x")

    def test_resume_rejects_score_that_disagrees_with_rounds(self):
        engine = RoundEngine()
        engine.start(create_paintings())
        perfect_guess(engine)
        first = engine.submit_guess()

        with pytest.raises(ValueError):
            RoundEngine().resume(create_paintings(), current_round=1, rounds=[first], total_score=25000, session_id="x")
