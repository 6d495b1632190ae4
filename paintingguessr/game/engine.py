# ABOUTME: Round state machine driving one game session
# ABOUTME: idle -> playing -> round_result -> (playing | final), scoring each submitted guess

import logging
from datetime import datetime, timezone
from typing import Optional, Sequence

from paintingguessr.debug import debug_log
from paintingguessr.game.models import Difficulty, GameMode, GameState, Session, new_session_id
from paintingguessr.paintings.models import Painting
from paintingguessr.scoring.calculator import (
    great_circle_distance_km,
    location_score,
    year_difference,
    year_score,
)
from paintingguessr.scoring.models import GuessLocation, PlayerGuess, RoundResult

log = logging.getLogger(__name__)

# Neutral answers used when a round timer runs out mid-guess
TIMEOUT_LOCATION = GuessLocation(lat=0.0, lng=0.0)
TIMEOUT_YEAR = 1650


class RoundEngine:
    """
    Drives one session for one player.

    Transitions out of round_result are always caller driven: the UI shows
    the result and calls advance() when the player is ready. The engine
    knows nothing about persistence.
    """

    def __init__(self, difficulty: Difficulty = Difficulty.NORMAL):
        self.difficulty = Difficulty(difficulty)
        self.state = GameState.IDLE
        self.session: Optional[Session] = None
        self.current_guess = PlayerGuess()

    # ==================== Session lifecycle ====================

    def start(
        self,
        paintings: Sequence[Painting],
        mode: GameMode = GameMode.STANDARD,
        session_id: Optional[str] = None,
    ) -> Session:
        """Begin a fresh session on round 0."""
        if not paintings:
            raise ValueError("Cannot start a session without paintings")

        self.session = Session(
            id=session_id or new_session_id(),
            mode=GameMode(mode),
            difficulty=self.difficulty,
            paintings=tuple(paintings),
            started_at=datetime.now(timezone.utc),
        )
        self.current_guess = PlayerGuess()
        self.state = GameState.PLAYING
        debug_log(f"Started {self.session.mode.value} session {self.session.id} with {len(paintings)} paintings", "ENGINE")
        return self.session

    def resume(
        self,
        paintings: Sequence[Painting],
        current_round: int,
        rounds: Sequence[RoundResult],
        total_score: int,
        session_id: str,
        mode: GameMode = GameMode.DAILY,
    ) -> Session:
        """
        Continue a persisted session.

        If the saved round was already scored the engine resumes in
        round_result, so the player sees that result before advancing.
        """
        if not paintings:
            raise ValueError("Cannot resume a session without paintings")
        if not 0 <= current_round < len(paintings):
            raise ValueError(f"Round {current_round} out of range for {len(paintings)} paintings")
        if len(rounds) not in (current_round, current_round + 1):
            raise ValueError(f"{len(rounds)} scored rounds don't match round {current_round}")
        recorded = sum(result.total_score for result in rounds)
        if total_score != recorded:
            raise ValueError(f"Saved score {total_score} doesn't match {recorded} from scored rounds")

        self.session = Session(
            id=session_id,
            mode=GameMode(mode),
            difficulty=self.difficulty,
            paintings=tuple(paintings),
            started_at=datetime.now(timezone.utc),
            current_round=current_round,
            rounds=list(rounds),
            total_score=total_score,
        )
        self.current_guess = PlayerGuess()
        self.state = GameState.ROUND_RESULT if len(rounds) > current_round else GameState.PLAYING
        debug_log(f"Resumed session {session_id} at round {current_round} ({self.state.value})", "ENGINE")
        return self.session

    def reset(self) -> None:
        """Back to idle, discarding the session."""
        self.session = None
        self.current_guess = PlayerGuess()
        self.state = GameState.IDLE

    # ==================== Guessing ====================

    @property
    def current_painting(self) -> Optional[Painting]:
        if self.session is None or self.state is GameState.IDLE:
            return None
        if self.session.current_round >= self.session.round_count:
            return None
        return self.session.paintings[self.session.current_round]

    @property
    def last_result(self) -> Optional[RoundResult]:
        if self.session is None or not self.session.rounds:
            return None
        return self.session.rounds[-1]

    def set_guess_location(self, lat: float, lng: float) -> None:
        self.current_guess.location = GuessLocation(lat=lat, lng=lng)

    def set_guess_year(self, year: int) -> None:
        self.current_guess.year = int(year)

    def can_submit(self, guess: Optional[PlayerGuess] = None) -> bool:
        guess = guess or self.current_guess
        return self.state is GameState.PLAYING and guess.is_complete(self.difficulty.requires_location)

    def submit_guess(self, guess: Optional[PlayerGuess] = None) -> Optional[RoundResult]:
        """
        Score the guess for the current painting.

        Args:
            guess: Guess to score; defaults to the scratch guess built with
                set_guess_location()/set_guess_year()

        Returns:
            RoundResult, or None when not playing or the guess is incomplete
            (no year, or no location outside year-only mode)
        """
        guess = guess or self.current_guess
        if not self.can_submit(guess):
            debug_log(f"Guess not ready (state={self.state.value}, guess={guess})", "ENGINE")
            return None

        painting = self.current_painting
        snapshot = guess.snapshot()

        if snapshot.location is not None:
            distance_km = great_circle_distance_km(
                snapshot.location.lat,
                snapshot.location.lng,
                painting.location.lat,
                painting.location.lng,
            )
            loc_score = location_score(distance_km)
        else:
            distance_km = 0.0
            loc_score = 0

        yr_score = year_score(snapshot.year, painting.year, painting.year_start, painting.year_end)

        result = RoundResult(
            painting=painting,
            guess=snapshot,
            distance_km=distance_km,
            year_difference=year_difference(snapshot.year, painting.year, painting.year_start, painting.year_end),
            location_score=loc_score,
            year_score=yr_score,
            total_score=loc_score + yr_score,
        )

        self.session.rounds.append(result)
        self.session.total_score += result.total_score
        self.state = GameState.ROUND_RESULT
        debug_log(
            f"Round {self.session.current_round + 1}: {distance_km:.0f}km, "
            f"{result.year_difference}y off -> {result.total_score}",
            "ENGINE",
        )
        return result

    def expire_timer(self) -> Optional[RoundResult]:
        """Round timer ran out: fill the missing parts with neutral answers and submit."""
        if self.state is not GameState.PLAYING:
            return None
        if self.difficulty.requires_location and self.current_guess.location is None:
            self.current_guess.location = TIMEOUT_LOCATION
        if self.current_guess.year is None:
            self.current_guess.year = TIMEOUT_YEAR
        return self.submit_guess()

    # ==================== Progression ====================

    def advance(self) -> GameState:
        """
        Leave the round result: next round, or final after the last one.

        Returns:
            The new state (unchanged if not currently showing a result)
        """
        if self.state is not GameState.ROUND_RESULT:
            debug_log(f"advance() ignored in state {self.state.value}", "ENGINE")
            return self.state

        if self.session.current_round + 1 >= self.session.round_count:
            self.session.completed_at = datetime.now(timezone.utc)
            self.state = GameState.FINAL
            log.info(f"Session {self.session.id} finished: {self.session.total_score}/{self.session.max_score}")
        else:
            self.session.current_round += 1
            self.current_guess = PlayerGuess()
            self.state = GameState.PLAYING

        return self.state
