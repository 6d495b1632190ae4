# ABOUTME: Saves and restores the player's daily challenge between visits
# ABOUTME: Wraps a RoundEngine and a SessionStore; the engine itself never touches storage

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Optional, Sequence

from paintingguessr.debug import debug_log
from paintingguessr.game.engine import RoundEngine
from paintingguessr.game.models import GameMode, GameState
from paintingguessr.game.persistence import SessionStore
from paintingguessr.paintings.models import Painting
from paintingguessr.sampling.daily import today_date_string
from paintingguessr.scoring.models import RoundResult

log = logging.getLogger(__name__)

DAILY_KEY_PREFIX = "daily_"


class DailyProgress:
    """
    Daily challenge progress for one player.

    Call load_or_start() when the player opens the daily challenge and
    save() after every engine transition (submit, advance, timer expiry).
    """

    def __init__(self, store: SessionStore, engine: RoundEngine):
        self.store = store
        self.engine = engine

    def daily_key(self, now: Optional[datetime] = None) -> str:
        return f"{DAILY_KEY_PREFIX}{today_date_string(now)}"

    def load_or_start(
        self,
        fetch_paintings: Callable[[], Sequence[Painting]],
        now: Optional[datetime] = None,
    ) -> dict[str, Any]:
        """
        Pick up today's challenge where the player left it.

        Args:
            fetch_paintings: Called only when there is nothing to resume
            now: Current instant (timezone-aware), defaults to now

        Returns:
            Today's snapshot. A completed snapshot is returned as saved and
            the engine is left untouched: the daily can only be played once.
        """
        now = now or datetime.now(timezone.utc)
        key = self.daily_key(now)
        saved = self.store.load(key)

        if saved and saved.get("completed"):
            debug_log(f"{key} already completed with {saved.get('score')}", "DAILY")
            return saved

        if saved and saved.get("inProgress"):
            try:
                self._resume(key, saved)
                return self.snapshot()
            except (KeyError, TypeError, ValueError) as e:
                log.warning(f"Saved daily progress {key} unusable, starting over: {e}")

        paintings = list(fetch_paintings())
        self.engine.start(paintings, mode=GameMode.DAILY, session_id=key)
        self.save(now)
        return self.snapshot()

    def _resume(self, key: str, saved: dict[str, Any]) -> None:
        paintings = [Painting.from_dict(raw) for raw in saved["paintings"]]
        rounds = [RoundResult.from_dict(raw) for raw in saved.get("rounds") or []]
        self.engine.resume(
            paintings,
            current_round=int(saved.get("currentRound", 0)),
            rounds=rounds,
            total_score=int(saved.get("score", 0)),
            session_id=key,
            mode=GameMode.DAILY,
        )

    def snapshot(self) -> dict[str, Any]:
        """Current engine session in the saved shape."""
        session = self.engine.session
        if session is None:
            raise ValueError("No daily session in progress")

        completed = self.engine.state is GameState.FINAL
        return {
            "completed": completed,
            "inProgress": not completed,
            "score": session.total_score,
            "currentRound": session.current_round,
            "rounds": [result.to_dict() for result in session.rounds],
            "paintings": [painting.to_dict() for painting in session.paintings],
        }

    def save(self, now: Optional[datetime] = None) -> dict[str, Any]:
        """Persist the session under the day it started on, even past midnight."""
        snapshot = self.snapshot()
        session_id = self.engine.session.id
        key = session_id if session_id.startswith(DAILY_KEY_PREFIX) else self.daily_key(now)
        self.store.save(key, snapshot)
        return snapshot
