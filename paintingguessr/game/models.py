# ABOUTME: Data models for a game session and its round state machine
# ABOUTME: Session owns its paintings and scored rounds; enums name states, modes and difficulties

import secrets
import time
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from paintingguessr.paintings.models import Painting
from paintingguessr.scoring.models import RoundResult


class GameState(str, Enum):
    IDLE = "idle"
    PLAYING = "playing"
    ROUND_RESULT = "round_result"
    FINAL = "final"


class GameMode(str, Enum):
    STANDARD = "standard"
    DAILY = "daily"


class Difficulty(str, Enum):
    """Easy is year-only (no map); hard only changes presentation"""
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"

    @property
    def requires_location(self) -> bool:
        return self is not Difficulty.EASY


def new_session_id() -> str:
    """Short random id with a time component, e.g. 'k3x9q2ab' + base36 millis."""
    return secrets.token_hex(4) + _base36(int(time.time() * 1000))


def _base36(value: int) -> str:
    digits = "0123456789abcdefghijklmnopqrstuvwxyz"
    out = ""
    while value:
        value, remainder = divmod(value, 36)
        out = digits[remainder] + out
    return out or "0"


@dataclass
class Session:
    """One game: a fixed list of paintings and the results scored so far

    current_round stays on the last round once the game is over; use
    is_complete rather than comparing it to round_count.
    """
    id: str
    mode: GameMode
    difficulty: Difficulty
    paintings: tuple[Painting, ...]
    started_at: datetime
    current_round: int = 0
    rounds: list[RoundResult] = field(default_factory=list)
    total_score: int = 0
    completed_at: Optional[datetime] = None

    @property
    def round_count(self) -> int:
        return len(self.paintings)

    @property
    def max_score(self) -> int:
        return self.round_count * 10000

    @property
    def is_complete(self) -> bool:
        return len(self.rounds) >= self.round_count
