# ABOUTME: Spoiler-free share summary of a finished game
# ABOUTME: Per-round score ratios plus a copyable text block of colored squares

from typing import Any, Optional, Sequence

from paintingguessr.config import Config
from paintingguessr.scoring.calculator import MAX_ROUND_SCORE, score_ratio_blocks
from paintingguessr.scoring.models import RoundResult


def share_summary(rounds: Sequence[RoundResult], total_score: int) -> dict[str, Any]:
    """
    Ratios only, no paintings or answers.

    Returns:
        {"rounds": [{"location": float, "year": float}, ...],
         "total": int, "max": int}
    """
    return {
        "rounds": [
            {
                "location": result.location_score / MAX_ROUND_SCORE,
                "year": result.year_score / MAX_ROUND_SCORE,
            }
            for result in rounds
        ],
        "total": total_score,
        "max": MAX_ROUND_SCORE * 2 * len(rounds),
    }


def share_text(
    rounds: Sequence[RoundResult],
    total_score: int,
    date: str,
    site_url: Optional[str] = None,
) -> str:
    summary = share_summary(rounds, total_score)
    lines = [f"PaintingGuessr {date} 🎨 {total_score:,}/{summary['max']:,}"]
    for number, result in enumerate(rounds, start=1):
        lines.append(
            f"{number}. 📍{score_ratio_blocks(result.location_score)} "
            f"📅{score_ratio_blocks(result.year_score)}"
        )
    lines.append("")
    lines.append(site_url or Config.SITE_URL)
    return "\n".join(lines)
