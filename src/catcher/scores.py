# scores.py
"""
High-score persistence: a ranked top-10 list stored as a JSON record list.
Unreadable data loads as an empty list; the game never crashes on it.
"""
from dataclasses import dataclass, asdict
from datetime import date
from typing import Iterable, List, Optional
import json
import logging
import os

from .config import MAX_HIGH_SCORES, DEFAULT_NAME

logger = logging.getLogger(__name__)


@dataclass
class HighScoreEntry:
    name: str
    score: int
    level: int
    date: str

    @classmethod
    def create(cls, name: str, score: int, level: int,
               when: Optional[date] = None) -> "HighScoreEntry":
        return cls(
            name=clean_name(name),
            score=score,
            level=level,
            date=(when or date.today()).isoformat(),
        )

    @classmethod
    def from_dict(cls, raw: dict) -> "HighScoreEntry":
        return cls(
            name=clean_name(str(raw["name"])),
            score=int(raw["score"]),
            level=int(raw["level"]),
            date=str(raw["date"]),
        )


def clean_name(name: Optional[str]) -> str:
    name = (name or "").strip()
    return name or DEFAULT_NAME


def rank(entries: Iterable[HighScoreEntry]) -> List[HighScoreEntry]:
    """Sort by score descending (stable for ties) and keep the top 10."""
    return sorted(entries, key=lambda e: e.score, reverse=True)[:MAX_HIGH_SCORES]


def is_high_score(score: int, ranked: List[HighScoreEntry]) -> bool:
    if len(ranked) < MAX_HIGH_SCORES:
        return True
    return score > ranked[-1].score


class ScoreStore:
    """
    Ranked score list backed by a JSON file. With path=None the list only
    lives in memory.
    """

    def __init__(self, path: Optional[str] = None):
        self.path = path
        self._memory: List[HighScoreEntry] = []

    def load_ranked(self) -> List[HighScoreEntry]:
        if self.path is None:
            return list(self._memory)
        if not os.path.exists(self.path):
            return []
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
            if not isinstance(raw, list):
                raise ValueError(f"expected a list, got {type(raw).__name__}")
            return rank(HighScoreEntry.from_dict(r) for r in raw)
        except (OSError, ValueError, KeyError, TypeError) as exc:
            # json.JSONDecodeError is a ValueError
            logger.warning("Ignoring unreadable high scores in %s: %s", self.path, exc)
            return []

    def save_ranked(self, entries: List[HighScoreEntry]) -> None:
        if self.path is None:
            self._memory = list(entries)
            return
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump([asdict(e) for e in entries], f, indent=2)

    def submit_score(self, entry: HighScoreEntry) -> List[HighScoreEntry]:
        ranked = rank(self.load_ranked() + [entry])
        self.save_ranked(ranked)
        return ranked
