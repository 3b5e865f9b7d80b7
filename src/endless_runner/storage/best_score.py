"""Durable best-score storage.

The best score is kept in a small JSON key-value file, stored as a
string under a fixed key. Storage problems never reach the game:
reads fall back to 0 and failed writes are reported as False.
"""

import json
import logging
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class BestScoreStore(Protocol):
    def load_best(self) -> int:
        ...

    def save_best(self, score: int) -> bool:
        ...


class MemoryBestScoreStore:
    """Transient store. Used when durable storage is unavailable, and in tests."""

    def __init__(self, best: int = 0) -> None:
        self._best = best

    def load_best(self) -> int:
        return self._best

    def save_best(self, score: int) -> bool:
        self._best = score
        return True


class JsonBestScoreStore:
    """Best score persisted in a JSON key-value file."""

    def __init__(self, path: Path, key: str = "bestScore") -> None:
        self.path = Path(path)
        self.key = key

    def _read_all(self) -> dict:
        if not self.path.exists():
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError("store root must be an object")
        return data

    def load_best(self) -> int:
        try:
            raw = self._read_all().get(self.key)
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to read best score from {self.path}: {e}")
            return 0

        if raw is None:
            return 0
        try:
            best = int(raw)
        except (TypeError, ValueError, OverflowError):
            logger.warning(f"Ignoring invalid best score value: {raw!r}")
            return 0
        if best < 0:
            logger.warning(f"Ignoring negative best score: {best}")
            return 0

        logger.info(f"Loaded best score {best} from {self.path}")
        return best

    def save_best(self, score: int) -> bool:
        try:
            data = self._read_all()
        except (OSError, ValueError):
            # Unreadable store gets rewritten from scratch
            data = {}
        data[self.key] = str(score)

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logger.error(f"Failed to save best score to {self.path}: {e}")
            return False

        logger.info(f"Saved best score {score} to {self.path}")
        return True
