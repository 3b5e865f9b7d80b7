"""Best-score bookkeeping."""

import logging

from endless_runner.storage.best_score import BestScoreStore

logger = logging.getLogger(__name__)


class ScoreKeeper:
    """
    Tracks the best score across runs.

    The store is read once here; it is written only when a finished
    run beats the best. If a write fails the new best is still kept
    in memory for the rest of the process.
    """

    def __init__(self, store: BestScoreStore) -> None:
        self._store = store
        self._best = max(0, store.load_best())
        self._persisted = True

    @property
    def best(self) -> int:
        return self._best

    @property
    def persisted(self) -> bool:
        """False once a save has failed and the best lives only in memory."""
        return self._persisted

    def record(self, score: int) -> bool:
        """Record a finished run. Returns True if it set a new best."""
        if score <= self._best:
            return False

        previous = self._best
        self._best = score
        self._persisted = self._store.save_best(score)
        if not self._persisted:
            logger.warning(f"Best score {score} kept in memory only")

        logger.info(f"New best score: {score} (was {previous})")
        return True
