# storage.py
"""One-key persistent store for the best score."""
from pathlib import Path
import json
import logging

logger = logging.getLogger(__name__)

BEST_KEY = "best_score"


class BestScoreStore:
    """
    Best score kept as ``{"best_score": n}`` in a small JSON file.
    Anything missing, unreadable or non-numeric reads as 0.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def load(self) -> int:
        try:
            raw = self.path.read_bytes()
        except FileNotFoundError:
            return 0
        except OSError as e:
            logger.warning("Could not read best score from %s: %s", self.path, e)
            return 0

        try:
            data = json.loads(raw.decode("utf-8"))
            # a bare number is accepted too
            value = data.get(BEST_KEY, 0) if isinstance(data, dict) else data
            if isinstance(value, bool):
                raise TypeError(f"not a score: {value!r}")
            best = int(value)
        except (ValueError, TypeError, OverflowError) as e:
            logger.warning("Ignoring malformed best score in %s: %s", self.path, e)
            return 0
        return max(best, 0)

    def save(self, best: int) -> bool:
        """Write ``best``; returns False (and logs) when the file can't be written."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps({BEST_KEY: int(best)}), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save best score to %s: %s", self.path, e)
            return False
        logger.info("Saved best score %d -> %s", best, self.path)
        return True
