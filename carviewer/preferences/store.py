from __future__ import annotations

import logging
import threading
from decimal import Decimal
from pathlib import Path
from typing import Iterable

from ..errors import PreferenceStoreError

logger = logging.getLogger(__name__)


def _parse_line(line: str, lineno: int) -> tuple[str, float]:
    # names may not contain ',' since the record format has no escaping
    name, _, raw = line.partition(",")
    try:
        return name, float(raw)
    except ValueError:
        logger.warning("Malformed preference weight on line %d: %r, using 0", lineno, line)
        return name, 0.0


def _format_weight(weight: float) -> str:
    if weight.is_integer():
        return str(int(weight))
    # shortest round-trip digits, written positionally (no exponent)
    return format(Decimal(repr(weight)), "f")


class PreferenceStore:
    """
    Durable model-name -> weight table shared by every request.

    All reads and writes go through one lock, so the store may be used from
    concurrent request handlers. A name missing from the table counts as
    weight 0.
    """

    def __init__(self, path: Path, weights: dict[str, float] | None = None) -> None:
        self.path = Path(path)
        self._weights: dict[str, float] = {k: float(v) for k, v in (weights or {}).items()}
        self._lock = threading.RLock()

    @classmethod
    def load(cls, path: Path) -> PreferenceStore:
        """Read the durable record. A missing file is fatal to the caller."""
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise PreferenceStoreError(f"Missing preference file {path}") from e
        except OSError as e:
            raise PreferenceStoreError(f"Cannot read preference file {path}: {e}") from e

        weights: dict[str, float] = {}
        for lineno, line in enumerate(text.splitlines(), start=1):
            if not line.strip():
                continue
            name, weight = _parse_line(line, lineno)
            weights[name] = weight

        logger.info("Loaded %d preference weights from %s", len(weights), path)
        return cls(path, weights)

    @staticmethod
    def clear_file(path: Path) -> None:
        """Truncate (or create) the durable record."""
        Path(path).write_text("", encoding="utf-8")

    def __len__(self) -> int:
        with self._lock:
            return len(self._weights)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._weights

    def weight(self, name: str) -> float:
        with self._lock:
            return self._weights.get(name, 0.0)

    def increment(self, name: str, amount: float) -> None:
        with self._lock:
            self._weights[name] = self._weights.get(name, 0.0) + amount

    def increment_many(self, names: Iterable[str], amount: float) -> None:
        with self._lock:
            for name in names:
                self._weights[name] = self._weights.get(name, 0.0) + amount

    def ensure(self, names: Iterable[str]) -> None:
        """Insert every unseen name with weight 0."""
        with self._lock:
            for name in names:
                self._weights.setdefault(name, 0.0)

    def as_dict(self) -> dict[str, float]:
        with self._lock:
            return dict(self._weights)

    def persist(self) -> bool:
        """
        Overwrite the durable record with the full table.

        An empty table leaves the file untouched. Write failures are logged
        and reported as ``False`` so serving can continue.
        """
        with self._lock:
            if not self._weights:
                return False
            content = "\n".join(
                f"{name},{_format_weight(weight)}" for name, weight in self._weights.items()
            )
            try:
                self.path.write_text(content, encoding="utf-8")
            except OSError:
                logger.warning("Failed to persist preferences to %s", self.path, exc_info=True)
                return False
        logger.debug("Persisted %d preference weights to %s", len(self._weights), self.path)
        return True

    def get_stats(self, top_n: int = 10) -> dict:
        with self._lock:
            ranked = sorted(self._weights.items(), key=lambda kv: kv[1], reverse=True)
            return {
                "size": len(self._weights),
                "total_weight": round(sum(self._weights.values()), 4),
                "top": [{"name": n, "weight": w} for n, w in ranked[:top_n]],
            }
