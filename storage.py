# storage.py
from __future__ import annotations
import json
import logging
from pathlib import Path
from typing import Any, Dict, Protocol

from settings import HIGHSCORE_KEY

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    def get(self, key: str) -> Any: ...
    def set(self, key: str, value: Any) -> None: ...


class JsonStore:
    """Small key/value store kept in one JSON object on disk."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _read(self) -> Dict[str, Any]:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.debug(f"No store at {self.path}, starting empty")
            return {}
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring {self.path}: expected a JSON object")
            return {}
        return data

    def get(self, key: str) -> Any:
        return self._read().get(key)

    def set(self, key: str, value: Any):
        data = self._read()
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            logger.warning(f"Could not write {self.path}: {e}")


def load_high_score(store: KeyValueStore) -> int:
    raw = store.get(HIGHSCORE_KEY)
    if raw is None:
        return 0
    try:
        value = int(float(str(raw).strip()))
    except (ValueError, OverflowError):
        logger.warning(f"Unparsable high score {raw!r}, using 0")
        return 0
    return max(0, value)


def save_high_score(store: KeyValueStore, value: int):
    store.set(HIGHSCORE_KEY, int(value))
