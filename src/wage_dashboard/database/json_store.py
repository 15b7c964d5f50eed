from __future__ import annotations

import json
import logging
import os
import tempfile
from decimal import Decimal
from pathlib import Path
from typing import Any, Callable, TypeVar

from ..common.money import money_to_json
from ..core.exceptions import LoadFailure

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _default(value: Any):
    if isinstance(value, Decimal):
        return money_to_json(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class JsonFileStore:
    """Key-value store keeping one JSON array per key (``<data_dir>/<key>.json``).

    Each save writes the whole collection and replaces the file atomically before returning.
    """

    def __init__(self, data_dir: str | Path):
        self._data_dir = Path(data_dir)

    @property
    def data_dir(self) -> Path:
        return self._data_dir

    def _path(self, key: str) -> Path:
        return self._data_dir / f"{key}.json"

    def load(self, key: str) -> list[dict]:
        path = self._path(key)
        if not path.exists():
            return []
        try:
            data = json.loads(path.read_text(encoding="utf-8"), parse_float=Decimal)
        except (OSError, ValueError) as e:
            logger.error("Failed to read %s: %s", path, e)
            raise LoadFailure(f"Could not read stored {key}") from e
        if not isinstance(data, list):
            logger.error("Unexpected content in %s (expected a list)", path)
            raise LoadFailure(f"Stored {key} are corrupted")
        return data

    def load_as(self, key: str, from_dict: Callable[[dict], T]) -> list[T]:
        """Load and convert every row; a row that does not convert is a LoadFailure too."""
        rows = self.load(key)
        try:
            return [from_dict(row) for row in rows]
        except (KeyError, TypeError, ValueError) as e:
            logger.error("Malformed row in %s: %r", self._path(key), e)
            raise LoadFailure(f"Stored {key} are corrupted") from e

    def save(self, key: str, items: list[dict]) -> None:
        self._data_dir.mkdir(parents=True, exist_ok=True)
        path = self._path(key)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{key}-", suffix=".json", dir=self._data_dir)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(items, f, ensure_ascii=False, indent=2, default=_default)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
