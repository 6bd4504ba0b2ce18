from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional, Union

from loguru import logger


class DraftStore:
    """
    Best-effort JSON files under a local directory, one file per key.
    Read/write failures are logged and ignored so an unwritable disk never
    blocks editing a slip.
    """

    def __init__(self, base_dir: Union[str, Path]) -> None:
        self.base_dir = Path(base_dir)

    def _path(self, key: str) -> Path:
        return self.base_dir / f"{key}.json"

    def set_json(self, key: str, value: Any) -> None:
        try:
            self.base_dir.mkdir(parents=True, exist_ok=True)
            self._path(key).write_text(json.dumps(value, ensure_ascii=False), encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            logger.warning("Draft save skipped for {}: {}", key, str(e))

    def get_json(self, key: str) -> Optional[Any]:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Draft {} unreadable, ignoring: {}", key, str(e))
            return None

    def remove(self, key: str) -> None:
        try:
            self._path(key).unlink(missing_ok=True)
        except OSError as e:
            logger.warning("Draft {} could not be removed: {}", key, str(e))
