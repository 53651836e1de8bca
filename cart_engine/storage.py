"""
Cart Storage

Key-value slots holding serialized cart snapshots.
"""

import os
import re
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class CartStorage(ABC):
    """Durable string slot keyed by name"""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Read a slot, None when absent"""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Write a slot, replacing any previous value"""

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Delete a slot, True if it existed"""

    def exists(self, key: str) -> bool:
        """Whether a slot has been written, without reading it"""
        return self.get(key) is not None


class MemoryCartStorage(CartStorage):
    """In-memory slots (lost on restart)"""

    def __init__(self):
        self.slots: dict[str, str] = {}

    def get(self, key: str) -> Optional[str]:
        return self.slots.get(key)

    def exists(self, key: str) -> bool:
        return key in self.slots

    def set(self, key: str, value: str) -> None:
        self.slots[key] = value

    def delete(self, key: str) -> bool:
        if key in self.slots:
            del self.slots[key]
            return True
        return False


class FileCartStorage(CartStorage):
    """One JSON file per slot under a directory"""

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)
        self.directory.mkdir(parents=True, exist_ok=True)

    def _path(self, key: str) -> Path:
        safe_name = re.sub(r"[^A-Za-z0-9_.-]", "_", key)
        return self.directory / f"{safe_name}.json"

    def get(self, key: str) -> Optional[str]:
        path = self._path(key)
        if not path.exists():
            return None
        with open(path, "r", encoding="utf-8") as f:
            return f.read()

    def exists(self, key: str) -> bool:
        return self._path(key).exists()

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp_path = path.with_suffix(".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            f.write(value)
        # Last write wins
        os.replace(tmp_path, path)

    def delete(self, key: str) -> bool:
        path = self._path(key)
        if path.exists():
            path.unlink()
            return True
        return False
