"""
Storage - Scoped key/value storage backends (JSON file and in-memory)
"""

import json
from pathlib import Path
from typing import Dict, Optional, Protocol

from pacetable.config import DEFAULT_STORAGE_FILE, is_diagnostic_mode


class KeyValueStorage(Protocol):
    """String-keyed, string-valued durable storage"""

    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent"""

    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value"""

    def remove_item(self, key: str) -> None:
        """Delete key; absent keys are ignored"""

    def clear(self) -> None:
        """Delete every key in this storage scope"""


class InMemoryStorage:
    """Non-durable storage for tests and throwaway sessions"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def clear(self) -> None:
        self._items.clear()

    def keys(self):
        return list(self._items.keys())


class JsonFileStorage:
    """Manages key/value storage in a single local JSON file"""

    def __init__(self, data_dir: str = "data", filename: str = DEFAULT_STORAGE_FILE):
        """
        Initialize JsonFileStorage

        Args:
            data_dir: Directory to store the JSON file
            filename: File name; one file is one storage scope
        """
        self.data_dir = Path(data_dir)
        self.data_dir.mkdir(parents=True, exist_ok=True)

        self.storage_file = self.data_dir / filename

    def _load(self) -> Dict[str, str]:
        """Load the whole key/value map from disk"""
        if not self.storage_file.exists():
            return {}

        try:
            with open(self.storage_file, 'r') as f:
                data = json.load(f)
        except Exception as e:
            print(f"Error loading storage file {self.storage_file}: {e}")
            return {}

        if not isinstance(data, dict):
            print(f"Error loading storage file {self.storage_file}: expected a JSON object")
            return {}

        # Values are always strings, like browser local storage
        return {str(k): v if isinstance(v, str) else json.dumps(v) for k, v in data.items()}

    def _save(self, items: Dict[str, str]) -> None:
        with open(self.storage_file, 'w') as f:
            json.dump(items, f, indent=2)

    def get_item(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._load()
        items[key] = value
        self._save(items)
        if is_diagnostic_mode():
            print(f"Stored {key} = {value}")

    def remove_item(self, key: str) -> None:
        items = self._load()
        if key in items:
            del items[key]
            self._save(items)

    def clear(self) -> None:
        """Clear all stored data"""
        if self.storage_file.exists():
            self.storage_file.unlink()

    def keys(self):
        return list(self._load().keys())
