"""
Distance List - Reference distances (defaults plus user-added), kept sorted
"""

import json
from typing import Iterable, List, Optional, Union

from pacetable.config import DEFAULT_DISTANCES, MAX_CUSTOM_DISTANCE, CUSTOM_DISTANCES_KEY
from pacetable.services.observable import Observable
from pacetable.services.storage import KeyValueStorage


def parse_distance(raw: Union[int, float, str, None]) -> Optional[int]:
    """Parse a user-entered distance in metres, or None if it is not a finite number"""
    if isinstance(raw, bool) or raw is None:
        return None
    try:
        if isinstance(raw, (int, float)):
            return int(raw)
        text = str(raw).strip()
        try:
            return int(text)
        except ValueError:
            return int(float(text))
    except (ValueError, OverflowError):
        # Not a number, NaN or infinity
        return None


def is_valid_custom_distance(value: Optional[int]) -> bool:
    return value is not None and 0 < value <= MAX_CUSTOM_DISTANCE


class DistanceList(Observable):
    """
    Sorted list of distances in metres.

    Default distances are always present and cannot be removed; only the
    custom ones are written to storage.
    """

    def __init__(self, storage: KeyValueStorage, defaults: Optional[Iterable[int]] = None):
        super().__init__()
        self.storage = storage
        self.defaults = sorted(DEFAULT_DISTANCES if defaults is None else defaults)
        self._distances = sorted(set(self.defaults) | set(self._load_custom()))

    def _load_custom(self) -> List[int]:
        raw = self.storage.get_item(CUSTOM_DISTANCES_KEY)
        if raw is None:
            return []
        try:
            custom = json.loads(raw)
        except ValueError as e:
            print(f"Error loading custom distances: {e}")
            return []
        if not isinstance(custom, list):
            print(f"Error loading custom distances: expected a list, got {raw!r}")
            return []

        distances = [parse_distance(d) for d in custom]
        valid = [d for d in distances if is_valid_custom_distance(d)]
        if len(valid) != len(custom):
            print(f"Ignoring {len(custom) - len(valid)} invalid custom distance(s) in {raw!r}")
        return valid

    def _persist(self) -> None:
        self.storage.set_item(CUSTOM_DISTANCES_KEY, json.dumps(self.custom_distances))

    def _commit(self, distances: Iterable[int]) -> None:
        self._distances = sorted(set(distances))
        self._persist()
        self._publish()

    def _snapshot(self) -> List[int]:
        return list(self._distances)

    @property
    def distances(self) -> List[int]:
        return list(self._distances)

    @property
    def custom_distances(self) -> List[int]:
        return [d for d in self._distances if d not in self.defaults]

    def is_default(self, distance: int) -> bool:
        return distance in self.defaults

    def add_distance(self, raw: Union[int, float, str]) -> bool:
        """
        Add a custom distance

        Args:
            raw: Distance in metres, as a number or user-entered text

        Returns:
            True if the distance was added
        """
        value = parse_distance(raw)
        if not is_valid_custom_distance(value) or self.is_default(value):
            return False

        with self._lock:
            if value in self._distances:
                return False
            self._commit(self._distances + [value])
        return True

    def remove_distance(self, value: int) -> bool:
        """Remove a custom distance; default distances are kept"""
        if self.is_default(value):
            return False

        with self._lock:
            if value not in self._distances:
                return False
            self._commit(d for d in self._distances if d != value)
        return True

    def set_distances(self, distances: Iterable[int]) -> None:
        with self._lock:
            self._commit(distances)
