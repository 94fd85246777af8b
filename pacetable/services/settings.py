"""
Settings - Scalar values kept in sync with key/value storage
"""

from typing import Union

from pacetable.config import (
    DEFAULT_MIN_PACE,
    DEFAULT_MAX_PACE,
    DEFAULT_INCREMENT,
    DEFAULT_VMA,
    MIN_PACE_KEY,
    MAX_PACE_KEY,
    INCREMENT_KEY,
    SHOW_VMA_KEY,
    VMA_KEY
)
from pacetable.services.observable import Observable
from pacetable.services.storage import KeyValueStorage

Scalar = Union[bool, int, float]


def parse_stored_value(stored: str, default: Scalar) -> Scalar:
    """
    Convert a stored string back to the type of the default value

    Args:
        stored: Raw string from storage
        default: Default value; its type decides the conversion

    Returns:
        bool for "true"/"false", int or float for numbers

    Raises:
        ValueError: If a number cannot be parsed
    """
    if isinstance(default, bool):
        return stored.strip().lower() == "true"

    value = float(stored)
    if isinstance(default, int) and value.is_integer():
        return int(value)
    return value


def format_stored_value(value: Scalar) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class PersistedValue(Observable):
    """Observable scalar whose every change is written to storage"""

    def __init__(self, storage: KeyValueStorage, key: str, default: Scalar):
        super().__init__()
        self.storage = storage
        self.key = key
        self.default = default
        self._value = self._load()

    def _load(self) -> Scalar:
        stored = self.storage.get_item(self.key)
        if stored is None:
            return self.default
        try:
            return parse_stored_value(stored, self.default)
        except ValueError as e:
            print(f"Error loading setting {self.key}: {e}")
            return self.default

    def _snapshot(self) -> Scalar:
        return self._value

    @property
    def value(self) -> Scalar:
        return self._value

    def set(self, value: Scalar) -> None:
        with self._lock:
            self._value = value
            self.storage.set_item(self.key, format_stored_value(value))
            self._publish()

    def reset(self) -> None:
        self.set(self.default)


class PaceSettings:
    """Pace range shown in the table, in seconds per km"""

    def __init__(self, storage: KeyValueStorage):
        self.min_pace = PersistedValue(storage, MIN_PACE_KEY, DEFAULT_MIN_PACE)
        self.max_pace = PersistedValue(storage, MAX_PACE_KEY, DEFAULT_MAX_PACE)
        self.increment = PersistedValue(storage, INCREMENT_KEY, DEFAULT_INCREMENT)

    def reset_to_defaults(self) -> None:
        for setting in (self.min_pace, self.max_pace, self.increment):
            setting.reset()


class VmaSettings:
    """Whether to show %VMA and the VMA (km/h) it is computed from"""

    def __init__(self, storage: KeyValueStorage):
        self.show_vma = PersistedValue(storage, SHOW_VMA_KEY, False)
        self.vma = PersistedValue(storage, VMA_KEY, DEFAULT_VMA)

    def reset_to_defaults(self) -> None:
        self.show_vma.reset()
        self.vma.reset()
