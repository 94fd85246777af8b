"""
Color Pool - Allocates athlete colors from a fixed pool and persists usage
"""

import json
import threading
from typing import List, Optional, Sequence

from pacetable.config import COLOR_POOL, COLOR_USAGE_KEY, is_diagnostic_mode
from pacetable.services.storage import KeyValueStorage


class ColorPoolAllocator:
    """
    Hands out colors lowest-index first and tracks which are in use.

    When every color is taken, the whole usage map is cleared and the first
    color is handed out again, even though athletes may still hold the other
    colors. Two athletes can then share a color until one is removed.
    """

    def __init__(self, storage: KeyValueStorage, color_pool: Optional[Sequence[str]] = None,
                 storage_key: str = COLOR_USAGE_KEY):
        """
        Initialize ColorPoolAllocator

        Args:
            storage: Key/value storage the usage map is mirrored to
            color_pool: Ordered color tokens (defaults to config.COLOR_POOL)
            storage_key: Key holding the JSON-encoded usage map

        Raises:
            ValueError: If the pool is empty or contains duplicates
        """
        pool = list(COLOR_POOL if color_pool is None else color_pool)
        if not pool:
            raise ValueError("color_pool must contain at least one color")
        if len(set(pool)) != len(pool):
            raise ValueError("color_pool must not contain duplicate colors")

        self._color_pool = tuple(pool)
        self._storage = storage
        self._storage_key = storage_key
        self._lock = threading.RLock()
        self._usage = self._load_usage()

    def _load_usage(self) -> List[bool]:
        """Read the usage map from storage, falling back to all-unused"""
        fresh = [False] * len(self._color_pool)

        raw = self._storage.get_item(self._storage_key)
        if raw is None:
            return fresh

        try:
            usage = json.loads(raw)
        except (TypeError, ValueError) as e:
            print(f"Error loading color usage: {e}")
            return fresh

        if (not isinstance(usage, list)
                or len(usage) != len(self._color_pool)
                or not all(isinstance(u, bool) for u in usage)):
            print(f"Error loading color usage: expected {len(self._color_pool)} booleans, got {raw!r}")
            return fresh

        return usage

    def _persist(self) -> None:
        self._storage.set_item(self._storage_key, json.dumps(self._usage))

    @property
    def color_pool(self) -> tuple:
        return self._color_pool

    @property
    def usage(self) -> List[bool]:
        """Copy of the usage map, parallel to color_pool"""
        with self._lock:
            return list(self._usage)

    def is_used(self, color: str) -> bool:
        with self._lock:
            try:
                return self._usage[self._color_pool.index(color)]
            except ValueError:
                return False

    def available(self) -> int:
        """Number of colors not currently assigned"""
        with self._lock:
            return self._usage.count(False)

    def allocate(self) -> str:
        """
        Take the lowest-index unused color.

        If all colors are in use, every color is marked unused first and the
        first color of the pool is returned.

        Returns:
            The allocated color token
        """
        with self._lock:
            try:
                index = self._usage.index(False)
            except ValueError:
                # Pool exhausted: start over from the first color
                self._usage = [False] * len(self._color_pool)
                index = 0
                if is_diagnostic_mode():
                    print("Color pool exhausted, resetting usage")

            self._usage[index] = True
            self._persist()
            return self._color_pool[index]

    def release(self, color: str) -> None:
        """Mark color as unused; unknown colors are ignored"""
        with self._lock:
            try:
                index = self._color_pool.index(color)
            except ValueError:
                return

            self._usage[index] = False
            self._persist()
            if is_diagnostic_mode():
                print(f"Released color {color} (slot {index})")

    def reset(self) -> None:
        """Mark every color as unused"""
        with self._lock:
            self._usage = [False] * len(self._color_pool)
            self._persist()
