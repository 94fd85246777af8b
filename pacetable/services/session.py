"""
Session - Owns the state of one pace-table session
"""

from typing import Optional, Sequence

import pandas as pd

from pacetable.config import get_data_dir, get_storage_file
from pacetable.services.color_pool import ColorPoolAllocator
from pacetable.services.distances import DistanceList
from pacetable.services.pace_table import PaceTableBuilder
from pacetable.services.roster import AthleteRoster
from pacetable.services.settings import PaceSettings, VmaSettings
from pacetable.services.storage import InMemoryStorage, JsonFileStorage, KeyValueStorage


class PaceTableSession:
    """
    Everything a user has selected: athletes, distances, pace range and VMA.

    Build one per session and hand it to whatever renders the table; all
    services share the same storage.
    """

    def __init__(self, storage: Optional[KeyValueStorage] = None,
                 color_pool: Optional[Sequence[str]] = None):
        self.storage = storage if storage is not None else InMemoryStorage()
        self.allocator = ColorPoolAllocator(self.storage, color_pool)
        self.roster = AthleteRoster(self.allocator)
        self.distances = DistanceList(self.storage)
        self.pace = PaceSettings(self.storage)
        self.vma = VmaSettings(self.storage)

    @classmethod
    def from_env(cls, color_pool: Optional[Sequence[str]] = None) -> 'PaceTableSession':
        """Session backed by the JSON file configured in the environment"""
        return cls(JsonFileStorage(get_data_dir(), get_storage_file()), color_pool)

    def pace_table(self) -> pd.DataFrame:
        """Numeric pace table for the current settings and distances"""
        return PaceTableBuilder.build(
            self.pace.min_pace.value,
            self.pace.max_pace.value,
            self.pace.increment.value,
            self.distances.distances
        )

    def reset(self) -> None:
        """Clear the athlete selection and free every color"""
        self.roster.reset()
