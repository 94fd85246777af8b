"""
Data models for PaceTable application
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Mapping


# Keys managed by the roster; anything else supplied by the caller is carried in `extra`
RESERVED_KEYS = ("id", "color", "isLoading", "visible", "records")


@dataclass(frozen=True)
class AthleteRecord:
    """An athlete selected for comparison, with its display color and records"""
    id: Any
    color: str
    is_loading: bool = False
    visible: bool = True
    records: List[Any] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)

    # Unhashable: records and extra are mutable containers; key collections by id instead
    __hash__ = None

    @classmethod
    def from_data(cls, data: Mapping[str, Any], color: str) -> 'AthleteRecord':
        """
        Create a freshly added athlete from caller-supplied data.

        The roster owns color, loading, visibility and records, so those keys
        in `data` are ignored; every other key is kept in `extra`.

        Args:
            data: Mapping with at least an "id" key (e.g. {"id": 7, "name": "Kipchoge"})
            color: Color token assigned by the allocator

        Returns:
            New AthleteRecord, visible and not loading, with no records
        """
        return cls(
            id=data["id"],
            color=color,
            extra={k: v for k, v in data.items() if k not in RESERVED_KEYS}
        )

    def with_loading(self, is_loading: bool) -> 'AthleteRecord':
        return replace(self, is_loading=is_loading)

    def with_records(self, records: List[Any]) -> 'AthleteRecord':
        """Records arrived: store them and clear the loading flag"""
        return replace(self, records=list(records), is_loading=False)

    def with_visible(self, visible: bool) -> 'AthleteRecord':
        return replace(self, visible=visible)

    def __getitem__(self, key: str) -> Any:
        """Look up a caller-supplied field, e.g. record["name"]"""
        return self.extra[key]

    def get(self, key: str, default: Any = None) -> Any:
        return self.extra.get(key, default)

    def to_dict(self) -> Dict:
        """Convert to dictionary"""
        data = dict(self.extra)
        data.update({
            "id": self.id,
            "color": self.color,
            "isLoading": self.is_loading,
            "visible": self.visible,
            "records": list(self.records)
        })
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> 'AthleteRecord':
        """Create AthleteRecord from dictionary (as produced by to_dict)"""
        return cls(
            id=data["id"],
            color=data.get("color", ""),
            is_loading=bool(data.get("isLoading", False)),
            visible=bool(data.get("visible", True)),
            records=list(data.get("records") or []),
            extra={k: v for k, v in data.items() if k not in RESERVED_KEYS}
        )
