"""
Athlete Roster - Ordered, deduplicated athletes with their colors and records
"""

from typing import Any, Callable, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from pacetable.models.models import AthleteRecord
from pacetable.services.color_pool import ColorPoolAllocator
from pacetable.services.observable import Observable

Roster = Tuple[AthleteRecord, ...]


class AthleteRoster(Observable):
    """
    Manages the athletes selected for comparison.

    Every mutation builds a new roster tuple and publishes it to all
    subscribers before returning. Unknown athlete ids never raise: the
    operation just leaves the roster as it is.
    """

    def __init__(self, allocator: ColorPoolAllocator, athletes: Optional[Iterable[AthleteRecord]] = None):
        super().__init__()
        self.allocator = allocator
        self._athletes: Roster = tuple(athletes or ())

    def _snapshot(self) -> Roster:
        return self._athletes

    def _commit(self, athletes: Roster) -> None:
        self._athletes = athletes
        self._publish()

    def _update(self, athlete_id: Any, change: Callable[[AthleteRecord], AthleteRecord]) -> None:
        """Replace the athlete matching athlete_id with change(athlete)"""
        with self._lock:
            self._commit(tuple(
                change(a) if a.id == athlete_id else a
                for a in self._athletes
            ))

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    @property
    def athletes(self) -> Roster:
        """Current roster snapshot"""
        return self._athletes

    def get(self, athlete_id: Any) -> Optional[AthleteRecord]:
        return next((a for a in self._athletes if a.id == athlete_id), None)

    def is_visible(self, athlete_id: Any) -> bool:
        """Visibility of the athlete, or False if it is not in the roster"""
        athlete = self.get(athlete_id)
        return athlete.visible if athlete is not None else False

    def visible_athletes(self) -> List[AthleteRecord]:
        return [a for a in self._athletes if a.visible]

    def __len__(self) -> int:
        return len(self._athletes)

    def __iter__(self) -> Iterator[AthleteRecord]:
        return iter(self._athletes)

    def __contains__(self, athlete_id: Any) -> bool:
        return self.get(athlete_id) is not None

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def set_athletes(self, athletes: Iterable[AthleteRecord]) -> None:
        """
        Replace the roster wholesale.

        No colors are allocated: the athletes must already carry theirs
        (e.g. when restoring a saved selection).
        """
        with self._lock:
            self._commit(tuple(athletes))

    def add_athlete(self, data: Union[Mapping[str, Any], AthleteRecord]) -> None:
        """
        Append an athlete with a newly allocated color.

        Adding an id that is already in the roster does nothing and consumes
        no color.

        Args:
            data: Mapping with an "id" key plus any display fields, or an
                AthleteRecord whose id and extra fields are reused
        """
        if isinstance(data, AthleteRecord):
            data = dict(data.extra, id=data.id)

        with self._lock:
            if any(a.id == data["id"] for a in self._athletes):
                return
            athlete = AthleteRecord.from_data(data, self.allocator.allocate())
            self._commit(self._athletes + (athlete,))

    def remove_athlete(self, athlete_id: Any) -> None:
        """Remove the athlete and give its color back to the pool"""
        with self._lock:
            athlete = self.get(athlete_id)
            if athlete is not None:
                self.allocator.release(athlete.color)
            self._commit(tuple(a for a in self._athletes if a.id != athlete_id))

    def set_loading(self, athlete_id: Any, is_loading: bool) -> None:
        self._update(athlete_id, lambda a: a.with_loading(is_loading))

    def set_records(self, athlete_id: Any, records: List[Any]) -> None:
        """Store the athlete's records; this also ends its loading state"""
        self._update(athlete_id, lambda a: a.with_records(records))

    def set_all_invisible(self) -> None:
        with self._lock:
            self._commit(tuple(a.with_visible(False) for a in self._athletes))

    def toggle_visible(self, athlete_id: Any) -> None:
        self._update(athlete_id, lambda a: a.with_visible(not a.visible))

    def reset(self) -> None:
        """Empty the roster and mark every color as unused"""
        with self._lock:
            self.allocator.reset()
            self._commit(())
