"""Food entry list owned by a single calculator session."""

import itertools
import logging
from dataclasses import dataclass, field, replace

from nutrition_calculator.domain.entries import FoodEntry
from nutrition_calculator.domain.nutrition import (
    FoodRecord,
    NutrientSet,
    NutritionTotals,
)
from nutrition_calculator.services.calculator import (
    aggregate,
    clamp_quantity,
    entry_nutrients,
)

_logger = logging.getLogger(__name__)


@dataclass
class FoodEntryList:
    """Ordered, editable list of food entries with running totals.

    Entry ids come from a per-list counter and are never reused, so a
    removed row can't collide with one added later.
    """

    _entries: list[FoodEntry] = field(default_factory=list)
    _ids: "itertools.count[int]" = field(default_factory=lambda: itertools.count(1))
    _totals: NutritionTotals = field(default_factory=NutrientSet)

    @property
    def entries(self) -> list[FoodEntry]:
        """Return a snapshot of entries in insertion order."""
        return list(self._entries)

    @property
    def totals(self) -> NutritionTotals:
        """Return totals as of the latest change."""
        return self._totals

    def get_entry(self, entry_id: int) -> FoodEntry | None:
        """Return an entry by id, if present."""
        index = self._index_of(entry_id)
        if index is None:
            return None
        return self._entries[index]

    def nutrients_for(self, entry_id: int) -> NutrientSet | None:
        """Return the scaled nutrients of one entry."""
        entry = self.get_entry(entry_id)
        if entry is None:
            return None
        return entry_nutrients(entry)

    def add_entry(self) -> FoodEntry:
        """Append an empty entry and return it."""
        entry = FoodEntry(id=next(self._ids))
        self._entries.append(entry)
        self._recompute()
        return entry

    def remove_entry(self, entry_id: int) -> bool:
        """Remove an entry; return False when the id is unknown."""
        index = self._index_of(entry_id)
        if index is None:
            _logger.debug("Remove ignored, no entry with id=%s", entry_id)
            return False
        del self._entries[index]
        self._recompute()
        return True

    def set_entry_food(
        self, entry_id: int, food: FoodRecord | None
    ) -> FoodEntry | None:
        """Assign or clear the food of an entry, keeping its quantity."""
        return self._update(entry_id, food=food)

    def set_entry_quantity(self, entry_id: int, quantity: float) -> FoodEntry | None:
        """Store a clamped quantity in grams on an entry."""
        return self._update(entry_id, quantity=clamp_quantity(quantity))

    def _update(self, entry_id: int, **changes: object) -> FoodEntry | None:
        index = self._index_of(entry_id)
        if index is None:
            _logger.debug("Update ignored, no entry with id=%s", entry_id)
            return None
        updated = replace(self._entries[index], **changes)
        self._entries[index] = updated
        self._recompute()
        return updated

    def _index_of(self, entry_id: int) -> int | None:
        for index, entry in enumerate(self._entries):
            if entry.id == entry_id:
                return index
        return None

    def _recompute(self) -> None:
        self._totals = aggregate(self._entries)
