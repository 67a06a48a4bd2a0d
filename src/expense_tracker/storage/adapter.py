"""Abstract storage adapter plus the tagged result of a load."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum

from expense_tracker.models.store import ExpenseStore


class LoadStatus(str, Enum):
    LOADED = "loaded"
    ABSENT = "absent"        # first run, nothing saved yet
    MALFORMED = "malformed"  # file exists but could not be parsed


@dataclass
class LoadResult:
    status: LoadStatus
    store: ExpenseStore = field(default_factory=ExpenseStore)
    error: str | None = None


class StorageAdapter(ABC):
    @abstractmethod
    def load(self) -> LoadResult:
        """Load the store, reporting whether it was found, missing or corrupt."""

    @abstractmethod
    def save(self, store: ExpenseStore) -> None:
        """Replace the persisted store with ``store``."""
