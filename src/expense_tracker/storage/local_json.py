"""Local JSON file storage, rewritten whole on every save."""

import json
import logging
import os
import tempfile
from pathlib import Path

from pydantic import ValidationError

from expense_tracker.config import store_path
from expense_tracker.models.store import ExpenseStore
from expense_tracker.storage.adapter import LoadResult, LoadStatus, StorageAdapter

logger = logging.getLogger(__name__)


def _write_json_atomic(path: Path, data: dict) -> None:
    """Write to a sibling temp file, then rename it over ``path``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)
            f.write("\n")
        os.chmod(tmp_name, 0o644)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


class LocalJsonStorage(StorageAdapter):
    def __init__(self, path: Path | None = None):
        self.path = Path(path) if path else store_path()

    def load(self) -> LoadResult:
        if not self.path.exists():
            logger.debug("No store at %s, starting empty", self.path)
            return LoadResult(LoadStatus.ABSENT)

        with open(self.path, "rb") as f:
            raw = f.read()

        try:
            store = ExpenseStore.model_validate_json(raw)
        except ValidationError as e:
            logger.warning("Could not parse %s: %s", self.path, e)
            return LoadResult(LoadStatus.MALFORMED, error=str(e))

        logger.debug("Loaded %d expenses from %s", len(store.expenses), self.path)
        return LoadResult(LoadStatus.LOADED, store=store)

    def save(self, store: ExpenseStore) -> None:
        # model_dump keeps field declaration order, so keys are stable
        _write_json_atomic(self.path, store.model_dump(mode="json"))
        logger.debug("Saved %d expenses to %s", len(store.expenses), self.path)
