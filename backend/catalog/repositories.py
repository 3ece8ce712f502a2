"""In-memory material store.

The store owns the authoritative collection of materials and assigns
identity. One instance lives for the lifetime of the application and is
passed to handlers explicitly; there is no module-level store.
"""

import logging
import threading
from datetime import datetime, timezone
from typing import Dict, Iterable, List, Optional

from . import models

logger = logging.getLogger("catalog.store")


class MaterialStore:
    """Thread-safe collection of `Material` records keyed by id.

    Mutations (`insert`, `increment_downloads`) and read snapshots are
    serialized by a single lock. Records handed out are copies, so
    callers cannot change stored state behind the store's back.
    """
    def __init__(self, initial: Optional[Iterable[models.MaterialDraft]] = None):
        self._materials: Dict[int, models.Material] = {}
        self._next_id = 1
        self._lock = threading.Lock()
        for draft in initial or ():
            self.insert(draft)

    def insert(self, draft: models.MaterialDraft) -> models.Material:
        """Persist a draft and return the stored record.

        Assigns the next sequential id, zero downloads and the current
        UTC time. Empty optional fields are stored as `None`.
        """
        data = draft.model_dump(exclude={"id", "downloads", "created_at"})
        for key in ("year_level", "author", "institution"):
            if not data.get(key):
                data[key] = None
        data["featured"] = data.get("featured") is True
        with self._lock:
            material_id = self._next_id
            self._next_id += 1
            material = models.Material(
                **data,
                id=material_id,
                downloads=0,
                created_at=datetime.now(timezone.utc),
            )
            self._materials[material_id] = material
        logger.info("material_created id=%s category=%s subject=%s", material_id, material.category, material.subject)
        return material.model_copy()

    def get_by_id(self, material_id: int) -> Optional[models.Material]:
        """Return a material by id or `None` if unknown."""
        with self._lock:
            material = self._materials.get(material_id)
            return material.model_copy() if material else None

    def get_all(self) -> List[models.Material]:
        """Return a snapshot of every material in insertion order."""
        with self._lock:
            return [m.model_copy() for m in self._materials.values()]

    def increment_downloads(self, material_id: int) -> Optional[models.Material]:
        """Add exactly one download to a material.

        Returns the updated record, or `None` if the id is unknown.
        """
        with self._lock:
            current = self._materials.get(material_id)
            if current is None:
                return None
            updated = current.model_copy(update={"downloads": current.downloads + 1})
            self._materials[material_id] = updated
        logger.debug("download_recorded id=%s downloads=%s", material_id, updated.downloads)
        return updated.model_copy()

    def count(self) -> int:
        with self._lock:
            return len(self._materials)
