"""
In-memory record store for people.

``PersonStore`` keeps ``PersonRead`` records keyed by identifier in an
insertion-ordered dict.  Every operation takes the store lock, so
reads never observe a half-applied write and concurrent writers cannot
lose updates.  Records are copied on the way in and on the way out;
callers never hold a reference to stored state.

The module also owns the process-wide store instance (``get_store``)
and its (re)initialisation with the seed set (``init_store``), which
the application calls on startup.  Swapping this module for another
key-value backend only requires keeping the ``PersonStore`` interface.
"""

import logging
import threading
from typing import Dict, List, Optional

from .config import settings
from .exceptions import DuplicateKeyError, NotFoundError
from .seed import seed_people
from people_api.app.schemas.person import PersonRead

logger = logging.getLogger(__name__)


class PersonStore:
    """Thread-safe map of identifier to person record."""

    def __init__(self) -> None:
        self._records: Dict[str, PersonRead] = {}
        self._lock = threading.RLock()

    def get_all(self) -> List[PersonRead]:
        with self._lock:
            return [record.model_copy() for record in self._records.values()]

    def get_by_key(self, identifier: str) -> Optional[PersonRead]:
        with self._lock:
            record = self._records.get(identifier)
            return record.model_copy() if record is not None else None

    def insert(self, person: PersonRead) -> PersonRead:
        """Add ``person``; raise ``DuplicateKeyError`` if its identifier exists."""
        with self._lock:
            if person.identifier in self._records:
                raise DuplicateKeyError(f"Person with identifier '{person.identifier}' already exists.")
            self._records[person.identifier] = person.model_copy()
            return person.model_copy()

    def replace(self, identifier: str, person: PersonRead) -> PersonRead:
        """Overwrite every field of the record stored under ``identifier``.

        The record keeps its position in insertion order.  Callers are
        responsible for ensuring ``person.identifier == identifier``.
        """
        with self._lock:
            if identifier not in self._records:
                raise NotFoundError(f"Person with identifier '{identifier}' not found.")
            self._records[identifier] = person.model_copy()
            return person.model_copy()

    def remove(self, identifier: str) -> None:
        with self._lock:
            if identifier not in self._records:
                raise NotFoundError(f"Person with identifier '{identifier}' not found.")
            del self._records[identifier]

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def load(self, people: List[PersonRead]) -> None:
        """Insert many records in order (used for seeding)."""
        with self._lock:
            for person in people:
                self.insert(person)


_store: Optional[PersonStore] = None
_store_lock = threading.RLock()


def init_store(seed: Optional[bool] = None) -> PersonStore:
    """Create a fresh process-wide store, seeding it when requested.

    ``seed`` defaults to ``settings.seed_data``.  Any previously
    created store is discarded.
    """
    global _store
    if seed is None:
        seed = settings.seed_data
    store = PersonStore()
    if seed:
        store.load([PersonRead(**row) for row in seed_people()])
    with _store_lock:
        _store = store
    logger.info("Initialised person store with %s records", store.count())
    return store


def get_store() -> PersonStore:
    """Return the process-wide store, creating it on first use."""
    with _store_lock:
        if _store is None:
            init_store()
        return _store
