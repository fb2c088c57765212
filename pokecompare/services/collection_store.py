import logging
import threading

from pokecompare.models import CollectionName

logger = logging.getLogger(__name__)


class CollectionStore:
    """
    In-memory favorites/comparisons lists. Each list keeps insertion order and
    holds an identifier at most once. Nothing survives a process restart.

    Every collection has its own lock, so adds coming from FastAPI's threadpool
    cannot interleave and break the dedup check.
    """

    def __init__(self):
        self._items: dict[CollectionName, list[str]] = {name: [] for name in CollectionName}
        self._locks = {name: threading.Lock() for name in CollectionName}

    def add(self, name: CollectionName, identifier: str) -> list[str]:
        name = CollectionName(name)
        if not identifier:
            raise ValueError("Collection entries must be non-empty strings.")

        with self._locks[name]:
            items = self._items[name]
            # Exact match only: "Pikachu", "pikachu" and "25" are different entries
            if identifier not in items:
                items.append(identifier)
                logger.info(f"Added '{identifier}' to {name.value}")
            return list(items)

    def list(self, name: CollectionName) -> list[str]:
        name = CollectionName(name)
        with self._locks[name]:
            return list(self._items[name])
