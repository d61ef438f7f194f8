"""
Base Repository Class
Provides common in-memory collection operations for all repositories
"""

import threading
from typing import Any, Dict, List, Optional

from ..config.logger import LoggerMixin


class BaseRepository(LoggerMixin):
    """
    Base class for in-memory repositories

    Provides:
    - Named, insertion-ordered collections of dict records
    - Linear-scan lookups by id or by field
    - Write primitives (append, replace, remove)
    - A re-entrant lock guarding every collection access
    """

    def __init__(self, collections: Optional[Dict[str, List[Dict]]] = None):
        """
        Initialize base repository

        Args:
            collections: Mapping of collection name to its initial records
        """
        self.lock = threading.RLock()
        self._collections: Dict[str, List[Dict]] = {}
        for name, records in (collections or {}).items():
            self._collections[name] = list(records)
        self.log_info(
            f"Initialized {self.__class__.__name__} repository",
            collections=sorted(self._collections)
        )

    def _collection(self, name: str) -> List[Dict]:
        try:
            return self._collections[name]
        except KeyError:
            raise KeyError(f"Unknown collection: {name}") from None

    # ============================================
    # READ OPERATIONS
    # ============================================

    def find_all(self, collection: str) -> List[Dict]:
        """
        Get all records of a collection

        Args:
            collection: Collection name

        Returns:
            Snapshot of the records in insertion order
        """
        with self.lock:
            return list(self._collection(collection))

    def find_by_id(self, collection: str, id: Any) -> Optional[Dict]:
        """
        Find record by ID

        The first record in insertion order wins if ids repeat.

        Args:
            collection: Collection name
            id: Record ID

        Returns:
            Record dictionary or None
        """
        with self.lock:
            for record in self._collection(collection):
                if record.get('id') == id:
                    return record
        return None

    def find_where(self, collection: str, field: str, value: Any) -> List[Dict]:
        """
        Find all records whose field equals value

        Args:
            collection: Collection name
            field: Field to compare
            value: Expected value

        Returns:
            Matching records in insertion order
        """
        with self.lock:
            return [r for r in self._collection(collection) if r.get(field) == value]

    def count(self, collection: str) -> int:
        """Count records in a collection"""
        with self.lock:
            return len(self._collection(collection))

    def exists(self, collection: str, id: Any) -> bool:
        """Check whether a record with the given id exists"""
        return self.find_by_id(collection, id) is not None

    # ============================================
    # WRITE OPERATIONS
    # ============================================

    def append(self, collection: str, record: Dict) -> Dict:
        """
        Append record to the end of a collection

        Args:
            collection: Collection name
            record: Record data

        Returns:
            The stored record
        """
        with self.lock:
            self._collection(collection).append(record)
        self.log_debug(f"Appended record {record.get('id')} to {collection}")
        return record

    def replace(self, collection: str, id: Any, record: Dict) -> bool:
        """
        Replace the first record with the given id, keeping its position

        Args:
            collection: Collection name
            id: Record ID
            record: New record data

        Returns:
            True if a record was replaced
        """
        with self.lock:
            records = self._collection(collection)
            for index, existing in enumerate(records):
                if existing.get('id') == id:
                    records[index] = record
                    self.log_debug(f"Replaced record {id} in {collection}")
                    return True
        return False

    def remove(self, collection: str, id: Any) -> int:
        """
        Remove every record with the given id

        Args:
            collection: Collection name
            id: Record ID

        Returns:
            Number of removed records
        """
        with self.lock:
            records = self._collection(collection)
            kept = [r for r in records if r.get('id') != id]
            removed = len(records) - len(kept)
            records[:] = kept

        if removed:
            self.log_debug(f"Removed {removed} record(s) with id {id} from {collection}")
        return removed
