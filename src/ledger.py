"""In-memory ledger: receipt id -> points."""

import threading
import uuid
from typing import Callable


def new_receipt_id() -> str:
    """Random UUID4 as text."""
    return str(uuid.uuid4())


class Ledger:
    """
    Thread-safe store of scored receipts.
    Entries are written once and never evicted; the ledger lives as long as its owner.
    """

    def __init__(self, id_factory: Callable[[], str] = new_receipt_id):
        self._id_factory = id_factory
        self._points: dict[str, int] = {}
        self._lock = threading.Lock()

    def record(self, points: int) -> str:
        """Store points under a freshly generated id and return the id."""
        with self._lock:
            receipt_id = self._id_factory()
            while receipt_id in self._points:
                receipt_id = self._id_factory()
            self._points[receipt_id] = points
        return receipt_id

    def lookup(self, receipt_id: str) -> int | None:
        """Points stored for receipt_id, or None if the id was never issued."""
        with self._lock:
            return self._points.get(receipt_id)

    def __contains__(self, receipt_id: object) -> bool:
        with self._lock:
            return receipt_id in self._points

    def __len__(self) -> int:
        with self._lock:
            return len(self._points)
