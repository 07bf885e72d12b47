"""
Change feed: turns tree mutations into queued batches.

Records reported while a batch is being processed land in the pending list
and only become the *next* batch on flush(), so a batch never observes the
rewrites it causes itself.
"""

from queue import Empty, Queue
from typing import List, Optional

from .diagnostics import get_logger
from .tree import ChangeRecord, Document, Node

logger = get_logger(__name__)


class ChangeFeed:
    def __init__(self, document: Document):
        self.document = document
        self._root: Optional[Node] = None
        self._pending: List[ChangeRecord] = []
        self._batches: "Queue[List[ChangeRecord]]" = Queue()

    @property
    def observing(self) -> bool:
        return self._root is not None

    def observe(self, root: Optional[Node] = None):
        """Watch ``root`` (default: the document's root container) and its descendants."""
        if self.observing:
            self.disconnect()
        self._root = root if root is not None else self.document.body
        self.document.add_observer(self._record)
        logger.debug(f"Observing {self._root!r}")

    def disconnect(self):
        self.document.remove_observer(self._record)
        self._root = None
        self._pending = []

    def _record(self, record: ChangeRecord):
        if self._root is not None and record.target.is_descendant_of(self._root):
            self._pending.append(record)

    def take_records(self) -> List[ChangeRecord]:
        """Drain pending records without queueing them."""
        records, self._pending = self._pending, []
        return records

    def flush(self) -> int:
        """Queue pending records as one batch; returns the batch size."""
        records = self.take_records()
        if records:
            self._batches.put(records)
        return len(records)

    def next_batch(self) -> Optional[List[ChangeRecord]]:
        try:
            return self._batches.get_nowait()
        except Empty:
            return None

    @property
    def pending(self) -> int:
        return len(self._pending)
