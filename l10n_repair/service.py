"""
RepairService - owns the dictionary, the change feed and the worker loop.
"""

from datetime import date
from typing import Callable, Optional

from .config import Config, config as default_config
from .diagnostics import get_logger
from .dictionary import Dictionary, build_dictionary
from .dispatcher import Dispatcher
from .feed import ChangeFeed
from .report import BatchReport
from .tree import Document

logger = get_logger(__name__)


class RepairService:
    """
    Keep a document repaired while something else keeps re-rendering it.

    Usage:
        service = RepairService(document)
        service.start()          # observe + initial full repair
        widget.render(document)  # third-party mutations
        service.run_until_idle()
    """

    def __init__(self, document: Document, config: Optional[Config] = None,
                 dictionary: Optional[Dictionary] = None,
                 today: Callable[[], date] = date.today):
        self.document = document
        self.config = config or default_config
        # built once, shared read-only by every pass
        self.dictionary = dictionary if dictionary is not None else build_dictionary(self.config.dictionary_path)
        self.feed = ChangeFeed(document)
        self.dispatcher = Dispatcher(document, self.dictionary, self.config, today=today)
        self.totals = BatchReport()
        self.batches = 0

    def start(self) -> BatchReport:
        """Observe the root container, then repair the whole document once."""
        self.feed.observe(self.document.body)
        report = self.dispatcher.repair(self.document.root)
        self.totals.merge(report)
        logger.info(
            f"Initial repair: {report.text.rewritten} text, {report.currency.rewritten} currency rewrites"
        )
        return report

    def stop(self):
        self.feed.disconnect()

    def run_once(self) -> Optional[BatchReport]:
        """Dispatch the next batch, None when the feed is idle."""
        self.feed.flush()
        batch = self.feed.next_batch()
        if batch is None:
            return None
        report = self.dispatcher.dispatch(batch)
        self.batches += 1
        self.totals.merge(report)
        logger.debug(f"Batch {self.batches}: {len(batch)} records, changed={report.changed}")
        return report

    def run_until_idle(self) -> int:
        """Worker loop; returns the number of batches processed."""
        processed = 0
        while processed < self.config.max_batches:
            if self.run_once() is None:
                return processed
            processed += 1
        logger.warning(
            f"Stopped after {processed} batches with {self.feed.pending} records pending; "
            "a rewrite keeps re-triggering itself"
        )
        return processed
