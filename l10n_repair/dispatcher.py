"""
Dispatcher - routes change batches to the repair components
"""

from datetime import date
from typing import Callable, Iterable, Optional
from urllib.parse import urlencode

from .config import Config, config as default_config
from .diagnostics import get_logger
from .dictionary import Dictionary
from .report import BatchReport
from .streamware import create_component
from .streamware.exceptions import ValidationError
from .tree import ChangeRecord, Document, Node

logger = get_logger(__name__)


class Dispatcher:
    """
    Route one batch of change records.

    Every record whose subtree has text goes through the text scan and the
    currency sweep; every record, text or not, is offered to the usability
    fix. A failing record is logged and skipped.
    """

    def __init__(self, document: Document, dictionary: Dictionary,
                 config: Optional[Config] = None, today: Callable[[], date] = date.today):
        self.document = document
        self.config = config or default_config
        cfg = self.config
        self.text_scan = create_component(
            "text-scan://repair?" + urlencode({"locale": cfg.locale, "duration_marker": cfg.duration_marker}),
            dictionary=dictionary,
            today=today,
        )
        self.currency_sweep = create_component(
            "currency-sweep://format?" + urlencode({"marker": cfg.currency_marker, "locale": cfg.locale})
        )
        self.usability_fix = create_component(
            "usability-fix://style?" + urlencode({"property": cfg.blocking_style_property}),
            document=document,
        )
        for component in (self.text_scan, self.currency_sweep, self.usability_fix):
            logger.debug(f"Pass ready: {component.get_metadata()}")

    def repair(self, root: Node) -> BatchReport:
        """Text scan then currency sweep over one subtree."""
        report = BatchReport()
        report.text.merge(self.text_scan.process(root))
        report.currency.merge(self.currency_sweep.process(root))
        return report

    def dispatch(self, batch: Iterable[ChangeRecord]) -> BatchReport:
        report = BatchReport()
        for record in batch:
            if not isinstance(record, ChangeRecord):
                raise ValidationError(f"Expected ChangeRecord, got {type(record).__name__}")
            report.records += 1
            try:
                self._dispatch_record(record, report)
            except Exception as e:
                logger.error(f"Failed to handle {record.kind.value} change on {record.target!r}: {e}")
                report.failed_records += 1
        return report

    def _dispatch_record(self, record: ChangeRecord, report: BatchReport):
        root = record.subtree_root
        if root is not None and root.text != "":
            report.merge(self.repair(root))
        if self.usability_fix.process(record):
            report.usability_fixes += 1

    def __call__(self, batch: Iterable[ChangeRecord]) -> BatchReport:
        return self.dispatch(batch)
