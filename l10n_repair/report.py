from collections import Counter
from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass
class ScanReport:
    """Counters for one pass over one subtree"""
    scanned: int = 0
    rewritten: int = 0
    failed: int = 0
    kinds: Counter = field(default_factory=Counter)

    @property
    def changed(self) -> bool:
        return self.rewritten > 0

    def merge(self, other: "ScanReport") -> "ScanReport":
        self.scanned += other.scanned
        self.rewritten += other.rewritten
        self.failed += other.failed
        self.kinds.update(other.kinds)
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "scanned": self.scanned,
            "rewritten": self.rewritten,
            "failed": self.failed,
            "kinds": dict(self.kinds),
        }


@dataclass
class BatchReport:
    """Aggregate of one dispatched batch of change records"""
    records: int = 0
    text: ScanReport = field(default_factory=ScanReport)
    currency: ScanReport = field(default_factory=ScanReport)
    usability_fixes: int = 0
    failed_records: int = 0

    @property
    def changed(self) -> bool:
        return self.text.changed or self.currency.changed or self.usability_fixes > 0

    def merge(self, other: "BatchReport") -> "BatchReport":
        self.records += other.records
        self.text.merge(other.text)
        self.currency.merge(other.currency)
        self.usability_fixes += other.usability_fixes
        self.failed_records += other.failed_records
        return self

    def to_dict(self) -> Dict[str, Any]:
        return {
            "records": self.records,
            "text": self.text.to_dict(),
            "currency": self.currency.to_dict(),
            "usability_fixes": self.usability_fixes,
            "failed_records": self.failed_records,
        }
