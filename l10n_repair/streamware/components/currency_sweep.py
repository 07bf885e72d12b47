"""
Currency Sweep Component - group raw amounts next to the currency marker

``19,99€`` / ``€1234.5`` become ``19,99 €`` / ``1.234,5 €``. The output puts
a space between number and marker, so it never matches the trigger again.
"""

import re
from typing import Any

from ..core import TransformComponent
from ..uri import StreamwareURI
from ..registry import register
from ..exceptions import ComponentError
from ...config import config
from ...diagnostics import get_logger
from ...formatting import NumberParseError, format_number, parse_number
from ...report import ScanReport
from ...traversal import query_elements
from ...tree import Node

logger = get_logger(__name__)


@register("currency-sweep")
class CurrencySweepComponent(TransformComponent):
    """
    Reformat unformatted amounts in elements carrying the currency marker
    
    URI: currency-sweep://format?marker=€&locale=de-DE
    """
    
    def __init__(self, uri: StreamwareURI, **context: Any):
        super().__init__(uri, **context)
        self.marker = str(uri.get_param('marker', config.currency_marker))
        self.locale = uri.get_param('locale', config.locale)
        marker = re.escape(self.marker)
        # marker glued to a digit on either side, optionally "€,99"
        self.raw_amount = re.compile(rf"{marker},?\d|\d{marker}")
        self.trailing_marker = re.compile(rf"\d{marker}")
        
    def transform(self, data: Any) -> ScanReport:
        if not isinstance(data, Node):
            raise ComponentError(f"currency-sweep expects a tree node, got {type(data).__name__}", scheme="currency-sweep")
            
        report = ScanReport()
        # materialise before mutating: rewriting text replaces children
        candidates = list(query_elements(data, self.marker))
        for element in candidates:
            if not element.is_descendant_of(data):
                continue
            report.scanned += 1
            try:
                self._rewrite(element, report)
            except Exception as e:
                logger.error(f"Currency rewrite failed for {element!r}: {e}")
                report.failed += 1
        return report
        
    def _rewrite(self, element, report: ScanReport):
        text = element.text
        if not self.raw_amount.search(text):
            return
        try:
            # amounts written before the marker are German notation: dots group
            amount = parse_number(
                text.replace(self.marker, ""),
                dots_group=bool(self.trailing_marker.search(text)),
            )
        except NumberParseError:
            logger.debug(f"Leaving {text!r} unchanged: no plain amount next to {self.marker}")
            return
        rewritten = f"{format_number(amount, self.locale)} {self.marker}"
        logger.debug(f"currency: {text!r} -> {rewritten!r}")
        element.text = rewritten
        report.rewritten += 1
        report.kinds["currency"] += 1
