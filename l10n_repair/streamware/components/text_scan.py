"""
Text Scan Component - classify every text leaf of a subtree, then rewrite

Two full passes: the walk only classifies and collects, rewrites happen
after the walk has finished so that the enumeration never sees its own
output and a half-rewritten leaf is never classified again in the same pass.
"""

from datetime import date
from typing import Any, Callable, List, Optional, Sequence, Tuple

from ..core import TransformComponent
from ..uri import StreamwareURI
from ..registry import register
from ..exceptions import ComponentError
from ...classifiers import ClassificationResult, Classifier, classify, default_classifiers
from ...config import config
from ...dictionary import Dictionary
from ...diagnostics import get_logger
from ...report import ScanReport
from ...traversal import iter_text_leaves, is_rendered_text
from ...tree import Node, TextLeaf

logger = get_logger(__name__)


@register("text-scan")
class TextScanComponent(TransformComponent):
    """
    Rewrite dates and mistranslated labels in text leaves
    
    URI: text-scan://repair?locale=de-DE&duration_marker=Wochen
    
    Context:
        classifiers: explicit priority chain (overrides the defaults)
        dictionary: phrase table for the default chain
        today: clock used to default the year of short dates
    """
    
    def __init__(self, uri: StreamwareURI, classifiers: Optional[Sequence[Classifier]] = None,
                 dictionary: Optional[Dictionary] = None,
                 today: Callable[[], date] = date.today, **context: Any):
        super().__init__(uri, **context)
        if classifiers is None:
            if dictionary is None:
                raise ComponentError("text-scan needs either 'classifiers' or 'dictionary'", scheme="text-scan")
            classifiers = default_classifiers(
                dictionary,
                locale=uri.get_param('locale', config.locale),
                duration_marker=uri.get_param('duration_marker', config.duration_marker),
                today=today,
            )
        self.classifiers: List[Classifier] = list(classifiers)
        
    def transform(self, data: Any) -> ScanReport:
        if not isinstance(data, Node):
            raise ComponentError(f"text-scan expects a tree node, got {type(data).__name__}", scheme="text-scan")
            
        report = ScanReport()
        accepted = self._classify_leaves(data, report)
        self._apply(accepted, report)
        return report
        
    def _classify_leaves(self, root: Node, report: ScanReport) -> List[Tuple[TextLeaf, ClassificationResult]]:
        accepted = []
        for leaf in iter_text_leaves(root, is_rendered_text):
            report.scanned += 1
            try:
                result = classify(leaf.data, self.classifiers)
            except Exception as e:
                logger.error(f"Classification failed for {leaf!r}: {e}")
                report.failed += 1
                continue
            if result is not None:
                accepted.append((leaf, result))
        return accepted
        
    def _apply(self, accepted: List[Tuple[TextLeaf, ClassificationResult]], report: ScanReport):
        for leaf, result in accepted:
            try:
                rewritten = result.apply(leaf.data)
            except Exception as e:
                logger.error(f"Rewrite '{result.kind}' failed for {leaf!r}: {e}")
                report.failed += 1
                continue
            if rewritten == leaf.data:
                continue
            logger.debug(f"{result.kind}: {leaf.data!r} -> {rewritten!r}")
            leaf.data = rewritten
            report.rewritten += 1
            report.kinds[result.kind] += 1
