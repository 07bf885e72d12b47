"""
Usability Fix Component - keep the page clickable

The third-party widget sets ``pointer-events: none`` on the body while its
dialogs are open and sometimes never clears it.
"""

from typing import Any, Optional

from ..core import Component
from ..uri import StreamwareURI
from ..registry import register
from ..exceptions import ComponentError
from ...config import config
from ...diagnostics import get_logger
from ...tree import ChangeKind, ChangeRecord, Document, Element

logger = get_logger(__name__)


@register("usability-fix")
class UsabilityFixComponent(Component):
    """
    Remove a blocking inline style property from the root container
    
    URI: usability-fix://style?property=pointer-events
    
    Input: one ChangeRecord. Output: True when the property was removed.
    """
    
    def __init__(self, uri: StreamwareURI, document: Optional[Document] = None, **context: Any):
        super().__init__(uri, **context)
        self.document = document
        self.property = uri.get_param('property', config.blocking_style_property)
        
    def process(self, data: Any) -> bool:
        if not isinstance(data, ChangeRecord):
            raise ComponentError(f"usability-fix expects a ChangeRecord, got {type(data).__name__}", scheme="usability-fix")
        if not self.triggers(data):
            return False
        removed = data.target.style.remove_property(self.property)
        if removed is None:
            return False
        logger.info(f"Removed '{self.property}: {removed}' from <{data.target.tag}>")
        return True
        
    def triggers(self, record: ChangeRecord) -> bool:
        if record.kind != ChangeKind.ATTRIBUTES or record.attribute_name != "style":
            return False
        if not isinstance(record.target, Element):
            return False
        document = self.document or record.target.document
        return document is not None and record.target is document.body
