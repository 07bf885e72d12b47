"""
Errors raised by the repair component layer

Per-leaf and per-record failures are logged and counted by the passes
themselves; these exceptions cover misuse of a pass or of its address.
"""

from typing import Optional


class StreamwareError(Exception):
    """Base for errors of the repair component layer"""


class ComponentError(StreamwareError):
    """A repair pass was built without its collaborators or fed the wrong input"""

    def __init__(self, message: str, scheme: Optional[str] = None):
        super().__init__(message)
        self.scheme = scheme


class ValidationError(StreamwareError):
    """A change batch held something other than change records"""


class URIError(StreamwareError):
    """A pass address is not of the form scheme://operation?params"""


class RegistryError(StreamwareError):
    """No pass is registered under the requested scheme"""
