"""
Built-in components, registered on import
"""

from .text_scan import TextScanComponent
from .currency_sweep import CurrencySweepComponent
from .usability import UsabilityFixComponent

__all__ = [
    "TextScanComponent",
    "CurrencySweepComponent",
    "UsabilityFixComponent",
]
