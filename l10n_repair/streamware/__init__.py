"""
Streamware - URI-addressed components for the repair passes

Each pass (text scan, currency sweep, usability fix) is a component looked
up by scheme and configured through URI parameters.
"""

from .core import Component, TransformComponent
from .uri import StreamwareURI
from .exceptions import (
    StreamwareError,
    ComponentError,
    ValidationError,
    URIError,
    RegistryError,
)
from .registry import register, get_component, list_components, list_schemes, create_component, unregister

# Auto-register built-in components
from .components import TextScanComponent, CurrencySweepComponent, UsabilityFixComponent

__all__ = [
    # Core classes
    "Component",
    "TransformComponent",
    "StreamwareURI",
    
    # Exceptions
    "StreamwareError",
    "ComponentError",
    "ValidationError",
    "URIError",
    "RegistryError",
    
    # Registry
    "register",
    "get_component",
    "list_components",
    "list_schemes",
    "create_component",
    "unregister",
    
    # Components
    "TextScanComponent",
    "CurrencySweepComponent",
    "UsabilityFixComponent",
]
