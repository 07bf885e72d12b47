"""
Core component base classes
"""

from abc import ABC, abstractmethod
from typing import Any, Dict
from .uri import StreamwareURI


class Component(ABC):
    """
    Base class for Streamware components
    
    Components process a subtree of the host tree based on URI parameters.
    Collaborators that cannot travel in a URI (dictionary, classifiers,
    document) are passed as keyword arguments at creation time.
    """
    
    def __init__(self, uri: StreamwareURI, **context: Any):
        """
        Initialize component with URI
        
        Args:
            uri: StreamwareURI object with routing info
            context: Extra collaborators for the concrete component
        """
        self.uri = uri
        self.context = context
        
    @abstractmethod
    def process(self, data: Any) -> Any:
        """
        Process input data and return output
        
        Args:
            data: Input data to process
            
        Returns:
            Processed output data
            
        Raises:
            ComponentError: If processing fails
        """
        pass
        
    def get_metadata(self) -> Dict[str, Any]:
        """
        Get component metadata
        
        Returns:
            Dictionary with component info
        """
        return {
            "name": self.__class__.__name__,
            "scheme": self.uri.scheme,
            "operation": self.uri.operation,
            "params": dict(self.uri.params),
        }


class TransformComponent(Component):
    """
    Base class for transformation components
    
    Simpler interface for pure data transformations
    """
    
    @abstractmethod
    def transform(self, data: Any) -> Any:
        """Transform data"""
        pass
        
    def process(self, data: Any) -> Any:
        """Process by calling transform"""
        return self.transform(data)
