"""
StreamwareURI - URI parsing and handling for component routing
"""

from typing import Any
from urllib.parse import urlparse, parse_qs, unquote
from .exceptions import URIError


class StreamwareURI:
    """
    Parse and handle Streamware URIs
    
    Format: scheme://operation?param1=value1&param2=value2
    
    Examples:
        text-scan://repair
        currency-sweep://format?marker=€&locale=de-DE
        usability-fix://style?property=pointer-events
    """
    
    def __init__(self, uri: str):
        self.original = uri
        self._parse(uri)
        
    def _parse(self, uri: str):
        """Parse URI into components"""
        if "://" not in uri:
            raise URIError(f"Invalid URI format: {uri}")
        try:
            parsed = urlparse(uri)
        except ValueError as e:
            raise URIError(f"Invalid URI format: {uri}") from e

        self.scheme = parsed.scheme
        if not self.scheme:
            raise URIError(f"Missing scheme in URI: {uri}")
        self.netloc = parsed.netloc
        self.path = parsed.path.lstrip('/')
        # Operation can be netloc (scheme://op?...) or path (scheme:///op?...)
        self.operation = self.netloc or self.path or None

        self.params = {}
        if parsed.query:
            query_params = parse_qs(parsed.query)
            # Flatten single-value lists
            for key, values in query_params.items():
                if len(values) == 1:
                    self.params[key] = self._convert_value(unquote(values[0]))
                else:
                    self.params[key] = [unquote(v) for v in values]
            
    def _convert_value(self, value: str) -> Any:
        """Convert string value to appropriate type"""
        if value.lower() in ('true', 'yes'):
            return True
        elif value.lower() in ('false', 'no'):
            return False
            
        try:
            return int(value)
        except ValueError:
            pass
            
        return value
        
    def get_param(self, key: str, default: Any = None) -> Any:
        """Get parameter value with default"""
        return self.params.get(key, default)
        
    def has_param(self, key: str) -> bool:
        """Check if parameter exists"""
        return key in self.params
        
    def __str__(self) -> str:
        return self.original
        
    def __repr__(self) -> str:
        return f"StreamwareURI('{self.original}')"
