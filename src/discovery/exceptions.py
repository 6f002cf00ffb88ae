"""
Custom exceptions for the tool discovery engine.
"""

class DiscoveryError(Exception):
    """Base exception for all discovery-related errors."""
    pass

class CatalogError(DiscoveryError):
    """Raised when the static tool catalog violates its invariants."""
    pass
