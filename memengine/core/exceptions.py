"""Custom exceptions for the engine's data structures."""


class EngineException(Exception):
    """Base exception for data-structure errors."""
    pass


class InvalidArgumentError(EngineException, ValueError):
    """Raised when a key or argument is forbidden (e.g. a None key)."""
    pass


class EmptyCollectionError(EngineException, LookupError):
    """Raised when popping or peeking an empty container."""
    pass


class IndexOutOfBoundsError(EngineException, IndexError):
    """Raised when a coordinate or position falls outside the valid range."""
    pass
