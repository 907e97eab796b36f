from .exceptions import (
    EngineException,
    InvalidArgumentError,
    EmptyCollectionError,
    IndexOutOfBoundsError,
)
from .interfaces import IndexStore, OrderedContainer, NavigableHistory

__all__ = [
    "EngineException",
    "InvalidArgumentError",
    "EmptyCollectionError",
    "IndexOutOfBoundsError",
    "IndexStore",
    "OrderedContainer",
    "NavigableHistory",
]
