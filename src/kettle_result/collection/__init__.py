"""Collection: ordered associative container with Option/Result accessors."""

from kettle_result.collection.collection import Collection
from kettle_result.collection.iterator import CollectionIter

__all__ = [
    'Collection',
    'CollectionIter',
]
