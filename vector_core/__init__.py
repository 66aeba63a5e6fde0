"""
Vector Core: a small in-memory vector store with Euclidean nearest-neighbor search.
"""

import logging

from vector_core.distance import euclidean, euclidean_strict, DimensionMismatchError
from vector_core.store import (
    LinearVectorStore,
    VectorStoreFactory,
    create_vector_store,
    VectorStoreError,
    VectorStoreOperationError,
    VectorStoreDimensionError,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "euclidean",
    "euclidean_strict",
    "DimensionMismatchError",
    "LinearVectorStore",
    "VectorStoreFactory",
    "create_vector_store",
    "VectorStoreError",
    "VectorStoreOperationError",
    "VectorStoreDimensionError",
]
