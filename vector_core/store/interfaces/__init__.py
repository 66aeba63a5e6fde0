"""
Interfaces for vector store implementations.
"""

from .vector_store_interface import (
    VectorStoreInterface,
    VectorStoreType,
    MetricType,
    VectorStoreError,
    VectorStoreOperationError,
    VectorStoreDimensionError
)

__all__ = [
    'VectorStoreInterface',
    'VectorStoreType',
    'MetricType',
    'VectorStoreError',
    'VectorStoreOperationError',
    'VectorStoreDimensionError'
]
