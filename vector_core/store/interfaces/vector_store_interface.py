"""
Abstract interface for vector stores.

This module defines the base interface that vector store implementations must
implement. Vectors are addressed by zero-based insertion position; positions
are not stable identifiers and shift down when an earlier vector is removed.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, Optional, Tuple
from enum import Enum
import numpy as np

from vector_core.distance import VectorLike


class VectorStoreType(Enum):
    """Supported vector store types."""
    LINEAR = "linear"


class MetricType(Enum):
    """Supported distance metrics."""
    L2 = "L2"


class VectorStoreInterface(ABC):
    """
    Abstract base class for vector store implementations.

    Out-of-range lookups and queries against an empty store return None
    instead of raising.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the vector store.

        Args:
            config: Store specific configuration dictionary
        """
        self.config = dict(config or {})
        self._name = self.config.get('name', 'default_store')
        self._strict_dimensions = self.config.get('strict_dimensions', False)
        if not isinstance(self._strict_dimensions, bool):
            raise VectorStoreOperationError(
                f"strict_dimensions must be a bool, got {self._strict_dimensions!r}"
            )
        self._metric_type = MetricType.L2

    @property
    def name(self) -> str:
        """Return the store name."""
        return self._name

    @property
    def strict_dimensions(self) -> bool:
        """Return whether length mismatches raise instead of truncating."""
        return self._strict_dimensions

    @property
    def metric_type(self) -> MetricType:
        """Return the distance metric type."""
        return self._metric_type

    @abstractmethod
    def add(self, vector: VectorLike) -> None:
        """
        Append a copy of a vector to the end of the store.

        Args:
            vector: Sequence of numbers
        """
        pass

    @abstractmethod
    def remove(self, index: int) -> Optional[np.ndarray]:
        """
        Remove the vector at a position.

        Args:
            index: Zero-based position

        Returns:
            The removed vector, or None if the index is out of range
        """
        pass

    @abstractmethod
    def get(self, index: int) -> Optional[np.ndarray]:
        """
        Get a read-only view of the vector at a position.

        Args:
            index: Zero-based position

        Returns:
            The stored vector, or None if the index is out of range
        """
        pass

    @abstractmethod
    def nearest(self, query: VectorLike) -> Optional[int]:
        """
        Find the stored vector closest to a query.

        Args:
            query: Query vector

        Returns:
            Index of the nearest vector, or None if the store is empty
        """
        pass

    @abstractmethod
    def nearest_with_distance(self, query: VectorLike) -> Optional[Tuple[int, float]]:
        """
        Find the nearest stored vector and its distance to the query.

        Returns:
            (index, distance) tuple, or None if the store is empty
        """
        pass

    @abstractmethod
    def count(self) -> int:
        """Return the number of stored vectors."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every stored vector."""
        pass

    @abstractmethod
    def __iter__(self) -> Iterator[np.ndarray]:
        pass

    def __len__(self) -> int:
        return self.count()

    def get_store_info(self) -> Dict[str, Any]:
        """
        Get information about the store.

        Returns:
            Dictionary with name, count, distinct dimensions, strictness and metric
        """
        return {
            'name': self.name,
            'count': self.count(),
            'dimensions': sorted({int(vector.shape[0]) for vector in self}),
            'strict_dimensions': self.strict_dimensions,
            'metric': self.metric_type.value,
        }

    def __str__(self) -> str:
        """String representation of the vector store."""
        return f"{self.__class__.__name__}(name={self.name}, count={self.count()})"


class VectorStoreError(Exception):
    """Base exception for vector store related errors."""
    pass


class VectorStoreOperationError(VectorStoreError):
    """Exception raised for malformed input to a store operation."""
    pass


class VectorStoreDimensionError(VectorStoreError):
    """Exception raised for dimension mismatches in strict mode."""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"Vector dimension mismatch: expected {expected}, got {actual}")
        self.expected = expected
        self.actual = actual
