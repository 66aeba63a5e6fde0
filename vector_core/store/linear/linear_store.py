"""
Linear-scan vector store implementation.

This module provides an in-memory vector store that keeps vectors as NumPy
arrays in insertion order and answers nearest-neighbor queries with a full
scan under Euclidean distance. It has no index structure and no internal
locking; callers sharing a store across threads must guard it themselves.
"""

import logging
import operator
from typing import Any, Dict, Iterator, List, Optional, Tuple

import numpy as np

from vector_core.distance import euclidean, VectorLike
from vector_core.store.interfaces import (
    VectorStoreInterface,
    VectorStoreOperationError,
    VectorStoreDimensionError,
)


class LinearVectorStore(VectorStoreInterface):
    """
    In-memory implementation of the vector store interface.

    Vectors are copied in as read-only float64 arrays. By default, vectors of
    different lengths may be mixed and distances are computed over the shorter
    length. With ``strict_dimensions`` enabled, every vector and query must
    match the length of the first stored vector.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the linear vector store.

        Args:
            config: Optional configuration dictionary with keys:
                - name: Store name used in logs (default: 'default_store')
                - strict_dimensions: Reject length mismatches (default: False)
        """
        super().__init__(config)

        self.logger = logging.getLogger(__name__)
        self._vectors: List[np.ndarray] = []

        self.logger.info(
            f"Created linear vector store {self.name} (strict_dimensions={self.strict_dimensions})"
        )

    def _to_vector(self, values: VectorLike) -> np.ndarray:
        """Copy input into a fresh one-dimensional float64 array."""
        try:
            vector = np.array(values, dtype=np.float64)
        except (TypeError, ValueError) as e:
            raise VectorStoreOperationError(f"Invalid vector: {str(e)}") from e

        if vector.ndim != 1:
            raise VectorStoreOperationError(
                f"Vectors must be one-dimensional, got shape {vector.shape}"
            )
        return vector

    def _position(self, index: Any) -> Optional[int]:
        """Return index as a valid list position, or None."""
        if isinstance(index, bool):
            return None
        try:
            position = operator.index(index)
        except TypeError:
            return None

        if 0 <= position < len(self._vectors):
            return position
        return None

    def _check_dimension(self, vector: np.ndarray):
        if not self.strict_dimensions or not self._vectors:
            return

        expected = self._vectors[0].shape[0]
        if vector.shape[0] != expected:
            raise VectorStoreDimensionError(expected, vector.shape[0])

    def add(self, vector: VectorLike) -> None:
        """
        Append a copy of a vector to the end of the store.

        Args:
            vector: Sequence of numbers

        Raises:
            VectorStoreOperationError: If the input is not a 1-D numeric sequence
            VectorStoreDimensionError: In strict mode, if the length differs from
                the stored vectors
        """
        stored = self._to_vector(vector)
        self._check_dimension(stored)

        stored.flags.writeable = False
        self._vectors.append(stored)

        self.logger.debug(
            f"Added vector of dimension {stored.shape[0]} at index {len(self._vectors) - 1} "
            f"to store {self.name}"
        )

    def remove(self, index: int) -> Optional[np.ndarray]:
        """
        Remove the vector at a position and hand it to the caller.

        Later vectors shift down by one position. Negative and non-integer
        indices are out of range.

        Args:
            index: Zero-based position

        Returns:
            The removed vector as a writable array, or None if out of range
        """
        position = self._position(index)
        if position is None:
            return None

        removed = self._vectors.pop(position)
        self.logger.debug(f"Removed vector at index {index} from store {self.name}")
        return removed.copy()

    def get(self, index: int) -> Optional[np.ndarray]:
        """
        Get the vector at a position.

        Args:
            index: Zero-based position

        Returns:
            Read-only view of the stored array, or None if out of range
        """
        position = self._position(index)
        if position is None:
            return None
        return self._vectors[position].view()

    def nearest(self, query: VectorLike) -> Optional[int]:
        """
        Find the index of the stored vector closest to the query.

        Ties go to the lowest index. A NaN distance never replaces the current
        best, so the scan always completes; with NaNs present the chosen index
        is deterministic but not meaningful.

        Args:
            query: Query vector

        Returns:
            Index of the nearest vector, or None if the store is empty
        """
        result = self.nearest_with_distance(query)
        if result is None:
            return None
        return result[0]

    def nearest_with_distance(self, query: VectorLike) -> Optional[Tuple[int, float]]:
        """
        Find the nearest stored vector and its distance to the query.

        Args:
            query: Query vector

        Returns:
            (index, distance) tuple, or None if the store is empty

        Raises:
            VectorStoreDimensionError: In strict mode, if the query length differs
                from the stored vectors
        """
        if not self._vectors:
            return None

        query_vector = self._to_vector(query)
        self._check_dimension(query_vector)

        best_index = 0
        best_distance = euclidean(self._vectors[0], query_vector)

        for index in range(1, len(self._vectors)):
            distance = euclidean(self._vectors[index], query_vector)
            # False for NaN on either side, which keeps the current best
            if distance < best_distance:
                best_index = index
                best_distance = distance

        return best_index, best_distance

    def count(self) -> int:
        """Return the number of stored vectors."""
        return len(self._vectors)

    def clear(self) -> None:
        """Remove every stored vector."""
        removed = len(self._vectors)
        self._vectors = []
        self.logger.info(f"Cleared {removed} vectors from store {self.name}")

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter([vector.view() for vector in self._vectors])
