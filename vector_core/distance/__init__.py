"""
Distance functions used by the vector stores.
"""

from .euclidean import euclidean, euclidean_strict, DimensionMismatchError, VectorLike

__all__ = ["euclidean", "euclidean_strict", "DimensionMismatchError", "VectorLike"]
