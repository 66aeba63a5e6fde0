"""
Linear-scan vector store implementation.

This package provides an in-memory vector store backed by a list of NumPy
arrays, searched exhaustively under Euclidean distance.

Usage:
    store = LinearVectorStore()

    store.add([1.0, 2.0, 3.0])
    store.add([4.0, 5.0, 6.0])

    index = store.nearest([1.1, 2.1, 3.1])   # 0
    vector = store.get(index)
    removed = store.remove(0)
"""

from .linear_store import LinearVectorStore

__all__ = ['LinearVectorStore']
