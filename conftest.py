"""
Configuration file for pytest.

This file configures pytest to properly load environment variables
and provides shared fixtures for tests.
"""
import pytest
import dotenv

from vector_core.store import LinearVectorStore

# Load environment variables from .env file
dotenv.load_dotenv()


@pytest.fixture
def store():
    """An empty permissive store."""
    return LinearVectorStore({'name': 'test_store'})


@pytest.fixture
def strict_store():
    """An empty store that rejects dimension mismatches."""
    return LinearVectorStore({'name': 'strict_store', 'strict_dimensions': True})


@pytest.fixture
def populated_store(store):
    """A store holding [1, 2, 3] at index 0 and [4, 5, 6] at index 1."""
    store.add([1.0, 2.0, 3.0])
    store.add([4.0, 5.0, 6.0])
    return store
