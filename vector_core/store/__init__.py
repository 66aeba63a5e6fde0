"""
Vector stores and factory system.
"""

from typing import Dict, Type, Any, List, Optional
from vector_core.store.interfaces import (
    VectorStoreInterface,
    VectorStoreType,
    MetricType,
    VectorStoreError,
    VectorStoreOperationError,
    VectorStoreDimensionError,
)

from .linear import LinearVectorStore


class VectorStoreFactory:
    """
    Factory for creating vector store instances.

    Every call returns a new, independent store owned by the caller.
    """

    # Registry of available vector stores
    _stores: Dict[str, Type[VectorStoreInterface]] = {
        VectorStoreType.LINEAR.value: LinearVectorStore,
    }

    @classmethod
    def create_vector_store(
        cls, store_type: str, config: Optional[Dict[str, Any]] = None
    ) -> VectorStoreInterface:
        """
        Create a vector store instance.

        Args:
            store_type: Type of vector store ('linear')
            config: Store specific configuration dictionary

        Returns:
            Configured vector store instance

        Raises:
            ValueError: If store type is not supported
        """
        store_class = cls.get_store_class(store_type)
        return store_class(config or {})

    @classmethod
    def get_available_stores(cls) -> List[str]:
        """
        Get list of available vector stores.

        Returns:
            List of vector store names
        """
        return list(cls._stores.keys())

    @classmethod
    def register_store(cls, name: str, store_class: Type[VectorStoreInterface]) -> None:
        """
        Register a new vector store.

        Args:
            name: Name of the vector store
            store_class: Store class implementing VectorStoreInterface
        """
        if not isinstance(store_class, type) or not issubclass(store_class, VectorStoreInterface):
            raise ValueError("Store class must implement VectorStoreInterface")

        cls._stores[name.lower()] = store_class

    @classmethod
    def get_store_class(cls, store_type: str) -> Type[VectorStoreInterface]:
        """
        Get the vector store class for a given type.

        Raises:
            ValueError: If store type is not supported
        """
        store_type = store_type.lower()

        if store_type not in cls._stores:
            available = ", ".join(cls._stores.keys())
            raise ValueError(
                f"Unsupported vector store: {store_type}. " f"Available stores: {available}"
            )

        return cls._stores[store_type]

    @classmethod
    def get_store_capabilities(cls, store_type: str) -> Dict[str, Any]:
        """
        Get capabilities and features of a vector store.

        Args:
            store_type: Type of vector store

        Returns:
            Dictionary describing store capabilities, empty for unknown types
        """
        capabilities = {
            "linear": {
                "persistent": False,
                "indexed": False,
                "thread_safe": False,
                "approximate": False,
                "metrics": [MetricType.L2.value],
                "mixed_dimensions": True,
            },
        }

        return capabilities.get(store_type.lower(), {})


# Convenience function for creating vector stores
def create_vector_store(
    store_type: str = "linear", config: Optional[Dict[str, Any]] = None
) -> VectorStoreInterface:
    """
    Create a vector store instance.

    Args:
        store_type: Type of vector store ('linear')
        config: Store specific configuration dictionary

    Returns:
        Configured vector store instance
    """
    return VectorStoreFactory.create_vector_store(store_type, config)


__all__ = [
    "VectorStoreFactory",
    "create_vector_store",
    "LinearVectorStore",
    "VectorStoreInterface",
    "VectorStoreType",
    "MetricType",
    "VectorStoreError",
    "VectorStoreOperationError",
    "VectorStoreDimensionError",
]
