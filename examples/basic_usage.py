#!/usr/bin/env python3
"""
Basic usage examples for Vector Core.

This script demonstrates the fundamental operations:
- Creating a store from configuration
- Adding and reading back vectors
- Classifying "images" by nearest neighbor
- Removing vectors and the resulting index shift
"""

import os
import sys

import numpy as np

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from vector_core.config import init_config, setup_logging
from vector_core.store import create_vector_store


def build_store():
    """Create a store from the example configuration."""
    print("🚀 Setting up vector store...")

    config = init_config(os.path.join(os.path.dirname(os.path.abspath(__file__)), "config"))
    setup_logging(config.config.logging)

    settings = config.get_vector_store_config()
    store = create_vector_store(settings["backend"], settings["backend_config"])
    print(f"✅ Created {store}")
    return store


def classify_digits(store):
    """Classify noisy 8x8 "images" against two reference digits."""
    print("\n🔢 Classifying digits...")

    labels = ["zero", "one"]
    store.add(np.full(64, 1.0))  # imagine this is a '0'
    store.add(np.full(64, 2.0))  # imagine this is a '1'

    rng = np.random.default_rng(seed=7)
    for reference in (1.0, 2.0):
        image = np.full(64, reference) + rng.normal(0.0, 0.1, size=64)
        index, distance = store.nearest_with_distance(image)
        print(f"   image around {reference:.1f} -> {labels[index]} (distance {distance:.3f})")


def show_index_shift(store):
    """Removing a vector moves every later vector down by one."""
    print("\n✂️  Removing index 0...")

    removed = store.remove(0)
    print(f"   removed vector starting with {removed[:3]}")
    print(f"   index 0 now starts with {store.get(0)[:3]}")
    print(f"   index 1 is {store.get(1)}")


def main():
    store = build_store()
    classify_digits(store)
    show_index_shift(store)
    print(f"\n📊 Store info: {store.get_store_info()}")


if __name__ == "__main__":
    main()
