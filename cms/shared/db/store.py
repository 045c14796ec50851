"""
In-Memory Store

This module holds the single owner of all entity state: one list per
collection plus the lock that serializes access to them.

Key Concepts:
=============

1. STORE: The data owner
   - One MemoryStore per application, created at startup
   - Attached to ``app.state.store`` and handed to repositories per request
   - Nothing outside the store keeps its own copy of an entity

2. COLLECTIONS: Plain lists keyed by name
   - "content", "categories", "media"
   - Insertion order is preserved; repositories sort on read where needed

3. LOCK: Single-writer guarantee
   - Repositories hold ``store.lock`` for every read-modify-write
   - No code awaits while holding it, so the event loop never blocks on it

Store Lifecycle:
================
    1. create_application() calls init_store()
    2. init_store() builds a MemoryStore and optionally seeds sample data
    3. Requests read/write through repositories
    4. Process exits → all data is gone (no persistence)

Configuration:
==============
    SEED_SAMPLE_DATA: Populate a fresh store with default categories and posts
"""

import threading
from typing import Any

from cms.shared.core.logging import logger


COLLECTIONS = ("content", "categories", "media")


class MemoryStore:
    """
    Process-wide owner of the content, category and media collections.

    Example:
        store = MemoryStore()
        with store.lock:
            store.collection("content").append(record)
    """

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self._collections: dict[str, list[Any]] = {name: [] for name in COLLECTIONS}

    def collection(self, name: str) -> list[Any]:
        """
        Return the live list backing a collection.

        Callers must hold ``lock`` while touching it.

        Raises:
            KeyError: If the collection name is unknown
        """
        return self._collections[name]

    def replace(self, name: str, records: list[Any]) -> None:
        """Swap a collection's contents wholesale. Caller holds ``lock``."""
        self._collections[name] = records

    def counts(self) -> dict[str, int]:
        """Number of records per collection."""
        with self.lock:
            return {name: len(records) for name, records in self._collections.items()}


def init_store(seed: bool = False) -> MemoryStore:
    """
    Create the application store.

    Called once from create_application() when no store is injected.

    Args:
        seed: Populate default categories and sample content

    Returns:
        A ready-to-use MemoryStore
    """
    # seed.py imports MemoryStore from this module
    from cms.shared.db.seed import seed_store

    store = MemoryStore()
    if seed:
        seed_store(store)
    logger.info("In-memory store initialized", seeded=seed, **store.counts())
    return store
