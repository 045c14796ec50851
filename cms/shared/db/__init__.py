"""
Store Module

This module provides the in-memory data owner for the CMS.

Architecture Overview:
======================
┌─────────────────────────────────────────────────────────────────────────────┐
│                          STORAGE LAYER                                      │
├─────────────────────────────────────────────────────────────────────────────┤
│                                                                             │
│   FastAPI Route                                                             │
│       │                                                                     │
│       │  Dependency Injection: get_store()  (app.state.store)               │
│       ▼                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │              Service (from services/)                       │          │
│   └─────────────────────────────────────────────────────────────┘          │
│       │                                                                     │
│       ▼                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │              Repository (from repositories/)                │          │
│   │  - ContentRepository                                        │          │
│   │  - CategoryRepository                                       │          │
│   │  - MediaRepository                                          │          │
│   └─────────────────────────────────────────────────────────────┘          │
│       │                                                                     │
│       │  with store.lock                                                    │
│       ▼                                                                     │
│   ┌─────────────────────────────────────────────────────────────┐          │
│   │              MemoryStore (from store.py)                    │          │
│   └─────────────────────────────────────────────────────────────┘          │
│                                                                             │
└─────────────────────────────────────────────────────────────────────────────┘
"""

from cms.shared.db.store import MemoryStore, init_store
from cms.shared.db.seed import seed_store

__all__ = [
    "MemoryStore",  # The single owner of all collections
    "init_store",  # Build the application store at startup
    "seed_store",  # Load default categories and sample content
]
