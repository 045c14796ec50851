"""
Shared Module

Contains the domain code behind the API:
- Models: pydantic entity models
- Repositories: Data access layer over the store
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions
- Db: The in-memory store and sample data

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← MemoryStore, seed data
    ├── models/         ← Entity models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    └── schemas/        ← Request/response schemas

Usage:
======
    from cms.shared.models import Content
    from cms.shared.repositories import ContentRepository
    from cms.shared.services import ContentService
    from cms.shared.core import logger, CMSException
"""
