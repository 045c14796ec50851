"""
Personal CMS Backend

REST API over an in-memory store of content, categories and media.

Package Structure:
==================
    cms/
    ├── api/        ← FastAPI application
    ├── shared/     ← Models, repositories, services, schemas, core
    └── config/     ← Configuration

Running the Application:
========================
    uvicorn cms.api.main:app --reload
"""
