"""
Content Handler

Handles content CRUD, slug lookup, and filtered listing endpoints.

ARCHITECTURE:
=============
    Handler → Service → Repository → MemoryStore

Handlers should ONLY:
- Parse HTTP requests (FastAPI validates bodies before the handler runs)
- Call service methods
- Format HTTP responses
- Turn "absent" into 404 where the contract says so

Business logic belongs in the SERVICE layer.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from cms.api.dependencies.services import get_content_service
from cms.shared.core.exceptions import ContentNotFoundError
from cms.shared.models.content import Content
from cms.shared.schemas.common import ErrorResponse, ValidationErrorResponse
from cms.shared.schemas.content import ContentCreate, ContentUpdate
from cms.shared.services.content_service import ContentService


router = APIRouter()


@router.get("", response_model=List[Content])
async def list_content(
    content_service: ContentService = Depends(get_content_service),
    category: Optional[str] = Query(None, description="Filter by category slug"),
    status_filter: Optional[str] = Query(
        None, alias="status", description="Filter by status; unknown values match nothing"
    ),
    search: Optional[str] = Query(None, description="Search title, body and tags"),
):
    """
    List content.

    At most one filter is applied, in priority order:
    - search: case-insensitive match on title, body or any tag
    - category: exact category slug
    - status: draft / published / archived

    Without filters, content is ordered by most recently updated.
    """
    return await content_service.list_content(
        category=category,
        status=status_filter,
        search=search,
    )


@router.get(
    "/slug/{slug}",
    response_model=Content,
    responses={404: {"model": ErrorResponse}},
)
async def get_content_by_slug(
    slug: str,
    content_service: ContentService = Depends(get_content_service),
):
    """Get content by its slug."""
    content = await content_service.get_by_slug(slug)
    if content is None:
        raise ContentNotFoundError()
    return content


@router.get(
    "/{content_id}",
    response_model=Content,
    responses={404: {"model": ErrorResponse}},
)
async def get_content(
    content_id: str,
    content_service: ContentService = Depends(get_content_service),
):
    """Get content by id."""
    content = await content_service.get(content_id)
    if content is None:
        raise ContentNotFoundError(content_id)
    return content


@router.post(
    "",
    response_model=Content,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ValidationErrorResponse}},
)
async def create_content(
    request: ContentCreate,
    content_service: ContentService = Depends(get_content_service),
):
    """
    Create content.

    The id and timestamps are assigned by the server; any supplied in the
    body are ignored.
    """
    return await content_service.create(request)


@router.patch(
    "/{content_id}",
    response_model=Content,
    responses={
        400: {"model": ValidationErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def update_content(
    content_id: str,
    request: ContentUpdate,
    content_service: ContentService = Depends(get_content_service),
):
    """
    Update content.

    Only the fields present in the body change; updatedAt is always bumped.
    """
    return await content_service.update(content_id, request)


@router.delete("/{content_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_content(
    content_id: str,
    content_service: ContentService = Depends(get_content_service),
):
    """
    Delete content.

    Returns 204 whether or not the id existed.
    """
    await content_service.delete(content_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
