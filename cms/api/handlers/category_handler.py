"""
Category Handler

Handles category CRUD and slug lookup endpoints.

    Handler → CategoryService → CategoryRepository → MemoryStore
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from cms.api.dependencies.services import get_category_service
from cms.shared.core.exceptions import CategoryNotFoundError
from cms.shared.models.category import Category
from cms.shared.schemas.common import ErrorResponse, ValidationErrorResponse
from cms.shared.schemas.category import CategoryCreate, CategoryUpdate
from cms.shared.services.category_service import CategoryService


router = APIRouter()


@router.get("", response_model=List[Category])
async def list_categories(
    category_service: CategoryService = Depends(get_category_service),
):
    """List all categories in creation order."""
    return await category_service.list_all()


@router.get(
    "/slug/{slug}",
    response_model=Category,
    responses={404: {"model": ErrorResponse}},
)
async def get_category_by_slug(
    slug: str,
    category_service: CategoryService = Depends(get_category_service),
):
    """Get a category by its slug."""
    category = await category_service.get_by_slug(slug)
    if category is None:
        raise CategoryNotFoundError()
    return category


@router.get(
    "/{category_id}",
    response_model=Category,
    responses={404: {"model": ErrorResponse}},
)
async def get_category(
    category_id: str,
    category_service: CategoryService = Depends(get_category_service),
):
    """Get a category by id."""
    category = await category_service.get(category_id)
    if category is None:
        raise CategoryNotFoundError(category_id)
    return category


@router.post(
    "",
    response_model=Category,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ValidationErrorResponse}},
)
async def create_category(
    request: CategoryCreate,
    category_service: CategoryService = Depends(get_category_service),
):
    """Create a category."""
    return await category_service.create(request)


@router.patch(
    "/{category_id}",
    response_model=Category,
    responses={
        400: {"model": ValidationErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def update_category(
    category_id: str,
    request: CategoryUpdate,
    category_service: CategoryService = Depends(get_category_service),
):
    """Update a category. Only the fields present in the body change."""
    return await category_service.update(category_id, request)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: str,
    category_service: CategoryService = Depends(get_category_service),
):
    """
    Delete a category.

    Content filed under the category's slug is left as is.
    """
    await category_service.delete(category_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
