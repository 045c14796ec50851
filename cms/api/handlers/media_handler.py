"""
Media Handler

Handles media metadata endpoints. Files themselves are hosted elsewhere;
only their descriptions pass through here.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from cms.api.dependencies.services import get_media_service
from cms.shared.core.exceptions import MediaNotFoundError
from cms.shared.models.media import Media
from cms.shared.schemas.common import ErrorResponse, ValidationErrorResponse
from cms.shared.schemas.media import MediaCreate, MediaUpdate
from cms.shared.services.media_service import MediaService


router = APIRouter()


@router.get("", response_model=List[Media])
async def list_media(
    media_service: MediaService = Depends(get_media_service),
):
    """List media, newest first."""
    return await media_service.list_all()


@router.get(
    "/{media_id}",
    response_model=Media,
    responses={404: {"model": ErrorResponse}},
)
async def get_media(
    media_id: str,
    media_service: MediaService = Depends(get_media_service),
):
    """Get media metadata by id."""
    media = await media_service.get(media_id)
    if media is None:
        raise MediaNotFoundError(media_id)
    return media


@router.post(
    "",
    response_model=Media,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ValidationErrorResponse}},
)
async def create_media(
    request: MediaCreate,
    media_service: MediaService = Depends(get_media_service),
):
    """Register a media file by its external URL."""
    return await media_service.create(request)


@router.patch(
    "/{media_id}",
    response_model=Media,
    responses={
        400: {"model": ValidationErrorResponse},
        404: {"model": ErrorResponse},
    },
)
async def update_media(
    media_id: str,
    request: MediaUpdate,
    media_service: MediaService = Depends(get_media_service),
):
    """Update media metadata."""
    return await media_service.update(media_id, request)


@router.delete("/{media_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_media(
    media_id: str,
    media_service: MediaService = Depends(get_media_service),
):
    """Delete media metadata. Returns 204 whether or not the id existed."""
    await media_service.delete(media_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
