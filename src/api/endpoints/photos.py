import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from pydantic import ValidationError

from core.dependencies import get_photo_service
from photoboard.exceptions import InvalidFilterError, PhotoNotFoundError
from photoboard.filters import FilterSelection
from photoboard.photos.service import PhotoService
from photoboard.schemas.photo import DeleteResponse, PhotoFeatures, PhotoResponse, StatsResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/upload", response_model=PhotoResponse)
async def upload_photo(
    photo: Optional[UploadFile] = File(None),
    date: Optional[str] = Form(None),
    grade: Optional[str] = Form(None),
    order: Optional[str] = Form(None),
    student: Optional[str] = Form(None),
    service: PhotoService = Depends(get_photo_service),
):
    """
    Store an uploaded photo with its fixed metadata fields.
    """
    if photo is None:
        raise HTTPException(status_code=400, detail="file required as `photo`")

    try:
        features = PhotoFeatures(date=date, grade=grade, order=order, student=student)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))

    content = await photo.read()
    return await service.upload(photo.filename, content, features, photo.content_type)


@router.get("/photos", response_model=List[PhotoResponse])
async def list_photos(
    field: Optional[str] = None,
    value: Optional[str] = None,
    service: PhotoService = Depends(get_photo_service),
):
    """
    List photos newest first, optionally only those where `field` equals `value`.
    """
    try:
        selection = FilterSelection(field=field, value=value)
    except InvalidFilterError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return await service.list_photos(selection)


@router.get("/photos/{photo_id}", response_model=PhotoResponse)
async def get_photo(photo_id: int, service: PhotoService = Depends(get_photo_service)):
    try:
        return await service.get_photo(photo_id)
    except PhotoNotFoundError:
        raise HTTPException(status_code=404, detail="Photo not found")


@router.delete("/photos/{photo_id}", response_model=DeleteResponse)
async def delete_photo(photo_id: int, service: PhotoService = Depends(get_photo_service)):
    try:
        await service.delete_photo(photo_id)
    except PhotoNotFoundError:
        raise HTTPException(status_code=404, detail="Photo not found")
    return DeleteResponse(success=True, message="Photo deleted")


@router.get("/stats", response_model=StatsResponse)
async def get_stats(service: PhotoService = Depends(get_photo_service)):
    return await service.stats()
