import base64
from typing import Optional

from fastapi import APIRouter, File, Form, HTTPException, UploadFile, status
from pydantic import BaseModel

from app.core.config import settings
from app.models.common import CropImage, Language, RequestContext
from app.services.insight_service import diagnose_crop

router = APIRouter(prefix="/crop-doctor", tags=["Crop Doctor"])


class DiagnosisResponse(BaseModel):
    analysis: str


@router.post("/diagnose", response_model=DiagnosisResponse)
async def diagnose(
    file: UploadFile = File(...),
    language: Language = Form(default=Language.ENGLISH),
    crop: Optional[str] = Form(default=None),
) -> DiagnosisResponse:
    """
    Uploads a crop photo as multipart/form-data and returns the diagnosis text.
    """
    if not file.content_type or not file.content_type.startswith("image/"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only image uploads can be diagnosed.",
        )
    data = await file.read()
    if not data:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Uploaded image is empty.",
        )
    if len(data) > settings.MAX_IMAGE_BYTES:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail="Image is too large.",
        )

    image = CropImage(
        data=base64.b64encode(data).decode("ascii"), mime_type=file.content_type
    )
    analysis = await diagnose_crop(image, RequestContext(language=language, crop=crop))
    return DiagnosisResponse(analysis=analysis)
