import os
from typing import Optional

from fastapi import APIRouter, Depends, File, UploadFile
from starlette.concurrency import run_in_threadpool

from db.models import User
from interfaces.commonModels import UploadResponse
from logger_manager import log_info
from services.auth_service import require_admin
from services.storage_service import upload_image
from utils.exceptions import BadRequestError
from utils.image_utils import convert_to_webp

router = APIRouter()


@router.post("/image", response_model=UploadResponse)
async def upload_image_endpoint(image: Optional[UploadFile] = File(default=None),
                                admin: User = Depends(require_admin)):
    """Convert the uploaded image to WebP and return its hosted URL."""
    log_info("Upload image endpoint called")
    if image is None:
        raise BadRequestError("No image provided")

    data = await image.read()
    if not data:
        raise BadRequestError("No image provided")

    # Pillow work runs off the event loop
    webp_path = await run_in_threadpool(convert_to_webp, data)
    try:
        url = await upload_image(webp_path)
    finally:
        # Clean up temporary file
        os.remove(webp_path)
    return {"url": url}
