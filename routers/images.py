from fastapi import APIRouter, File, UploadFile
from starlette import status
from starlette.concurrency import run_in_threadpool
from schemas.image_schemas import ImageUploadResponse
from services.image_service import ImageService


router = APIRouter(
    prefix="/images",
    tags=["images"]
)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ImageUploadResponse)
async def upload_image(image: UploadFile = File(...)):
    try:
        filename = await run_in_threadpool(ImageService.save_upload, image.file, image.filename)
    finally:
        await image.close()

    return ImageUploadResponse(message="Image uploaded successfully", filename=filename)
