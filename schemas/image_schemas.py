from schemas.base import CamelModel


class ImageUploadResponse(CamelModel):
    message: str
    filename: str
