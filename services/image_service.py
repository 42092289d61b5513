import os
import shutil
import tempfile
import uuid
from pathlib import Path
from typing import BinaryIO
from core.config import settings
from core.exceptions import StorageError
from utils.logger import get_logger

logger = get_logger(__name__)

COPY_CHUNK_SIZE = 1024 * 1024


class ImageService:
    """
    Persists uploaded product images under ``settings.UPLOAD_DIR``.

    The upload is first streamed into a temporary file in the same directory
    and then moved to its final, randomly generated name, so a half-written
    file never appears under a real image name.
    """

    @staticmethod
    def upload_dir() -> Path:
        path = Path(settings.UPLOAD_DIR)
        path.mkdir(parents=True, exist_ok=True)
        return path

    @staticmethod
    def generate_filename() -> str:
        return uuid.uuid4().hex

    @staticmethod
    def save_upload(stream: BinaryIO, original_filename: str | None = None) -> str:
        """
        Stores the stream and returns the generated filename.

        Raises:
            StorageError: On any filesystem failure; the temporary file is
                removed before raising
        """
        temp_path = None
        try:
            target_dir = ImageService.upload_dir()
            filename = ImageService.generate_filename()

            with tempfile.NamedTemporaryFile(dir=target_dir, prefix=".upload-", delete=False) as temp_file:
                temp_path = temp_file.name
                shutil.copyfileobj(stream, temp_file, COPY_CHUNK_SIZE)

            shutil.move(temp_path, target_dir / filename)
        except OSError as exc:
            if temp_path and os.path.exists(temp_path):
                os.remove(temp_path)
            logger.error(
                "Failed to store uploaded image",
                extra={"original_filename": original_filename, "error": str(exc)},
                exc_info=True
            )
            raise StorageError("Could not store image") from exc

        logger.info(
            "Image stored",
            extra={"stored_filename": filename, "original_filename": original_filename}
        )
        return filename
