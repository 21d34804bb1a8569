import os
import time
import uuid
from io import BytesIO

from PIL import Image, UnidentifiedImageError

from env import UPLOAD_TEMP_DIR
from logger_manager import log_error, log_info
from utils.exceptions import BadRequestError


def convert_to_webp(data: bytes, quality: int = 80) -> str:
    """Write ``data`` as a WebP file in the temp directory and return its path."""
    os.makedirs(UPLOAD_TEMP_DIR, exist_ok=True)
    output_path = os.path.join(UPLOAD_TEMP_DIR, f"{int(time.time() * 1000)}_{uuid.uuid4().hex}.webp")

    try:
        with Image.open(BytesIO(data)) as img:
            if img.mode not in ("RGB", "RGBA"):
                img = img.convert("RGBA")
            img.save(output_path, format="WEBP", quality=quality)
    except UnidentifiedImageError as e:
        log_error("Uploaded file is not an image", e)
        raise BadRequestError("File is not a valid image")
    except Exception as e:
        # Drop a partially written file
        if os.path.exists(output_path):
            os.remove(output_path)
        log_error(f"Failed to convert image to WebP: {str(e)}", e)
        raise

    log_info(f"Converted image to {output_path}")
    return output_path
