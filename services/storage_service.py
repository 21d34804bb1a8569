import hashlib
import os
import time

import aiohttp

from env import CLOUDINARY_API_KEY, CLOUDINARY_API_SECRET, CLOUDINARY_CLOUD_NAME, CLOUDINARY_FOLDER
from logger_manager import log_error, log_info
from utils.exceptions import AppError


def sign_params(params: dict, api_secret: str) -> str:
    """SHA-1 over the sorted ``key=value`` pairs followed by the API secret."""
    to_sign = "&".join(f"{key}={params[key]}" for key in sorted(params))
    return hashlib.sha1(f"{to_sign}{api_secret}".encode("utf-8")).hexdigest()


async def upload_image(image_path: str) -> str:
    """
    Uploads a local image to the image host and returns its public https URL.
    """
    log_info(f"Uploading {image_path} to image storage")
    url = f"https://api.cloudinary.com/v1_1/{CLOUDINARY_CLOUD_NAME}/image/upload"

    params = {
        "folder": CLOUDINARY_FOLDER,
        "timestamp": int(time.time()),
    }
    signature = sign_params(params, CLOUDINARY_API_SECRET or "")

    with open(image_path, "rb") as image_file:
        form = aiohttp.FormData()
        form.add_field("file", image_file, filename=os.path.basename(image_path), content_type="image/webp")
        form.add_field("api_key", CLOUDINARY_API_KEY or "")
        form.add_field("folder", params["folder"])
        form.add_field("timestamp", str(params["timestamp"]))
        form.add_field("signature", signature)

        try:
            async with aiohttp.ClientSession() as session:
                async with session.post(url, data=form) as response:
                    response_json = await response.json(content_type=None)
                    log_info(f"Image storage response status: {response.status}")

                    if response.status != 200:
                        log_error(f"Failed to upload image: Status {response.status}, Response: {response_json}")
                        error = (response_json or {}).get("error", {}).get("message", "Unknown")
                        raise AppError(f"Failed to upload image: {error}")
                    return response_json["secure_url"]
        except aiohttp.ClientError as e:
            log_error(f"Error uploading image {image_path}: {e}", e)
            raise AppError("Failed to upload image")
