import os
from io import BytesIO
from unittest.mock import AsyncMock, patch

import pytest
from PIL import Image
from starlette.concurrency import run_in_threadpool

from utils.exceptions import BadRequestError
from utils.image_utils import convert_to_webp


def png_bytes():
    buffer = BytesIO()
    Image.new("RGB", (8, 8), color="red").save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture(autouse=True)
def temp_dir(tmp_path):
    with patch("utils.image_utils.UPLOAD_TEMP_DIR", str(tmp_path)):
        yield tmp_path


def test_convert_to_webp(temp_dir):
    path = convert_to_webp(png_bytes())
    assert path.endswith(".webp")
    with Image.open(path) as img:
        assert img.format == "WEBP"
        assert img.size == (8, 8)


def test_convert_rejects_non_image():
    with pytest.raises(BadRequestError):
        convert_to_webp(b"definitely not an image")


def test_convert_removes_partial_file_on_failure(temp_dir):
    def failing_save(self, path, *args, **kwargs):
        with open(path, "wb") as handle:
            handle.write(b"RIFF")
        raise OSError("disk full")

    data = png_bytes()
    with patch.object(Image.Image, "save", failing_save):
        with pytest.raises(OSError):
            convert_to_webp(data)

    assert os.listdir(temp_dir) == []


@patch("routers.upload.upload_image", new_callable=AsyncMock)
def test_upload_image(mock_upload, client, admin_headers, temp_dir):
    mock_upload.return_value = "https://cdn.example.com/weekly/abc.webp"

    response = client.post(
        "/upload/image",
        files={"image": ("dish.png", png_bytes(), "image/png")},
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert response.json() == {"url": "https://cdn.example.com/weekly/abc.webp"}
    uploaded_path = mock_upload.await_args[0][0]
    assert uploaded_path.endswith(".webp")
    # The temporary WebP file is removed afterwards
    assert not os.path.exists(uploaded_path)


def test_upload_without_image(client, admin_headers):
    response = client.post("/upload/image", headers=admin_headers)
    assert response.status_code == 400
    assert response.json() == {"message": "No image provided"}


@patch("routers.upload.upload_image", new_callable=AsyncMock)
def test_upload_invalid_image(mock_upload, client, admin_headers):
    response = client.post(
        "/upload/image",
        files={"image": ("notes.txt", b"hello", "text/plain")},
        headers=admin_headers,
    )
    assert response.status_code == 400
    mock_upload.assert_not_awaited()


def test_upload_requires_admin(client, make_user, auth_headers):
    response = client.post(
        "/upload/image",
        files={"image": ("dish.png", png_bytes(), "image/png")},
        headers=auth_headers(make_user()),
    )
    assert response.status_code == 403


@patch("routers.upload.upload_image", new_callable=AsyncMock)
def test_upload_converts_in_threadpool(mock_upload, client, admin_headers):
    mock_upload.return_value = "https://cdn.example.com/weekly/abc.webp"

    with patch("routers.upload.run_in_threadpool", new=AsyncMock(side_effect=run_in_threadpool)) as mock_pool:
        response = client.post(
            "/upload/image",
            files={"image": ("dish.png", png_bytes(), "image/png")},
            headers=admin_headers,
        )

    assert response.status_code == 200
    mock_pool.assert_awaited_once()
    assert mock_pool.await_args[0][0] is convert_to_webp
