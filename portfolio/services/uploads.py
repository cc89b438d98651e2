import os
import uuid

from portfolio.config import UPLOADS_DIR, PUBLIC_BASE_URL

UPLOAD_FOLDERS = ("blog-images", "project-images", "skill-icons")
ALLOWED_EXTENSIONS = {"png", "jpg", "jpeg", "gif", "webp", "svg", "avif"}


class UploadError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


def _extension(filename: str) -> str:
    ext = os.path.splitext(filename or "")[1].lstrip(".").lower()
    if ext not in ALLOWED_EXTENSIONS:
        raise UploadError(f"Unsupported image type: '{ext or filename}'")
    return ext


def save_upload(folder: str, filename: str, data: bytes, uploads_dir: str = UPLOADS_DIR) -> str:
    """
    Store an image under <uploads_dir>/<folder>/<random>.<ext>.

    Returns the relative object path, e.g. "blog-images/3f2a...e1.png".
    """
    if folder not in UPLOAD_FOLDERS:
        raise UploadError(f"Unknown upload folder '{folder}'")
    if not data:
        raise UploadError("Uploaded file is empty")

    ext = _extension(filename)
    object_path = f"{folder}/{uuid.uuid4().hex}.{ext}"
    target = os.path.join(uploads_dir, folder)
    try:
        os.makedirs(target, exist_ok=True)
        with open(os.path.join(uploads_dir, object_path), "wb") as f:
            f.write(data)
    except OSError as e:
        raise UploadError("Failed to upload image") from e
    return object_path


def public_url(object_path: str, base_url: str = PUBLIC_BASE_URL) -> str:
    return f"{base_url}/uploads/{object_path}"
