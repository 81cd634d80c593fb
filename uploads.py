import logging
import os
import shutil
import time
from typing import Iterable, List, Optional

from fastapi import HTTPException, UploadFile
from starlette.datastructures import UploadFile as FormFile
from werkzeug.utils import secure_filename

logger = logging.getLogger(__name__)

PAGE_IMAGE_TYPES = ("image/jpeg", "image/png", "image/gif", "image/webp", "image/svg+xml")
BANNER_IMAGE_TYPES = ("image/jpeg", "image/png", "image/webp")


class UploadStore:
    """Saves uploaded files below ``root`` and hands back their public ``/uploads`` URL."""

    def __init__(self, root: str, url_prefix: str = "/uploads"):
        self.root = root
        self.url_prefix = url_prefix.rstrip("/")

    def ensure_dir(self, subdir: Optional[str] = None) -> str:
        path = os.path.join(self.root, subdir) if subdir else self.root
        os.makedirs(path, exist_ok=True)
        return path

    def url_for(self, path: str) -> str:
        rel = os.path.relpath(path, self.root).replace(os.sep, "/")
        return f"{self.url_prefix}/{rel}"

    def write(self, data: bytes, filename: str, subdir: Optional[str] = None, prefix: str = "file") -> str:
        timestamp = int(time.time() * 1000)
        clean = secure_filename(filename or "").lower() or "upload"
        name = f"{prefix}-{timestamp}-{str(timestamp)[-4:]}-{clean}"
        target = os.path.join(self.ensure_dir(subdir), name)
        with open(target, "wb") as f:
            f.write(data)
        logger.info("Saved upload %s (%d bytes)", target, len(data))
        return f"{self.url_for(target)}?t={timestamp}"

    async def save(
        self,
        upload: UploadFile,
        subdir: Optional[str] = None,
        prefix: str = "file",
        allowed_types: Optional[Iterable[str]] = None,
        type_prefix: Optional[str] = None,
        max_bytes: Optional[int] = None,
    ) -> str:
        content_type = upload.content_type or ""
        if allowed_types is not None and content_type not in allowed_types:
            raise HTTPException(status_code=400, detail=f"Invalid file type: {content_type or 'unknown'}")
        if type_prefix is not None and not content_type.startswith(type_prefix):
            raise HTTPException(status_code=400, detail=f"Only {type_prefix.rstrip('/')} files are allowed")
        data = await upload.read()
        if max_bytes is not None and len(data) > max_bytes:
            raise HTTPException(
                status_code=400,
                detail=f"File size exceeds the limit of {max_bytes // (1024 * 1024)}MB",
            )
        return self.write(data, upload.filename, subdir=subdir, prefix=prefix)

    def remove_dir(self, subdir: str) -> None:
        path = os.path.join(self.root, subdir)
        if os.path.isdir(path):
            shutil.rmtree(path, ignore_errors=True)
            logger.info("Removed upload folder %s", path)


async def save_property_media(store: UploadStore, property_id: str, form, max_video_bytes: int) -> dict:
    """Persist ``image-N``, ``video`` and ``video-N`` files of a property form.

    Returns the new image and video URLs in form order. A file that fails to
    save is logged and skipped so the rest of the form still goes through.
    """
    images: List[str] = []
    videos: List[str] = []
    for key, value in form.multi_items():
        if not isinstance(value, FormFile) or not value.filename:
            continue
        try:
            if key.startswith("image-"):
                images.append(await store.save(value, subdir=property_id, prefix=secure_filename(key) or "image"))
            elif key == "video" or (key.startswith("video-") and key[6:].isdigit()):
                videos.append(
                    await store.save(value, subdir=property_id, prefix=key, max_bytes=max_video_bytes)
                )
        except HTTPException as e:
            logger.warning("Skipping %s for property %s: %s", key, property_id, e.detail)
    return {"images": images, "videoUrls": videos}
