"""Local Image Store: writes uploaded product images under the configured upload dir.

Invariants:
    - Stored filename is generated (uuid + extension from content type); the
      client filename is never used as a path component
    - save() returns the public URL under upload_url_prefix
    - delete() takes that URL back; unknown or foreign URLs are ignored

Design Decisions:
    - File write runs in a worker thread (asyncio.to_thread): keeps the event
      loop free during large uploads
"""

import asyncio
import logging
import uuid
from pathlib import Path

from app.core.domain_types import ImageUpload

logger = logging.getLogger(__name__)

_EXTENSIONS = {
    "image/jpeg": ".jpg",
    "image/png": ".png",
    "image/gif": ".gif",
    "image/webp": ".webp",
    "image/svg+xml": ".svg",
    "image/bmp": ".bmp",
}


class LocalImageStore:
    """ImageStore backed by a local directory."""

    def __init__(self, upload_dir: str, url_prefix: str):
        self.upload_dir = Path(upload_dir)
        self.url_prefix = url_prefix.rstrip("/")

    async def save(self, image: ImageUpload) -> str:
        filename = f"{uuid.uuid4().hex}{_EXTENSIONS.get(image.content_type, '')}"
        await asyncio.to_thread(self._write, filename, image.content)
        logger.info(f"Stored product image {filename} ({image.size} bytes)")
        return f"{self.url_prefix}/{filename}"

    def _write(self, filename: str, content: bytes) -> None:
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        (self.upload_dir / filename).write_bytes(content)

    async def delete(self, location: str) -> None:
        prefix = f"{self.url_prefix}/"
        if not location.startswith(prefix):
            return
        filename = Path(location[len(prefix):]).name
        await asyncio.to_thread(
            (self.upload_dir / filename).unlink, missing_ok=True,
        )
        logger.info(f"Removed product image {filename}")
