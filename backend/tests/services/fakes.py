"""Test doubles for the mutation pipeline's collaborators."""

from app.core.domain_types import ImageUpload

WRITE_OPERATIONS = ("create", "update", "delete")


class SpyRepository:
    """Wraps a real repository and records every store call."""

    def __init__(self, inner):
        self.inner = inner
        self.calls: list[tuple] = []

    @property
    def writes(self) -> list[tuple]:
        return [c for c in self.calls if c[0] in WRITE_OPERATIONS]

    async def find_by_name(self, name, case_insensitive=True, exclude_id=None):
        self.calls.append(("find_by_name", name, exclude_id))
        return await self.inner.find_by_name(
            name, case_insensitive=case_insensitive, exclude_id=exclude_id,
        )

    async def find_by_id(self, resource_id):
        self.calls.append(("find_by_id", resource_id))
        return await self.inner.find_by_id(resource_id)

    async def create(self, fields):
        self.calls.append(("create", fields))
        return await self.inner.create(fields)

    async def update(self, resource_id, fields):
        self.calls.append(("update", resource_id, fields))
        return await self.inner.update(resource_id, fields)

    async def delete(self, resource_id):
        self.calls.append(("delete", resource_id))
        return await self.inner.delete(resource_id)


class RecordingInvalidator:
    """CacheInvalidator that records paths and can be told to fail on some."""

    def __init__(self, fail_on: set[str] | None = None):
        self.paths: list[str] = []
        self.fail_on = fail_on or set()

    def invalidate(self, path: str) -> None:
        self.paths.append(path)
        if path in self.fail_on:
            raise RuntimeError(f"cache backend unavailable for {path}")


class FakeImageStore:
    """ImageStore that keeps uploads in memory, keyed by their URL."""

    def __init__(self):
        self.stored: dict[str, ImageUpload] = {}
        self.deleted: list[str] = []
        self._uploads = 0

    @property
    def saved(self) -> list[ImageUpload]:
        return list(self.stored.values())

    async def save(self, image: ImageUpload) -> str:
        self._uploads += 1
        location = f"/uploads/products/{self._uploads}.png"
        self.stored[location] = image
        return location

    async def delete(self, location: str) -> None:
        self.deleted.append(location)
        self.stored.pop(location, None)


def png(name: str = "shot.png") -> ImageUpload:
    return ImageUpload(name, "image/png", b"\x89PNG\r\n\x1a\n" + b"0" * 32)
