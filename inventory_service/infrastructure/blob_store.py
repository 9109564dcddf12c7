"""Blob Store: photo files in the cache directory, keyed by generated names.

Invariants:
    - Names are uuid4 hex plus a whitelisted image extension: unique under concurrent uploads
    - A blob becomes visible only after it is fully written (temp file + atomic rename)
    - open() never resolves a name outside the cache directory
    - remove() never raises: missing files are ignored, OS errors are logged

Design Decisions:
    - Filesystem calls run in the threadpool so uploads do not block the event loop
"""

import logging
import os
import shutil
import uuid
from pathlib import Path
from typing import BinaryIO

from fastapi.concurrency import run_in_threadpool

from inventory_service.core.domain_types import BlobName, photo_extension
from inventory_service.core.errors import BlobStorageError, ErrorContext

logger = logging.getLogger(__name__)

_TMP_SUFFIX = ".part"


class FileBlobStore:
    """BlobStore backed by a local directory."""

    def __init__(self, root: str | os.PathLike):
        self.root = Path(root).resolve()

    def ensure_root(self) -> None:
        self.root.mkdir(parents=True, exist_ok=True)

    def _new_name(self, original_filename: str | None) -> BlobName:
        ext = photo_extension(original_filename)
        token = uuid.uuid4().hex
        return BlobName(f"{token}.{ext}" if ext else token)

    def _path_for(self, filename: str) -> Path | None:
        if not filename or filename.endswith(_TMP_SUFFIX):
            return None
        candidate = (self.root / filename).resolve()
        if candidate.parent != self.root:
            return None
        return candidate

    def _write(self, stream: BinaryIO, original_filename: str | None) -> BlobName:
        self.ensure_root()
        while True:
            name = self._new_name(original_filename)
            target = self.root / name
            if not target.exists():
                break
        tmp = self.root / f"{name}{_TMP_SUFFIX}"
        try:
            with open(tmp, "xb") as buffer:
                shutil.copyfileobj(stream, buffer)
            os.replace(tmp, target)
        except OSError as e:
            tmp.unlink(missing_ok=True)
            logger.error(
                f"Failed to write blob: {e}", extra={"photo_filename": name},
            )
            raise BlobStorageError(
                str(e), "write", ErrorContext(photo_filename=name),
            ) from e
        return name

    async def save(
        self, stream: BinaryIO, original_filename: str | None = None,
    ) -> BlobName:
        """Persist the stream under a fresh name and return that name."""
        name = await run_in_threadpool(self._write, stream, original_filename)
        logger.info("Blob saved", extra={"photo_filename": name})
        return name

    def _open(self, path: Path) -> BinaryIO | None:
        try:
            return path.open("rb")
        except (FileNotFoundError, IsADirectoryError):
            return None

    async def open(self, filename: str) -> BinaryIO | None:
        """Open a blob for reading, or None when absent.

        The handle stays readable if the blob is removed afterwards, so a
        concurrent photo replace cannot break a response already started.
        """
        path = self._path_for(filename)
        if path is None:
            return None
        return await run_in_threadpool(self._open, path)

    def _unlink(self, filename: str) -> None:
        path = self._path_for(filename)
        if path is None:
            return
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.warning(
                f"Best-effort blob removal failed: {e}",
                extra={"photo_filename": filename},
            )
            return
        logger.info("Blob removed", extra={"photo_filename": filename})

    async def remove(self, filename: str) -> None:
        """Best-effort delete; failures are logged, never raised."""
        await run_in_threadpool(self._unlink, filename)
