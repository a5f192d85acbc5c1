"""Validation and storage of uploaded profile photos."""
from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass
from pathlib import Path, PurePath

from fastapi import UploadFile
from fastapi.concurrency import run_in_threadpool

from ..errors import PayloadTooLarge, StoreError, UnsupportedMediaType

logger = logging.getLogger(__name__)

ALLOWED_CONTENT_TYPES = frozenset({"image/jpeg", "image/png"})


@dataclass(frozen=True)
class PendingAttachment:
    """An upload that passed the type and size checks but is not yet on disk."""

    filename: str
    content_type: str
    data: bytes


class MediaAttachmentHandler:
    """Checks uploads and writes them under collision-resistant names.

    Files are never removed here, not even when a newer photo replaces them
    or their employee is deleted.
    """

    def __init__(self, upload_dir: str | Path, max_bytes: int) -> None:
        self.upload_dir = Path(upload_dir)
        self.max_bytes = max_bytes

    def ensure_upload_dir(self) -> Path:
        """Create the upload directory so it can be served before the first upload."""

        self.upload_dir.mkdir(parents=True, exist_ok=True)
        return self.upload_dir

    async def accept(self, upload: UploadFile | None) -> PendingAttachment | None:
        """Validate an optional upload, returning ``None`` when nothing was sent."""

        if upload is None or not upload.filename:
            return None

        if upload.content_type not in ALLOWED_CONTENT_TYPES:
            logger.info("Rejected upload %r with type %s", upload.filename, upload.content_type)
            raise UnsupportedMediaType()

        data = await upload.read(self.max_bytes + 1)
        if len(data) > self.max_bytes:
            logger.info("Rejected upload %r larger than %d bytes", upload.filename, self.max_bytes)
            raise PayloadTooLarge()

        return PendingAttachment(
            filename=upload.filename,
            content_type=upload.content_type,
            data=data,
        )

    def generate_name(self, original_name: str) -> str:
        """``<millis>-<random>-<original>``; the original is reduced to its basename."""

        base = PurePath(original_name.replace("\\", "/")).name or "upload"
        unique_suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
        return f"{unique_suffix}-{base}"

    async def store(self, attachment: PendingAttachment | None) -> str | None:
        """Persist an accepted attachment and return its relative reference."""

        if attachment is None:
            return None

        name = self.generate_name(attachment.filename)
        target = self.upload_dir / name
        try:
            await run_in_threadpool(self._write, target, attachment.data)
        except OSError as exc:
            logger.exception("Could not write upload to %s", target)
            raise StoreError(str(exc)) from exc

        reference = f"{self.upload_dir.name}/{name}"
        logger.info("Stored upload %s (%d bytes)", reference, len(attachment.data))
        return reference

    @staticmethod
    def _write(target: Path, data: bytes) -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        # exclusive create: an existing upload is never overwritten
        with target.open("xb") as fh:
            fh.write(data)
