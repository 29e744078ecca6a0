"""Attachment codec: bridges uploaded files and the ledger's inline base64 form.

Uploads are staged to the upload directory first (one file per multipart
part), then encoded and persisted by the grievance service. The staging
scope removes every temporary copy on exit, whether the ledger write
succeeded or not.

Rule: No FastAPI here. Routers read the multipart bytes and hand them over.
"""


import base64
import binascii
import logging
import time
import uuid
from dataclasses import dataclass, field
from pathlib import Path
from types import TracebackType

from streeteats.core.exceptions import AttachmentTooLargeError, ValidationError

logger = logging.getLogger(__name__)

DEFAULT_MIMETYPE = "application/octet-stream"

# ---------------------------------------------------------------------------
# Types
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class StagedFile:
    """Temporary on-disk copy of one uploaded file."""

    path: Path
    filename: str
    mimetype: str


@dataclass(frozen=True)
class EncodedAttachment:
    filename: str
    mimetype: str
    content: str

    def as_dict(self) -> dict[str, str]:
        return {"filename": self.filename, "mimetype": self.mimetype, "content": self.content}

# ---------------------------------------------------------------------------
# Encode / decode / cleanup
# ---------------------------------------------------------------------------

def encode(staged: StagedFile, max_bytes: int | None = None) -> EncodedAttachment:
    """Read the whole staged file and return its base64 representation.

    No size cap applies unless *max_bytes* is given.
    """
    data = staged.path.read_bytes()
    if max_bytes is not None and len(data) > max_bytes:
        raise AttachmentTooLargeError(staged.filename, max_bytes)
    return EncodedAttachment(
        filename=staged.filename,
        mimetype=staged.mimetype,
        content=base64.b64encode(data).decode("ascii"),
    )


def decode(content: str) -> bytes:
    try:
        return base64.b64decode(content, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValidationError(f"Attachment content is not valid base64: {exc}") from exc


def cleanup(staged: StagedFile) -> None:
    """Remove the temporary copy; a file that is already gone is fine."""
    try:
        staged.path.unlink(missing_ok=True)
    except OSError as exc:
        logger.warning("Could not remove staged upload %s: %s", staged.path, exc)

# ---------------------------------------------------------------------------
# Staging scope
# ---------------------------------------------------------------------------

@dataclass
class UploadStage:
    """Context manager owning the staged copies of one request's uploads.

    Usage::

        with UploadStage(upload_dir) as stage:
            stage.add(data, "photo.jpg", "image/jpeg")
            await service.submit(body, stage.files)
    """

    upload_dir: Path
    files: list[StagedFile] = field(default_factory=list)

    def add(self, data: bytes, filename: str | None, mimetype: str | None) -> StagedFile:
        original = filename or "attachment"
        self.upload_dir.mkdir(parents=True, exist_ok=True)
        staged = StagedFile(
            path=self.upload_dir / f"{time.time_ns()}-{uuid.uuid4().hex[:8]}-{Path(original).name}",
            filename=original,
            mimetype=mimetype or DEFAULT_MIMETYPE,
        )
        # Registered before writing so a failed write is still cleaned up
        self.files.append(staged)
        staged.path.write_bytes(data)
        return staged

    def __enter__(self) -> "UploadStage":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        for staged in self.files:
            cleanup(staged)
        if self.files:
            logger.debug("Removed %d staged upload(s)", len(self.files))
        self.files.clear()
