"""File upload data model."""

from __future__ import annotations

import mimetypes
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field


class FileUpload(BaseModel):
    """A file sent as the raw body of an upload request."""

    name: str = Field(..., min_length=1, description="File name sent in Content-Disposition")
    content: bytes = Field(..., description="Raw file bytes")
    type: str | None = Field(None, description="Media type, octet-stream when omitted")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_path(cls, path: str | Path, type: str | None = None) -> FileUpload:
        """Read a file from disk, guessing its media type from the name.

        Args:
            path: File to read
            type: Explicit media type, overriding the guess

        Returns:
            FileUpload with the file's name, bytes and media type
        """
        path = Path(path)
        guessed, _ = mimetypes.guess_type(path.name)
        return cls(name=path.name, content=path.read_bytes(), type=type or guessed)

    @property
    def size(self) -> int:
        return len(self.content)
