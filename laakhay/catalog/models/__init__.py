"""Data models."""

from .upload import FileUpload

__all__ = ["FileUpload"]
