"""Resource collection APIs."""

from .base import ResourceAPI
from .catalog import CatalogAPI
from .documents import DocumentsAPI
from .files import FilesAPI
from .folders import FoldersAPI
from .groups import GroupsAPI
from .trash import TrashAPI

__all__ = [
    "ResourceAPI",
    "CatalogAPI",
    "DocumentsAPI",
    "FilesAPI",
    "FoldersAPI",
    "GroupsAPI",
    "TrashAPI",
]
