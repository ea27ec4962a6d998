"""Domain models for folders, notes and documents."""

from dataclasses import dataclass
from enum import Enum


class FileType(str, Enum):
    """Kinds of file items."""

    NOTE = "note"
    DOCUMENT = "document"


@dataclass(frozen=True)
class Folder:
    """A named container for file items."""

    id: str
    name: str
    created_at: int


@dataclass(frozen=True)
class FileItem:
    """A note or document reference stored in a folder.

    Attributes:
        id: Opaque identifier assigned at creation time.
        folder_id: Owning folder id, or ``"root"``.
        title: Display title.
        content: Note text, or descriptive metadata for documents.
        type: Note or document.
        created_at: Creation instant in epoch milliseconds.
    """

    id: str
    folder_id: str
    title: str
    content: str
    type: FileType
    created_at: int


__all__ = ["FileType", "Folder", "FileItem"]
