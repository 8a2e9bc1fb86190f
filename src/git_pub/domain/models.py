from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EntryType(str, Enum):
    """Object type of a tree entry as reported by ``git ls-tree``."""

    tree = "tree"
    blob = "blob"
    other = "other"

    @classmethod
    def from_git(cls, value: str) -> EntryType:
        # submodules show up as "commit"; anything unknown is kept as other
        if value == "tree":
            return cls.tree
        if value == "blob":
            return cls.blob
        return cls.other


class Operation(str, Enum):
    tag_index = "tag_index"
    tree_listing = "tree_listing"
    blob_content = "blob_content"


@dataclass(frozen=True)
class TreeEntry:
    """A single record of a directory listing at a tag."""

    mode: str
    type: EntryType
    object_id: str
    name: str


@dataclass(frozen=True)
class RequestPath:
    """An incoming URL path split into tag and remainder."""

    tag: str | None
    rest: str
    trailing_slash: bool


@dataclass(frozen=True)
class TagIndex:
    title: str
    tags: list[str]  # publish tags, sorted ascending


@dataclass(frozen=True)
class TreeListing:
    title: str
    tag: str
    path: str
    entries: list[TreeEntry]  # sorted by name


@dataclass(frozen=True)
class BlobContent:
    title: str
    tag: str
    path: str
    content: bytes
    content_type: str


PubResult = TagIndex | TreeListing | BlobContent
