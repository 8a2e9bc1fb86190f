from __future__ import annotations

from typing import Protocol

from git_pub.domain.models import TreeEntry


class GitRepository(Protocol):
    """Read-only view of a repository's tags, trees and blobs."""

    def list_tags(self) -> list[str]: ...

    def list_tree(self, tag: str, path: str) -> list[TreeEntry]: ...

    def read_blob(self, tag: str, path: str) -> bytes: ...
