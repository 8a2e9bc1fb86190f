"""Construction-time configuration for a git-pub instance."""
from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from pathlib import PurePath

from git_pub.infrastructure.git_cli_reader import DEFAULT_TIMEOUT

# Tag names without "/" or ":" are published by default.
DEFAULT_PUB_TAG_PATTERN = r"[^/:]+"


def compile_pattern(pattern: str | re.Pattern[str]) -> re.Pattern[str]:
    """Compile a publish-tag pattern, raising ValueError on bad syntax."""
    if isinstance(pattern, re.Pattern):
        return pattern
    try:
        return re.compile(pattern)
    except re.error as e:
        raise ValueError(f"Invalid tag pattern {pattern!r}: {e}") from e


def default_title(git_dir: str) -> str:
    """Derive a display title from the repository path.

    ``linux/.git`` gives ``linux``; a bare ``project.git`` keeps its name.
    """
    path = PurePath(os.path.abspath(git_dir))
    if path.name == ".git":
        path = path.parent
    return path.name or str(git_dir)


@dataclass(frozen=True)
class PubConfig:
    git_dir: str
    pub_tag_pattern: re.Pattern[str] = field(
        default_factory=lambda: re.compile(DEFAULT_PUB_TAG_PATTERN)
    )
    title: str = ""
    git_bin: str = "git"
    timeout: float | None = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "pub_tag_pattern", compile_pattern(self.pub_tag_pattern)
        )
        if not self.title:
            object.__setattr__(self, "title", default_title(self.git_dir))

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> PubConfig:
        env = os.environ if environ is None else environ
        timeout = env.get("GIT_PUB_TIMEOUT")
        return cls(
            git_dir=env.get("GIT_PUB_GIT_DIR", ".git"),
            pub_tag_pattern=env.get("GIT_PUB_TAG_PATTERN", DEFAULT_PUB_TAG_PATTERN),
            title=env.get("GIT_PUB_TITLE", ""),
            git_bin=env.get("GIT_PUB_GIT_BIN", "git"),
            timeout=float(timeout) if timeout else DEFAULT_TIMEOUT,
        )
