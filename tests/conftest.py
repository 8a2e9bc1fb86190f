import os
import subprocess
from pathlib import Path

import pytest

GPL_TEXT = (
    "\t\t    GNU GENERAL PUBLIC LICENSE\n"
    "\t\t       Version 2, June 1991\n"
)

PNG_BYTES = b"\x89PNG\r\n\x1a\n\x00\x00\x00\rIHDR\x00\x00\x00\x01"

_GIT_ENV = {
    **os.environ,
    "GIT_AUTHOR_NAME": "Test User",
    "GIT_AUTHOR_EMAIL": "test@example.com",
    "GIT_COMMITTER_NAME": "Test User",
    "GIT_COMMITTER_EMAIL": "test@example.com",
}


def git(repo: Path, *args: str) -> None:
    subprocess.run(
        ["git", "-C", str(repo), *args],
        capture_output=True, check=True, env=_GIT_ENV,
    )


def commit_files(repo: Path, files: dict[str, str | bytes], message: str) -> None:
    """Write *files* and commit them in a single commit."""
    for file_path, content in files.items():
        full_path = repo / file_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            full_path.write_bytes(content)
        else:
            full_path.write_text(content)
        git(repo, "add", file_path)
    git(repo, "commit", "-m", message)


@pytest.fixture
def tmp_git_repo(tmp_path: Path) -> Path:
    """Create a temporary git repository (work tree)."""
    repo = tmp_path / "project"
    subprocess.run(
        ["git", "init", str(repo)],
        capture_output=True, check=True,
    )
    return repo


@pytest.fixture
def published_repo(tmp_git_repo: Path) -> Path:
    """A repository with two releases and a few non-publish tags.

    v1.0: README, COPYING, docs/
    v2.0: adds img/logo.png, src/main.c, empty.txt, a&b.txt
    """
    commit_files(
        tmp_git_repo,
        {
            "README": "Project readme\n",
            "COPYING": GPL_TEXT,
            "docs/guide.txt": "How to <use> it\n",
            "docs/intro.md": "# Intro\n",
        },
        "Initial release",
    )
    git(tmp_git_repo, "tag", "v1.0")
    git(tmp_git_repo, "tag", "feature/preview")

    commit_files(
        tmp_git_repo,
        {
            "README": "Project readme, second edition\n",
            "img/logo.png": PNG_BYTES,
            "src/main.c": "int main(void) { return 0; }\n",
            "empty.txt": "",
            "a&b.txt": "ampersand\n",
        },
        "Second release",
    )
    git(tmp_git_repo, "tag", "-a", "v2.0", "-m", "Release 2.0")
    git(tmp_git_repo, "tag", "nightly")
    return tmp_git_repo


@pytest.fixture
def git_dir(published_repo: Path) -> str:
    return str(published_repo / ".git")
