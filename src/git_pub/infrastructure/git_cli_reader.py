import logging
import subprocess
from pathlib import Path

from git_pub.domain.models import EntryType, TreeEntry

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


class GitError(Exception):
    """Raised when the git executable cannot be run at all."""


class GitCliReader:
    """Runs read-only git commands against a fixed git directory.

    Arguments are always passed as a vector, never through a shell, so tag
    and path values may safely contain shell metacharacters.  A failing git
    command (bad object name, unknown tag) is not an error here: its
    diagnostics are logged and the caller sees empty output.
    """

    def __init__(
        self,
        git_dir: str,
        git_bin: str = "git",
        timeout: float | None = DEFAULT_TIMEOUT,
    ) -> None:
        path = Path(git_dir)
        if not path.is_dir():
            raise ValueError(f"Not a git directory: {path}")
        self._git_dir = str(path)
        self._git_bin = git_bin
        self._timeout = timeout

    @property
    def git_dir(self) -> str:
        return self._git_dir

    def _run(self, *args: str) -> bytes:
        cmd = [self._git_bin, "--git-dir", self._git_dir, *args]
        logger.debug("Running %s", cmd)
        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                timeout=self._timeout,
                shell=False,
            )
        except subprocess.TimeoutExpired:
            logger.warning(
                "git %s timed out after %ss", " ".join(args), self._timeout
            )
            return b""
        except OSError as e:
            raise GitError(f"Cannot run {self._git_bin}: {e}") from e
        if result.returncode != 0:
            logger.warning(
                "git %s exited with %d: %s",
                " ".join(args),
                result.returncode,
                result.stderr.decode("utf-8", errors="replace").strip(),
            )
        return result.stdout

    def list_tags(self) -> list[str]:
        output = self._run("tag")
        return _parse_tag_lines(output)

    def list_tree(self, tag: str, path: str) -> list[TreeEntry]:
        output = self._run("ls-tree", "-z", f"{tag}:{path}")
        return _parse_ls_tree(output)

    def read_blob(self, tag: str, path: str) -> bytes:
        return self._run("show", f"{tag}:{path}")


def _parse_tag_lines(output: bytes) -> list[str]:
    tags: list[str] = []
    # Only "\n" ends a line; tag names may hold other Unicode line breaks.
    for raw in output.split(b"\n"):
        line = raw.rstrip(b"\r").decode("utf-8", errors="replace")
        if not line:
            continue
        tags.append(line)
    return tags


def _parse_ls_tree(output: bytes) -> list[TreeEntry]:
    entries: list[TreeEntry] = []
    for record in output.split(b"\0"):
        # Format: <mode> SP <type> SP <object> TAB <name>
        if not record:
            continue
        info, sep, name = record.partition(b"\t")
        if not sep:
            continue
        parts = info.decode("ascii", errors="replace").split(" ")
        if len(parts) < 3:
            continue
        mode, type_name, object_id = parts[0], parts[1], parts[2]
        entries.append(
            TreeEntry(
                mode=mode,
                type=EntryType.from_git(type_name),
                object_id=object_id,
                name=name.decode("utf-8", errors="replace"),
            )
        )
    return entries
