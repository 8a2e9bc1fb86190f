import logging
import re

from git_pub.config import PubConfig
from git_pub.domain.models import (
    BlobContent,
    Operation,
    PubResult,
    RequestPath,
    TagIndex,
    TreeEntry,
    TreeListing,
)
from git_pub.domain.ports import GitRepository
from git_pub.infrastructure.content_types import content_type_for_path

logger = logging.getLogger(__name__)

# First path segment followed by a slash; the segment never holds "/" or ":".
_TAG_PREFIX = re.compile(r"\A/([^/:]+)/")


def is_pub_tag(tag: str, pattern: re.Pattern[str]) -> bool:
    return pattern.fullmatch(tag) is not None


def list_pub_tags(repo: GitRepository, pattern: re.Pattern[str]) -> list[str]:
    """Tags of *repo* whose whole name matches *pattern*, sorted ascending."""
    return sorted({tag for tag in repo.list_tags() if is_pub_tag(tag, pattern)})


def list_files(repo: GitRepository, tag: str, path: str) -> list[TreeEntry]:
    """Entries of the directory *path* at *tag*, sorted by name.

    An unknown tag or path gives an empty list.
    """
    return sorted(repo.list_tree(tag, path), key=lambda e: e.name)


def show_file(repo: GitRepository, tag: str, path: str) -> tuple[bytes, str]:
    """Raw content of *path* at *tag* with its content type."""
    return repo.read_blob(tag, path), content_type_for_path(path)


def parse_request_path(path: str | None) -> RequestPath:
    path = path or "/"
    match = _TAG_PREFIX.match(path)
    if match is None:
        return RequestPath(tag=None, rest="", trailing_slash=path.endswith("/"))
    return RequestPath(
        tag=match.group(1),
        rest=path[match.end():],
        trailing_slash=path.endswith("/"),
    )


def route(request_path: RequestPath, pattern: re.Pattern[str]) -> Operation:
    """Choose the operation for a parsed request path.

    Missing or non-publish tags fall back to the tag index rather than
    failing, so stale links still land on a usable page.
    """
    if request_path.tag is None or not is_pub_tag(request_path.tag, pattern):
        return Operation.tag_index
    if request_path.trailing_slash:
        return Operation.tree_listing
    return Operation.blob_content


def dispatch(repo: GitRepository, config: PubConfig, path: str | None) -> PubResult:
    request_path = parse_request_path(path)
    operation = route(request_path, config.pub_tag_pattern)
    logger.debug("%s -> %s", path, operation.value)

    if operation is Operation.tree_listing:
        return TreeListing(
            title=config.title,
            tag=request_path.tag,
            path=request_path.rest,
            entries=list_files(repo, request_path.tag, request_path.rest),
        )
    if operation is Operation.blob_content:
        content, content_type = show_file(repo, request_path.tag, request_path.rest)
        return BlobContent(
            title=config.title,
            tag=request_path.tag,
            path=request_path.rest,
            content=content,
            content_type=content_type,
        )
    return TagIndex(
        title=config.title,
        tags=list_pub_tags(repo, config.pub_tag_pattern),
    )
