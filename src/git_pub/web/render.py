"""HTML pages for the tag index, tree listings and file views."""
from __future__ import annotations

from html import escape
from urllib.parse import quote

from git_pub.domain.models import (
    BlobContent,
    EntryType,
    PubResult,
    TagIndex,
    TreeEntry,
    TreeListing,
)
from git_pub.infrastructure.content_types import DEFAULT_CONTENT_TYPE

HTML_CONTENT_TYPE = "text/html; charset=utf-8"


def _page(title: str, body: str) -> str:
    return (
        "<html>\n"
        "<head>\n"
        f"<title>{title}</title>\n"
        "</head>\n"
        "<body>\n"
        f"<h1>{title}</h1>\n"
        f"{body}"
        "</body>\n"
        "</html>\n"
    )


def _href(name: str) -> str:
    return escape(quote(name, safe=""))


def _location(title: str, tag: str, path: str) -> str:
    return f"{escape(title)} {escape(tag)}:{escape(path)}"


def render_tag_index(index: TagIndex) -> str:
    items = "".join(
        f'<li><a href="{_href(tag)}/">{escape(tag)}</a></li>\n'
        for tag in index.tags
    )
    return _page(escape(index.title), f"<ul>\n{items}</ul>\n")


def _entry_item(entry: TreeEntry) -> str:
    name = escape(entry.name)
    href = _href(entry.name)
    if entry.type is EntryType.tree:
        return f'<li><a href="{href}/">{name}/</a></li>\n'
    if entry.type is EntryType.blob:
        return f'<li><a href="{href}">{name}</a></li>\n'
    return f"<li>{name}</li>\n"


def render_tree_listing(listing: TreeListing) -> str:
    items = '<li><a href="..">..</a></li>\n'
    items += "".join(_entry_item(e) for e in listing.entries)
    return _page(
        _location(listing.title, listing.tag, listing.path),
        f"<ol>\n{items}</ol>\n",
    )


def render_blob(blob: BlobContent) -> str:
    text = blob.content.decode("utf-8", errors="replace")
    return _page(
        _location(blob.title, blob.tag, blob.path),
        '<p><a href=".">back</a></p>\n'
        f"<pre>{escape(text)}</pre>\n",
    )


def render(result: PubResult) -> tuple[bytes, str]:
    """Return ``(body, media_type)`` for a dispatch result.

    Non-text blobs are passed through untouched with their own type.
    """
    if isinstance(result, BlobContent):
        if result.content_type != DEFAULT_CONTENT_TYPE:
            return result.content, result.content_type
        page = render_blob(result)
    elif isinstance(result, TreeListing):
        page = render_tree_listing(result)
    else:
        page = render_tag_index(result)
    return page.encode("utf-8"), HTML_CONTENT_TYPE
