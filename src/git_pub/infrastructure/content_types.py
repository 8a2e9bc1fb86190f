"""Static file-extension to MIME type table."""
from __future__ import annotations

from pathlib import PurePosixPath

DEFAULT_CONTENT_TYPE = "text/plain"

# Common entries of the Rack MIME table.  Anything not listed is shown as text.
_MIME_TYPES: dict[str, str] = {
    ".asc": "application/pgp-signature",
    ".atom": "application/atom+xml",
    ".avi": "video/x-msvideo",
    ".bmp": "image/bmp",
    ".bz2": "application/x-bzip2",
    ".c": "text/x-c",
    ".cc": "text/x-c",
    ".cpp": "text/x-c",
    ".css": "text/css",
    ".csv": "text/csv",
    ".deb": "application/x-debian-package",
    ".diff": "text/x-diff",
    ".doc": "application/msword",
    ".dtd": "application/xml-dtd",
    ".gif": "image/gif",
    ".gz": "application/x-gzip",
    ".h": "text/x-c",
    ".htm": "text/html",
    ".html": "text/html",
    ".ico": "image/vnd.microsoft.icon",
    ".jar": "application/java-archive",
    ".java": "text/x-java-source",
    ".jpeg": "image/jpeg",
    ".jpg": "image/jpeg",
    ".js": "application/javascript",
    ".json": "application/json",
    ".mp3": "audio/mpeg",
    ".mp4": "video/mp4",
    ".ogg": "application/ogg",
    ".patch": "text/x-diff",
    ".pdf": "application/pdf",
    ".pl": "text/x-script.perl",
    ".png": "image/png",
    ".ps": "application/postscript",
    ".py": "text/x-script.python",
    ".rb": "text/x-script.ruby",
    ".rss": "application/rss+xml",
    ".rtf": "application/rtf",
    ".s": "text/x-asm",
    ".sh": "application/x-sh",
    ".svg": "image/svg+xml",
    ".swf": "application/x-shockwave-flash",
    ".tar": "application/x-tar",
    ".tgz": "application/x-tar-gz",
    ".tif": "image/tiff",
    ".tiff": "image/tiff",
    ".txt": "text/plain",
    ".wav": "audio/x-wav",
    ".woff": "application/font-woff",
    ".xhtml": "application/xhtml+xml",
    ".xml": "application/xml",
    ".xsl": "application/xml",
    ".yaml": "text/yaml",
    ".yml": "text/yaml",
    ".zip": "application/zip",
}


def resolve_content_type(extension: str, default: str = DEFAULT_CONTENT_TYPE) -> str:
    """Return the MIME type for *extension* (e.g. ``".png"``), or *default*."""
    return _MIME_TYPES.get(extension.lower(), default)


def content_type_for_path(path: str) -> str:
    """MIME type of a repository file path, judged by its extension.

    ``COPYING`` and dotfiles such as ``.gitignore`` have no extension and
    fall back to plain text.
    """
    return resolve_content_type(PurePosixPath(path).suffix)
