from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.responses import PlainTextResponse

from git_pub.application.use_cases import dispatch
from git_pub.config import PubConfig
from git_pub.infrastructure.git_cli_reader import GitCliReader, GitError
from git_pub.web.render import render

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    config = getattr(app.state, "config", None)
    if config is None:
        config = PubConfig.from_env()
        app.state.config = config
    app.state.repo = GitCliReader(
        config.git_dir, git_bin=config.git_bin, timeout=config.timeout
    )
    logger.info("Publishing %s as %r", config.git_dir, config.title)
    yield


# No docs routes: every path belongs to the repository view.
app = FastAPI(
    title="git-pub",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


@app.exception_handler(GitError)
async def git_error_handler(request: Request, exc: GitError) -> PlainTextResponse:
    logger.error("git failed for %s: %s", request.url.path, exc)
    return PlainTextResponse("Internal Server Error", status_code=500)


@app.api_route("/{full_path:path}", methods=["GET", "HEAD"])
def publish(full_path: str) -> Response:
    """Tag index, tree listing or file content depending on the path."""
    result = dispatch(app.state.repo, app.state.config, "/" + full_path)
    body, media_type = render(result)
    return Response(content=body, media_type=media_type)
