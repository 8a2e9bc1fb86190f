"""Launch the publishing app under uvicorn."""
from __future__ import annotations

from git_pub.config import PubConfig


def launch(
    config: PubConfig,
    host: str = "127.0.0.1",
    port: int = 9292,
    log_level: str = "info",
) -> None:
    import uvicorn

    from git_pub.web.api import app

    app.state.config = config
    print(f"Publishing {config.title}: http://{host}:{port}/")
    uvicorn.run(app, host=host, port=port, log_level=log_level.lower())
