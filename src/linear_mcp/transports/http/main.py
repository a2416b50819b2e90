from __future__ import annotations

import uvicorn

from linear_mcp.core.config import log_level_from_env
from linear_mcp.core.logging import setup_logging

from .app import build_http_app
from .config import HttpConfig


def run() -> None:
    setup_logging(log_level_from_env())
    cfg = HttpConfig.from_env()
    uvicorn.run(build_http_app(cfg), host=cfg.host, port=cfg.port, log_config=None)


if __name__ == "__main__":
    run()
