from __future__ import annotations

import os
from typing import Tuple

from dotenv import load_dotenv

from .client import DEFAULT_API_URL

DEFAULT_LOG_LEVEL = "INFO"


def load_env_config(*, use_dotenv: bool = True) -> Tuple[str, str]:
    """Load the Linear GraphQL endpoint and API key from environment (optional .env)."""
    if use_dotenv:
        load_dotenv()
    api_url = os.getenv("LINEAR_API_URL", "").strip() or DEFAULT_API_URL
    api_key = os.getenv("LINEAR_API_KEY", "").strip()
    return api_url, api_key


def log_level_from_env() -> str:
    return os.getenv("LINEAR_MCP_LOG_LEVEL", "").strip() or DEFAULT_LOG_LEVEL


__all__ = ["load_env_config", "log_level_from_env", "DEFAULT_LOG_LEVEL"]
