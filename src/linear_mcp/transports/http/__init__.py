from .app import build_http_app
from .config import HttpConfig

__all__ = ["build_http_app", "HttpConfig"]
