#!/usr/bin/env python3
"""
Enforce import layering under src/linear_mcp/core/.

- core may not import a transport, the MCP server layer or a web stack.
- core/tools may additionally not import httpx: handlers go through LinearClient.
"""

from __future__ import annotations

import ast
import sys
from pathlib import Path
from typing import Iterator, Tuple

REPO_ROOT = Path(__file__).resolve().parent.parent
CORE_DIR = REPO_ROOT / "src" / "linear_mcp" / "core"
TOOLS_DIR = CORE_DIR / "tools"

CORE_FORBIDDEN = (
    "starlette",
    "uvicorn",
    "mcp.server",
    "linear_mcp.server",
    "linear_mcp.transports",
)
TOOLS_FORBIDDEN = CORE_FORBIDDEN + ("httpx",)


def _matches(module: str, prefixes: Tuple[str, ...]) -> bool:
    return any(module == p or module.startswith(p + ".") for p in prefixes)


def absolute_imports(path: Path) -> Iterator[str]:
    for node in ast.walk(ast.parse(path.read_text())):
        if isinstance(node, ast.Import):
            yield from (alias.name for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.level == 0 and node.module:
            yield node.module


def violations() -> list[str]:
    found: list[str] = []
    for path in sorted(CORE_DIR.rglob("*.py")):
        forbidden = TOOLS_FORBIDDEN if TOOLS_DIR in path.parents else CORE_FORBIDDEN
        found.extend(
            f"{path.relative_to(REPO_ROOT)}: forbidden import '{module}'"
            for module in absolute_imports(path)
            if _matches(module, forbidden)
        )
    return found


def main() -> int:
    found = violations()
    for line in found:
        print(line, file=sys.stderr)
    return 1 if found else 0


if __name__ == "__main__":
    sys.exit(main())
