"""Explicit tool outcomes returned by the dispatcher."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Union


class FailureKind(str, Enum):
    UNKNOWN_TOOL = "unknown_tool"
    VALIDATION = "validation"
    AUTH = "auth"
    REMOTE = "remote"


@dataclass(frozen=True)
class ToolSuccess:
    """A tool result.

    Narrative results carry only ``text``; structured results also keep the
    remote payload untouched in ``data``.
    """

    text: str
    data: Optional[Dict[str, Any]] = None

    @property
    def structured(self) -> bool:
        return self.data is not None


@dataclass(frozen=True)
class ToolFailure:
    kind: FailureKind
    message: str
    operation: Optional[str] = None


ToolResult = Union[ToolSuccess, ToolFailure]


def narrative(text: str) -> ToolSuccess:
    return ToolSuccess(text=text)


def structured(payload: Dict[str, Any]) -> ToolSuccess:
    return ToolSuccess(text=json.dumps(payload, indent=2), data=payload)


__all__ = [
    "FailureKind",
    "ToolSuccess",
    "ToolFailure",
    "ToolResult",
    "narrative",
    "structured",
]
