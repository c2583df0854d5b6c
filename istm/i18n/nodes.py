from __future__ import annotations

from enum import Enum
from typing import Any, Mapping


class NodeKind(str, Enum):
    BRANCH = "branch"  # mapping: descend into it
    TEXT = "text"  # str: formattable leaf
    OTHER = "other"  # anything else yaml can produce


def node_kind(value: Any) -> NodeKind:
    if isinstance(value, Mapping):
        return NodeKind.BRANCH
    if isinstance(value, str):
        return NodeKind.TEXT
    return NodeKind.OTHER


__all__ = ["NodeKind", "node_kind"]
