"""Xcode object identifiers (24 hex chars, uppercase)."""
from __future__ import annotations

import uuid
from typing import Callable, List, Optional

OBJECT_ID_LENGTH = 24


def new_object_id() -> str:
    return uuid.uuid4().hex[:OBJECT_ID_LENGTH].upper()


class IdentifierGenerator:
    """Issues fresh object IDs and remembers them for inspection."""

    def __init__(self, source: Optional[Callable[[], str]] = None):
        self._source = source or new_object_id
        self.issued: List[str] = []

    def next(self) -> str:
        value = self._source()
        # 截断/补齐到固定长度
        value = value[:OBJECT_ID_LENGTH].rjust(OBJECT_ID_LENGTH, "0")
        self.issued.append(value)
        return value

    def __len__(self) -> int:
        return len(self.issued)
