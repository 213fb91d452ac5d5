"""Runtime context stack read by compiled component directives.

Compiled templates push a frame when a ``<context>`` region opens, pop it when
the region closes, and every component start reads the flattened stack as
default arguments. ``scope()`` frames a push/pop pair so the pop always runs.

Example:
    stack = ContextStack()
    with stack.scope({"theme": "dark"}):
        stack.read()  # {"theme": "dark"}
    stack.read()      # {}
"""
from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Mapping

from bladetags.exceptions import ContextStackError

logger = logging.getLogger(__name__)


class ContextStack:
    """Last-in-first-out stack of key/value frames."""

    def __init__(self) -> None:
        self._frames: List[Dict[str, Any]] = []

    def push(self, data: Mapping[str, Any]) -> None:
        self._frames.append(dict(data))

    def pop(self) -> Dict[str, Any]:
        if not self._frames:
            raise ContextStackError("Cannot pop an empty context stack")
        return self._frames.pop()

    def read(self) -> Dict[str, Any]:
        """Merge all frames; keys in later frames override earlier ones."""
        merged: Dict[str, Any] = {}
        for frame in self._frames:
            merged.update(frame)
        return merged

    @property
    def depth(self) -> int:
        return len(self._frames)

    def clear(self) -> None:
        if self._frames:
            logger.debug("Clearing context stack with %d frame(s)", len(self._frames))
        self._frames.clear()

    @contextmanager
    def scope(self, data: Mapping[str, Any]) -> Iterator["ContextStack"]:
        """Push ``data`` for the duration of the block."""
        self.push(data)
        try:
            yield self
        finally:
            self.pop()


__all__ = ["ContextStack"]
