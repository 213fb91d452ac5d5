from __future__ import annotations

from typing import Any, Dict, Mapping


class BladeTagsError(Exception):
    """Base exception for bladetags."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class PatternCompileError(BladeTagsError, ValueError):
    """Raised when a component's match pattern cannot be built."""

    def __init__(
        self,
        message: str,
        *,
        tag: str | None = None,
        view: str | None = None,
        prefix: str | None = None,
        stage: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        ctx = dict(context or {})
        if tag is not None:
            ctx.setdefault("tag", tag)
        if view is not None:
            ctx.setdefault("view", view)
        if prefix is not None:
            ctx.setdefault("prefix", prefix)
        if stage is not None:
            ctx.setdefault("stage", stage)
        BladeTagsError.__init__(self, message, context=ctx)
        ValueError.__init__(self, message)
        self.tag = tag
        self.view = view
        self.prefix = prefix
        self.stage = stage


class ComponentRegistrationError(BladeTagsError, ValueError):
    """Raised when a component cannot be registered."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        BladeTagsError.__init__(self, message, context=context)
        ValueError.__init__(self, message)


class ConfigError(BladeTagsError):
    """Raised when configuration cannot be loaded or fails validation."""


class ContextStackError(BladeTagsError, RuntimeError):
    """Raised for invalid context stack operations (e.g. popping an empty stack)."""

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        BladeTagsError.__init__(self, message, context=context)
        RuntimeError.__init__(self, message)


__all__ = [
    "BladeTagsError",
    "PatternCompileError",
    "ComponentRegistrationError",
    "ConfigError",
    "ContextStackError",
]
