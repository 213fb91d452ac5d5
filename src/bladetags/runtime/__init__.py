"""Runtime helpers for executing compiled templates."""
from __future__ import annotations

from .context_stack import ContextStack

__all__ = ["ContextStack"]
