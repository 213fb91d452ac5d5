"""Shared helpers for bladetags internals."""
from __future__ import annotations

from .merge import deep_merge
from .text import camel_case, kebab_case, str_after, str_start

__all__ = ["deep_merge", "camel_case", "kebab_case", "str_after", "str_start"]
