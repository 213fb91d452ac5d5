"""Identifier case conversion and small string helpers.

The case rules follow the ones used by Blade component attribute names:

- camel_case("data-id")      -> "dataId"
- camel_case("bind:foo-bar") -> "bind:fooBar"
- kebab_case("alertBox")     -> "alert-box"
"""
from __future__ import annotations

import re

_WORD_SEPARATORS = re.compile(r"[-_]+")
_WHITESPACE = re.compile(r"\s+")
_KEBAB_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def studly_case(value: str) -> str:
    """Upper-case the first letter of every word and drop separators."""
    words = _WHITESPACE.split(_WORD_SEPARATORS.sub(" ", value))
    return "".join(word[:1].upper() + word[1:] for word in words if word)


def camel_case(value: str) -> str:
    """Convert ``value`` to camelCase.

    Only ``-`` and ``_`` split words; any other character (such as the ``:``
    in a ``bind:`` marker) is kept as part of its word.
    """
    studly = studly_case(value)
    return studly[:1].lower() + studly[1:]


def kebab_case(value: str) -> str:
    """Convert ``value`` (camelCase, snake_case or already kebab) to kebab-case."""
    value = _KEBAB_BOUNDARY.sub("-", value)
    return _WORD_SEPARATORS.sub("-", _WHITESPACE.sub("-", value)).lower()


def str_start(value: str, prefix: str) -> str:
    """Return ``value`` starting with exactly one ``prefix``."""
    return value if value.startswith(prefix) else prefix + value


def str_after(value: str, search: str) -> str:
    """Return everything after the first occurrence of ``search`` (or ``value`` unchanged)."""
    if not search:
        return value
    _, found, rest = value.partition(search)
    return rest if found else value


__all__ = ["studly_case", "camel_case", "kebab_case", "str_start", "str_after"]
