"""Attribute parsing for custom component tags.

Turns the raw attribute text captured from a tag into an ordered mapping of
camelCased keys to emitted values:

- ``title="Hi"``    -> ``{"title": "'Hi'"}``       (literal, quoted and escaped)
- ``:count="5+1"``  -> ``{"count": "5+1"}``        (bound, raw expression)
- ``bind:x="$y"``   -> ``{"x": "$y"}``             (explicit bind marker)
- ``disabled``      -> ``{"disabled": "true"}``    (bare, bound to true)

Later duplicates overwrite earlier keys in place; unparsable fragments are
skipped rather than reported.
"""
from __future__ import annotations

import re
from typing import Dict, Optional

from ..utils.text import camel_case, str_after, str_start

BIND_MARKER = "bind:"


class AttributeParser:
    """Parse attribute strings captured by the tag passes."""

    # Shorthand bind `:name` at the start of the text or after whitespace.
    # Quoted strings are matched first so markers inside values are left alone.
    SHORTHAND_BIND_PATTERN = re.compile(r"(\"[^\"]*\"|'[^']*')|(^|\s):([\w-]+)")

    ATTRIBUTE_PATTERN = re.compile(
        r"(?P<attribute>:?[\w-][\w:-]*)"
        r"(?:=(?P<value>\"[^\"]*\"|'[^']*'|[^\s>]+))?"
    )

    def normalize_bind_attributes(self, text: str) -> str:
        """Rewrite ``:name`` shorthand to the explicit ``bind:name`` form."""

        def replacer(match: re.Match[str]) -> str:
            if match.group(1) is not None:
                return match.group(1)
            return f"{match.group(2)}{BIND_MARKER}{match.group(3)}"

        return self.SHORTHAND_BIND_PATTERN.sub(replacer, text)

    def parse(self, text: str) -> Dict[str, str]:
        """Parse ``text`` into an ordered ``{key: emitted value}`` mapping.

        Args:
            text: Raw attribute text, e.g. ``title="Hi" :count="1" disabled``

        Returns:
            Mapping of camelCased attribute names to emitted values. Literal
            values are single-quoted; bound values are raw expressions.
        """
        text = self.normalize_bind_attributes(text)

        attributes: Dict[str, str] = {}
        for match in self.ATTRIBUTE_PATTERN.finditer(text):
            key, value = self._convert(match.group("attribute"), match.group("value"))
            attributes[key] = value
        return attributes

    def _convert(self, attribute: str, value: Optional[str]) -> tuple[str, str]:
        attribute = camel_case(attribute)

        if value is None:
            value = "true"
            attribute = str_start(attribute, BIND_MARKER)

        value = _strip_quotes(value)

        if attribute.startswith(BIND_MARKER):
            return str_after(attribute, BIND_MARKER), value

        escaped = value.replace("'", "\\'")
        return attribute, f"'{escaped}'"


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
        return value[1:-1]
    return value


_default_parser = AttributeParser()


def parse_attributes(text: str) -> Dict[str, str]:
    """Parse attribute text with the default parser."""
    return _default_parser.parse(text)


__all__ = ["AttributeParser", "BIND_MARKER", "parse_attributes"]
