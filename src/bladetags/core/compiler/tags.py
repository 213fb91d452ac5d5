"""Tag transformers: rewrite custom component tags into directives.

Handles the three tag shapes of one component, in this order:
- <x-card title="Hi" />   - self-closing: start + end directive
- <x-card title="Hi">     - opening: start directive
- </x-card>               - closing: end directive (or context pop)

Patterns are built per component from the prefixed tag. A tag must be
followed by whitespace, ``/`` or ``>``; ``<x-card-item>`` never matches
the ``card`` component.
"""
from __future__ import annotations

import logging
import re
from functools import lru_cache
from typing import Pattern

from bladetags.exceptions import PatternCompileError

from ..components import TAG_PATTERN
from .attributes import AttributeParser
from .base import ContentTransformer, TransformContext

logger = logging.getLogger(__name__)

PREFIX_PATTERN = re.compile(r"^[A-Za-z0-9_.:-]*$")

# Characters that may continue a tag name.
_TAG_END = r"(?![\w:.-])"

# Attribute text of a self-closing tag: one line, stops at the first unquoted `>`.
# A quote with no partner on the line is plain text.
_INLINE_ATTRIBUTES = r"((?:\"[^\"\n]*\"|'[^'\n]*'|[^>\n])*?)"

# Attribute groups of an opening tag: name, name="v", name='v' or name=v.
_OPENING_ATTRIBUTES = r"((?:\s+[\w:-]+(?:=(?:\"[^\"]*\"|'[^']*'|[^'\"=<>\s]+))?)*\s*)"

_TEMPLATES = {
    "self-closing": r"<[^\S\n]*{tag}" + _TAG_END + r"[^\S\n]*" + _INLINE_ATTRIBUTES + r"[^\S\n]*/>",
    "opening": r"<\s*{tag}" + _OPENING_ATTRIBUTES + r"(?<![/=\-])>",
    "closing": r"</\s*{tag}" + _TAG_END + r"[^>]*>",
}


@lru_cache(maxsize=256)
def _compile(stage: str, prefixed_tag: str) -> Pattern[str]:
    return re.compile(_TEMPLATES[stage].format(tag=re.escape(prefixed_tag)))


def build_tag_pattern(stage: str, context: TransformContext) -> Pattern[str]:
    """Build the match pattern for ``stage`` of the component in ``context``.

    Raises:
        PatternCompileError: If the tag or prefix cannot be turned into a
            pattern, naming the component and stage.
    """
    component = context.component
    details = {
        "tag": component.tag,
        "view": component.view,
        "prefix": context.prefix,
        "stage": stage,
    }

    if not isinstance(component.tag, str) or not TAG_PATTERN.match(component.tag):
        raise PatternCompileError(
            f"Cannot build {stage} pattern for component {component.view!r}: "
            f"invalid tag {component.tag!r}",
            **details,
        )
    if not PREFIX_PATTERN.match(context.prefix or ""):
        raise PatternCompileError(
            f"Cannot build {stage} pattern for component {component.view!r}: "
            f"invalid prefix {context.prefix!r}",
            **details,
        )

    try:
        return _compile(stage, context.prefixed_tag)
    except re.error as exc:
        raise PatternCompileError(
            f"Cannot build {stage} pattern for component {component.view!r}: {exc}",
            **details,
        ) from exc


class SelfClosingTagTransformer(ContentTransformer):
    """Rewrite ``<x-card ... />`` into a start and end directive pair."""

    kind = "self-closing"

    def __init__(self, parser: AttributeParser | None = None) -> None:
        self.parser = parser or AttributeParser()

    def transform(self, content: str, context: TransformContext) -> str:
        pattern = build_tag_pattern(self.kind, context)
        emitter = context.emitter

        def replacer(match: re.Match[str]) -> str:
            attributes = self.parser.parse(match.group(1))
            return emitter.component(context.component, attributes)

        result, count = pattern.subn(replacer, content)
        context.record_rewrite(self.kind, count)
        return result


class OpeningTagTransformer(ContentTransformer):
    """Rewrite ``<x-card ...>`` into a start directive.

    Fragments ending in ``/``, ``=`` or ``-`` right before ``>`` are not
    opening tags and are left alone.
    """

    kind = "opening"

    def __init__(self, parser: AttributeParser | None = None) -> None:
        self.parser = parser or AttributeParser()

    def transform(self, content: str, context: TransformContext) -> str:
        pattern = build_tag_pattern(self.kind, context)
        emitter = context.emitter

        def replacer(match: re.Match[str]) -> str:
            attributes = self.parser.parse(match.group(1))
            return emitter.component_start(context.component, attributes)

        result, count = pattern.subn(replacer, content)
        context.record_rewrite(self.kind, count)
        return result


class ClosingTagTransformer(ContentTransformer):
    """Rewrite ``</x-card>`` into the end directive; anything inside the closing tag is dropped."""

    kind = "closing"

    def transform(self, content: str, context: TransformContext) -> str:
        pattern = build_tag_pattern(self.kind, context)
        end = context.emitter.component_end(context.component)

        result, count = pattern.subn(lambda _match: end, content)
        context.record_rewrite(self.kind, count)
        return result


__all__ = [
    "SelfClosingTagTransformer",
    "OpeningTagTransformer",
    "ClosingTagTransformer",
    "build_tag_pattern",
]
