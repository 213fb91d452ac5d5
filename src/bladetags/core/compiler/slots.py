"""Slot transformer: rewrite named ``<slot>`` regions into slot directives.

    <slot name="header">Hello</slot>  ->  @slot('header')Hello@endslot

The ``slot`` tag is not prefixed. Matching is non-greedy and non-nesting:
an opening slot runs to the next ``</slot>``, so nested slots are not
supported. An opening slot with no closing tag is left untouched.
"""
from __future__ import annotations

import re

from .base import ContentTransformer, TransformContext


class SlotTransformer(ContentTransformer):
    """Rewrite ``<slot name="...">...</slot>`` regions."""

    kind = "slot"

    SLOT_PATTERN = re.compile(
        r"<\s*slot(?![\w:.-])[^>]*?(?<![\w-])name=(?P<quote>[\"'])(?P<name>[^>]*?)(?P=quote)[^>]*>"
        r"(?P<contents>.*?)"
        r"<\s*/\s*slot\s*>",
        re.DOTALL,
    )

    def transform(self, content: str, context: TransformContext) -> str:
        emitter = context.emitter

        def replacer(match: re.Match[str]) -> str:
            return emitter.slot(match.group("name"), match.group("contents"))

        result, count = self.SLOT_PATTERN.subn(replacer, content)
        context.record_rewrite(self.kind, count)
        return result


__all__ = ["SlotTransformer"]
