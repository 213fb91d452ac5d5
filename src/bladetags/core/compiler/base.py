"""Base classes for the component compiler passes.

The compiler runs a pipeline of transformers once per registered component,
feeding each pass the output of the previous one.

Pass order (per component):
1. SLOTS        - <slot name="x">...</slot>
2. SELF-CLOSING - <x-card ... />
3. OPENING      - <x-card ...>
4. CLOSING      - </x-card>
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List

from ..components import Component
from .directives import DirectiveEmitter, DirectiveSyntax


@dataclass
class TransformContext:
    """Context provided to transformers while compiling one component.

    Contains:
    - The component being compiled and the global tag prefix
    - The directive syntax used for emission
    - Rewrite counters for reporting
    """

    component: Component
    prefix: str = ""
    syntax: DirectiveSyntax = field(default_factory=DirectiveSyntax)

    # Tracking for reports
    rewrites: Dict[str, int] = field(default_factory=dict)

    @property
    def emitter(self) -> DirectiveEmitter:
        return DirectiveEmitter(self.syntax)

    @property
    def prefixed_tag(self) -> str:
        return self.component.prefixed_tag(self.prefix)

    def record_rewrite(self, kind: str, count: int = 1) -> None:
        """Record that ``count`` occurrences of ``kind`` were rewritten."""
        self.rewrites[kind] = self.rewrites.get(kind, 0) + count


class ContentTransformer(ABC):
    """Abstract base class for compiler passes.

    Transformers are stateless and receive everything they need through
    ``transform()``.
    """

    #: Name used in reports and pattern errors.
    kind: str = ""

    @abstractmethod
    def transform(self, content: str, context: TransformContext) -> str:
        """Transform content using this transformer's rules.

        Args:
            content: Input content to transform
            context: TransformContext for the component being compiled

        Returns:
            Transformed content
        """
        ...


class TransformerPipeline:
    """Execute a sequence of transformers on content.

    Example:
        pipeline = TransformerPipeline([
            SlotTransformer(),
            SelfClosingTagTransformer(),
        ])
        result = pipeline.execute(content, context)
    """

    def __init__(self, transformers: List[ContentTransformer]) -> None:
        self.transformers = transformers

    def execute(self, content: str, context: TransformContext) -> str:
        result = content
        for transformer in self.transformers:
            result = transformer.transform(result, context)
        return result


__all__ = ["TransformContext", "ContentTransformer", "TransformerPipeline"]
