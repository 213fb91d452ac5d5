"""Component compiler.

Rewrites custom component tags into renderer directives by folding over the
registered components in order. Each component runs the full pass pipeline
over the accumulated text:

1. SLOTS        - <slot name="x">...</slot> -> @slot('x')...@endslot
2. SELF-CLOSING - <x-card ... />            -> start + end directive
3. OPENING      - <x-card ...>              -> start directive
4. CLOSING      - </x-card>                 -> end directive

Passes are plain text substitutions, not a structural parse, so nesting depth
does not matter. A compile call holds no state beyond its arguments.
"""
from __future__ import annotations

import logging
from typing import Iterable, Optional, Tuple, Union

from ..components import Component, ComponentRegistry
from .base import TransformContext, TransformerPipeline
from .directives import DirectiveSyntax
from .report import CompileReport, ComponentPassReport
from .slots import SlotTransformer
from .tags import ClosingTagTransformer, OpeningTagTransformer, SelfClosingTagTransformer

logger = logging.getLogger(__name__)

ComponentSource = Union[ComponentRegistry, Iterable[Component]]


def default_pipeline() -> TransformerPipeline:
    """The per-component pass pipeline in its fixed order."""
    return TransformerPipeline([
        SlotTransformer(),
        SelfClosingTagTransformer(),
        OpeningTagTransformer(),
        ClosingTagTransformer(),
    ])


class Compiler:
    """Compile templates containing custom component tags.

    Example:
        registry = ComponentRegistry(prefix="x-")
        registry.component("components.card")
        compiler = Compiler(registry)
        compiler.compile('<x-card title="Hi" />')
    """

    def __init__(
        self,
        components: ComponentSource,
        *,
        prefix: Optional[str] = None,
        syntax: Optional[DirectiveSyntax] = None,
        pipeline: Optional[TransformerPipeline] = None,
    ) -> None:
        """Initialize the compiler.

        Args:
            components: A ComponentRegistry or an ordered iterable of components
            prefix: Tag prefix; defaults to the registry's prefix (or "")
            syntax: Directive syntax; defaults to Blade with the registry's context view
            pipeline: Pass pipeline; defaults to default_pipeline()
        """
        self.components = components
        if prefix is None:
            prefix = components.prefix if isinstance(components, ComponentRegistry) else ""
        self.prefix = prefix
        if syntax is None:
            if isinstance(components, ComponentRegistry):
                syntax = DirectiveSyntax(context_view=components.context_view)
            else:
                syntax = DirectiveSyntax()
        self.syntax = syntax
        self.pipeline = pipeline or default_pipeline()

    def _components(self) -> list[Component]:
        if isinstance(self.components, ComponentRegistry):
            return self.components.components()
        return list(self.components)

    def compile(self, text: str) -> str:
        """Return ``text`` with every registered component tag rewritten."""
        result, _report = self.compile_with_report(text)
        return result

    def compile_with_report(self, text: str) -> Tuple[str, CompileReport]:
        """Compile ``text`` and report what each component pass rewrote.

        Raises:
            PatternCompileError: If a component's pattern cannot be built.
                The whole call is aborted; no partial output is returned.
        """
        report = CompileReport(prefix=self.prefix)
        result = text
        for component in self._components():
            context = TransformContext(component=component, prefix=self.prefix, syntax=self.syntax)
            result = self.pipeline.execute(result, context)

            pass_report = ComponentPassReport(tag=component.tag, view=component.view, rewrites=dict(context.rewrites))
            report.passes.append(pass_report)
            logger.debug(
                "Compiled component %s%s (%s): %s",
                self.prefix,
                component.tag,
                component.view,
                pass_report.rewrites,
            )

        logger.debug("Compile finished: %d components, %d rewrites", len(report.passes), report.total_rewrites)
        return result, report


def compile_template(
    text: str,
    components: ComponentSource,
    prefix: Optional[str] = None,
    syntax: Optional[DirectiveSyntax] = None,
) -> str:
    """Compile ``text`` against ``components`` in one call."""
    return Compiler(components, prefix=prefix, syntax=syntax).compile(text)


__all__ = ["Compiler", "compile_template", "default_pipeline"]
