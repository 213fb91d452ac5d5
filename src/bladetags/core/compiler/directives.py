"""Directive emission for the downstream template renderer.

Builds the text that replaces a custom tag. The defaults spell Blade
directives:

- component:    @component('view', array_merge(<stack>->read(), ['key' => value])) ... @endcomponent
- data model:   @component('view', array_merge(<stack>->read(), [...], app(Model::class, array_merge(<stack>->read(), [...]))->toArray()))
- context push: @php(<stack>->push(['key' => value]))
- context pop:  @php(<stack>->pop())
- slot:         @slot('name')...@endslot

Argument precedence inside ``array_merge`` is left to right: context stack,
then tag attributes, then data model output.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional

from ..components import Component, DEFAULT_CONTEXT_VIEW

DEFAULT_CONTEXT_STACK = "app(Spatie\\BladeX\\ContextStack::class)"


@dataclass(frozen=True)
class DirectiveSyntax:
    """Renderer-specific spelling of the emitted directives."""

    context_view: str = DEFAULT_CONTEXT_VIEW
    context_stack: str = DEFAULT_CONTEXT_STACK

    @property
    def context_read(self) -> str:
        return f"{self.context_stack}->read()"


class DirectiveEmitter:
    """Render component, context and slot directives."""

    def __init__(self, syntax: Optional[DirectiveSyntax] = None) -> None:
        self.syntax = syntax or DirectiveSyntax()

    @staticmethod
    def attributes_to_string(attributes: Mapping[str, str]) -> str:
        """Render ``{"title": "'Hi'"}`` as ``'title' => 'Hi'``."""
        return ",".join(f"'{key}' => {value}" for key, value in attributes.items())

    def component_start(self, component: Component, attributes: Mapping[str, str]) -> str:
        array = f"[{self.attributes_to_string(attributes)}]"

        if component.is_context(self.syntax):
            return f"@php({self.syntax.context_stack}->push({array}))"

        read = self.syntax.context_read
        if component.data_model:
            model = f"app({component.data_model}::class, array_merge({read}, {array}))->toArray()"
            arguments = f"array_merge({read}, {array}, {model})"
        else:
            arguments = f"array_merge({read}, {array})"

        return f"@component('{component.view}', {arguments})"

    def component_end(self, component: Component) -> str:
        if component.is_context(self.syntax):
            return f"@php({self.syntax.context_stack}->pop())"
        return " @endcomponent"

    def component(self, component: Component, attributes: Mapping[str, str]) -> str:
        """Start and end directives for a tag without children."""
        return self.component_start(component, attributes) + self.component_end(component)

    @staticmethod
    def slot(name: str, contents: str) -> str:
        return f"@slot('{name}'){contents}@endslot"


__all__ = ["DirectiveSyntax", "DirectiveEmitter", "DEFAULT_CONTEXT_STACK"]
