"""Component descriptors and the registry that hands them to the compiler.

A component maps a custom tag (``<x-card>``) to a target view
(``components.card``) and, optionally, a data model whose output is merged
into the component's arguments.

Example:
    registry = ComponentRegistry(prefix="x-")
    registry.component("components.card")
    registry.component("components.alert", tag="notice", data_model="App\\Alert")
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass, replace
from typing import Dict, Iterator, List, Optional, TYPE_CHECKING

from bladetags.core.utils.text import kebab_case
from bladetags.exceptions import ComponentRegistrationError

if TYPE_CHECKING:
    from bladetags.core.compiler.directives import DirectiveSyntax

logger = logging.getLogger(__name__)

# Tags are spliced into match patterns; restrict them to identifier characters.
TAG_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_.:-]*$")

CONTEXT_TAG = "context"
DEFAULT_CONTEXT_VIEW = "bladex::context"


@dataclass(frozen=True)
class Component:
    """Registration record for one custom tag."""

    view: str
    tag: str
    data_model: Optional[str] = None

    @classmethod
    def make(cls, view: str, tag: Optional[str] = None, data_model: Optional[str] = None) -> "Component":
        """Create a component, deriving the tag from the view name when omitted.

        ``components.alertBox`` becomes ``alert-box``; a namespaced view such
        as ``shop::product-card`` uses the part after ``::``.
        """
        if not view or not view.strip():
            raise ComponentRegistrationError("Component view must not be empty")
        view = view.strip()
        if tag is None:
            tag = kebab_case(view.split("::")[-1].split(".")[-1])
        validate_tag(tag, view=view)
        return cls(view=view, tag=tag, data_model=data_model or None)

    def is_context(self, syntax: Optional["DirectiveSyntax"] = None) -> bool:
        """Whether this is the context sentinel component."""
        context_view = syntax.context_view if syntax is not None else DEFAULT_CONTEXT_VIEW
        return self.view == context_view

    def with_data_model(self, data_model: Optional[str]) -> "Component":
        return replace(self, data_model=data_model or None)

    def prefixed_tag(self, prefix: str) -> str:
        return f"{prefix}{self.tag}"

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"view": self.view, "tag": self.tag, "data_model": self.data_model}


def validate_tag(tag: str, *, view: Optional[str] = None) -> str:
    """Validate a component tag name.

    Raises:
        ComponentRegistrationError: If the tag holds characters outside
            ``[A-Za-z0-9_.:-]`` or does not start with a letter/underscore.
    """
    if not isinstance(tag, str) or not TAG_PATTERN.match(tag):
        raise ComponentRegistrationError(
            f"Invalid component tag {tag!r}: tags must start with a letter or underscore "
            "and contain only letters, digits, '_', '.', ':' or '-'",
            context={"tag": tag, "view": view},
        )
    return tag


class ComponentRegistry:
    """Ordered registry of components plus the global tag prefix.

    Components are compiled in registration order. Registering a tag that is
    already present replaces the earlier component in place.
    """

    def __init__(
        self,
        prefix: str = "",
        *,
        register_context: bool = True,
        context_view: str = DEFAULT_CONTEXT_VIEW,
    ) -> None:
        self._prefix = prefix or ""
        self._components: Dict[str, Component] = {}
        self.context_view = context_view
        if register_context:
            self.component(context_view, tag=CONTEXT_TAG)

    @property
    def prefix(self) -> str:
        return self._prefix

    @prefix.setter
    def prefix(self, value: Optional[str]) -> None:
        self._prefix = value or ""

    def component(self, view: str, tag: Optional[str] = None, data_model: Optional[str] = None) -> Component:
        """Register a component and return it."""
        component = Component.make(view, tag=tag, data_model=data_model)
        if component.tag in self._components:
            logger.debug("Replacing component for tag %r (%s)", component.tag, component.view)
        self._components[component.tag] = component
        return component

    def register(self, component: Component) -> Component:
        """Register an already-built component."""
        validate_tag(component.tag, view=component.view)
        self._components[component.tag] = component
        return component

    def with_data_model(self, tag: str, data_model: Optional[str]) -> Component:
        """Attach (or clear) the data model of a registered component."""
        existing = self.get(tag)
        if existing is None:
            raise ComponentRegistrationError(
                f"No component registered for tag {tag!r}",
                context={"tag": tag},
            )
        updated = existing.with_data_model(data_model)
        self._components[tag] = updated
        return updated

    def get(self, tag: str) -> Optional[Component]:
        return self._components.get(tag)

    def components(self) -> List[Component]:
        """Registered components in registration order."""
        return list(self._components.values())

    def __iter__(self) -> Iterator[Component]:
        return iter(self.components())

    def __len__(self) -> int:
        return len(self._components)

    def __contains__(self, tag: object) -> bool:
        return tag in self._components


__all__ = [
    "Component",
    "ComponentRegistry",
    "CONTEXT_TAG",
    "DEFAULT_CONTEXT_VIEW",
    "TAG_PATTERN",
    "validate_tag",
]
