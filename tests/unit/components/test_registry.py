"""Tests for Component and ComponentRegistry."""
from __future__ import annotations

import pytest

from bladetags.core.components import CONTEXT_TAG, Component, ComponentRegistry
from bladetags.core.compiler.directives import DirectiveSyntax
from bladetags.exceptions import ComponentRegistrationError


class TestComponentMake:
    def test_tag_from_last_view_segment(self) -> None:
        assert Component.make("components.card").tag == "card"

    def test_camel_case_view_becomes_kebab_tag(self) -> None:
        assert Component.make("components.alertBox").tag == "alert-box"

    def test_namespaced_view(self) -> None:
        assert Component.make("shop::product-card").tag == "product-card"

    def test_explicit_tag_wins(self) -> None:
        component = Component.make("components.card", tag="panel", data_model="App\\Panel")
        assert (component.tag, component.data_model) == ("panel", "App\\Panel")

    def test_empty_data_model_is_none(self) -> None:
        assert Component.make("components.card", data_model="").data_model is None

    @pytest.mark.parametrize("tag", ["ca rd", "card(", "1card", "", "x<y"])
    def test_invalid_tags_are_rejected(self, tag: str) -> None:
        with pytest.raises(ComponentRegistrationError) as excinfo:
            Component.make("components.card", tag=tag)
        assert excinfo.value.context["tag"] == tag

    def test_empty_view_is_rejected(self) -> None:
        with pytest.raises(ComponentRegistrationError):
            Component.make("  ")

    def test_is_context(self) -> None:
        assert Component.make("bladex::context", tag="context").is_context()
        assert not Component.make("components.card").is_context()
        assert Component.make("ctx::stack", tag="context").is_context(DirectiveSyntax(context_view="ctx::stack"))

    def test_prefixed_tag(self) -> None:
        assert Component.make("components.card").prefixed_tag("x-") == "x-card"


class TestComponentRegistry:
    def test_context_is_registered_first(self) -> None:
        registry = ComponentRegistry()
        registry.component("components.card")
        assert [c.tag for c in registry] == [CONTEXT_TAG, "card"]

    def test_without_context(self) -> None:
        registry = ComponentRegistry(register_context=False)
        assert len(registry) == 0
        assert CONTEXT_TAG not in registry

    def test_registration_order_is_kept(self) -> None:
        registry = ComponentRegistry(register_context=False)
        for view in ("components.b", "components.a", "components.c"):
            registry.component(view)
        assert [c.tag for c in registry.components()] == ["b", "a", "c"]

    def test_reregistering_replaces_in_place(self) -> None:
        registry = ComponentRegistry(register_context=False)
        registry.component("components.card")
        registry.component("components.alert")
        registry.component("other.card")
        assert [c.view for c in registry.components()] == ["other.card", "components.alert"]

    def test_prefix_setter(self) -> None:
        registry = ComponentRegistry(prefix="x-")
        registry.prefix = None
        assert registry.prefix == ""

    def test_with_data_model(self) -> None:
        registry = ComponentRegistry()
        registry.component("components.card")
        updated = registry.with_data_model("card", "App\\Card")
        assert registry.get("card") == updated
        assert updated.data_model == "App\\Card"

    def test_with_data_model_unknown_tag(self) -> None:
        with pytest.raises(ComponentRegistrationError):
            ComponentRegistry().with_data_model("missing", "App\\Missing")

    def test_register_prebuilt_component(self) -> None:
        registry = ComponentRegistry(register_context=False)
        registry.register(Component(view="components.card", tag="card"))
        assert "card" in registry

    def test_register_rejects_invalid_prebuilt_component(self) -> None:
        with pytest.raises(ComponentRegistrationError):
            ComponentRegistry().register(Component(view="components.card", tag="bad tag"))

    def test_custom_context_view(self) -> None:
        registry = ComponentRegistry(context_view="ctx::stack")
        assert registry.get(CONTEXT_TAG).view == "ctx::stack"
