"""Tests for the Compiler fold over registered components.

Exercises the end-to-end properties of compilation: untouched text,
self-closing equivalence, binding semantics, slots, context regions,
data-model precedence and fixed-point stability.
"""
from __future__ import annotations

import logging

import pytest

from bladetags.core.compiler.directives import DirectiveSyntax
from bladetags.core.compiler.engine import Compiler, compile_template
from bladetags.core.components import Component, ComponentRegistry
from bladetags.exceptions import PatternCompileError

STACK = DirectiveSyntax().context_stack
READ = f"{STACK}->read()"
END = " @endcomponent"
PUSH = f"@php({STACK}->push(['foo' => 'bar']))"
POP = f"@php({STACK}->pop())"


def card_start(pairs: str = "") -> str:
    return f"@component('components.card', array_merge({READ}, [{pairs}]))"


@pytest.fixture
def registry() -> ComponentRegistry:
    registry = ComponentRegistry(prefix="x-")
    registry.component("components.card")
    registry.component("components.alert-box")
    return registry


@pytest.fixture
def compiler(registry: ComponentRegistry) -> Compiler:
    return Compiler(registry)


class TestUnrelatedText:
    def test_text_without_tags_is_unchanged(self, compiler: Compiler) -> None:
        text = '<div class="card">\n  <p>Hello <b>world</b></p>\n  <card />\n</div>\n'
        assert compiler.compile(text) == text

    def test_similar_tags_are_unchanged(self, compiler: Compiler) -> None:
        text = "<x-cards></x-cards><x-card-item /><y-card />"
        assert compiler.compile(text) == text

    def test_empty_text(self, compiler: Compiler) -> None:
        assert compiler.compile("") == ""


class TestComponents:
    def test_self_closing_equals_empty_pair(self, compiler: Compiler) -> None:
        assert compiler.compile('<x-card title="Hi" />') == compiler.compile('<x-card title="Hi"></x-card>')

    def test_attribute_binding(self, compiler: Compiler) -> None:
        result = compiler.compile('<x-card :count="5+1" label="hi" />')
        assert result == card_start("'count' => 5+1,'label' => 'hi'") + END

    def test_escaped_literal(self, compiler: Compiler) -> None:
        result = compiler.compile("<x-card label=\"it's\" />")
        assert result == card_start("'label' => 'it\\'s'") + END

    def test_bare_attribute(self, compiler: Compiler) -> None:
        assert compiler.compile("<x-card disabled />") == card_start("'disabled' => true") + END

    def test_tag_derived_from_view(self, compiler: Compiler) -> None:
        result = compiler.compile('<x-alert-box type="error">Oops</x-alert-box>')
        assert result == f"@component('components.alert-box', array_merge({READ}, ['type' => 'error']))Oops{END}"

    def test_nested_same_component(self, compiler: Compiler) -> None:
        result = compiler.compile("<x-card><x-card /></x-card>")
        assert result == card_start() + card_start() + END + END

    def test_slot_inside_component(self, compiler: Compiler) -> None:
        text = '<x-card>\n    <slot name="header">Title</slot>\n    Body\n</x-card>'
        expected = card_start() + "\n    @slot('header')Title@endslot\n    Body\n" + END
        assert compiler.compile(text) == expected

    def test_different_components_interleaved(self, compiler: Compiler) -> None:
        text = '<x-card><x-alert-box type="info" /></x-card>'
        alert = f"@component('components.alert-box', array_merge({READ}, ['type' => 'info']))" + END
        assert compiler.compile(text) == card_start() + alert + END


class TestContext:
    def test_context_wraps_nested_component(self, compiler: Compiler) -> None:
        result = compiler.compile('<x-context foo="bar"><x-card /></x-context>')
        assert result == PUSH + card_start() + END + POP

    def test_push_before_read_before_pop(self, compiler: Compiler) -> None:
        result = compiler.compile('<x-context foo="bar">\n  <x-card title="Hi" />\n</x-context>')
        push_at = result.index(PUSH)
        card_at = result.index("@component('components.card'")
        end_at = result.index(END)
        pop_at = result.index(POP)
        assert push_at < card_at < end_at < pop_at
        assert READ in result[card_at:end_at]

    def test_registry_without_context(self) -> None:
        registry = ComponentRegistry(prefix="x-", register_context=False)
        registry.component("components.card")
        text = '<x-context foo="bar"></x-context>'
        assert Compiler(registry).compile(text) == text


class TestDataModel:
    def test_data_model_output_is_merged_last(self) -> None:
        registry = ComponentRegistry(prefix="x-")
        registry.component("components.card", data_model="App\\ViewModels\\CardViewModel")
        result = Compiler(registry).compile('<x-card title="Hi" />')

        attrs = "['title' => 'Hi']"
        model = f"app(App\\ViewModels\\CardViewModel::class, array_merge({READ}, {attrs}))->toArray()"
        assert result == f"@component('components.card', array_merge({READ}, {attrs}, {model})){END}"
        # Precedence: stack, then attributes, then data model.
        outer = result[len("@component('components.card', array_merge("):]
        assert outer.index(READ) < outer.index(attrs) < outer.index("app(App\\ViewModels")


class TestStability:
    @pytest.mark.parametrize(
        "text",
        [
            '<x-card :count="5+1" label="hi" />',
            '<x-context foo="bar"><x-card><slot name="a">A</slot></x-card></x-context>',
            '<x-alert-box\n    type="warning"\n>\n  Careful\n</x-alert-box>',
        ],
    )
    def test_compile_is_a_fixed_point(self, compiler: Compiler, text: str) -> None:
        once = compiler.compile(text)
        assert compiler.compile(once) == once

    def test_compile_does_not_keep_state(self, compiler: Compiler) -> None:
        first = compiler.compile("<x-card />")
        compiler.compile('<x-context foo="bar">')
        assert compiler.compile("<x-card />") == first


class TestOrchestration:
    def test_plain_component_list(self) -> None:
        components = [Component(view="components.card", tag="card")]
        assert compile_template("<card />", components) == card_start() + END

    def test_explicit_prefix_overrides_registry(self, registry: ComponentRegistry) -> None:
        assert Compiler(registry, prefix="").compile("<card />") == card_start() + END

    def test_invalid_component_aborts_compile(self) -> None:
        components = [
            Component(view="components.card", tag="card"),
            Component(view="components.broken", tag="bro*ken"),
        ]
        with pytest.raises(PatternCompileError) as excinfo:
            compile_template("<card />", components)
        assert excinfo.value.context["view"] == "components.broken"
        assert excinfo.value.stage == "self-closing"

    def test_report_counts_rewrites(self, compiler: Compiler) -> None:
        text = '<x-context foo="bar"><slot name="a">A</slot><x-card /><x-card></x-card></x-context>'
        _, report = compiler.compile_with_report(text)
        assert [p.tag for p in report.passes] == ["context", "card", "alert-box"]
        assert report.rewrites_for("context") == {"slot": 1, "self-closing": 0, "opening": 1, "closing": 1}
        assert report.rewrites_for("card") == {"slot": 0, "self-closing": 1, "opening": 1, "closing": 1}
        assert report.total_rewrites == 6
        assert report.to_dict()["prefix"] == "x-"

    def test_logs_each_component_pass(self, compiler: Compiler, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="bladetags.core.compiler.engine"):
            compiler.compile("<x-card />")
        assert "Compiled component x-card (components.card)" in caplog.text
