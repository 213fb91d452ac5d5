"""Tests for text case helpers."""
from __future__ import annotations

import pytest

from bladetags.core.utils.merge import deep_merge
from bladetags.core.utils.text import camel_case, kebab_case, str_after, str_start


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("title", "title"),
        ("data-id", "dataId"),
        ("first_name", "firstName"),
        ("FooBar", "fooBar"),
        ("bind:foo-bar", "bind:fooBar"),
        ("aria--label", "ariaLabel"),
    ],
)
def test_camel_case(value: str, expected: str) -> None:
    assert camel_case(value) == expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [("alertBox", "alert-box"), ("alert-box", "alert-box"), ("card", "card"), ("user_card", "user-card")],
)
def test_kebab_case(value: str, expected: str) -> None:
    assert kebab_case(value) == expected


def test_str_start() -> None:
    assert str_start("foo", "bind:") == "bind:foo"
    assert str_start("bind:foo", "bind:") == "bind:foo"


def test_str_after() -> None:
    assert str_after("bind:foo", "bind:") == "foo"
    assert str_after("foo", "bind:") == "foo"


def test_deep_merge_does_not_mutate() -> None:
    base = {"a": 1, "b": {"c": 2}, "l": [1]}
    merged = deep_merge(base, {"b": {"d": 3}, "l": [2]})
    assert merged == {"a": 1, "b": {"c": 2, "d": 3}, "l": [2]}
    assert base == {"a": 1, "b": {"c": 2}, "l": [1]}
