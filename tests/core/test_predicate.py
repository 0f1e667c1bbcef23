# topmark:header:start
#
#   project      : DoubleColonConceal
#   file         : test_predicate.py
#   file_relpath : tests/core/test_predicate.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the field-name predicate shared by both surfaces."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dcconceal.core.predicate import conceal_double_colon, includes_field, is_valid_field_name

# Names built only from letters, spaces and balanced bracket pairs.
_balanced_names = st.recursive(
    st.text(alphabet="abcXYZ -_", max_size=6),
    lambda inner: st.one_of(
        st.builds(lambda a, b: a + b, inner, inner),
        inner.map(lambda s: f"[{s}]"),
        inner.map(lambda s: f"({s})"),
    ),
    max_leaves=8,
)


@pytest.mark.parametrize(
    "name",
    ["", "Status", "Tags (optional)", "[[Link]] name", "a (b [c] d) e", "Tags)", "]]"],
)
def test_balanced_or_overclosed_names_are_valid(name: str) -> None:
    """Closers never push a count below zero, so only openers can invalidate a name."""
    assert is_valid_field_name(name) is True


@pytest.mark.parametrize("name", ["[draft", "(draft", "a [b (c)", "Tags (", "Tags[", "[[Link]"])
def test_unclosed_brackets_are_invalid(name: str) -> None:
    assert is_valid_field_name(name) is False


def test_none_field_name_is_treated_as_empty() -> None:
    assert is_valid_field_name(None) is True


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("Status:: Done", True),
        ("Tags (optional):: a, b", True),
        (":: Done", False),
        ("no separator here", False),
        ("[draft:: note", False),
        ("[draft]:: note", True),
        ("a::b::c", True),
        ("See C++ :: scope", True),
        ("[a::b]::c", False),
        ("", False),
        (None, False),
    ],
)
def test_includes_field(text: str | None, expected: bool) -> None:
    """Only the text before the first separator is checked."""
    assert includes_field(text) is expected


def test_conceal_replaces_first_separator_only() -> None:
    assert conceal_double_colon("a:: b:: c", "→") == "a→ b:: c"


@pytest.mark.parametrize(("replacement", "expected"), [("", "a b"), (None, "a b"), (":", "a: b")])
def test_conceal_with_empty_or_missing_glyph(replacement: str | None, expected: str) -> None:
    assert conceal_double_colon("a:: b", replacement) == expected


def test_conceal_is_a_noop_without_separator() -> None:
    """Text rewritten once has no separator left for a second pass."""
    once = conceal_double_colon("Status:: Done", ":")
    assert conceal_double_colon(once, ":") == once == "Status: Done"


@given(name=_balanced_names)
def test_balanced_names_are_valid(name: str) -> None:
    assert is_valid_field_name(name)


@given(name=_balanced_names)
def test_unmatched_opener_invalidates_balanced_name(name: str) -> None:
    assert not is_valid_field_name(name + "[")
    assert not is_valid_field_name("(" + name)


@given(name=_balanced_names.filter(lambda s: s != "" and "::" not in s), value=st.text(max_size=10))
def test_balanced_name_followed_by_separator_includes_field(name: str, value: str) -> None:
    assert includes_field(f"{name}::{value}")
