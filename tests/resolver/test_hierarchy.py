# topmark:header:start
#
#   project      : TypeSniff
#   file         : test_hierarchy.py
#   file_relpath : tests/resolver/test_hierarchy.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `is_child_of` and `most_specific`."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from typesniff.registry import TypeDefinition, TypeRegistry
from typesniff.resolver import is_child_of, most_specific


@pytest.mark.parametrize(
    ("candidate", "ancestor"),
    [
        ("text/csv", "text/plain"),
        ("text/x-web-markdown", "text/plain"),
        ("application/illustrator", "application/pdf"),
        ("application/json", "text/plain"),
        ("TEXT/CSV", "text/PLAIN"),
    ],
)
def test_registered_descendants(candidate: str, ancestor: str) -> None:
    assert is_child_of(candidate, ancestor)


def test_ancestor_is_not_a_child_of_its_descendant() -> None:
    assert not is_child_of("text/plain", "text/csv")
    assert not is_child_of("image/png", "text/plain")


@given(label=st.text(min_size=1, max_size=40))
def test_is_child_of_is_reflexive(label: str) -> None:
    assert is_child_of(label, label, TypeRegistry(definitions=()))


@pytest.mark.parametrize(("candidate", "ancestor"), [("", "text/plain"), ("text/plain", ""), (None, None)])
def test_empty_input_is_not_a_child(candidate: str | None, ancestor: str | None) -> None:
    assert not is_child_of(candidate, ancestor)


def test_cyclic_parents_terminate() -> None:
    registry = TypeRegistry(
        definitions=(
            TypeDefinition(label="x/a", parents=("x/b",)),
            TypeDefinition(label="x/b", parents=("x/a",)),
        )
    )
    assert is_child_of("x/a", "x/b", registry)
    assert not is_child_of("x/a", "x/c", registry)


def test_most_specific_singleton_is_identity() -> None:
    assert most_specific("image/png") == "image/png"


def test_most_specific_without_candidates() -> None:
    assert most_specific() is None
    assert most_specific(None, "", "   ") is None


def test_most_specific_descendant_after_ancestor() -> None:
    assert most_specific("text/plain", "text/csv") == "text/csv"
    assert most_specific("application/pdf", "application/illustrator") == "application/illustrator"


def test_most_specific_is_order_sensitive() -> None:
    # The fold keeps the running value unless a later candidate descends from it,
    # so unrelated candidates resolve to whichever comes first.
    assert most_specific("image/png", "text/plain") == "image/png"
    assert most_specific("text/plain", "image/png") == "text/plain"
    # Descendant first: the ancestor never replaces it
    assert most_specific("text/csv", "text/plain") == "text/csv"


def test_most_specific_dedupes_case_insensitively() -> None:
    assert most_specific("Text/CSV", "text/csv", "text/plain") == "Text/CSV"


def test_most_specific_uses_given_registry() -> None:
    registry = TypeRegistry(definitions=(TypeDefinition(label="x/child", parents=("x/parent",)),))
    assert most_specific("x/parent", "x/child", registry=registry) == "x/child"
    assert most_specific("x/parent", "x/child", registry=TypeRegistry(definitions=())) == "x/parent"
