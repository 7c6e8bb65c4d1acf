"""Deletion Enforcement — tests for the pure ordered guard chain.

Tests cover:
    - Each guard fires on its own violation
    - None returned when every guard passes
    - Guard order: first violation wins when several apply
"""

from app.core.domain_types import DeletionErrorKind
from app.core.enforce_deletion import check_space_deletable
from app.core.space import Space

OWNER = "known-owner"


def _space(**overrides) -> Space:
    fields = {"id": "known-space", "owner_id": OWNER, "name": "x"}
    fields.update(overrides)
    return Space(**fields)


# ─── single violations ───────────────────────────────────────────

def test_missing_space_is_not_found():
    assert check_space_deletable(None, OWNER) is DeletionErrorKind.NOT_FOUND


def test_foreign_space_is_not_owned():
    space = _space(owner_id="someone-else")
    assert check_space_deletable(space, OWNER) is DeletionErrorKind.NOT_OWNED


def test_space_with_resources_is_not_empty():
    space = _space(resources=("r-1",))
    assert check_space_deletable(space, OWNER) is DeletionErrorKind.NOT_EMPTY


def test_default_space_is_protected():
    space = _space(name="default")
    assert check_space_deletable(space, OWNER) is DeletionErrorKind.PROTECTED_DEFAULT


def test_owned_empty_regular_space_passes():
    assert check_space_deletable(_space(), OWNER) is None


# ─── ordering ────────────────────────────────────────────────────

def test_ownership_checked_before_emptiness():
    space = _space(owner_id="someone-else", resources=("r-1",))
    assert check_space_deletable(space, OWNER) is DeletionErrorKind.NOT_OWNED


def test_ownership_checked_before_default_protection():
    space = _space(owner_id="someone-else", name="default")
    assert check_space_deletable(space, OWNER) is DeletionErrorKind.NOT_OWNED


def test_emptiness_checked_before_default_protection():
    space = _space(name="default", resources=("r-1",))
    assert check_space_deletable(space, OWNER) is DeletionErrorKind.NOT_EMPTY


def test_check_is_repeatable_on_same_snapshot():
    space = _space(resources=("r-1",))
    assert check_space_deletable(space, OWNER) == check_space_deletable(space, OWNER)
