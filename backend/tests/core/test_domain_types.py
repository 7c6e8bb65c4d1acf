"""Domain Types — verifies identity wrappers, constants, and the deletion taxonomy.

Tests:
    - NewType wrappers exist and are transparent over str
    - DEFAULT_SPACE_NAME is "default"
    - DeletionErrorKind has exactly five distinct members
"""

from app.core.domain_types import (
    SpaceId, ResourceId, UserId, DEFAULT_SPACE_NAME, DeletionErrorKind,
)


def test_identity_types_wrap_str():
    assert SpaceId("known-space") == "known-space"
    assert UserId("known-owner") == "known-owner"
    assert ResourceId("r-1") == "r-1"


def test_default_space_name_is_default():
    assert DEFAULT_SPACE_NAME == "default"


def test_deletion_error_kind_has_five_kinds():
    assert set(DeletionErrorKind) == {
        DeletionErrorKind.NOT_FOUND,
        DeletionErrorKind.NOT_OWNED,
        DeletionErrorKind.NOT_EMPTY,
        DeletionErrorKind.PROTECTED_DEFAULT,
        DeletionErrorKind.REMOVAL_FAILED,
    }


def test_deletion_error_kinds_are_distinct_values():
    values = [k.value for k in DeletionErrorKind]
    assert len(values) == len(set(values))


def test_deletion_error_kind_serializes_to_string():
    assert DeletionErrorKind.NOT_FOUND.value == "space_not_found"
    assert DeletionErrorKind("space_not_owned") is DeletionErrorKind.NOT_OWNED
