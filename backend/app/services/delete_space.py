"""Delete Space — fetch, validate, remove sandwich around the pure deletion guards.

Invariants:
    - Exactly one fetch_by_id per call
    - remove_by_id called at most once, and only after every guard passed
    - No guard evaluated after removal begins; no re-fetch mid-validation
    - Every failure surfaces as SpaceDeletionError; nothing logged, retried, or swallowed

Design Decisions:
    - Store injected per call (any SpaceStore): no module-level client, the function
      holds no state between calls
    - Storage failures during removal wrapped as REMOVAL_FAILED with the original
      exception kept on .cause and chained via `raise ... from`
    - Fetch failures propagate unchanged: they are storage errors, not a deletion outcome
"""

from app.core.domain_types import DeletionErrorKind, SpaceId
from app.core.enforce_deletion import check_space_deletable
from app.core.errors import ErrorContext, SpaceDeletionError
from app.core.repository_protocols import SpaceStore


async def delete_space(
    store: SpaceStore, space_id: SpaceId, acting_user: str,
) -> None:
    """Delete the space if acting_user may, else raise SpaceDeletionError."""
    space = await store.fetch_by_id(space_id)

    violation = check_space_deletable(space, acting_user)
    if violation is not None:
        raise SpaceDeletionError(
            violation,
            context=ErrorContext(space_id=space_id, user_id=acting_user),
        )

    try:
        await store.remove_by_id(space_id)
    except Exception as e:
        raise SpaceDeletionError(
            DeletionErrorKind.REMOVAL_FAILED,
            cause=e,
            context=ErrorContext(space_id=space_id, user_id=acting_user),
        ) from e
