"""Pure reducer functions over entity collections.

Collections are tuples of frozen dataclasses. Every reducer returns a new
tuple and never raises for unknown ids or guarded entities; the input tuple is
returned unchanged instead so callers can detect a no-op with ``is``.
"""

from dataclasses import fields, replace
from typing import Any, Callable, Iterable, Optional, TypeVar

T = TypeVar("T")

# Fields that are assigned once at creation and never patched
IMMUTABLE_FIELDS = frozenset({"id", "created_at", "is_default"})


def _find_index(items: tuple[T, ...], entity_id: str) -> Optional[int]:
    for index, item in enumerate(items):
        if getattr(item, "id") == entity_id:
            return index
    return None


def clean_patch(entity: Any, patch: dict[str, Any]) -> dict[str, Any]:
    """Drop unknown and immutable keys from a patch."""
    allowed = {f.name for f in fields(entity)} - IMMUTABLE_FIELDS
    return {key: value for key, value in patch.items() if key in allowed}


def append(items: tuple[T, ...], entity: T) -> tuple[T, ...]:
    """Append an entity to a collection."""
    return items + (entity,)


def update(
    items: tuple[T, ...],
    entity_id: str,
    patch: dict[str, Any],
    guard: Optional[Callable[[T], bool]] = None,
) -> tuple[T, ...]:
    """Merge a patch into the entity with the given id.

    Args:
        items: Current collection
        entity_id: ID of the entity to update
        patch: Field values to merge
        guard: Optional predicate; the entity is only updated if it returns True

    Returns:
        New collection, or ``items`` itself when nothing changed
    """
    index = _find_index(items, entity_id)
    if index is None:
        return items

    current = items[index]
    if guard is not None and not guard(current):
        return items

    changes = clean_patch(current, patch)
    if not changes:
        return items

    updated = replace(current, **changes)
    return items[:index] + (updated,) + items[index + 1 :]


def remove(
    items: tuple[T, ...],
    entity_id: str,
    guard: Optional[Callable[[T], bool]] = None,
) -> tuple[T, ...]:
    """Remove the entity with the given id unless the guard refuses."""
    index = _find_index(items, entity_id)
    if index is None:
        return items
    if guard is not None and not guard(items[index]):
        return items
    return items[:index] + items[index + 1 :]


def replace_all(entities: Iterable[T]) -> tuple[T, ...]:
    """Bulk overwrite of a collection."""
    return tuple(entities)
