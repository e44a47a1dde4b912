"""Ordered sub-entity lists (artists, schedule events, ticket tiers, nav items).

Every function returns a new list whose ``order`` values are exactly
1..N in list position. Inputs are never mutated.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, TypeVar

from app.domain.enums import MoveDirection
from app.domain.exceptions import ResourceNotFoundException, ValidationException


class OrderedItem(Protocol):
    """Sub-entity with a stable id and a 1-based position."""

    id: str
    order: int

    def model_copy(self, *, update: dict[str, Any] | None = None, deep: bool = False) -> Any:
        ...


T = TypeVar("T", bound=OrderedItem)


def repack(items: Sequence[T]) -> list[T]:
    """Renumber items 1..N in their current list position."""
    return [
        item if item.order == position else item.model_copy(update={"order": position})
        for position, item in enumerate(items, start=1)
    ]


def sort_and_repack(items: Sequence[T]) -> list[T]:
    """Sort by existing order (stable for ties) then renumber 1..N."""
    return repack(sorted(items, key=lambda item: item.order))


def is_dense(items: Sequence[OrderedItem]) -> bool:
    """Return True when the order values are exactly {1..N}."""
    return sorted(item.order for item in items) == list(range(1, len(items) + 1))


def _index_of(items: Sequence[OrderedItem], item_id: str, kind: str) -> int:
    for index, item in enumerate(items):
        if item.id == item_id:
            return index
    raise ResourceNotFoundException(kind, item_id)


def add_item(items: Sequence[T], item: T) -> list[T]:
    """Append item at position N+1."""
    if any(existing.id == item.id for existing in items):
        raise ValidationException(f"Duplicate item id: {item.id}", field="id")
    return repack([*items, item])


def remove_item(items: Sequence[T], item_id: str, kind: str = "item") -> list[T]:
    """Remove item by id and close the gap."""
    index = _index_of(items, item_id, kind)
    return repack([*items[:index], *items[index + 1 :]])


def move_item(
    items: Sequence[T],
    item_id: str,
    direction: MoveDirection,
    kind: str = "item",
) -> list[T]:
    """Swap item with its neighbour. Moving past either end is a no-op."""
    index = _index_of(items, item_id, kind)
    target = index - 1 if direction == MoveDirection.UP else index + 1
    moved = list(items)
    if 0 <= target < len(moved):
        moved[index], moved[target] = moved[target], moved[index]
    return repack(moved)


def reorder_items(items: Sequence[T], ordered_ids: Sequence[str]) -> list[T]:
    """Drag-to-reorder: ordered_ids must be a permutation of the current ids."""
    by_id = {item.id: item for item in items}
    if len(ordered_ids) != len(by_id) or set(ordered_ids) != set(by_id):
        raise ValidationException(
            "Reorder ids must list every current item exactly once",
            field="ids",
        )
    return repack([by_id[item_id] for item_id in ordered_ids])
