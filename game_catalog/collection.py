"""
Item Collection

Append-only container shared by the games collection and the tag/genre
indices.  Identity is handed out by an explicit counter at append time and
never changes afterwards.
"""

from typing import Generic, Iterator, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class ItemCollection(Generic[T]):
    """
    Ordered collection of games or index items.

    Items need an ``id`` attribute (set on append), a ``name`` attribute and,
    for attribute searches, a ``field_contains(attribute, needle)`` method.
    """

    def __init__(self) -> None:
        self._count: int = 0
        self._items: List[T] = []

    @property
    def count(self) -> int:
        return self._count

    @property
    def items(self) -> Tuple[T, ...]:
        """Read-only view of the stored items, in id order."""
        return tuple(self._items)

    def append(self, item: T) -> int:
        """Add an item, set its id to the next identity and return it."""
        self._count += 1
        item.id = self._count
        self._items.append(item)
        return self._count

    def last(self) -> Optional[T]:
        return self._items[-1] if self._items else None

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def get_by_id(self, item_id: int) -> Optional[T]:
        """Return the item with the given 1-based id, or None."""
        if item_id < 1 or item_id > self._count:
            return None
        return self._items[item_id - 1]

    def get_by_name(self, name: str) -> Optional[T]:
        """Return the first item whose name matches exactly, or None."""
        for item in self._items:
            if item.name == name:
                return item
        return None

    def get_by_attribute_substring(self, attribute: str, needle: str) -> List[T]:
        """
        Return every item whose ``attribute`` contains ``needle``.

        Matching is case-insensitive; repeated attributes are matched element
        by element.  Results keep collection (ascending id) order.
        """
        return [item for item in self._items if item.field_contains(attribute, needle)]

    def get_by_tag(self, tag: str) -> List[T]:
        return self.get_by_attribute_substring("tags", tag)

    def get_by_genre(self, genre: str) -> List[T]:
        return self.get_by_attribute_substring("genres", genre)

    def names(self) -> List[str]:
        return [item.name for item in self._items]

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"<ItemCollection count={self.count}>"
