"""
Observable Collection Module

An ordered, mutable sequence that notifies subscribers when its
contents change. List views bind to it to know when to re-render.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Iterator, List, Tuple, TypeVar


logger = logging.getLogger(__name__)

T = TypeVar("T")

ADD = "add"
RESET = "reset"


@dataclass(frozen=True)
class CollectionChange(Generic[T]):
    """A single change notification."""
    action: str
    items: Tuple[T, ...]


class ObservableCollection(Generic[T]):
    """
    Insertion-ordered collection with publish/subscribe change events.

    Observers are called synchronously after the collection has been
    mutated, so they always see a consistent state.
    """

    def __init__(self, items: Iterable[T] = ()):
        self._items: List[T] = list(items)
        self._observers: List[Callable[[CollectionChange[T]], None]] = []

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items))

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __repr__(self) -> str:
        return f"ObservableCollection({self._items!r})"

    def subscribe(
        self,
        callback: Callable[[CollectionChange[T]], None]
    ) -> Callable[[], None]:
        """
        Register a change observer.

        Args:
            callback: Called with a CollectionChange after every mutation.

        Returns:
            A function that removes the observer when called.
        """
        self._observers.append(callback)

        def unsubscribe() -> None:
            if callback in self._observers:
                self._observers.remove(callback)

        return unsubscribe

    def append(self, item: T) -> None:
        self._items.append(item)
        self._notify(CollectionChange(ADD, (item,)))

    def clear(self) -> None:
        self._items.clear()
        self._notify(CollectionChange(RESET, ()))

    def replace_all(self, items: Iterable[T]) -> None:
        """
        Clear and repopulate in one step.

        Observers get exactly one reset event carrying the new items.
        """
        self._items = list(items)
        self._notify(CollectionChange(RESET, tuple(self._items)))

    def _notify(self, change: CollectionChange[T]) -> None:
        for callback in list(self._observers):
            try:
                callback(change)
            except Exception:
                logger.exception(f"Collection observer failed on '{change.action}'")
