from __future__ import annotations

from abc import ABC, abstractmethod
from .types import *

# --- operator mixins ---
from .extensions.core import _CoreOperations, canonical_key
from .extensions.set import _SetOperations
from .extensions.terminal import _TerminalOperations, TerminalAccessor

# --- abstract base class ---

class IView(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> Tuple[T, ...]:
        """get the underlying elements as a tuple"""
        pass

# --- base view implementation ---

class _BaseView(IView[T]):
    def __init__(self, data: Iterable[T] = ()):
        """snapshot the given elements; the view never changes afterwards"""
        self._data: Tuple[T, ...] = tuple(data)
        self.to = TerminalAccessor(self)

    def _get_data(self) -> Tuple[T, ...]:
        return self._data

    def unwrap(self) -> List[T]:
        """return the elements as a fresh list owned by the caller"""
        return list(self._data)

    def __iter__(self) -> Iterator[T]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._data)!r})"

# --- filterable view ---

class Filterable(
    _BaseView[T],
    _CoreOperations[T],
    _SetOperations[T],
    _TerminalOperations[T]
):
    """an immutable, chainable view carrying the full operator algebra."""
    pass

# --- orderable view ---

class Orderable(_BaseView[T]):
    """
    a view produced by an ordering operator.

    only extraction, conversion back to a filterable view and subordinate
    orderings are available here; continue chaining through as_filterable().
    """

    def __init__(self, source: Iterable[T], sort_keys: List[Tuple[Callable[[T], Any], bool]]):
        self._source: Tuple[T, ...] = tuple(source)
        self._sort_keys = sort_keys
        data = list(self._source)
        # python's sort is stable, so we sort from the last key to the first
        for key_selector, is_descending in reversed(sort_keys):
            data.sort(key=key_selector, reverse=is_descending)
        super().__init__(data)

    def as_filterable(self) -> 'Filterable[T]':
        """reinterpret as a filterable view, keeping the current order"""
        return Filterable(self._data)

    def then_by(self, key_selector: KeySelector[T, K], natural: bool = False) -> 'Orderable[T]':
        """subordinate ascending sort for elements with equal preceding keys"""
        new_keys = self._sort_keys + [(canonical_key(key_selector, natural), False)]
        return Orderable(self._source, new_keys)

    def then_by_descending(self, key_selector: KeySelector[T, K], natural: bool = False) -> 'Orderable[T]':
        """subordinate descending sort for elements with equal preceding keys"""
        new_keys = self._sort_keys + [(canonical_key(key_selector, natural), True)]
        return Orderable(self._source, new_keys)
