from __future__ import annotations
import typing
from itertools import chain
from ..types import *

if typing.TYPE_CHECKING:
    from ..views import Filterable


class _SetOperations(Generic[T]):
    """
    set-theoretic operators. every result is deduplicated, keeps the order of
    first appearance, and compares keys with the type-aware KeySet discipline.
    """

    def distinct(self: 'Filterable[T]') -> 'Filterable[T]':
        """return distinct elements. preserves order of first appearance."""
        return self.distinct_by(lambda item: item)

    def distinct_by(self: 'Filterable[T]', key_selector: KeySelector[T, K]) -> 'Filterable[T]':
        """return the first element seen for each distinct key"""
        from ..views import Filterable
        seen = KeySet()
        return Filterable(item for item in self._get_data() if seen.add(key_selector(item)))

    def union(self: 'Filterable[T]', other: Iterable[T]) -> 'Filterable[T]':
        """return the order-preserving union of two sequences (distinct elements)."""
        from ..views import Filterable
        # chain reads both sides without building a concatenation over either input
        return Filterable(chain(self._get_data(), other)).distinct()

    def intersect(self: 'Filterable[T]', other: Iterable[T]) -> 'Filterable[T]':
        """return the order-preserving intersection of two sequences."""
        from ..views import Filterable
        other_keys = KeySet(other)
        return Filterable(x for x in self._get_data() if x in other_keys).distinct()

    def except_(self: 'Filterable[T]', other: Iterable[T]) -> 'Filterable[T]':
        """return distinct elements from the first sequence not in the second."""
        from ..views import Filterable
        other_keys = KeySet(other)
        return Filterable(x for x in self._get_data() if x not in other_keys).distinct()
