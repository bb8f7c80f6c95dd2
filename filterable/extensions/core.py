from __future__ import annotations
import logging
import typing
from itertools import takewhile, dropwhile
from ..types import *

if typing.TYPE_CHECKING:
    from ..views import Filterable, Orderable

logger = logging.getLogger(__name__)


def canonical_key(key_selector: KeySelector[T, K], natural: bool = False) -> Callable[[T], Any]:
    """
    build the sort key used by the ordering operators.
    keys are compared by their str() rendering unless natural is set.
    """
    if natural:
        return key_selector
    return lambda item: str(key_selector(item))


class _CoreOperations(Generic[T]):
    # --- filtering ---

    def where(self: 'Filterable[T]', predicate: Predicate[T]) -> 'Filterable[T]':
        """filter elements based on a predicate"""
        return self.where_indexed(lambda _, item: predicate(item))

    def where_indexed(self: 'Filterable[T]', predicate: IndexedPredicate[T]) -> 'Filterable[T]':
        """filter elements with a predicate that also receives the element's position"""
        from ..views import Filterable
        return Filterable(item for index, item in enumerate(self._get_data()) if predicate(index, item))

    # --- projection ---

    def select(self: 'Filterable[T]', selector: Selector[T, U]) -> 'Filterable[U]':
        """project each element to a new form, dropping those mapped to EMPTY_SELECTION"""
        return self.select_indexed(lambda _, item: selector(item))

    def select_indexed(self: 'Filterable[T]', selector: IndexedSelector[T, U]) -> 'Filterable[U]':
        """project each element using its position as well"""
        from ..views import Filterable
        projected = (selector(index, item) for index, item in enumerate(self._get_data()))
        return Filterable(value for value in projected if value is not EMPTY_SELECTION)

    # --- slicing ---

    def skip(self: 'Filterable[T]', count: int) -> 'Filterable[T]':
        """skip the first 'count' elements"""
        from ..views import Filterable
        return Filterable(self._get_data()[max(0, count):])

    def skip_while(self: 'Filterable[T]', predicate: Predicate[T]) -> 'Filterable[T]':
        """skip elements while predicate is true"""
        from ..views import Filterable
        # itertools.dropwhile stops calling the predicate at the first miss
        return Filterable(dropwhile(predicate, self._get_data()))

    def skip_while_indexed(self: 'Filterable[T]', predicate: IndexedPredicate[T]) -> 'Filterable[T]':
        """skip elements while the indexed predicate is true"""
        from ..views import Filterable
        data = self._get_data()
        index = 0
        while index < len(data) and predicate(index, data[index]):
            index += 1
        return Filterable(data[index:])

    def take(self: 'Filterable[T]', count: int) -> 'Filterable[T]':
        """take the first 'count' elements"""
        from ..views import Filterable
        return Filterable(self._get_data()[:max(0, count)])

    def take_while(self: 'Filterable[T]', predicate: Predicate[T]) -> 'Filterable[T]':
        """take elements while predicate is true"""
        from ..views import Filterable
        return Filterable(takewhile(predicate, self._get_data()))

    def take_while_indexed(self: 'Filterable[T]', predicate: IndexedPredicate[T]) -> 'Filterable[T]':
        """take elements while the indexed predicate is true"""
        from ..views import Filterable
        data = self._get_data()
        index = 0
        while index < len(data) and predicate(index, data[index]):
            index += 1
        return Filterable(data[:index])

    # --- ordering ---

    def order_by(self: 'Filterable[T]', key_selector: KeySelector[T, K], natural: bool = False) -> 'Orderable[T]':
        """stable ascending sort on the str() form of the key"""
        from ..views import Orderable
        return Orderable(self._get_data(), [(canonical_key(key_selector, natural), False)])

    def order_by_descending(self: 'Filterable[T]', key_selector: KeySelector[T, K], natural: bool = False) -> 'Orderable[T]':
        """stable descending sort on the str() form of the key"""
        from ..views import Orderable
        return Orderable(self._get_data(), [(canonical_key(key_selector, natural), True)])

    def order(self: 'Filterable[T]', direction: str, key_selector: KeySelector[T, K], natural: bool = False) -> 'Orderable[T]':
        """
        dispatch on a direction string, case-insensitive.
        'asc' and 'desc' sort; anything else keeps the current order.
        """
        normalized = direction.lower() if isinstance(direction, str) else direction
        if normalized == "asc":
            return self.order_by(key_selector, natural)
        if normalized == "desc":
            return self.order_by_descending(key_selector, natural)
        logger.debug(f"unrecognised order direction {direction!r}, keeping input order")
        return self.as_orderable()

    def as_orderable(self: 'Filterable[T]') -> 'Orderable[T]':
        """
        treat the current sequence as already ordered, without sorting.
        then_by() on the result sorts by that key alone.
        """
        from ..views import Orderable
        return Orderable(self._get_data(), [])
