from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..views import _BaseView, Filterable


class _TerminalOperations(Generic[T]):
    # --- positional lookup ---
    # a stored None and "nothing found" both come back as None by default;
    # pass a private default=object() to tell the two apart.

    def first(self: 'Filterable[T]', default: Optional[T] = None) -> Optional[T]:
        """get the first element, or default (None) when the sequence is empty"""
        data = self._get_data()
        return data[0] if data else default

    def first_where(self: 'Filterable[T]', predicate: Predicate[T], default: Optional[T] = None) -> Optional[T]:
        """get the first element satisfying predicate, or default"""
        return next((item for item in self._get_data() if predicate(item)), default)

    def last(self: 'Filterable[T]', default: Optional[T] = None) -> Optional[T]:
        """get the last element, or default (None) when the sequence is empty"""
        data = self._get_data()
        return data[-1] if data else default

    def last_where(self: 'Filterable[T]', predicate: Predicate[T], default: Optional[T] = None) -> Optional[T]:
        """get the last element satisfying predicate, scanning from the end"""
        return next((item for item in reversed(self._get_data()) if predicate(item)), default)

    # --- quantifiers ---

    def any(self: 'Filterable[T]', predicate: Predicate[T]) -> bool:
        """check if any element satisfies condition"""
        return any(predicate(x) for x in self._get_data())

    def all(self: 'Filterable[T]', predicate: Predicate[T]) -> bool:
        """check if all elements satisfy condition"""
        return not self.any(lambda x: not predicate(x))

    # --- counting ---

    def count(self: 'Filterable[T]') -> int:
        """count elements"""
        return len(self._get_data())

    def count_where(self: 'Filterable[T]', predicate: Predicate[T]) -> int:
        """count elements satisfying predicate"""
        return sum(1 for x in self._get_data() if predicate(x))


class TerminalAccessor(Generic[T]):
    """extractors exposed as `view.to`. mutable results are fresh copies."""

    def __init__(self, view_instance: '_BaseView[T]'):
        self._view = view_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._view._get_data())

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return self._view._get_data()

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._view._get_data())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._view._get_data()}

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._view._get_data())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(list(self._view._get_data()))

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(list(self._view._get_data()))
