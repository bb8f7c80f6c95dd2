from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
IndexedPredicate = Callable[[int, T], bool]
Selector = Callable[[T], U]
IndexedSelector = Callable[[int, T], U]
KeySelector = Callable[[T], K]


class EmptySelection:
    """
    marker returned from a projection to drop the current element.
    there is exactly one instance per process; compare with `is`.
    """
    _instance: Optional['EmptySelection'] = None

    def __new__(cls) -> 'EmptySelection':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __eq__(self, other: Any) -> bool:
        return self is other

    def __hash__(self) -> int:
        return id(self)

    def __copy__(self) -> 'EmptySelection':
        return self

    def __deepcopy__(self, memo: Dict) -> 'EmptySelection':
        return self

    def __reduce__(self) -> str:
        # pickles by reference to the module-level name
        return 'EMPTY_SELECTION'

    def __repr__(self) -> str:
        return "EMPTY_SELECTION"


EMPTY_SELECTION = EmptySelection()


class KeySet:
    """
    membership set for element keys used by the set operators.

    keys are tagged with their exact type, so 1, 1.0 and True are distinct.
    hashable keys live in a hash set; unhashable ones (lists, dicts, mutable
    dataclasses) fall back to an equality scan over keys of the same type.
    """

    def __init__(self, keys: Iterable[Any] = ()):
        self._hashed: Set[Tuple[type, Any]] = set()
        self._unhashed: List[Tuple[type, Any]] = []
        for key in keys:
            self.add(key)

    def __contains__(self, key: Any) -> bool:
        tagged = (type(key), key)
        try:
            return tagged in self._hashed
        except TypeError:
            return any(kind is tagged[0] and seen == key for kind, seen in self._unhashed)

    def add(self, key: Any) -> bool:
        """add a key, returning True if it was not already present"""
        if key in self:
            return False
        tagged = (type(key), key)
        try:
            self._hashed.add(tagged)
        except TypeError:
            self._unhashed.append(tagged)
        return True

    def __len__(self) -> int:
        return len(self._hashed) + len(self._unhashed)

    def __repr__(self) -> str:
        return f"KeySet(size={len(self)})"
