import logging
import typing
from collections.abc import Sequence
import numpy as np
import pandas as pd
from .types import *
from .errors import InvalidInput

if typing.TYPE_CHECKING:
    from .views import Filterable

logger = logging.getLogger(__name__)

# text is indexable but is treated as a single value, not a run of characters
_TEXT_TYPES = (str, bytes, bytearray)


def _as_elements(data: Any) -> List[Any]:
    """unpack a contiguous container into a list of its elements"""
    if isinstance(data, np.ndarray):
        if data.ndim == 0:
            raise InvalidInput(data)
        # higher ranks become nested lists of native scalars, one per row
        return data.tolist()
    if isinstance(data, pd.Series):
        return data.tolist()
    if isinstance(data, Sequence) and not isinstance(data, _TEXT_TYPES):
        return list(data)
    raise InvalidInput(data)


def from_contiguous(data: Sequence) -> 'Filterable[Any]':
    """
    create a filterable view from a sequence, numpy array or pandas series.

    the elements are snapshotted, so later changes to `data` are not seen.
    raises InvalidInput for anything that is not an indexable container
    (text, mappings, sets, iterators, scalars, None).
    """
    from .views import Filterable
    try:
        elements = _as_elements(data)
    except InvalidInput:
        logger.debug(f"rejected {type(data).__name__} as filterable input")
        raise
    logger.debug(f"wrapped {type(data).__name__} of {len(elements)} elements")
    return Filterable(elements)


def from_range(start: int, count: int) -> 'Filterable[int]':
    """create a view of the integers [start, start + count); empty when count <= 0"""
    from .views import Filterable
    return Filterable(range(start, start + max(0, count)))


def empty() -> 'Filterable[Any]':
    """create empty view"""
    from .views import Filterable
    return Filterable()


def empty_sentinel() -> EmptySelection:
    """the value a projection returns to drop the current element"""
    return EMPTY_SELECTION


# --- aliases ---
F = from_contiguous
