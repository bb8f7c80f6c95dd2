r"""
    _____ _ _ _                 _     _
   |  ___(_) | |_ ___ _ __ __ _| |__ | | ___
   | |_  | | | __/ _ \ '__/ _` | '_ \| |/ _ \
   |  _| | | | ||  __/ | | (_| | |_) | |  __/
   |_|   |_|_|\__\___|_|  \__,_|_.__/|_|\___|
"""

import logging

# expose the view classes
from .views import Filterable, Orderable

# expose the factory functions
from .factories import (
    from_contiguous,
    from_range,
    empty,
    empty_sentinel,
    F
)

# expose supporting types
from .types import EmptySelection, EMPTY_SELECTION, KeySet
from .errors import FilterableError, InvalidInput

# silent unless the host application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

# define what `import *` does
__all__ = [
    "Filterable",
    "Orderable",
    "from_contiguous",
    "from_range",
    "empty",
    "empty_sentinel",
    "F",
    "EmptySelection",
    "EMPTY_SELECTION",
    "KeySet",
    "FilterableError",
    "InvalidInput"
]
