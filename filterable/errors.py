class FilterableError(Exception):
    """base class for errors raised by the filterable package"""
    pass


class InvalidInput(FilterableError, TypeError):
    """raised when a constructor is handed something that is not a sequence"""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"argument not a valid sequence: got {type(value).__name__}")
