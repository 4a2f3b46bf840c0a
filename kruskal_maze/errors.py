class InvalidSize(ValueError):
    """Raised when a maze is requested with a negative or non-integer side length."""


class IndexOutOfRange(IndexError):
    """Raised when a query names a cell or coordinate outside the grid."""
